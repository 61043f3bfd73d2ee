"""Generated source file I/O.

Artifacts are written atomically: the text goes to a temporary sibling file
which then replaces the target, so a failed write never truncates an existing
artifact.
"""

import logging
import os
from pathlib import Path

from registry_codegen.errors import OutputUnavailable
from registry_codegen.models import GeneratedArtifact

logger = logging.getLogger(__name__)


def artifact_path(artifact: GeneratedArtifact, output_dir: Path) -> Path:
    """Derive the file an artifact is written to.

    ``minestom.server.particle.Particle`` lands in
    ``<output_dir>/minestom/server/particle.py``.
    """
    *packages, module = artifact.module_parts
    return output_dir.joinpath(*packages, f"{module}.py")


def write_artifact(artifact: GeneratedArtifact, output_dir: Path) -> Path:
    """Write an artifact below output_dir, replacing any previous version.

    Args:
        artifact: Rendered artifact
        output_dir: Root output directory, created if missing

    Returns:
        Path of the written file

    Raises:
        OutputUnavailable: If the directory cannot be created or the file
            cannot be written. Any previous artifact is left untouched.
    """
    target = artifact_path(artifact, output_dir)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except FileExistsError:
        raise OutputUnavailable(target.parent, "path exists and is not a directory") from None
    except NotADirectoryError:
        raise OutputUnavailable(target.parent, "a parent path is not a directory") from None
    except PermissionError:
        raise OutputUnavailable(target.parent, "permission denied") from None
    except OSError as e:
        raise OutputUnavailable(target.parent, e.strerror or str(e)) from e

    if target.is_dir():
        raise OutputUnavailable(target, "path exists and is a directory")

    temp_path = target.with_suffix(".py.tmp")
    try:
        with temp_path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(artifact.source_text)
            f.flush()
            os.fsync(f.fileno())
        temp_path.replace(target)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise OutputUnavailable(target, e.strerror or str(e)) from e

    logger.debug("Wrote %d bytes to %s", len(artifact.source_text.encode("utf-8")), target)
    return target


def is_artifact_current(artifact: GeneratedArtifact, output_dir: Path) -> bool:
    """Check whether the file on disk already holds exactly this artifact."""
    target = artifact_path(artifact, output_dir)
    if not target.is_file():
        return False
    return target.read_bytes() == artifact.source_text.encode("utf-8")
