"""Particle registry generator."""

import logging
from pathlib import Path

from registry_codegen.builder import build_entries
from registry_codegen.io.loader import load_registry_records
from registry_codegen.io.writer import artifact_path, is_artifact_current, write_artifact
from registry_codegen.models import GeneratedArtifact
from registry_codegen.render import render_artifact

logger = logging.getLogger(__name__)

DEFAULT_PARTICLE_TYPE_NAME = "minestom.server.particle.Particle"


class ParticleGenerator:
    """Compiles particles.json into an importable ``Particle`` enum module.

    Every step either completes or raises a CodegenError; nothing is written
    unless the whole model loaded, validated and rendered.
    """

    registry_attribute = "particles"

    def __init__(
        self,
        particles_file: Path,
        output_folder: Path,
        type_name: str = DEFAULT_PARTICLE_TYPE_NAME,
    ) -> None:
        self.particles_file = particles_file
        self.output_folder = output_folder
        self.type_name = type_name

    def render(self) -> GeneratedArtifact:
        """Load, validate and render the registry without touching the output folder."""
        records = load_registry_records(self.particles_file)
        entries = build_entries(records)
        return render_artifact(
            entries,
            self.type_name,
            registry_attribute=self.registry_attribute,
            generator_name=type(self).__name__,
            source_name=self.particles_file.name,
        )

    def generate(self) -> Path:
        """Render the registry and write it below the output folder.

        Returns:
            Path of the written module
        """
        artifact = self.render()
        target = write_artifact(artifact, self.output_folder)
        logger.debug("Generated %s at %s", self.type_name, target)
        return target

    def check(self) -> tuple[bool, Path]:
        """Compare a fresh rendering against the artifact on disk.

        Returns:
            Tuple of (is_current, artifact path)
        """
        artifact = self.render()
        return is_artifact_current(artifact, self.output_folder), artifact_path(
            artifact, self.output_folder
        )
