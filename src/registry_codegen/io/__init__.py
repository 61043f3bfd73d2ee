"""File I/O for registry documents and generated artifacts."""

from registry_codegen.io.loader import load_registry_records
from registry_codegen.io.writer import artifact_path, is_artifact_current, write_artifact

__all__ = [
    "artifact_path",
    "is_artifact_current",
    "load_registry_records",
    "write_artifact",
]
