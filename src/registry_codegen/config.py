"""Project configuration data structures and loading.

Provides immutable generator settings loaded from ``codegen.toml`` in the
working directory. Command-line options override anything loaded here.
"""

import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from registry_codegen.generators.particle import DEFAULT_PARTICLE_TYPE_NAME

CONFIG_FILE_NAME = "codegen.toml"


@dataclass(frozen=True)
class CodegenConfig:
    """Immutable generator settings.

    Paths are absolute once loaded; None means "not configured".
    """

    particles_file: Path | None
    output_folder: Path | None
    type_name: str

    @staticmethod
    def default() -> "CodegenConfig":
        return CodegenConfig(
            particles_file=None,
            output_folder=None,
            type_name=DEFAULT_PARTICLE_TYPE_NAME,
        )


class ConfigOps(ABC):
    """Abstract interface for configuration access.

    Enables in-memory implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a configuration file exists."""
        ...

    @abstractmethod
    def load(self) -> CodegenConfig:
        """Load configuration.

        Raises:
            FileNotFoundError: If the configuration doesn't exist
            ValueError: If the configuration is malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the configuration path (for error messages and debugging)."""
        ...

    def load_or_default(self) -> CodegenConfig:
        if not self.exists():
            return CodegenConfig.default()
        return self.load()


class FilesystemConfigOps(ConfigOps):
    """Production implementation that reads ``codegen.toml`` from a project root."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def exists(self) -> bool:
        return self.path().is_file()

    def load(self) -> CodegenConfig:
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        section = data.get("particles", {})
        if not isinstance(section, dict):
            raise ValueError(f"'particles' must be a table in {config_path}")

        base = config_path.parent
        return CodegenConfig(
            particles_file=_optional_path(section, "particles_file", base, config_path),
            output_folder=_optional_path(section, "output_folder", base, config_path),
            type_name=_string(section, "type_name", DEFAULT_PARTICLE_TYPE_NAME, config_path),
        )

    def path(self) -> Path:
        return self._root / CONFIG_FILE_NAME


class InMemoryConfigOps(ConfigOps):
    """Test implementation that stores config in memory."""

    def __init__(self, config: CodegenConfig | None = None) -> None:
        """Initialize in-memory config ops.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> CodegenConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def path(self) -> Path:
        return Path("/fake/project") / CONFIG_FILE_NAME


def _optional_path(section: dict, field: str, base: Path, config_path: Path) -> Path | None:
    value = section.get(field)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ValueError(f"'particles.{field}' must be a non-empty string in {config_path}")
    return (base / Path(value).expanduser()).resolve()


def _string(section: dict, field: str, default: str, config_path: Path) -> str:
    value = section.get(field, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'particles.{field}' must be a non-empty string in {config_path}")
    return value
