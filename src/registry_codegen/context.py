"""Application context with dependency injection.

The CodegenContext dataclass holds the dependencies commands need and is
created once at the CLI entry point, then passed through Click's context.
"""

from dataclasses import dataclass
from pathlib import Path

from registry_codegen.config import ConfigOps, FilesystemConfigOps, InMemoryConfigOps


@dataclass(frozen=True)
class CodegenContext:
    """Immutable context holding all dependencies for generator commands.

    Attributes:
        config_ops: Access to the project's codegen.toml
        debug: Debug flag for error handling (full stack traces instead of a one-line error)
    """

    config_ops: ConfigOps
    debug: bool

    @staticmethod
    def for_test(
        config_ops: ConfigOps | None = None,
        debug: bool = False,
    ) -> "CodegenContext":
        """Create test context; config defaults to an absent in-memory config."""
        resolved_config_ops: ConfigOps = (
            config_ops if config_ops is not None else InMemoryConfigOps()
        )
        return CodegenContext(config_ops=resolved_config_ops, debug=debug)


def create_context(*, debug: bool, cwd: Path | None = None) -> CodegenContext:
    """Create production context reading configuration from the working directory."""
    root = cwd if cwd is not None else Path.cwd()
    return CodegenContext(config_ops=FilesystemConfigOps(root), debug=debug)
