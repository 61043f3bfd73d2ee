"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and displays clean error
messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from registry_codegen.context import CodegenContext
from registry_codegen.errors import CodegenError
from registry_codegen.output import user_output


T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns predictable failures into a styled error and exit code 1.

    Catches:
        - CodegenError: Any generation failure (missing input, bad records, ...)
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces, and so do
    the caught ones when the command runs with a debug CodegenContext.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (CodegenError, FileNotFoundError, ValueError, PermissionError) as e:
            ctx = click.get_current_context(silent=True)
            if ctx is not None and isinstance(ctx.obj, CodegenContext) and ctx.obj.debug:
                raise
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
