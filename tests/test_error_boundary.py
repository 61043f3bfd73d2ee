"""Tests for the CLI error boundary."""

from pathlib import Path

import click
import pytest

from registry_codegen.context import CodegenContext
from registry_codegen.error_boundary import cli_error_boundary
from registry_codegen.errors import DuplicateEntry, InputNotFound


def test_passes_through_return_value() -> None:
    @cli_error_boundary
    def command() -> str:
        return "ok"

    assert command() == "ok"


@pytest.mark.parametrize(
    "error",
    [
        InputNotFound(Path("/data/particles.json")),
        DuplicateEntry("flame"),
        ValueError("bad type name"),
        FileNotFoundError("gone"),
        PermissionError("denied"),
    ],
)
def test_known_errors_exit_with_code_1(
    error: Exception, capsys: pytest.CaptureFixture[str]
) -> None:
    @cli_error_boundary
    def command() -> None:
        raise error

    with pytest.raises(SystemExit) as exc_info:
        command()

    assert exc_info.value.code == 1
    assert f"Error: {error}" in capsys.readouterr().err


def test_unexpected_errors_propagate() -> None:
    @cli_error_boundary
    def command() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        command()


def test_debug_context_reraises_known_errors() -> None:
    @cli_error_boundary
    def command() -> None:
        raise DuplicateEntry("flame")

    ctx = click.Context(click.Command("particles"), obj=CodegenContext.for_test(debug=True))
    with ctx, pytest.raises(DuplicateEntry):
        command()


def test_non_debug_context_exits_with_code_1() -> None:
    @cli_error_boundary
    def command() -> None:
        raise DuplicateEntry("flame")

    ctx = click.Context(click.Command("particles"), obj=CodegenContext.for_test())
    with ctx, pytest.raises(SystemExit) as exc_info:
        command()

    assert exc_info.value.code == 1
