import logging

import click

from registry_codegen import __version__
from registry_codegen.commands.particles import particles_command
from registry_codegen.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Log progress and full stack traces for errors")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Compile game-data registries into Python modules."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


# Register all commands
cli.add_command(particles_command)


def main() -> None:
    """CLI entry point used by the `registry-codegen` console script."""
    cli()
