"""Particles command - compile particles.json into the Particle enum module."""

import logging
from pathlib import Path

import click

from registry_codegen.context import CodegenContext
from registry_codegen.error_boundary import cli_error_boundary
from registry_codegen.generators.particle import ParticleGenerator
from registry_codegen.models import split_qualified_type_name
from registry_codegen.output import machine_output, user_output

logger = logging.getLogger(__name__)


@click.command(name="particles")
@click.option(
    "--particles-file",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Registry document (JSON array of {name, id}). Overrides codegen.toml.",
)
@click.option(
    "--output-folder",
    type=click.Path(path_type=Path, file_okay=False),
    help="Root folder for generated modules. Overrides codegen.toml.",
)
@click.option(
    "--type-name",
    help="Qualified name of the generated enum, e.g. 'minestom.server.particle.Particle'.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Verify the generated module is up to date instead of writing it.",
)
@click.pass_obj
@cli_error_boundary
def particles_command(
    ctx: CodegenContext,
    particles_file: Path | None,
    output_folder: Path | None,
    type_name: str | None,
    check: bool,
) -> None:
    """Generate the particle registry enum.

    Loads the particles document, assigns each entry an ordinal by its
    position, and writes a Python module declaring one enum member per entry.
    Nothing is written if any record is invalid.
    """
    config = ctx.config_ops.load_or_default()

    resolved_particles_file = (
        particles_file if particles_file is not None else config.particles_file
    )
    resolved_output_folder = output_folder if output_folder is not None else config.output_folder
    resolved_type_name = type_name if type_name is not None else config.type_name

    if resolved_particles_file is None:
        raise click.UsageError(
            f"No particles file given. Pass --particles-file or set "
            f"particles.particles_file in {ctx.config_ops.path()}"
        )
    if resolved_output_folder is None:
        raise click.UsageError(
            f"No output folder given. Pass --output-folder or set "
            f"particles.output_folder in {ctx.config_ops.path()}"
        )
    # Fail on a bad type name before reading the registry
    split_qualified_type_name(resolved_type_name)

    logger.debug(
        "Particles task: file=%s, output=%s, type=%s, check=%s",
        resolved_particles_file,
        resolved_output_folder,
        resolved_type_name,
        check,
    )
    generator = ParticleGenerator(
        particles_file=resolved_particles_file,
        output_folder=resolved_output_folder,
        type_name=resolved_type_name,
    )

    if check:
        is_current, target = generator.check()
        if not is_current:
            user_output(click.style("✗ ", fg="red") + f"{target} is out of date")
            user_output("  Run 'registry-codegen particles' to regenerate it")
            raise SystemExit(1)
        user_output(click.style("✓ ", fg="green") + f"{target} is up to date")
        return

    target = generator.generate()
    user_output(click.style("✓ ", fg="green") + f"Generated {resolved_type_name}")
    machine_output(str(target))
