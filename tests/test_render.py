"""Tests for rendering registry entries into an artifact."""

import pytest

from registry_codegen.builder import build_entries
from registry_codegen.errors import EmptyRegistry
from registry_codegen.models import RegistryRecord
from registry_codegen.render import render_artifact


def _render(records: list[RegistryRecord], type_name: str = "minestom.server.particle.Particle"):
    return render_artifact(
        build_entries(records),
        type_name,
        registry_attribute="particles",
        generator_name="ParticleGenerator",
        source_name="particles.json",
    )


def test_artifact_carries_qualified_type_name() -> None:
    artifact = _render([RegistryRecord(name="flame", id="minecraft:flame")])

    assert artifact.qualified_type_name == "minestom.server.particle.Particle"
    assert artifact.module_parts == ("minestom", "server", "particle")
    assert artifact.type_name == "Particle"
    assert "class Particle(Enum):" in artifact.source_text


def test_declares_one_member_per_entry_in_input_order() -> None:
    records = [
        RegistryRecord(name="smoke", id="minecraft:smoke"),
        RegistryRecord(name="flame", id="minecraft:flame"),
        RegistryRecord(name="angry_villager", id="minecraft:angry_villager"),
    ]

    member_lines = [
        line.strip()
        for line in _render(records).source_text.splitlines()
        if line.startswith("    ") and " = \"minecraft:" in line
    ]

    assert member_lines == [
        'smoke = "minecraft:smoke"',
        'flame = "minecraft:flame"',
        'angry_villager = "minecraft:angry_villager"',
    ]


def test_rendering_is_byte_identical_across_runs() -> None:
    records = [
        RegistryRecord(name="flame", id="minecraft:flame"),
        RegistryRecord(name="smoke", id="minecraft:smoke"),
    ]

    assert _render(records).source_text == _render(records).source_text


def test_empty_registry_raises() -> None:
    with pytest.raises(EmptyRegistry) as exc_info:
        _render([])

    assert exc_info.value.type_name == "minestom.server.particle.Particle"


@pytest.mark.parametrize("type_name", ["Particle", "minestom.particle.", "minestom.class.Particle"])
def test_invalid_type_name_raises(type_name: str) -> None:
    with pytest.raises(ValueError):
        _render([RegistryRecord(name="flame", id="minecraft:flame")], type_name=type_name)


@pytest.mark.parametrize(
    "type_name", ["game.registries", "game.Enum", "game._VALUES", "game.tuple"]
)
def test_type_name_shadowing_module_globals_raises(type_name: str) -> None:
    with pytest.raises(ValueError, match="already used by the generated module"):
        _render([RegistryRecord(name="flame", id="minecraft:flame")], type_name=type_name)
