"""Tests for the runtime registry sink and the Keyed capability."""

from dataclasses import dataclass

import pytest

from registry_codegen.runtime.keyed import Keyed
from registry_codegen.runtime.namespace_id import NamespaceID
from registry_codegen.runtime.registries import DuplicateRegistrationError, Registry


@dataclass(frozen=True, eq=False)
class StubEntry:
    """Minimal Keyed implementation; identity equality like enum members."""

    raw_key: str

    def key(self) -> NamespaceID:
        return NamespaceID.from_string(self.raw_key)


def test_stub_entry_satisfies_keyed() -> None:
    assert isinstance(StubEntry("minecraft:flame"), Keyed)


def test_object_without_key_is_not_keyed() -> None:
    assert not isinstance(object(), Keyed)


def test_register_all_preserves_insertion_order() -> None:
    registry: Registry[StubEntry] = Registry("particle")
    flame = StubEntry("minecraft:flame")
    smoke = StubEntry("minecraft:smoke")

    registry.register_all([flame, smoke])

    assert list(registry) == [flame, smoke]
    assert len(registry) == 2


def test_get_accepts_key_or_string() -> None:
    registry: Registry[StubEntry] = Registry("particle")
    flame = StubEntry("minecraft:flame")
    registry.register(flame)

    assert registry.get(NamespaceID("minecraft", "flame")) is flame
    assert registry.get("minecraft:flame") is flame
    assert registry.get("minecraft:smoke") is None
    assert NamespaceID("minecraft", "flame") in registry


def test_registering_same_entry_twice_is_noop() -> None:
    registry: Registry[StubEntry] = Registry("particle")
    flame = StubEntry("minecraft:flame")

    registry.register(flame)
    registry.register(flame)

    assert len(registry) == 1


def test_conflicting_entry_is_rejected() -> None:
    registry: Registry[StubEntry] = Registry("particle")
    registry.register(StubEntry("minecraft:flame"))

    with pytest.raises(DuplicateRegistrationError) as exc_info:
        registry.register(StubEntry("minecraft:flame"))

    assert exc_info.value.key == NamespaceID("minecraft", "flame")
    assert exc_info.value.registry_name == "particle"


def test_conflicting_batch_leaves_registry_unchanged() -> None:
    registry: Registry[StubEntry] = Registry("particle")
    batch = [
        StubEntry("minecraft:flame"),
        StubEntry("minecraft:smoke"),
        StubEntry("minecraft:flame"),
    ]

    with pytest.raises(DuplicateRegistrationError):
        registry.register_all(batch)

    assert len(registry) == 0


def test_contains_accepts_string_keys() -> None:
    registry: Registry[StubEntry] = Registry("particle")
    registry.register(StubEntry("minecraft:flame"))

    assert "minecraft:flame" in registry
    assert "flame" in registry
    assert NamespaceID("minecraft", "flame") in registry
    assert "minecraft:smoke" not in registry
