"""Pytest configuration and fixtures."""

import importlib.util
import itertools
import json
from collections.abc import Callable
from pathlib import Path
from types import ModuleType

import pytest

from registry_codegen.runtime import registries
from registry_codegen.runtime.registries import Registry

FIXTURES_DIR = Path(__file__).parent / "fixtures"

_module_counter = itertools.count()


@pytest.fixture(autouse=True)
def fresh_particle_registry(monkeypatch: pytest.MonkeyPatch) -> Registry:
    """Give every test an empty particle sink so generated modules can be imported repeatedly."""
    registry: Registry = Registry("particle")
    monkeypatch.setattr(registries, "particles", registry)
    return registry


@pytest.fixture
def sample_particles_file() -> Path:
    """Realistic particles.json excerpt."""
    return FIXTURES_DIR / "particles.json"


@pytest.fixture
def write_registry(tmp_path: Path) -> Callable[..., Path]:
    """Write a registry document to tmp_path and return its path."""

    def _write(data: object, name: str = "particles.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def import_generated() -> Callable[[Path], ModuleType]:
    """Import a generated module from its file under a unique module name."""

    def _import(path: Path) -> ModuleType:
        module_name = f"generated_registry_{next(_module_counter)}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        assert spec is not None and spec.loader is not None
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _import
