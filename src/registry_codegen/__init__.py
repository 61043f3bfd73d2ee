"""Compile game-data registries into importable Python enum modules."""

__version__ = "0.1.0"
