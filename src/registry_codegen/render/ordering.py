"""Canonical declaration order for generated enum members.

Ordinals are derived from declaration position in the generated enum, so
members must be declared exactly in ascending ordinal order with no gaps.
"""

from collections.abc import Iterable

from registry_codegen.models import RegistryEntry


def declaration_order(entries: Iterable[RegistryEntry]) -> tuple[RegistryEntry, ...]:
    """Return entries in the order their members must be declared.

    Raises:
        ValueError: If the ordinals are not exactly 0..n-1
    """
    ordered = tuple(sorted(entries, key=lambda entry: entry.ordinal))
    for position, entry in enumerate(ordered):
        if entry.ordinal != position:
            raise ValueError(
                f"Ordinals must be contiguous from 0: expected {position} "
                f"but found {entry.ordinal} ({entry.name!r})"
            )
    return ordered
