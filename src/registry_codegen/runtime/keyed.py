"""Capability interface for registry-backed values."""

from typing import Protocol, runtime_checkable

from registry_codegen.runtime.namespace_id import NamespaceID


@runtime_checkable
class Keyed(Protocol):
    """Anything that exposes a NamespaceID key.

    Generated enums satisfy this structurally; Enum and Protocol metaclasses
    cannot be combined through inheritance.
    """

    def key(self) -> NamespaceID: ...
