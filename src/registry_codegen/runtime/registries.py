"""Process-wide registries that generated modules populate on import."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from registry_codegen.runtime.keyed import Keyed
from registry_codegen.runtime.namespace_id import NamespaceID


class DuplicateRegistrationError(Exception):
    """Raised when a key is already bound to a different entry."""

    def __init__(self, registry_name: str, key: NamespaceID) -> None:
        self.registry_name = registry_name
        self.key = key
        super().__init__(f"{registry_name} registry already holds an entry for {key}")


T = TypeVar("T", bound=Keyed)


class Registry(Generic[T]):
    """Write-once mapping from NamespaceID to registered entry.

    Iteration follows insertion order. There is no removal API.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[NamespaceID, T] = {}

    def register(self, entry: T) -> None:
        self.register_all([entry])

    def register_all(self, entries: Iterable[T]) -> None:
        """Register a batch of entries in iteration order.

        The whole batch is checked before anything is inserted, so a conflict
        leaves the registry unchanged. Registering an entry that is already
        bound to its own key is a no-op.

        Raises:
            DuplicateRegistrationError: If a key is bound to a different entry,
                either already or earlier in the same batch
        """
        batch = list(entries)
        pending: dict[NamespaceID, T] = {}
        for entry in batch:
            key = entry.key()
            existing = pending.get(key, self._entries.get(key))
            if existing is not None and existing is not entry:
                raise DuplicateRegistrationError(self.name, key)
            pending[key] = entry

        for key, entry in pending.items():
            self._entries.setdefault(key, entry)

    def get(self, key: NamespaceID | str) -> T | None:
        if isinstance(key, str):
            key = NamespaceID.from_string(key)
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            key = NamespaceID.from_string(key)
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries.values())


particles: Registry = Registry("particle")
