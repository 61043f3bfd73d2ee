"""Namespaced identifiers (``namespace:path``) used as registry keys."""

import re
from dataclasses import dataclass

DEFAULT_NAMESPACE = "minecraft"

_NAMESPACE_PATTERN = re.compile(r"^[a-z0-9._-]+$")
_PATH_PATTERN = re.compile(r"^[a-z0-9._/-]+$")


@dataclass(frozen=True)
class NamespaceID:
    """Immutable ``namespace:path`` key.

    Equality and hashing are by value, so instances work as mapping keys.
    """

    namespace: str
    path: str

    @staticmethod
    def from_string(value: str) -> "NamespaceID":
        """Parse a namespaced identifier.

        A value without a colon lands in the default ``minecraft`` namespace.

        Args:
            value: Identifier such as ``"minecraft:flame"``

        Returns:
            Parsed NamespaceID

        Raises:
            ValueError: If either part is empty or holds characters outside
                the allowed sets
        """
        if ":" in value:
            namespace, path = value.split(":", 1)
        else:
            namespace, path = DEFAULT_NAMESPACE, value

        if not _NAMESPACE_PATTERN.match(namespace):
            raise ValueError(f"Invalid namespace in identifier {value!r}: {namespace!r}")
        if not _PATH_PATTERN.match(path):
            raise ValueError(f"Invalid path in identifier {value!r}: {path!r}")

        return NamespaceID(namespace=namespace, path=path)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"
