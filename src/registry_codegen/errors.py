"""Errors raised by the generation pipeline.

Every error is terminal for the generation task that raised it. Each carries
the offending value as an attribute so callers can report it without parsing
the message.
"""

from pathlib import Path


class CodegenError(Exception):
    """Base class for generation failures."""


class InputNotFound(CodegenError):
    """Raised when the registry document is missing or unreadable."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Registry document not found: {path}")


class MalformedInput(CodegenError):
    """Raised when the registry document is not an array of {name, id} objects."""

    def __init__(self, path: Path | None, detail: str) -> None:
        self.path = path
        self.detail = detail
        location = str(path) if path is not None else "registry input"
        super().__init__(f"Malformed registry in {location}: {detail}")


class DuplicateEntry(CodegenError):
    """Raised when two records share a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate registry entry name: {name!r}")


class InvalidKey(CodegenError):
    """Raised when a record id is not a valid namespaced identifier."""

    def __init__(self, raw_id: str, reason: str) -> None:
        self.id = raw_id
        self.reason = reason
        super().__init__(f"Invalid namespaced key {raw_id!r}: {reason}")


class InvalidName(CodegenError):
    """Raised when a record name cannot be used as an enum member name."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid registry entry name {name!r}: {reason}")


class EmptyRegistry(CodegenError):
    """Raised when there is nothing to generate."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Registry for {type_name} has no entries")


class OutputUnavailable(CodegenError):
    """Raised when the artifact cannot be written to its target location."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write generated source to {path}: {reason}")
