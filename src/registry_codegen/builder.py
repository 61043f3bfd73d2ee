"""Build the canonical, ordinal-numbered model from raw registry records."""

import keyword
import logging
import unicodedata
from collections.abc import Sequence

from registry_codegen.errors import DuplicateEntry, InvalidKey, InvalidName, MalformedInput
from registry_codegen.models import RegistryEntry, RegistryRecord
from registry_codegen.runtime.namespace_id import NamespaceID

logger = logging.getLogger(__name__)

# Ordinals are encoded as unsigned 16-bit values
MAX_ENTRIES = 1 << 16

# Attribute names the generated enum already defines or Enum forbids as members
RESERVED_NAMES = frozenset(
    {"name", "value", "mro", "key", "ordinal", "namespace_id", "from_ordinal"}
)


def build_entries(records: Sequence[RegistryRecord]) -> tuple[RegistryEntry, ...]:
    """Assign ordinals by document position and parse every key.

    Args:
        records: Records in document order

    Returns:
        Entries whose ordinals are 0..len(records)-1 in the same order

    Raises:
        MalformedInput: If there are more records than ordinals can encode
        InvalidName: If a name cannot be an enum member name
        DuplicateEntry: If a name repeats, compared as Python compiles identifiers
        InvalidKey: If an id is not a valid namespaced identifier or repeats
            another entry's key
    """
    if len(records) > MAX_ENTRIES:
        raise MalformedInput(
            None, f"{len(records)} records exceed the {MAX_ENTRIES} ordinals available"
        )

    seen_names: set[str] = set()
    names_by_key: dict[NamespaceID, str] = {}
    entries: list[RegistryEntry] = []
    for ordinal, record in enumerate(records):
        # Python compiles identifiers in NFKC form, so "ﬂame" declares "flame"
        compiled_name = unicodedata.normalize("NFKC", record.name)
        _validate_member_name(record.name, compiled_name)
        if compiled_name in seen_names:
            raise DuplicateEntry(record.name)
        seen_names.add(compiled_name)

        try:
            key = NamespaceID.from_string(record.id)
        except ValueError as e:
            raise InvalidKey(record.id, str(e)) from e
        if key in names_by_key:
            raise InvalidKey(record.id, f"already used by {names_by_key[key]!r}")
        names_by_key[key] = record.name

        entries.append(
            RegistryEntry(ordinal=ordinal, name=record.name, namespaced_key=record.id, key=key)
        )

    logger.debug("Built %d registry entries", len(entries))
    return tuple(entries)


def _validate_member_name(name: str, compiled_name: str) -> None:
    if not name.isidentifier():
        raise InvalidName(name, "not a valid Python identifier")
    if keyword.iskeyword(compiled_name):
        raise InvalidName(name, "is a Python keyword")
    if compiled_name.startswith("_"):
        raise InvalidName(name, "names starting with an underscore are not enum members")
    if compiled_name in RESERVED_NAMES:
        raise InvalidName(name, "collides with an attribute of the generated type")
