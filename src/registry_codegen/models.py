"""Registry models."""

import keyword
import unicodedata
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from registry_codegen.runtime.namespace_id import NamespaceID

# Globals the generated module binds or reads after its class statement runs
GENERATED_MODULE_NAMES = frozenset(
    {"Enum", "NamespaceID", "registries", "_VALUES", "len", "object", "tuple", "int", "str"}
)


class RegistryRecord(BaseModel):
    """One raw `{name, id}` object from the registry document."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    name: str = Field(..., min_length=1)
    id: str = Field(..., min_length=1)


@dataclass(frozen=True)
class RegistryEntry:
    """Canonical registry entry with its position-derived ordinal."""

    ordinal: int  # Zero-based document position
    name: str  # Enum member name
    namespaced_key: str  # Verbatim id string from the document
    key: NamespaceID  # Parsed form of namespaced_key


@dataclass(frozen=True)
class GeneratedArtifact:
    """Rendered module source, addressed by its qualified type name."""

    qualified_type_name: str
    source_text: str

    @property
    def module_parts(self) -> tuple[str, ...]:
        return split_qualified_type_name(self.qualified_type_name)[0]

    @property
    def type_name(self) -> str:
        return split_qualified_type_name(self.qualified_type_name)[1]


def split_qualified_type_name(qualified_type_name: str) -> tuple[tuple[str, ...], str]:
    """Split ``"pkg.module.Type"`` into ``(("pkg", "module"), "Type")``.

    Raises:
        ValueError: If there is no module part, a part is not an identifier, or the
            type name would shadow a name the generated module uses
    """
    parts = qualified_type_name.split(".")
    if len(parts) < 2:
        raise ValueError(
            f"Qualified type name must include a module, e.g. 'particle.Particle': "
            f"{qualified_type_name!r}"
        )
    for part in parts:
        if not part.isidentifier() or keyword.iskeyword(part):
            raise ValueError(f"Invalid qualified type name {qualified_type_name!r}: {part!r}")
    if unicodedata.normalize("NFKC", parts[-1]) in GENERATED_MODULE_NAMES:
        raise ValueError(
            f"Invalid qualified type name {qualified_type_name!r}: "
            f"{parts[-1]!r} is already used by the generated module"
        )
    return tuple(parts[:-1]), parts[-1]
