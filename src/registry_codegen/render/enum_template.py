"""Text template for generated registry enum modules.

The template emits members in the order it receives them; ordering is the
caller's responsibility (see ``registry_codegen.render.ordering``).
"""

import json
from collections.abc import Sequence

from registry_codegen.models import RegistryEntry

INDENT = "    "

RUNTIME_PACKAGE = "registry_codegen.runtime"


def render_enum_module(
    entries: Sequence[RegistryEntry],
    *,
    type_name: str,
    registry_attribute: str,
    generator_name: str,
    source_name: str,
) -> str:
    """Render the module source for one registry enum.

    Args:
        entries: Entries in declaration order
        type_name: Class name of the generated enum
        registry_attribute: Name of the sink in ``registry_codegen.runtime.registries``
        generator_name: Generator named in the module docstring
        source_name: Registry document named in the module docstring

    Returns:
        Module source text, newline-terminated
    """
    lines = [
        f'"""{type_name} registry.',
        "",
        f"AUTOGENERATED by {generator_name} from {_literal(source_name)}. Do not edit by hand.",
        '"""',
        "",
        "from enum import Enum",
        "",
        f"from {RUNTIME_PACKAGE} import registries",
        f"from {RUNTIME_PACKAGE}.namespace_id import NamespaceID",
        "",
        "",
        f"class {type_name}(Enum):",
        f'{INDENT}"""Registry values, declared in ordinal order."""',
        "",
    ]

    lines.extend(f"{INDENT}{entry.name} = {_literal(entry.namespaced_key)}" for entry in entries)
    lines.append("")
    lines.extend(_indent(_methods(type_name)))
    lines.extend(
        [
            "",
            "",
            f"_VALUES: tuple[{type_name}, ...] = tuple({type_name})",
            "",
            f"registries.{registry_attribute}.register_all(_VALUES)",
        ]
    )

    return "\n".join(lines) + "\n"


def _methods(type_name: str) -> list[str]:
    return [
        f'def __new__(cls, namespace_id: str) -> "{type_name}":',
        f"{INDENT}member = object.__new__(cls)",
        f"{INDENT}member._value_ = len(cls.__members__)",
        f"{INDENT}member._id = NamespaceID.from_string(namespace_id)",
        f"{INDENT}return member",
        "",
        "def key(self) -> NamespaceID:",
        f"{INDENT}return self._id",
        "",
        "def ordinal(self) -> int:",
        f"{INDENT}return self._value_",
        "",
        "def namespace_id(self) -> NamespaceID:",
        f"{INDENT}return self._id",
        "",
        "@staticmethod",
        f'def from_ordinal(ordinal: int) -> "{type_name} | None":',
        f"{INDENT}if 0 <= ordinal < len(_VALUES):",
        f"{INDENT}{INDENT}return _VALUES[ordinal]",
        f"{INDENT}return None",
        "",
        "def __str__(self) -> str:",
        f'{INDENT}return f"[{{self._value_}}]"',
    ]


def _indent(lines: list[str]) -> list[str]:
    return [f"{INDENT}{line}" if line else "" for line in lines]


def _literal(value: str) -> str:
    """Double-quoted Python string literal with deterministic escaping."""
    return json.dumps(value)
