"""Render registry models into generated source artifacts."""

import logging
from collections.abc import Sequence

from registry_codegen.errors import EmptyRegistry
from registry_codegen.models import GeneratedArtifact, RegistryEntry, split_qualified_type_name
from registry_codegen.render.enum_template import render_enum_module
from registry_codegen.render.ordering import declaration_order

logger = logging.getLogger(__name__)


def render_artifact(
    entries: Sequence[RegistryEntry],
    qualified_type_name: str,
    *,
    registry_attribute: str,
    generator_name: str,
    source_name: str,
) -> GeneratedArtifact:
    """Render entries into a module declaring one enum member per entry.

    Raises:
        EmptyRegistry: If entries is empty
        ValueError: If the type name or the entry ordinals are invalid
    """
    _, type_name = split_qualified_type_name(qualified_type_name)
    if not entries:
        raise EmptyRegistry(qualified_type_name)

    source_text = render_enum_module(
        declaration_order(entries),
        type_name=type_name,
        registry_attribute=registry_attribute,
        generator_name=generator_name,
        source_name=source_name,
    )
    logger.debug("Rendered %s with %d members", qualified_type_name, len(entries))
    return GeneratedArtifact(qualified_type_name=qualified_type_name, source_text=source_text)


__all__ = ["declaration_order", "render_artifact", "render_enum_module"]
