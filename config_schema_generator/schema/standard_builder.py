"""
Builds the nested standard schema tree of a contract type.
"""

from __future__ import annotations

from typing import Any

from ..contracts.tags import SchemaTag
from ..errors import SchemaCompositionError
from .extractor import accepted_members
from .models import JSON_SCHEMA_URI, StandardSchema
from .type_names import element_type, is_nullable, normalize_type_name


def build_standard_schema(
    root: StandardSchema | None,
    contract: Any,
    name: str | None,
    tag: SchemaTag | None,
    source: str,
) -> StandardSchema:
    """
    Build the standard schema node of a type, recursively.

    Args:
        root: Root node of the tree being built, None for the root call
        contract: Type to describe
        name: External name of the member being described, None for element types
        tag: Schema tag of the member being described, None for root and element types
        source: Owning source label recorded on tagged nodes

    Returns:
        A bare node when ``name`` or ``tag`` is missing, a tagged node otherwise.
        Array-shaped types get ``items``, types with accepted members get
        ``properties``. The root node carries ``$schema``.
    """
    type_name = normalize_type_name(contract)
    if name is None or tag is None:
        node = StandardSchema(type=type_name)
    else:
        node = StandardSchema.from_tag(type_name=type_name, nullable=is_nullable(contract), source=source, tag=tag)

    # TODO: collect contract types seen more than once under root definitions and emit $ref nodes
    if root is None:
        root = node
        root.schema = JSON_SCHEMA_URI

    inner = element_type(contract)
    if inner is not None:
        node.items = build_standard_schema(root, inner, None, None, source)

    members = accepted_members(contract)
    if members:
        node.properties = {
            member.external_name: build_standard_schema(root, member.field_type, member.external_name, member.tag, source)
            for member in members
        }

    return node


def splice_docfx_into_docsets(
    ops_schema: StandardSchema,
    docfx_schema: StandardSchema,
    docsets_property: str = "docsets_to_publish",
) -> StandardSchema:
    """
    Add the docset build properties to the docset items of the publishing schema.

    Every top-level property of ``docfx_schema`` is appended to the element
    ``properties`` of the ``docsets_property`` array of ``ops_schema``.

    Args:
        ops_schema: Standard schema of the publishing configuration (modified in place)
        docfx_schema: Standard schema of the docset build configuration
        docsets_property: Array property of ``ops_schema`` holding the docsets

    Returns:
        ``ops_schema``

    Raises:
        SchemaCompositionError: If the docsets property is missing, is not an
            array, or already defines one of the docset build properties
    """
    docsets = (ops_schema.properties or {}).get(docsets_property)
    if docsets is None or docsets.items is None:
        raise SchemaCompositionError(f"Publishing schema has no array property '{docsets_property}'")

    element = docsets.items
    if element.properties is None:
        element.properties = {}

    for name, property_schema in (docfx_schema.properties or {}).items():
        if name in element.properties:
            raise SchemaCompositionError(f"Property '{name}' is already defined under '{docsets_property}'")
        element.properties[name] = property_schema

    return ops_schema
