"""
Builds the flat extension schema entries of a contract type.
"""

from __future__ import annotations

from typing import Any

from .extractor import ExtractedMember, walk
from .models import SchemaExtension
from .type_names import is_nullable, normalize_type_name


def build_extensions(prefix: str | None, contract: Any, source: str) -> list[SchemaExtension]:
    """
    Build the schema entries of every accepted member reachable from a type.

    Entries of a list member's element type come first, followed by the
    entry of the list member itself, e.g. ``a.items.field`` then ``a.items``.

    Args:
        prefix: Dotted path the entries are nested under (None for a top-level root)
        contract: Root contract type
        source: Owning source label recorded on every entry

    Returns:
        Schema entries in traversal order, empty if the type has no accepted members
    """
    return [_to_extension(extracted) for extracted in walk(contract, prefix, source)]


def _to_extension(extracted: ExtractedMember) -> SchemaExtension:
    member = extracted.member
    return SchemaExtension.from_tag(
        name=extracted.path,
        type_name=normalize_type_name(member.field_type),
        nullable=is_nullable(member.field_type),
        source=extracted.source,
        tag=member.tag,
    )
