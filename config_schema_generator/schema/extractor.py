"""
Metadata extraction from registered data contracts.

Walks the descriptor tables of contract types, following the element types
of list/array-shaped members. Traversal is driven by types only, so it
terminates as long as the contract type graph has no cycles.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ..contracts.registry import MemberDescriptor, describe
from ..utils import qualify
from .type_names import element_type, unwrap_optional


@dataclass(frozen=True)
class ExtractedMember:
    """An accepted member reached during a walk.

    Attributes:
        path: Dotted path of the member from the walk's root
        member: Descriptor of the member
        source: Label of the source the walk was started for
    """

    path: str
    member: MemberDescriptor
    source: str


def accepted_members(contract: Any) -> list[MemberDescriptor]:
    """Return the named and tagged members of a type, in declaration order."""
    return describe(unwrap_optional(contract)).accepted_members


def walk(contract: Any, prefix: str | None, source: str) -> Iterator[ExtractedMember]:
    """
    Yield every accepted member reachable from a contract type.

    For list/array-shaped members the members of the element type are
    yielded first, under the member's own path, followed by the member
    itself. The element type is traversed even when the list member is not
    accepted; its path segment then falls back to the attribute name if the
    member declares no external name.

    Args:
        contract: Root type of the walk
        prefix: Dotted path of the root type, None or "" for top-level roots
        source: Owning source label attached to every yielded member

    Yields:
        ExtractedMember records in output order
    """
    for member in describe(unwrap_optional(contract)).members:
        path = qualify(prefix, member.path_name)

        inner = element_type(member.field_type)
        if inner is not None:
            yield from walk(inner, path, source)

        if member.is_accepted:
            yield ExtractedMember(path=path, member=member, source=source)
