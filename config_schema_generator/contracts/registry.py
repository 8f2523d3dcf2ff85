"""
Registration of data contracts and their schema descriptor tables.

Contracts are dataclasses that opt into schema generation field by field.
Decorating a contract with ``@schema_contract`` builds its descriptor table
once, at class-definition time; schema derivation only ever reads these
tables and never inspects contract instances.

Example:

    @schema_contract
    @dataclass_json
    @dataclass
    class FileItem:
        files: list[str] = schema_field("files", tag=SchemaTag(description="Glob patterns"), default_factory=list)
        cache_key: str | None = None  # not part of the schema
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, get_type_hints

from dataclasses_json import config

from ..utils import DATACLASSES_JSON_KEY, json_field_name
from .tags import SchemaTag

# Field metadata key holding the SchemaTag of a field
SCHEMA_TAG_KEY = "config_schema_generator.schema_tag"


@dataclass(frozen=True)
class MemberDescriptor:
    """A contract member as seen by schema derivation.

    Attributes:
        attribute: Python attribute name of the member
        external_name: JSON name of the member, None if it declares none
        field_type: Resolved type annotation of the member
        tag: Schema metadata of the member, None if it is not tagged
    """

    attribute: str
    external_name: str | None
    field_type: Any
    tag: SchemaTag | None = None

    @property
    def is_accepted(self) -> bool:
        """A member contributes to the schema only if it is named and tagged."""
        return self.external_name is not None and self.tag is not None

    @property
    def path_name(self) -> str:
        """Name used for the member in dotted paths."""
        return self.external_name or self.attribute


@dataclass(frozen=True)
class ContractDescriptor:
    """Descriptor table for one registered contract."""

    contract: type | None = None
    members: tuple[MemberDescriptor, ...] = field(default_factory=tuple)

    @property
    def accepted_members(self) -> list[MemberDescriptor]:
        return [m for m in self.members if m.is_accepted]


EMPTY_DESCRIPTOR = ContractDescriptor()

_registry: dict[Any, ContractDescriptor] = {}


def schema_field(name: str, *, tag: SchemaTag, **kwargs: Any) -> Any:
    """Declare a dataclass field that is part of the configuration schema.

    Args:
        name: External (JSON) name of the field
        tag: Schema metadata copied into the derived schema entries
        **kwargs: Forwarded to ``dataclasses.field`` (default, default_factory, ...)

    Returns:
        A dataclass field carrying both the JSON name and the schema tag
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    # Other dataclasses_json overrides (encoder, decoder, ...) are kept
    overrides = dict(metadata.get(DATACLASSES_JSON_KEY) or {})
    overrides.update(config(field_name=name)[DATACLASSES_JSON_KEY])
    metadata[DATACLASSES_JSON_KEY] = overrides
    metadata[SCHEMA_TAG_KEY] = tag
    return field(metadata=metadata, **kwargs)


def schema_contract(cls: type) -> type:
    """Register a dataclass as a data contract.

    Raises:
        TypeError: If ``cls`` is not a dataclass
    """
    if not is_dataclass(cls):
        raise TypeError(f"{cls.__name__} must be a dataclass to be registered as a contract")

    hints = get_type_hints(cls)
    members = tuple(
        MemberDescriptor(
            attribute=f.name,
            external_name=json_field_name(f),
            field_type=hints.get(f.name, f.type),
            tag=f.metadata.get(SCHEMA_TAG_KEY),
        )
        for f in fields(cls)
    )
    _registry[cls] = ContractDescriptor(contract=cls, members=members)
    return cls


def describe(contract: Any) -> ContractDescriptor:
    """Return the descriptor table of a type, empty for unregistered types."""
    try:
        return _registry.get(contract, EMPTY_DESCRIPTOR)
    except TypeError:
        # Unhashable annotations cannot be registered contracts
        return EMPTY_DESCRIPTOR
