"""
Schema document models.

SchemaExtension is the flat, persisted entry of the extension schema.
StandardSchema is a node of the nested standard schema tree.
"""

# Annotations are evaluated eagerly: dataclasses_json locates the CatchAll
# field by its declared type.

from dataclasses import dataclass, field, fields
from typing import Any

from dataclasses_json import CatchAll, Undefined, config, dataclass_json

from ..contracts.tags import SchemaTag, is_overridable

JSON_SCHEMA_URI = "http://json-schema.org/draft-04/schema#"

# Field metadata key marking a mapping field whose items are written inline
FLATTEN_KEY = "config_schema_generator.flatten"

_TAG_FIELD_NAMES = frozenset(f.name for f in fields(SchemaTag) if not is_overridable(f))


def split_tag(tag: SchemaTag) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Split a tag into base tag fields and fields added by tag subclasses.

    Overridable fields are left out. A base extension point finalized by a
    tag subclass counts as an added field.

    Returns:
        Tuple of (base field values, extra field values keyed by field name)
    """
    known: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for f in fields(tag):
        if is_overridable(f):
            continue
        value = getattr(tag, f.name)
        if f.name in _TAG_FIELD_NAMES:
            known[f.name] = value
        else:
            extra[f.name] = value
    return known, extra


@dataclass(kw_only=True)
class _ExtensionHead:
    name: str
    type: str
    nullable: bool = False
    from_: str | None = field(default=None, metadata=config(field_name="from"))


@dataclass_json(undefined=Undefined.INCLUDE)
@dataclass(kw_only=True)
class SchemaExtension(SchemaTag, _ExtensionHead):
    """
    A flat schema entry, keyed by its dotted path.

    Keys that are not known fields (metadata of tag subclasses, or keys
    added to the persisted file by other tools) are kept in ``extra`` and
    written back inline.
    """

    extra: CatchAll = field(default_factory=dict, metadata={FLATTEN_KEY: True})

    @classmethod
    def from_tag(cls, name: str, type_name: str, nullable: bool, source: str, tag: SchemaTag) -> "SchemaExtension":
        known, extra = split_tag(tag)
        return cls(name=name, type=type_name, nullable=nullable, from_=source, extra=extra, **known)


@dataclass(kw_only=True)
class _StandardHead:
    schema: str | None = field(default=None, metadata=config(field_name="$schema"))
    type: str
    nullable: bool = False
    from_: str | None = field(default=None, metadata=config(field_name="from"))


@dataclass(kw_only=True)
class StandardSchema(SchemaTag, _StandardHead):
    """
    A node of the standard schema tree.

    A node is a leaf, an object node (``properties`` set) or an array node
    (``items`` set). Bare nodes, built for root and element types, only
    carry their type.
    """

    properties: "dict[str, StandardSchema] | None" = None
    items: "StandardSchema | None" = None

    # Metadata of tag subclasses, written inline
    extra: dict[str, Any] = field(default_factory=dict, metadata={FLATTEN_KEY: True})

    @classmethod
    def from_tag(cls, type_name: str, nullable: bool, source: str, tag: SchemaTag) -> "StandardSchema":
        known, extra = split_tag(tag)
        return cls(type=type_name, nullable=nullable, from_=source, extra=extra, **known)
