"""
Schema tags attached to data-contract fields.

A tag carries the documentation metadata that is copied into every schema
entry derived from the field it decorates.
"""

from __future__ import annotations

from dataclasses import MISSING, Field, dataclass, field
from typing import Any

# Field metadata key marking a member as an extension point
OVERRIDABLE_KEY = "config_schema_generator.overridable"


def overridable(*, default: Any = None, default_factory: Any = MISSING) -> Any:
    """Declare a member that subclasses are expected to redeclare.

    Overridable members are placeholders: they are never serialized unless a
    subclass finalizes them by redeclaring the field without this marker.
    """
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata={OVERRIDABLE_KEY: True})
    return field(default=default, metadata={OVERRIDABLE_KEY: True})


def is_overridable(f: Field) -> bool:
    """Check whether a dataclass field is a non-finalized extension point."""
    return bool(f.metadata.get(OVERRIDABLE_KEY, False))


@dataclass(kw_only=True)
class SchemaTag:
    """Schema metadata for a configuration field.

    Subclasses may add fields of their own; those are carried into flat
    schema entries as additional metadata.
    """

    description: str | None = None
    default: Any = None
    required: bool = False
    deprecated: bool = False
    allowed_values: list[Any] | None = None
    example: Any = None

    # Identifies the kind of tag, defaults to the tag's class name
    tag_id: str | None = overridable()

    def __post_init__(self):
        if self.tag_id is None:
            self.tag_id = type(self).__name__
