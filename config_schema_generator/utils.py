"""
Utility functions for the configuration schema generator.
"""

from __future__ import annotations

from dataclasses import Field

# Key under which dataclasses_json stores per-field overrides
DATACLASSES_JSON_KEY = "dataclasses_json"


def json_field_name(f: Field) -> str | None:
    """Return the JSON name declared for a dataclass field, if any.

    The name is the one given through ``dataclasses_json.config(field_name=...)``
    (or a per-field ``letter_case``). Fields without such an override have no
    declared JSON name.

    Examples:
        field(metadata=config(field_name="docsets_to_publish")) -> "docsets_to_publish"
        field(default=None) -> None
    """
    overrides = f.metadata.get(DATACLASSES_JSON_KEY) or {}
    letter_case = overrides.get("letter_case")
    if letter_case is None:
        return None
    return letter_case(f.name)


def qualify(prefix: str | None, name: str) -> str:
    """Join a dotted-path prefix and a member name.

    Examples:
        qualify(None, "content") -> "content"
        qualify("", "content") -> "content"
        qualify("docsets_to_publish", "content") -> "docsets_to_publish.content"
    """
    return f"{prefix}.{name}" if prefix else name
