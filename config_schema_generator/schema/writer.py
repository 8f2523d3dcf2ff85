"""
Serialization of schema documents to JSON.

Every dataclass is written member by member, under the member's JSON name:

- ``None`` values are always omitted
- with ``ignore_default_values``, values equal to the member's declared
  default and empty containers are omitted too
- members declared overridable and not finalized by a subclass are never
  written
- references back to an object or container that is being written are
  skipped instead of recursing forever
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import MISSING, Field, fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from ..config import WriterConfig
from ..contracts.tags import is_overridable
from ..utils import json_field_name
from .atomic_writer import AtomicWriter
from .models import FLATTEN_KEY

# Marks a value that must not be written
_OMIT = object()


def to_json_data(document: Any, config: WriterConfig) -> Any:
    """Convert a schema document into plain JSON data."""
    return _encode(document, config, set())


def _encode(value: Any, config: WriterConfig, active: set[int]) -> Any:
    if isinstance(value, Enum):
        return value.value

    is_object = is_dataclass(value) and not isinstance(value, type)
    if not (is_object or isinstance(value, (Mapping, list, tuple, set, frozenset))):
        return value

    if id(value) in active:
        return _OMIT
    active.add(id(value))
    try:
        if is_object:
            return _encode_dataclass(value, config, active)
        if isinstance(value, Mapping):
            return _encode_mapping(value, config, active)
        encoded_items = (_encode(item, config, active) for item in value)
        return [item for item in encoded_items if item is not _OMIT]
    finally:
        active.discard(id(value))


def _encode_mapping(value: Mapping, config: WriterConfig, active: set[int]) -> dict[str, Any]:
    encoded = {}
    for key, item in value.items():
        item = _encode(item, config, active)
        if item is not _OMIT:
            encoded[str(key)] = item
    return encoded


def _encode_dataclass(obj: Any, config: WriterConfig, active: set[int]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    inline: dict[str, Any] = {}

    for f in fields(obj):
        if is_overridable(f):
            continue

        value = getattr(obj, f.name)
        if f.metadata.get(FLATTEN_KEY):
            encoded = _encode(value or {}, config, active)
            if encoded is not _OMIT:
                inline.update(encoded)
            continue

        if _should_omit(f, value, config):
            continue

        encoded = _encode(value, config, active)
        if encoded is _OMIT:
            continue
        data[json_field_name(f) or f.name] = encoded

    for key, value in inline.items():
        data.setdefault(key, value)
    return data


def _should_omit(f: Field, value: Any, config: WriterConfig) -> bool:
    if value is None:
        return True
    if not config.ignore_default_values:
        return False
    if isinstance(value, (Mapping, list, tuple, set, frozenset)) and not value:
        return True
    return _has_default(f) and value == _default_of(f) and type(value) is type(_default_of(f))


def _has_default(f: Field) -> bool:
    return f.default is not MISSING or f.default_factory is not MISSING


def _default_of(f: Field) -> Any:
    if f.default is not MISSING:
        return f.default
    return f.default_factory()


class SchemaWriter:
    """Writes schema documents to JSON files."""

    def __init__(self, atomic_writer: AtomicWriter | None = None):
        self.atomic_writer = atomic_writer or AtomicWriter()

    def dumps(self, document: Any, config: WriterConfig) -> str:
        """
        Serialize a schema document to indented JSON text.

        Args:
            document: A StandardSchema tree or a mapping of extension entries
            config: Serialization options for this call

        Returns:
            The JSON text
        """
        return json.dumps(to_json_data(document, config), indent=config.indent, ensure_ascii=config.ensure_ascii)

    def write(self, path: Path, document: Any, config: WriterConfig) -> None:
        """
        Write a schema document, replacing any existing content of ``path``.

        Args:
            path: Output file path
            document: A StandardSchema tree or a mapping of extension entries
            config: Serialization options for this call
        """
        content = self.dumps(document, config)
        if config.atomic_write:
            self.atomic_writer.write(path, content)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
