"""
Reconciliation of freshly derived extension entries with a persisted schema.

Entries are keyed by dotted path. Fresh entries replace persisted ones,
entries this generator owned but no longer derives are deleted, and entries
owned by anyone else are kept as they are. Persisted entries stay the JSON
objects read from disk, so foreign ones are written back verbatim.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from ..errors import SchemaFileError
from .models import SchemaExtension

logger = logging.getLogger(__name__)

# A freshly derived entry, or a JSON object read from a persisted schema
SchemaEntry = Union[SchemaExtension, Mapping[str, Any]]


@dataclass
class MergeResult:
    """Outcome of a merge.

    Attributes:
        extensions: Final entries, sorted by key
        added: Keys that were not persisted before
        updated: Persisted keys replaced by a fresh entry
        removed: Owned keys deleted because they are no longer derived
        kept: Foreign keys carried over unchanged
    """

    extensions: dict[str, SchemaEntry] = field(default_factory=dict)
    added: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    kept: list[str] = field(default_factory=list)


def group_by_name(extensions: Iterable[SchemaExtension]) -> dict[str, SchemaExtension]:
    """Key entries by dotted path; a later entry wins over an earlier one."""
    grouped: dict[str, SchemaExtension] = {}
    for extension in extensions:
        if extension.name in grouped:
            logger.debug("Duplicate schema entry %s, keeping the last one", extension.name)
        grouped[extension.name] = extension
    return grouped


def load_existing(path: Path) -> dict[str, dict[str, Any]]:
    """
    Load a persisted extension schema.

    Entries are returned as the JSON objects found in the file. No member is
    required: an entry without ``from`` simply belongs to nobody.

    Args:
        path: Path of the persisted schema file

    Returns:
        Persisted entries keyed by dotted path, empty if the file does not exist

    Raises:
        json.JSONDecodeError: If the file is not valid JSON
        SchemaFileError: If the file does not hold a JSON object of entries
    """
    if not path.exists():
        logger.debug("No persisted schema at %s, starting empty", path)
        return {}

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise SchemaFileError(f"Persisted schema {path} must be a JSON object, got {type(data).__name__}")

    for key, value in data.items():
        if not isinstance(value, dict):
            raise SchemaFileError(f"Entry '{key}' of persisted schema {path} must be a JSON object")
    return data


def source_of(entry: SchemaEntry) -> Any:
    """Source label of an entry, None when it has none."""
    if isinstance(entry, Mapping):
        return entry.get("from")
    return entry.from_


class ExtensionMerger:
    """Merges fresh extension entries into persisted ones."""

    def __init__(self, owned_sources: Iterable[str]):
        """
        Initialize the merger.

        Args:
            owned_sources: Source labels produced by this generator. Persisted
                entries with one of these labels are deleted when they are not
                derived anymore.
        """
        self.owned_sources = frozenset(owned_sources)

    def is_owned(self, entry: SchemaEntry) -> bool:
        source = source_of(entry)
        return isinstance(source, str) and source in self.owned_sources

    def merge(self, fresh: dict[str, SchemaExtension], existing: Mapping[str, SchemaEntry]) -> MergeResult:
        """
        Reconcile fresh entries with persisted ones.

        1. Start from the persisted entries
        2. Insert or replace every fresh entry
        3. Delete owned entries that are not in the fresh batch
        4. Keep every other entry unchanged (the same object)

        Args:
            fresh: Freshly derived entries keyed by dotted path
            existing: Persisted entries keyed by dotted path, as returned by
                load_existing (not modified)

        Returns:
            MergeResult with the final entries sorted by key
        """
        result = MergeResult()
        merged = dict(existing)

        for key, extension in fresh.items():
            if key in merged:
                result.updated.append(key)
            else:
                result.added.append(key)
            merged[key] = extension

        for key in list(merged):
            if key in fresh:
                continue
            if self.is_owned(merged[key]):
                result.removed.append(key)
                del merged[key]
            else:
                result.kept.append(key)

        result.extensions = {key: merged[key] for key in sorted(merged)}

        logger.debug(
            "Merged schema: %d added, %d updated, %d removed, %d foreign kept",
            len(result.added),
            len(result.updated),
            len(result.removed),
            len(result.kept),
        )
        return result
