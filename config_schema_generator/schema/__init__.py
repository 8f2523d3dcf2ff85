"""
Schema derivation from registered data contracts.

1. Extractor: walk contract descriptor tables, following list element types
2. Builders: derive flat extension entries or a nested standard schema tree
3. Merger: reconcile extension entries with the persisted schema
4. Writer: serialize the resulting document to JSON
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .extension_builder import build_extensions
from .extractor import ExtractedMember, accepted_members, walk
from .merger import ExtensionMerger, MergeResult, SchemaEntry, group_by_name, load_existing, source_of
from .models import JSON_SCHEMA_URI, SchemaExtension, StandardSchema
from .standard_builder import build_standard_schema, splice_docfx_into_docsets
from .type_names import RESERVED_TYPE_NAMES, element_type, is_nullable, normalize_type_name
from .writer import SchemaWriter, to_json_data

__all__ = [
    "AtomicWriter",
    "build_extensions",
    "ExtractedMember",
    "accepted_members",
    "walk",
    "ExtensionMerger",
    "MergeResult",
    "SchemaEntry",
    "source_of",
    "group_by_name",
    "load_existing",
    "JSON_SCHEMA_URI",
    "SchemaExtension",
    "StandardSchema",
    "build_standard_schema",
    "splice_docfx_into_docsets",
    "RESERVED_TYPE_NAMES",
    "element_type",
    "is_nullable",
    "normalize_type_name",
    "SchemaWriter",
    "to_json_data",
]
