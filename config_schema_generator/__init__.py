"""Configuration Schema Generator

A Python package for deriving configuration schemas from data-contract
definitions. Supports a flat extension schema merged against a persisted
artifact and a nested, JSON-Schema-shaped standard schema.
"""

import logging

__version__ = "1.0.0"

from .config import GeneratorConfig, SchemaMode, WriterConfig
from .errors import SchemaCompositionError, SchemaFileError, SchemaGeneratorError
from .generator import SchemaGenerator
from .schema import (
    JSON_SCHEMA_URI,
    ExtensionMerger,
    MergeResult,
    SchemaExtension,
    SchemaWriter,
    StandardSchema,
    build_extensions,
    build_standard_schema,
    splice_docfx_into_docsets,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SchemaGenerator",
    "GeneratorConfig",
    "SchemaMode",
    "WriterConfig",
    "SchemaGeneratorError",
    "SchemaFileError",
    "SchemaCompositionError",
    "JSON_SCHEMA_URI",
    "SchemaExtension",
    "StandardSchema",
    "ExtensionMerger",
    "MergeResult",
    "SchemaWriter",
    "build_extensions",
    "build_standard_schema",
    "splice_docfx_into_docsets",
]
