"""
Schema generation entry points.

Derives the extension or standard schema of the publishing configuration
(with the docset build configuration nested under its docsets) and writes
it to disk.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .config import GeneratorConfig, SchemaMode
from .contracts import DocfxBuild, PublishConfig
from .schema import (
    ExtensionMerger,
    MergeResult,
    SchemaEntry,
    SchemaExtension,
    SchemaWriter,
    StandardSchema,
    build_extensions,
    build_standard_schema,
    group_by_name,
    load_existing,
    splice_docfx_into_docsets,
)

logger = logging.getLogger(__name__)


class SchemaGenerator:
    """Generates configuration schemas from the registered data contracts."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        ops_root: Any = PublishConfig,
        docfx_root: Any = DocfxBuild,
        writer: SchemaWriter | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Generation options, defaults to GeneratorConfig()
            ops_root: Root contract of the publishing configuration
            docfx_root: Root contract of the docset build configuration
            writer: Writer used for the output file
        """
        self.config = config or GeneratorConfig()
        self.ops_root = ops_root
        self.docfx_root = docfx_root
        self.writer = writer or SchemaWriter()

    def extensions(self) -> list[SchemaExtension]:
        """Derive the flat schema entries of both configurations."""
        schemas = build_extensions(None, self.ops_root, self.config.ops_source)
        schemas.extend(build_extensions(self.config.docsets_property, self.docfx_root, self.config.docfx_source))
        return schemas

    def merge_extensions(self, existing: Mapping[str, SchemaEntry]) -> MergeResult:
        """Merge freshly derived entries into persisted ones."""
        fresh = group_by_name(self.extensions())
        return ExtensionMerger(self.config.owned_sources).merge(fresh, existing)

    def standard_schema(self) -> StandardSchema:
        """Derive the standard schema tree of both configurations."""
        ops_schema = build_standard_schema(None, self.ops_root, self.config.ops_root_name, None, self.config.ops_source)
        docfx_schema = build_standard_schema(
            None,
            self.docfx_root,
            self.config.docfx_root_name,
            None,
            self.config.docfx_standard_source,
        )
        return splice_docfx_into_docsets(ops_schema, docfx_schema, self.config.docsets_property)

    def generate_extension_schema(self, input_path: Path, output_path: Path) -> MergeResult:
        """
        Merge the extension schema into the persisted one and write the result.

        Args:
            input_path: Persisted schema to merge with (may not exist)
            output_path: File the merged schema is written to

        Returns:
            MergeResult describing the changes
        """
        result = self.merge_extensions(load_existing(input_path))
        self.writer.write(output_path, result.extensions, self.config.writer.for_mode(SchemaMode.EXTENSION))
        logger.info("Wrote %d schema entries to %s", len(result.extensions), output_path)
        return result

    def generate_standard_schema(self, output_path: Path) -> StandardSchema:
        """
        Write the standard schema, replacing any existing file.

        Args:
            output_path: File the schema is written to

        Returns:
            The standard schema tree
        """
        schema = self.standard_schema()
        self.writer.write(output_path, schema, self.config.writer.for_mode(SchemaMode.STANDARD))
        logger.info("Wrote standard schema to %s", output_path)
        return schema

    def generate(self, mode: SchemaMode, input_path: Path, output_path: Path) -> MergeResult | StandardSchema:
        """Generate the schema of the given mode."""
        if mode is SchemaMode.STANDARD:
            return self.generate_standard_schema(output_path)
        return self.generate_extension_schema(input_path, output_path)
