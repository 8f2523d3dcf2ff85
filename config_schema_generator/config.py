"""
Configuration for the schema generator.

The writer configuration is passed explicitly to every write call, so
switching between extension and standard output never mutates shared
serializer settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class SchemaMode(str, Enum):
    """Which schema document to generate."""

    EXTENSION = "extension"  # Flat dotted-path map, merged with the persisted file
    STANDARD = "standard"  # Nested JSON-Schema-like tree, replaces the file


# Default file names used when no input path is given
DEFAULT_SCHEMA_FILENAMES = {
    SchemaMode.EXTENSION: "schema.json",
    SchemaMode.STANDARD: "stand_schema.json",
}


@dataclass
class WriterConfig:
    """Configuration for serializing schema documents.

    Attributes:
        indent: Number of spaces used to indent the JSON output
        ignore_default_values: Omit members whose value equals their declared default
        ensure_ascii: Escape non-ASCII characters in the output
        atomic_write: Write through a temporary file and replace the target
    """

    indent: int = 2
    ignore_default_values: bool = False
    ensure_ascii: bool = False
    atomic_write: bool = True

    def for_mode(self, mode: SchemaMode) -> WriterConfig:
        """Return a copy configured for the given schema mode."""
        return replace(self, ignore_default_values=mode is SchemaMode.STANDARD)


@dataclass
class GeneratorConfig:
    """Configuration options for schema generation."""

    # Source label recorded on entries derived from the publishing configuration
    ops_source: str = "OPS"

    # Source label recorded on entries derived from the docset build configuration
    docfx_source: str = "DocFX"

    # Source label used for the docset build tree in standard mode
    docfx_standard_source: str = "Docfx"

    # Labels owned by this generator; stale entries carrying them are deleted
    owned_sources: list[str] = field(default_factory=lambda: ["OPS", "DocFX"])

    # Array property of the publishing configuration that holds docset builds
    docsets_property: str = "docsets_to_publish"

    # Names given to the two root types in standard mode
    ops_root_name: str = "ops_configuration"
    docfx_root_name: str = "docfx_configuration"

    writer: WriterConfig = field(default_factory=WriterConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "writer" and isinstance(v, dict):
                config.writer = WriterConfig(**v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ops_source": self.ops_source,
            "docfx_source": self.docfx_source,
            "docfx_standard_source": self.docfx_standard_source,
            "owned_sources": self.owned_sources,
            "docsets_property": self.docsets_property,
            "ops_root_name": self.ops_root_name,
            "docfx_root_name": self.docfx_root_name,
            "writer": {
                "indent": self.writer.indent,
                "ignore_default_values": self.writer.ignore_default_values,
                "ensure_ascii": self.writer.ensure_ascii,
                "atomic_write": self.writer.atomic_write,
            },
        }
