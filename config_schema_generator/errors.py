"""
Exceptions raised by the schema generator.
"""

from __future__ import annotations


class SchemaGeneratorError(Exception):
    """Base class for schema generation failures."""

    pass


class SchemaFileError(SchemaGeneratorError):
    """Raised when a schema file has an unexpected shape.

    This can happen when:
    - The persisted extension schema is not a JSON object
    - Serialized output fails validation before being written
    """

    pass


class SchemaCompositionError(SchemaGeneratorError):
    """Raised when two standard schema trees cannot be stitched together."""

    pass
