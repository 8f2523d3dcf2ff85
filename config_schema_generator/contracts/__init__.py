"""
Data contracts of the build pipeline and the registry describing them.
"""

from __future__ import annotations

from .docfx import DocfxBuild, FileItem
from .ops import DependentRepository, DocsetToPublish, JoinTocConfig, PublishConfig
from .registry import (
    ContractDescriptor,
    MemberDescriptor,
    describe,
    schema_contract,
    schema_field,
)
from .tags import SchemaTag, is_overridable, overridable

__all__ = [
    "ContractDescriptor",
    "MemberDescriptor",
    "describe",
    "schema_contract",
    "schema_field",
    "SchemaTag",
    "overridable",
    "is_overridable",
    "PublishConfig",
    "DocsetToPublish",
    "DependentRepository",
    "JoinTocConfig",
    "DocfxBuild",
    "FileItem",
]
