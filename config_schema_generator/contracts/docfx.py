"""
Docset build configuration (``docfx.json`` build section).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import dataclass_json

from .registry import schema_contract, schema_field
from .tags import SchemaTag


@schema_contract
@dataclass_json
@dataclass
class FileItem:
    """
    A group of files mapped from a source folder to a destination folder.
    """

    files: list[str] = schema_field(
        "files",
        tag=SchemaTag(description="Glob patterns of the files to include.", required=True, example=["**/*.md"]),
        default_factory=list,
    )
    exclude: list[str] = schema_field(
        "exclude",
        tag=SchemaTag(description="Glob patterns of the files to exclude.", example=["**/obj/**"]),
        default_factory=list,
    )
    src: str | None = schema_field(
        "src",
        tag=SchemaTag(description="Folder the file patterns are relative to."),
        default=None,
    )
    dest: str | None = schema_field(
        "dest",
        tag=SchemaTag(description="Output folder of the matched files, relative to the build destination."),
        default=None,
    )
    version: str | None = schema_field(
        "version",
        tag=SchemaTag(description="Version group the files belong to."),
        default=None,
    )
    case_sensitive: bool = schema_field(
        "caseSensitive",
        tag=SchemaTag(description="Whether the glob patterns are case sensitive.", default=False),
        default=False,
    )

    # Resolved at build time, not part of the configuration
    resolved_files: list[str] = field(default_factory=list)


@schema_contract
@dataclass_json
@dataclass
class DocfxBuild:
    """
    Build section of a docset configuration.
    """

    content: list[FileItem] = schema_field(
        "content",
        tag=SchemaTag(description="Content files to build.", required=True),
        default_factory=list,
    )
    resource: list[FileItem] = schema_field(
        "resource",
        tag=SchemaTag(description="Resource files copied to the output as-is."),
        default_factory=list,
    )
    overwrite: list[FileItem] = schema_field(
        "overwrite",
        tag=SchemaTag(description="Overwrite files applied on top of the content."),
        default_factory=list,
    )
    dest: str | None = schema_field(
        "dest",
        tag=SchemaTag(description="Output folder of the build.", default="_site"),
        default=None,
    )
    global_metadata: dict[str, Any] = schema_field(
        "globalMetadata",
        tag=SchemaTag(description="Metadata applied to every file of the docset."),
        default_factory=dict,
    )
    file_metadata: dict[str, dict[str, Any]] = schema_field(
        "fileMetadata",
        tag=SchemaTag(description="Metadata applied to files matching a glob pattern."),
        default_factory=dict,
    )
    template: list[str] = schema_field(
        "template",
        tag=SchemaTag(description="Templates applied to the build output, in order.", example=["default"]),
        default_factory=list,
    )
    markdown_engine_name: str | None = schema_field(
        "markdownEngineName",
        tag=SchemaTag(description="Markdown engine used to render content.", allowed_values=["dfm", "markdig"]),
        default=None,
    )
    xref_service: list[str] = schema_field(
        "xrefService",
        tag=SchemaTag(description="Services queried to resolve cross references."),
        default_factory=list,
    )
    keep_file_link: bool = schema_field(
        "keepFileLink",
        tag=SchemaTag(description="Keep links to files instead of resolving them.", default=False),
        default=False,
    )
    disable_git_features: bool = schema_field(
        "disableGitFeatures",
        tag=SchemaTag(description="Skip collecting contributor information from git."),
        default=False,
    )
    max_parallelism: int | None = schema_field(
        "maxParallelism",
        tag=SchemaTag(description="Maximum number of files processed in parallel."),
        default=None,
    )
    no_lang_keyword: bool = schema_field(
        "noLangKeyword",
        tag=SchemaTag(description="Do not emit language keywords in API pages.", deprecated=True),
        default=False,
    )

    # Set by the build host
    build_id: str | None = None
