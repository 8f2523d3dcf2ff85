"""
Publishing configuration (``.openpublishing.publish.config.json``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dataclasses_json import config, dataclass_json

from .registry import schema_contract, schema_field
from .tags import SchemaTag


@schema_contract
@dataclass_json
@dataclass
class DocsetToPublish:
    """
    A docset published from the repository.
    """

    docset_name: str = schema_field(
        "docset_name",
        tag=SchemaTag(description="Name of the docset.", required=True),
        default="",
    )
    build_source_folder: str = schema_field(
        "build_source_folder",
        tag=SchemaTag(description="Folder holding the docset configuration, relative to the repository root.", default="."),
        default=".",
    )
    build_output_subfolder: str | None = schema_field(
        "build_output_subfolder",
        tag=SchemaTag(description="Sub folder of the build output the docset is written to."),
        default=None,
    )
    locale: str = schema_field(
        "locale",
        tag=SchemaTag(description="Locale of the docset.", default="en-us", example="en-us"),
        default="en-us",
    )
    monikers: list[str] = schema_field(
        "monikers",
        tag=SchemaTag(description="Versions the docset is published for."),
        default_factory=list,
    )
    open_to_public_contributors: bool = schema_field(
        "open_to_public_contributors",
        tag=SchemaTag(description="Whether public contributors may edit the docset."),
        default=False,
    )
    type_mapping: dict[str, str] = schema_field(
        "type_mapping",
        tag=SchemaTag(description="Maps source file types to page types."),
        default_factory=dict,
    )
    customized_template_paths: list[str] = schema_field(
        "customized_template_paths",
        tag=SchemaTag(description="Template folders overriding the default template."),
        default_factory=list,
    )
    template_folder: str | None = schema_field(
        "template_folder",
        tag=SchemaTag(description="Template folder used by the docset.", deprecated=True),
        default=None,
    )


@schema_contract
@dataclass_json
@dataclass
class DependentRepository:
    """
    A repository checked out next to the main repository before building.
    """

    path_to_root: str = schema_field(
        "path_to_root",
        tag=SchemaTag(description="Checkout folder, relative to the repository root.", required=True),
        default="",
    )
    url: str = schema_field(
        "url",
        tag=SchemaTag(description="Git URL of the repository.", required=True),
        default="",
    )
    branch: str | None = schema_field(
        "branch",
        tag=SchemaTag(description="Branch to check out.", default="master"),
        default=None,
    )
    branch_mapping: dict[str, str] = schema_field(
        "branch_mapping",
        tag=SchemaTag(description="Maps branches of the main repository to branches of this repository."),
        default_factory=dict,
    )
    include_in_build: bool = schema_field(
        "include_in_build",
        tag=SchemaTag(description="Whether the repository content is part of the build."),
        default=False,
    )


@schema_contract
@dataclass_json
@dataclass
class JoinTocConfig:
    """
    Joins a reference table of contents into a conceptual one.
    """

    top_level_toc: str | None = schema_field(
        "TopLevelToc",
        tag=SchemaTag(description="Table of contents the reference one is joined into."),
        default=None,
    )
    reference_toc: str | None = schema_field(
        "ReferenceToc",
        tag=SchemaTag(description="Table of contents to join."),
        default=None,
    )
    output_folder: str | None = schema_field(
        "OutputFolder",
        tag=SchemaTag(description="Folder the joined table of contents is written to."),
        default=None,
    )


@schema_contract
@dataclass_json
@dataclass
class PublishConfig:
    """
    Root of the publishing configuration.
    """

    docsets_to_publish: list[DocsetToPublish] = schema_field(
        "docsets_to_publish",
        tag=SchemaTag(description="Docsets published from the repository.", required=True),
        default_factory=list,
    )
    notification_subscribers: list[str] = schema_field(
        "notification_subscribers",
        tag=SchemaTag(description="Aliases notified of build results."),
        default_factory=list,
    )
    sync_notification_subscribers: list[str] = schema_field(
        "sync_notification_subscribers",
        tag=SchemaTag(description="Aliases notified of repository sync results."),
        default_factory=list,
    )
    branches_to_filter: list[str] = schema_field(
        "branches_to_filter",
        tag=SchemaTag(description="Branches that are never built."),
        default_factory=list,
    )
    git_repository_url_open_to_public_contributors: str | None = schema_field(
        "git_repository_url_open_to_public_contributors",
        tag=SchemaTag(description="Public repository contributors are redirected to."),
        default=None,
    )
    git_repository_branch_open_to_public_contributors: str | None = schema_field(
        "git_repository_branch_open_to_public_contributors",
        tag=SchemaTag(description="Branch of the public repository contributors are redirected to."),
        default=None,
    )
    skip_source_output_uploading: bool = schema_field(
        "skip_source_output_uploading",
        tag=SchemaTag(description="Do not upload the source output of the build."),
        default=False,
    )
    need_preview_pull_request: bool = schema_field(
        "need_preview_pull_request",
        tag=SchemaTag(description="Build pull requests and publish them to a preview site."),
        default=False,
    )
    contribution_branch_mappings: dict[str, str] = schema_field(
        "contribution_branch_mappings",
        tag=SchemaTag(description="Maps public contribution branches to private branches."),
        default_factory=dict,
    )
    dependent_repositories: list[DependentRepository] = schema_field(
        "dependent_repositories",
        tag=SchemaTag(description="Repositories the build depends on."),
        default_factory=list,
    )
    branch_target_mapping: dict[str, list[str]] = schema_field(
        "branch_target_mapping",
        tag=SchemaTag(description="Maps branches to publishing targets."),
        default_factory=dict,
    )
    need_generate_pdf_url_template: bool = schema_field(
        "need_generate_pdf_url_template",
        tag=SchemaTag(description="Generate the URL template of the PDF download link."),
        default=False,
    )
    max_build_minutes: int | None = schema_field(
        "max_build_minutes",
        tag=SchemaTag(description="Build timeout, in minutes."),
        default=None,
    )

    # Named in JSON but not documented in the schema; its entries still are
    join_toc_plugin: list[JoinTocConfig] = field(default_factory=list, metadata=config(field_name="JoinTOCPlugin"))

    # Filled in by the build host
    source_path: str | None = None
