"""Project models and the project list filter."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field

from ..constants import (
    PAGE_PARAM,
    PER_PAGE_PARAM,
    AccessLevel,
    AutoDevopsDeployStrategy,
    BuildGitStrategy,
    ImportStatus,
    ProjectOrderBy,
    SortOrder,
    SquashOption,
    Visibility,
)
from ..enums import WireEnum, decode_with
from ..form import GitLabForm
from .base import DateOnly, GitLabModel, Timestamp
from .common import (
    CustomAttribute,
    Namespace,
    Owner,
    Permissions,
    ProjectLicense,
    ProjectStatistics,
    SharedGroup,
)


class MergeMethod(WireEnum):
    """The merge_method of a project."""

    MERGE = "merge"
    REBASE_MERGE = "rebase_merge"
    FF = "ff"


class Project(GitLabModel):
    approvals_before_merge: int | None = None
    archived: bool | None = None
    avatar_url: str | None = None
    container_registry_enabled: bool | None = None
    created_at: Timestamp | None = None
    creator_id: int | None = None
    default_branch: str | None = None
    description: str | None = None
    forks_count: int | None = None
    forked_from_project: Project | None = None
    http_url_to_repo: str | None = None
    id: int | None = None
    is_public: bool | None = Field(default=None, alias="public")
    issues_enabled: bool | None = None
    jobs_enabled: bool | None = None
    last_activity_at: Timestamp | None = None
    lfs_enabled: bool | None = None
    merge_method: Annotated[MergeMethod | None, decode_with(MergeMethod)] = None
    merge_requests_enabled: bool | None = None
    name: str | None = None
    namespace: Namespace | None = None
    name_with_namespace: str | None = None
    only_allow_merge_if_pipeline_succeeds: bool | None = None
    allow_merge_on_skipped_pipeline: bool | None = None
    only_allow_merge_if_all_discussions_are_resolved: bool | None = None
    open_issues_count: int | None = None
    owner: Owner | None = None
    path: str | None = None
    path_with_namespace: str | None = None
    permissions: Permissions | None = None
    public_jobs: bool | None = None
    repository_storage: str | None = None
    request_access_enabled: bool | None = None
    runners_token: str | None = None
    shared_runners_enabled: bool | None = None
    shared_with_groups: list[SharedGroup] | None = None
    snippets_enabled: bool | None = None
    ssh_url_to_repo: str | None = None
    star_count: int | None = None
    tag_list: list[str] | None = None
    topics: list[str] | None = None
    visibility_level: int | None = None
    visibility: Annotated[Visibility | None, decode_with(Visibility)] = None
    wall_enabled: bool | None = None
    web_url: str | None = None
    wiki_enabled: bool | None = None
    printing_merge_request_link_enabled: bool | None = None
    resolve_outdated_diff_discussions: bool | None = None
    statistics: ProjectStatistics | None = None
    initialize_with_readme: bool | None = None
    packages_enabled: bool | None = None
    empty_repo: bool | None = None
    license_url: str | None = None
    license: ProjectLicense | None = None
    custom_attributes: list[CustomAttribute] | None = None
    build_coverage_regex: str | None = None
    build_git_strategy: Annotated[BuildGitStrategy | None, decode_with(BuildGitStrategy)] = None
    readme_url: str | None = None
    can_create_merge_request_in: bool | None = None
    import_status: Annotated[ImportStatus | None, decode_with(ImportStatus)] = None
    ci_default_git_depth: int | None = None
    ci_forward_deployment_enabled: bool | None = None
    ci_config_path: str | None = None
    remove_source_branch_after_merge: bool | None = None
    auto_devops_enabled: bool | None = None
    auto_devops_deploy_strategy: Annotated[
        AutoDevopsDeployStrategy | None, decode_with(AutoDevopsDeployStrategy)
    ] = None
    autoclose_referenced_issues: bool | None = None
    emails_disabled: bool | None = None
    suggestion_commit_message: str | None = None
    squash_option: Annotated[SquashOption | None, decode_with(SquashOption)] = None
    merge_commit_template: str | None = None
    squash_commit_template: str | None = None
    issue_branch_template: str | None = None
    merge_requests_template: str | None = None
    issues_template: str | None = None
    links: dict[str, str] | None = Field(default=None, alias="_links")
    marked_for_deletion_on: DateOnly | None = None

    def with_namespace_id(self, namespace_id: int) -> Project:
        """Replace the namespace with one that only carries *namespace_id*."""
        self.namespace = Namespace(id=namespace_id)
        return self

    def get_link_by_name(self, name: str) -> str | None:
        if not self.links:
            return None
        return self.links.get(name)

    @staticmethod
    def is_valid(project: Project | None) -> bool:
        return project is not None and project.id is not None

    @staticmethod
    def format_path_with_namespace(namespace: str, path: str) -> str:
        """Build a fully qualified project path, e.g. ``group/repo``.

        Surrounding whitespace is stripped from both parts before joining.
        """
        return f"{namespace.strip()}/{path.strip()}"


class ProjectFilter(GitLabModel):
    """Query filter for listing projects.

    The ``with_*`` GitLab flags are stored without their prefix so they do not
    clash with the builder methods; they keep their GitLab names on the wire.
    """

    archived: bool | None = None
    visibility: Annotated[Visibility | None, decode_with(Visibility)] = None
    order_by: Annotated[ProjectOrderBy | None, decode_with(ProjectOrderBy)] = None
    sort: Annotated[SortOrder | None, decode_with(SortOrder)] = None
    search: str | None = None
    search_namespaces: bool | None = None
    simple: bool | None = None
    owned: bool | None = None
    membership: bool | None = None
    starred: bool | None = None
    statistics: bool | None = None
    custom_attributes: bool | None = Field(default=None, alias="with_custom_attributes")
    issues_enabled: bool | None = Field(default=None, alias="with_issues_enabled")
    merge_requests_enabled: bool | None = Field(
        default=None, alias="with_merge_requests_enabled"
    )
    programming_language: str | None = Field(default=None, alias="with_programming_language")
    wiki_checksum_failed: bool | None = None
    repository_checksum_failed: bool | None = None
    min_access_level: Annotated[AccessLevel | None, decode_with(AccessLevel)] = None
    id_after: int | None = None
    id_before: int | None = None
    last_activity_after: Timestamp | None = None
    last_activity_before: Timestamp | None = None
    repository_storage: str | None = None
    imported: bool | None = None
    topic: str | None = None
    topic_id: int | None = None

    def with_archived(self, archived: bool | None) -> ProjectFilter:
        """Limit by archived status."""
        self.archived = archived
        return self

    def with_visibility(self, visibility: Visibility | str | None) -> ProjectFilter:
        """Limit by visibility: public, internal, or private."""
        self.visibility = visibility
        return self

    def with_order_by(self, order_by: ProjectOrderBy | str | None) -> ProjectFilter:
        self.order_by = order_by
        return self

    def with_sort(self, sort: SortOrder | str | None) -> ProjectFilter:
        self.sort = sort
        return self

    def with_search(self, search: str | None) -> ProjectFilter:
        """Return projects matching the search criteria."""
        self.search = search
        return self

    def with_search_namespaces(self, search_namespaces: bool | None) -> ProjectFilter:
        """Include ancestor namespaces when matching the search criteria."""
        self.search_namespaces = search_namespaces
        return self

    def with_simple(self, simple: bool | None) -> ProjectFilter:
        """Return only limited fields for each project."""
        self.simple = simple
        return self

    def with_owned(self, owned: bool | None) -> ProjectFilter:
        """Limit to projects explicitly owned by the current user."""
        self.owned = owned
        return self

    def with_membership(self, membership: bool | None) -> ProjectFilter:
        """Limit to projects the current user is a member of."""
        self.membership = membership
        return self

    def with_starred(self, starred: bool | None) -> ProjectFilter:
        self.starred = starred
        return self

    def with_statistics(self, statistics: bool | None) -> ProjectFilter:
        self.statistics = statistics
        return self

    def with_custom_attributes(self, custom_attributes: bool | None) -> ProjectFilter:
        self.custom_attributes = custom_attributes
        return self

    def with_issues_enabled(self, issues_enabled: bool | None) -> ProjectFilter:
        self.issues_enabled = issues_enabled
        return self

    def with_merge_requests_enabled(self, merge_requests_enabled: bool | None) -> ProjectFilter:
        self.merge_requests_enabled = merge_requests_enabled
        return self

    def with_programming_language(self, programming_language: str | None) -> ProjectFilter:
        self.programming_language = programming_language
        return self

    def with_wiki_checksum_failed(self, wiki_checksum_failed: bool | None) -> ProjectFilter:
        self.wiki_checksum_failed = wiki_checksum_failed
        return self

    def with_repository_checksum_failed(
        self, repository_checksum_failed: bool | None
    ) -> ProjectFilter:
        self.repository_checksum_failed = repository_checksum_failed
        return self

    def with_min_access_level(self, min_access_level: AccessLevel | int | None) -> ProjectFilter:
        """Limit by the current user's minimal access level."""
        self.min_access_level = min_access_level
        return self

    def with_id_after(self, id_after: int | None) -> ProjectFilter:
        self.id_after = id_after
        return self

    def with_id_before(self, id_before: int | None) -> ProjectFilter:
        self.id_before = id_before
        return self

    def with_last_activity_after(
        self, last_activity_after: datetime | str | None
    ) -> ProjectFilter:
        self.last_activity_after = last_activity_after
        return self

    def with_last_activity_before(
        self, last_activity_before: datetime | str | None
    ) -> ProjectFilter:
        self.last_activity_before = last_activity_before
        return self

    def with_repository_storage(self, repository_storage: str | None) -> ProjectFilter:
        """Limit to projects stored in *repository_storage* (administrators only)."""
        self.repository_storage = repository_storage
        return self

    def with_imported(self, imported: bool | None) -> ProjectFilter:
        """Limit to projects imported from external systems by the current user."""
        self.imported = imported
        return self

    def with_topic(self, topic: str | None) -> ProjectFilter:
        """Comma-separated topic names; matching projects have all of them."""
        self.topic = topic
        return self

    def with_topic_id(self, topic_id: int | None) -> ProjectFilter:
        self.topic_id = topic_id
        return self

    def get_query_params(self, page: int | None = None, per_page: int | None = None) -> GitLabForm:
        """Encode the set filter fields as query parameters.

        Keys are emitted in a fixed order; ``page`` and ``per_page`` follow the
        filter fields when given.
        """
        return (
            GitLabForm()
            .with_param("archived", self.archived)
            .with_param("visibility", self.visibility)
            .with_param("order_by", self.order_by)
            .with_param("sort", self.sort)
            .with_param("search", self.search)
            .with_param("search_namespaces", self.search_namespaces)
            .with_param("simple", self.simple)
            .with_param("owned", self.owned)
            .with_param("membership", self.membership)
            .with_param("starred", self.starred)
            .with_param("statistics", self.statistics)
            .with_param("with_custom_attributes", self.custom_attributes)
            .with_param("with_issues_enabled", self.issues_enabled)
            .with_param("with_merge_requests_enabled", self.merge_requests_enabled)
            .with_param("with_programming_language", self.programming_language)
            .with_param("wiki_checksum_failed", self.wiki_checksum_failed)
            .with_param("repository_checksum_failed", self.repository_checksum_failed)
            .with_param("min_access_level", self.min_access_level)
            .with_param("id_after", self.id_after)
            .with_param("id_before", self.id_before)
            .with_param("last_activity_after", self.last_activity_after)
            .with_param("last_activity_before", self.last_activity_before)
            .with_param("repository_storage", self.repository_storage)
            .with_param("imported", self.imported)
            .with_param("topic", self.topic)
            .with_param("topic_id", self.topic_id)
            .with_param(PAGE_PARAM, page)
            .with_param(PER_PAGE_PARAM, per_page)
        )
