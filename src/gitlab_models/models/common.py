"""Records embedded in GitLab project resources."""

from __future__ import annotations

from typing import Annotated

from ..constants import AccessLevel
from ..enums import decode_with
from .base import DateOnly, GitLabModel, Timestamp


class CustomAttribute(GitLabModel):
    key: str | None = None
    value: str | None = None

    def with_key(self, key: str | None) -> CustomAttribute:
        self.key = key
        return self

    def with_value(self, value: str | None) -> CustomAttribute:
        self.value = value
        return self


class Namespace(GitLabModel):
    id: int | None = None
    name: str | None = None
    path: str | None = None
    kind: str | None = None
    full_path: str | None = None
    parent_id: int | None = None
    avatar_url: str | None = None
    web_url: str | None = None


class Owner(GitLabModel):
    id: int | None = None
    username: str | None = None
    name: str | None = None
    state: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    web_url: str | None = None
    created_at: Timestamp | None = None


class ProjectAccess(GitLabModel):
    access_level: Annotated[AccessLevel | None, decode_with(AccessLevel)] = None
    notification_level: int | None = None


class Permissions(GitLabModel):
    project_access: ProjectAccess | None = None
    group_access: ProjectAccess | None = None


class ProjectStatistics(GitLabModel):
    commit_count: int | None = None
    storage_size: int | None = None
    repository_size: int | None = None
    wiki_size: int | None = None
    lfs_objects_size: int | None = None
    job_artifacts_size: int | None = None
    packages_size: int | None = None
    snippets_size: int | None = None
    uploads_size: int | None = None


class ProjectLicense(GitLabModel):
    key: str | None = None
    name: str | None = None
    nickname: str | None = None
    html_url: str | None = None
    source_url: str | None = None


class SharedGroup(GitLabModel):
    group_id: int | None = None
    group_name: str | None = None
    group_full_path: str | None = None
    group_access_level: Annotated[AccessLevel | None, decode_with(AccessLevel)] = None
    expires_at: DateOnly | None = None
