"""Closed value sets shared across GitLab models."""

from __future__ import annotations

from .enums import WireEnum, WireIntEnum

PAGE_PARAM = "page"
PER_PAGE_PARAM = "per_page"


class SortOrder(WireEnum):
    ASC = "asc"
    DESC = "desc"


class ProjectOrderBy(WireEnum):
    ID = "id"
    NAME = "name"
    PATH = "path"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    LAST_ACTIVITY_AT = "last_activity_at"
    SIMILARITY = "similarity"
    REPOSITORY_SIZE = "repository_size"
    STORAGE_SIZE = "storage_size"
    PACKAGES_SIZE = "packages_size"
    WIKI_SIZE = "wiki_size"


class Visibility(WireEnum):
    PUBLIC = "public"
    PRIVATE = "private"
    INTERNAL = "internal"


class StateEvent(WireEnum):
    """Merge request state transition, for updates only."""

    CLOSE = "close"
    REOPEN = "reopen"


class SquashOption(WireEnum):
    NEVER = "never"
    ALWAYS = "always"
    DEFAULT_ON = "default_on"
    DEFAULT_OFF = "default_off"


class AutoDevopsDeployStrategy(WireEnum):
    CONTINUOUS = "continuous"
    MANUAL = "manual"
    TIMED_INCREMENTAL = "timed_incremental"


class BuildGitStrategy(WireEnum):
    FETCH = "fetch"
    CLONE = "clone"


class ImportStatus(WireEnum):
    NONE = "none"
    SCHEDULED = "scheduled"
    FAILED = "failed"
    STARTED = "started"
    FINISHED = "finished"


class AccessLevel(WireIntEnum):
    INVALID = -1
    NONE = 0
    MINIMAL_ACCESS = 5
    GUEST = 10
    REPORTER = 20
    DEVELOPER = 30
    MAINTAINER = 40
    OWNER = 50
    ADMIN = 60
