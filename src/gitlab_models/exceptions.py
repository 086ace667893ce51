"""GitLab model exceptions."""

from __future__ import annotations


class GitLabError(Exception):
    """Base exception for GitLab model operations."""


class GitLabFormError(GitLabError, ValueError):
    """Raised when a set of form parameters cannot be built."""


class MissingParamError(GitLabFormError):
    """Raised when a required form parameter is absent or blank."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} cannot be empty or null")


class GitLabDecodeError(GitLabError, ValueError):
    """Raised when a wire value cannot be decoded into its model type."""


class UnknownEnumValueError(GitLabDecodeError):
    """Raised when a wire string matches none of an enum's values."""

    def __init__(self, enum_name: str, value: object, allowed: list[str]) -> None:
        self.enum_name = enum_name
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Unrecognized {enum_name} value {value!r} (expected one of: {', '.join(allowed)})"
        )
