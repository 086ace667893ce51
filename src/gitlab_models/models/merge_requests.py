"""Merge request request parameters."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any

from ..constants import StateEvent
from ..enums import decode_with
from ..form import GitLabForm, ListStyle
from .base import GitLabModel


def _as_list(name: str, values: Iterable[Any] | None) -> list[Any] | None:
    if values is None:
        return None
    if isinstance(values, (str, bytes)):
        msg = f"{name} takes an iterable of values, not a single string"
        raise TypeError(msg)
    return list(values)


class MergeRequestParams(GitLabModel):
    """Form parameters for creating and updating merge requests."""

    source_branch: str | None = None
    target_branch: str | None = None
    title: str | None = None
    assignee_id: int | None = None
    assignee_ids: list[int] | None = None
    reviewer_ids: list[int] | None = None
    milestone_id: int | None = None
    labels: list[str] | None = None
    description: str | None = None
    target_project_id: int | None = None
    state_event: Annotated[StateEvent | None, decode_with(StateEvent)] = None
    remove_source_branch: bool | None = None
    squash: bool | None = None
    discussion_locked: bool | None = None
    allow_collaboration: bool | None = None
    approvals_before_merge: int | None = None

    def with_source_branch(self, source_branch: str | None) -> MergeRequestParams:
        """Set the source branch. Creation only."""
        self.source_branch = source_branch
        return self

    def with_target_branch(self, target_branch: str | None) -> MergeRequestParams:
        self.target_branch = target_branch
        return self

    def with_title(self, title: str | None) -> MergeRequestParams:
        self.title = title
        return self

    def with_assignee_id(self, assignee_id: int | None) -> MergeRequestParams:
        self.assignee_id = assignee_id
        return self

    def with_assignee_ids(self, assignee_ids: Iterable[int] | None) -> MergeRequestParams:
        """Set the users to assign the merge request to.

        GitLab unassigns everyone when given ``0``.
        """
        self.assignee_ids = _as_list("assignee_ids", assignee_ids)
        return self

    def with_reviewer_ids(self, reviewer_ids: Iterable[int] | None) -> MergeRequestParams:
        """Set the users to request a review from. GitLab clears reviewers when given ``0``."""
        self.reviewer_ids = _as_list("reviewer_ids", reviewer_ids)
        return self

    def with_milestone_id(self, milestone_id: int | None) -> MergeRequestParams:
        self.milestone_id = milestone_id
        return self

    def with_labels(self, labels: Iterable[str] | None) -> MergeRequestParams:
        self.labels = _as_list("labels", labels)
        return self

    def with_description(self, description: str | None) -> MergeRequestParams:
        """Set the description. GitLab limits it to 1,048,576 characters; not checked here."""
        self.description = description
        return self

    def with_target_project_id(self, target_project_id: int | None) -> MergeRequestParams:
        """Set the target project ID. Creation only."""
        self.target_project_id = target_project_id
        return self

    def with_state_event(self, state_event: StateEvent | str | None) -> MergeRequestParams:
        """Close or reopen the merge request. Updates only."""
        self.state_event = state_event
        return self

    def with_remove_source_branch(self, remove_source_branch: bool | None) -> MergeRequestParams:
        self.remove_source_branch = remove_source_branch
        return self

    def with_squash(self, squash: bool | None) -> MergeRequestParams:
        self.squash = squash
        return self

    def with_discussion_locked(self, discussion_locked: bool | None) -> MergeRequestParams:
        """Lock the discussion to project members. Updates only."""
        self.discussion_locked = discussion_locked
        return self

    def with_allow_collaboration(self, allow_collaboration: bool | None) -> MergeRequestParams:
        """Allow commits from members who can merge to the target branch."""
        self.allow_collaboration = allow_collaboration
        return self

    def with_approvals_before_merge(
        self, approvals_before_merge: int | None
    ) -> MergeRequestParams:
        """Set approvals_before_merge. Creation only."""
        self.approvals_before_merge = approvals_before_merge
        return self

    def get_form(self, is_create: bool) -> GitLabForm:
        """Encode the parameters for a create (``is_create=True``) or update call.

        Creation requires ``target_branch``, ``title`` and ``source_branch`` and
        raises :class:`~gitlab_models.exceptions.MissingParamError` without them.
        Updates have no required fields.
        """
        form = (
            GitLabForm()
            .with_param("target_branch", self.target_branch, is_create)
            .with_param("title", self.title, is_create)
            .with_param("assignee_id", self.assignee_id)
            .with_param("assignee_ids", self.assignee_ids)
            .with_param("reviewer_ids", self.reviewer_ids)
            .with_param("milestone_id", self.milestone_id)
            .with_param("labels", self.labels, list_style=ListStyle.COMMA)
            .with_param("description", self.description)
            .with_param("remove_source_branch", self.remove_source_branch)
            .with_param("squash", self.squash)
            .with_param("allow_collaboration", self.allow_collaboration)
        )

        if is_create:
            form.with_param("source_branch", self.source_branch, True).with_param(
                "target_project_id", self.target_project_id
            ).with_param("approvals_before_merge", self.approvals_before_merge)
        else:
            form.with_param("state_event", self.state_event).with_param(
                "discussion_locked", self.discussion_locked
            )

        return form
