"""GitLab REST API resource models and request parameter encoding."""

import json
import logging
from typing import TextIO

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from .config import GitLabModelsConfig
from .constants import AccessLevel, ProjectOrderBy, SortOrder, StateEvent, Visibility
from .exceptions import MissingParamError


def _choices(enum_class: type) -> click.Choice:
    return click.Choice([str(member.value) for member in enum_class])


def _emit(form, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(form.as_list()))
    else:
        click.echo(form.encode())


@click.group()
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Encode GitLab request parameters and decode GitLab resources."""
    load_dotenv()

    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = GitLabModelsConfig.from_env()
        config.validate()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    ctx.obj = config


@main.command("project-filter")
@click.option("--archived/--no-archived", default=None, help="Limit by archived status")
@click.option("--visibility", type=_choices(Visibility))
@click.option("--order-by", type=_choices(ProjectOrderBy))
@click.option("--sort", type=_choices(SortOrder))
@click.option("--search", help="Return projects matching the search criteria")
@click.option("--owned/--no-owned", default=None)
@click.option("--membership/--no-membership", default=None)
@click.option("--starred/--no-starred", default=None)
@click.option("--simple/--no-simple", default=None)
@click.option(
    "--min-access-level",
    type=click.Choice([level.name.lower() for level in AccessLevel if level > 0]),
)
@click.option("--topic", help="Comma-separated topic names")
@click.option("--page", type=int, help="Append page and per_page parameters")
@click.option("--per-page", type=int, help="Page size (defaults to GITLAB_PER_PAGE)")
@click.option("--json", "as_json", is_flag=True, help="Print key/value pairs as JSON")
@click.pass_obj
def project_filter(
    config: GitLabModelsConfig,
    archived: bool | None,
    visibility: str | None,
    order_by: str | None,
    sort: str | None,
    search: str | None,
    owned: bool | None,
    membership: bool | None,
    starred: bool | None,
    simple: bool | None,
    min_access_level: str | None,
    topic: str | None,
    page: int | None,
    per_page: int | None,
    as_json: bool,
) -> None:
    """Print the query parameters for a project listing."""
    from .models.projects import ProjectFilter

    project_filter = (
        ProjectFilter()
        .with_archived(archived)
        .with_visibility(visibility)
        .with_order_by(order_by)
        .with_sort(sort)
        .with_search(search)
        .with_owned(owned)
        .with_membership(membership)
        .with_starred(starred)
        .with_simple(simple)
        .with_min_access_level(AccessLevel[min_access_level.upper()] if min_access_level else None)
        .with_topic(topic)
    )
    if page is not None and per_page is None:
        per_page = config.per_page
    _emit(project_filter.get_query_params(page, per_page), as_json)


@main.command("merge-request")
@click.option("--update", "is_update", is_flag=True, help="Encode for an update instead of a create")
@click.option("--source-branch")
@click.option("--target-branch")
@click.option("--title")
@click.option("--description")
@click.option("--label", "labels", multiple=True, help="Label name (repeatable)")
@click.option("--assignee-id", "assignee_ids", type=int, multiple=True)
@click.option("--reviewer-id", "reviewer_ids", type=int, multiple=True)
@click.option("--milestone-id", type=int)
@click.option("--target-project-id", type=int)
@click.option("--state-event", type=_choices(StateEvent), help="Updates only")
@click.option("--remove-source-branch/--keep-source-branch", default=None)
@click.option("--squash/--no-squash", default=None)
@click.option("--json", "as_json", is_flag=True, help="Print key/value pairs as JSON")
def merge_request(
    is_update: bool,
    source_branch: str | None,
    target_branch: str | None,
    title: str | None,
    description: str | None,
    labels: tuple[str, ...],
    assignee_ids: tuple[int, ...],
    reviewer_ids: tuple[int, ...],
    milestone_id: int | None,
    target_project_id: int | None,
    state_event: str | None,
    remove_source_branch: bool | None,
    squash: bool | None,
    as_json: bool,
) -> None:
    """Print the form parameters for creating or updating a merge request."""
    from .models.merge_requests import MergeRequestParams

    params = (
        MergeRequestParams()
        .with_source_branch(source_branch)
        .with_target_branch(target_branch)
        .with_title(title)
        .with_description(description)
        .with_labels(labels or None)
        .with_assignee_ids(assignee_ids or None)
        .with_reviewer_ids(reviewer_ids or None)
        .with_milestone_id(milestone_id)
        .with_target_project_id(target_project_id)
        .with_state_event(state_event)
        .with_remove_source_branch(remove_source_branch)
        .with_squash(squash)
    )
    try:
        form = params.get_form(is_create=not is_update)
    except MissingParamError as e:
        option = "--" + e.name.replace("_", "-")
        raise click.UsageError(f"{option} is required to create a merge request") from e
    _emit(form, as_json)


@main.command("decode-project")
@click.argument("source", type=click.File("r"))
@click.option("--lenient", is_flag=True, help="Map unknown enum values to null instead of failing")
@click.pass_obj
def decode_project(config: GitLabModelsConfig, source: TextIO, lenient: bool) -> None:
    """Validate a project JSON document and print it normalized."""
    from .models.projects import Project

    strict = config.strict_enums and not lenient
    try:
        project = Project.from_json(source.read(), strict_enums=strict)
    except ValidationError as e:
        raise click.ClickException(str(e)) from e
    click.echo(project.to_json(indent=config.json_indent))


if __name__ == "__main__":
    main()
