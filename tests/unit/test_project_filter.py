"""Tests for the project list filter."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from gitlab_models.constants import AccessLevel, ProjectOrderBy, SortOrder, Visibility
from gitlab_models.models.projects import ProjectFilter


def test_empty_filter_encodes_nothing():
    assert ProjectFilter().get_query_params().as_list() == []


def test_archived_and_search():
    params = ProjectFilter().with_archived(True).with_search("foo").get_query_params()
    assert params.as_list() == [("archived", "true"), ("search", "foo")]
    assert params.as_dict() == {"archived": "true", "search": "foo"}


def test_pagination_follows_filter_fields():
    params = ProjectFilter().with_archived(True).with_search("foo").get_query_params(2, 50)
    assert params.as_list() == [
        ("archived", "true"),
        ("search", "foo"),
        ("page", "2"),
        ("per_page", "50"),
    ]


def test_order_does_not_depend_on_set_order():
    first = (
        ProjectFilter()
        .with_topic("api")
        .with_owned(True)
        .with_visibility(Visibility.INTERNAL)
        .with_id_after(10)
    )
    second = (
        ProjectFilter()
        .with_id_after(10)
        .with_visibility(Visibility.INTERNAL)
        .with_owned(True)
        .with_topic("api")
    )
    assert first.get_query_params() == second.get_query_params()
    assert first.get_query_params().encode() == second.get_query_params().encode()
    assert [name for name, _ in first.get_query_params()] == [
        "visibility",
        "owned",
        "id_after",
        "topic",
    ]


def test_full_filter_order():
    after = datetime(2024, 1, 1, tzinfo=UTC)
    before = datetime(2024, 2, 1, 12, 0, tzinfo=timezone(timedelta(hours=-5)))
    project_filter = (
        ProjectFilter()
        .with_topic_id(8)
        .with_topic("api")
        .with_imported(False)
        .with_repository_storage("default")
        .with_last_activity_before(before)
        .with_last_activity_after(after)
        .with_id_before(100)
        .with_id_after(1)
        .with_min_access_level(AccessLevel.DEVELOPER)
        .with_repository_checksum_failed(False)
        .with_wiki_checksum_failed(False)
        .with_programming_language("Python")
        .with_merge_requests_enabled(True)
        .with_issues_enabled(True)
        .with_custom_attributes(True)
        .with_statistics(True)
        .with_starred(False)
        .with_membership(True)
        .with_owned(False)
        .with_simple(True)
        .with_search_namespaces(True)
        .with_search("foo")
        .with_sort(SortOrder.DESC)
        .with_order_by(ProjectOrderBy.LAST_ACTIVITY_AT)
        .with_visibility(Visibility.PUBLIC)
        .with_archived(False)
    )
    assert project_filter.get_query_params().as_list() == [
        ("archived", "false"),
        ("visibility", "public"),
        ("order_by", "last_activity_at"),
        ("sort", "desc"),
        ("search", "foo"),
        ("search_namespaces", "true"),
        ("simple", "true"),
        ("owned", "false"),
        ("membership", "true"),
        ("starred", "false"),
        ("statistics", "true"),
        ("with_custom_attributes", "true"),
        ("with_issues_enabled", "true"),
        ("with_merge_requests_enabled", "true"),
        ("with_programming_language", "Python"),
        ("wiki_checksum_failed", "false"),
        ("repository_checksum_failed", "false"),
        ("min_access_level", "30"),
        ("id_after", "1"),
        ("id_before", "100"),
        ("last_activity_after", "2024-01-01T00:00:00Z"),
        ("last_activity_before", "2024-02-01T12:00:00-05:00"),
        ("repository_storage", "default"),
        ("imported", "false"),
        ("topic", "api"),
        ("topic_id", "8"),
    ]


def test_builders_return_same_instance():
    project_filter = ProjectFilter()
    assert project_filter.with_starred(True) is project_filter
    assert project_filter.with_sort("asc") is project_filter


def test_string_enum_values_are_decoded():
    project_filter = ProjectFilter().with_sort("asc").with_order_by("name")
    assert project_filter.sort is SortOrder.ASC
    assert project_filter.order_by is ProjectOrderBy.NAME


def test_unknown_enum_value_is_rejected():
    with pytest.raises(ValidationError):
        ProjectFilter().with_sort("sideways")


def test_clearing_a_field():
    project_filter = ProjectFilter().with_search("foo").with_search(None)
    assert project_filter.get_query_params().as_list() == []


def test_wire_names_for_with_flags():
    project_filter = ProjectFilter.from_api(
        {"with_issues_enabled": True, "with_programming_language": "Go"}
    )
    assert project_filter.issues_enabled is True
    assert project_filter.to_dict() == {
        "with_issues_enabled": True,
        "with_programming_language": "Go",
    }


def test_with_values_accepts_wire_names():
    project_filter = ProjectFilter().with_values(with_issues_enabled=True, simple=True)
    assert project_filter.issues_enabled is True
    assert project_filter.get_query_params().as_list() == [
        ("simple", "true"),
        ("with_issues_enabled", "true"),
    ]
