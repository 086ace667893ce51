"""Shared test fixtures for gitlab-models."""

from __future__ import annotations

from typing import Any

import pytest
from click.testing import CliRunner

from gitlab_models.config import GitLabModelsConfig


@pytest.fixture
def config() -> GitLabModelsConfig:
    return GitLabModelsConfig()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_payload() -> dict[str, Any]:
    """A trimmed GET /projects/:id response."""
    return {
        "id": 42,
        "name": "Repo",
        "path": "repo",
        "path_with_namespace": "group/repo",
        "name_with_namespace": "Group / Repo",
        "description": None,
        "default_branch": "main",
        "public": False,
        "visibility": "private",
        "archived": False,
        "created_at": "2024-01-15T10:30:00.000Z",
        "last_activity_at": "2024-03-01T08:00:00+02:00",
        "merge_method": "rebase_merge",
        "squash_option": "default_off",
        "auto_devops_deploy_strategy": "continuous",
        "build_git_strategy": "fetch",
        "import_status": "finished",
        "marked_for_deletion_on": "2024-05-01",
        "tag_list": ["api"],
        "topics": ["api", "python"],
        "namespace": {"id": 7, "name": "Group", "path": "group", "kind": "group", "full_path": "group"},
        "owner": {"id": 3, "username": "alice", "name": "Alice", "state": "active"},
        "permissions": {
            "project_access": {"access_level": 30, "notification_level": 3},
            "group_access": None,
        },
        "statistics": {"commit_count": 12, "storage_size": 2048, "repository_size": 1024},
        "license": {"key": "mit", "name": "MIT License", "nickname": None},
        "custom_attributes": [{"key": "team", "value": "platform"}],
        "shared_with_groups": [
            {"group_id": 9, "group_name": "ops", "group_full_path": "ops", "group_access_level": 20}
        ],
        "_links": {"self": "https://gitlab.example.com/api/v4/projects/42"},
        "container_expiration_policy": {"cadence": "1d"},
    }
