"""gitlab-models configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any


@dataclass
class GitLabModelsConfig:
    """Encoding and decoding defaults, loaded from environment variables."""

    per_page: int = 20
    strict_enums: bool = True
    json_indent: int | None = 2

    @classmethod
    def from_env(cls) -> GitLabModelsConfig:
        per_page = int(os.getenv("GITLAB_PER_PAGE", "20"))
        strict_enums = os.getenv("GITLAB_STRICT_ENUMS", "true").lower() not in (
            "false",
            "0",
            "no",
        )
        json_indent = int(os.getenv("GITLAB_JSON_INDENT", "2")) or None

        return cls(
            per_page=per_page,
            strict_enums=strict_enums,
            json_indent=json_indent,
        )

    @property
    def validation_context(self) -> dict[str, Any]:
        return {"strict_enums": self.strict_enums}

    def validate(self) -> None:
        if not 1 <= self.per_page <= 100:
            msg = f"GITLAB_PER_PAGE must be between 1 and 100, got {self.per_page}"
            raise ValueError(msg)
        if self.json_indent is not None and self.json_indent < 0:
            msg = f"GITLAB_JSON_INDENT must not be negative, got {self.json_indent}"
            raise ValueError(msg)
