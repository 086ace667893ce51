"""Form and query parameter encoding for GitLab API requests.

:class:`GitLabForm` collects ``(name, value)`` pairs in the order they are
added and keeps only the values that are present, rendered as GitLab expects
them on the wire. Escaping is left to the transport; :meth:`GitLabForm.encode`
and :meth:`GitLabForm.to_query_params` hand the pairs to ``httpx`` for that.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any

import httpx

from .enums import WireEnum, WireIntEnum
from .exceptions import MissingParamError

logger = logging.getLogger(__name__)


class ListStyle(Enum):
    """How a list value is laid out in the encoded parameters."""

    REPEATED = "repeated"  # name[]=a&name[]=b
    COMMA = "comma"  # name=a,b


def format_timestamp(value: datetime) -> str:
    """Render *value* as ``yyyy-MM-ddTHH:mm:ssXXX``.

    Naive datetimes are taken to be UTC. A zero offset renders as ``Z``.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def to_wire(value: Any) -> str:
    """Render a single scalar value as its wire string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (WireEnum, WireIntEnum)):
        return str(value.to_value())
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return format_date(value)
    return str(value)


class GitLabForm:
    """Ordered set of encoded form parameters.

    Example::

        form = (
            GitLabForm()
            .with_param("archived", True)
            .with_param("search", "foo")
            .with_param("topic", None)
        )
        form.as_list()  # [("archived", "true"), ("search", "foo")]
    """

    def __init__(self) -> None:
        self._params: list[tuple[str, str]] = []

    def with_param(
        self,
        name: str,
        value: Any,
        required: bool = False,
        *,
        list_style: ListStyle = ListStyle.REPEATED,
    ) -> GitLabForm:
        """Append *value* under *name* if it is present.

        Raises :class:`MissingParamError` when *required* is set and the value
        is ``None``, blank or an empty collection. An empty list is dropped
        unless it is comma-joined, in which case ``name=`` is sent.
        """
        if value is None:
            if required:
                raise MissingParamError(name)
            return self

        if isinstance(value, (list, tuple)):
            return self._with_list(name, value, required, list_style)

        text = to_wire(value)
        if required and not text.strip():
            raise MissingParamError(name)
        self._params.append((name, text))
        return self

    def _with_list(
        self, name: str, values: list[Any] | tuple[Any, ...], required: bool, style: ListStyle
    ) -> GitLabForm:
        if style is ListStyle.COMMA:
            joined = ",".join(to_wire(v) for v in values)
            if required and not joined.strip():
                raise MissingParamError(name)
            # an empty joined value is sent so GitLab clears the field
            self._params.append((name, joined))
            return self

        if not values:
            if required:
                raise MissingParamError(name)
            return self

        self._params.extend((f"{name}[]", to_wire(v)) for v in values if v is not None)
        return self

    # ── Output ────────────────────────────────────────────────────

    def as_list(self) -> list[tuple[str, str]]:
        return list(self._params)

    def as_dict(self) -> dict[str, str]:
        """Single-valued view of the parameters; the first value of a repeated key wins."""
        result: dict[str, str] = {}
        for name, value in self._params:
            result.setdefault(name, value)
        return result

    def to_query_params(self) -> httpx.QueryParams:
        return httpx.QueryParams(self._params)

    def encode(self) -> str:
        """URL-encoded query string, e.g. ``archived=true&search=foo``."""
        encoded = str(self.to_query_params())
        logger.debug("Encoded %d form parameters", len(self._params))
        return encoded

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GitLabForm):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        return f"GitLabForm({self._params!r})"
