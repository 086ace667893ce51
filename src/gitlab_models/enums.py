"""Enum types with canonical wire values.

Every GitLab enum is declared with its wire string (or integer) as the member
value, so the member-to-wire table is explicit and never derived from the
Python name. The reverse lookup is strict by default: a token the enum does
not define raises :class:`UnknownEnumValueError` so callers can tell it apart
from an absent field. ``strict=False`` restores the lenient behavior of
mapping unknown tokens to ``None``.
"""

from __future__ import annotations

import logging
from enum import IntEnum, StrEnum
from typing import Any

from pydantic import BeforeValidator, ValidationInfo

from .exceptions import UnknownEnumValueError

logger = logging.getLogger(__name__)


class _WireValueMixin:
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return value

    @classmethod
    def for_value(cls, value: Any, *, strict: bool = True) -> Any:
        """Return the member whose wire value is *value*.

        ``None`` always maps to ``None``. Unknown values raise
        :class:`UnknownEnumValueError` unless *strict* is false, in which case
        ``None`` is returned.
        """
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(cls._coerce(value))  # type: ignore[call-arg]
        except ValueError:
            if strict:
                allowed = [str(member.value) for member in cls]  # type: ignore[attr-defined]
                raise UnknownEnumValueError(cls.__name__, value, allowed) from None
            logger.debug("Ignoring unrecognized %s value %r", cls.__name__, value)
            return None

    def to_value(self) -> Any:
        return self.value  # type: ignore[attr-defined]


class WireEnum(_WireValueMixin, StrEnum):
    """String enum whose value is the GitLab wire string."""


class WireIntEnum(_WireValueMixin, IntEnum):
    """Integer enum whose value is the GitLab wire integer."""

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            return int(value)
        return value


def decode_with(enum_class: type[WireEnum] | type[WireIntEnum]) -> BeforeValidator:
    """Pydantic validator that decodes a wire value into *enum_class*.

    Honors ``strict_enums`` in the validation context (default ``True``).
    """

    def _decode(value: Any, info: ValidationInfo) -> Any:
        context = info.context or {}
        return enum_class.for_value(value, strict=context.get("strict_enums", True))

    return BeforeValidator(_decode)
