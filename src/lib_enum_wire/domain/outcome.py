"""Decode results that distinguish "absent" from "no member matched"."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from .errors import DecodeError


class _NoMatch:
    """Sentinel returned when a string names no member of the target enum."""

    _instance: "_NoMatch | None" = None

    def __new__(cls) -> "_NoMatch":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NO_MATCH"


NO_MATCH: Final = _NoMatch()


class DecodeStatus(Enum):
    FOUND = "found"
    ABSENT = "absent"
    NO_MATCH = "no_match"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class DecodeOutcome:
    """Result-type rendition of a decode call.

    Exactly one of ``value`` (``FOUND``) or ``error`` (``FAILED``) is
    meaningful; ``ABSENT`` and ``NO_MATCH`` carry neither.
    """

    status: DecodeStatus
    value: Enum | None = None
    error: DecodeError | None = None

    @classmethod
    def from_value(cls, value: Any) -> "DecodeOutcome":
        if value is NO_MATCH:
            return cls(DecodeStatus.NO_MATCH)
        if value is None:
            return cls(DecodeStatus.ABSENT)
        return cls(DecodeStatus.FOUND, value=value)

    @classmethod
    def failed(cls, error: DecodeError) -> "DecodeOutcome":
        return cls(DecodeStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status is not DecodeStatus.FAILED

    def unwrap(self) -> Any:
        """Return the decoded value (``None`` / ``NO_MATCH`` included) or raise the error."""

        if self.error is not None:
            raise self.error
        if self.status is DecodeStatus.NO_MATCH:
            return NO_MATCH
        return self.value


__all__ = ["DecodeOutcome", "DecodeStatus", "NO_MATCH"]
