"""Domain value objects and errors used by the enum codec."""

from __future__ import annotations

from .declared import DeclaredType
from .errors import (
    AmbiguousWireNameError,
    CompositeValueError,
    ConversionFailedError,
    DecodeError,
    EncodeError,
    EnumWireError,
    IntegerNotAllowedError,
    NullNotAllowedError,
    NumericLikeNameError,
    PayloadError,
    UnexpectedTokenError,
    UnknownMemberError,
)
from .member_table import MemberEntry, MemberTable
from .outcome import NO_MATCH, DecodeOutcome, DecodeStatus
from .wire import WireKind, WireValue

__all__ = [
    "AmbiguousWireNameError",
    "CompositeValueError",
    "ConversionFailedError",
    "DeclaredType",
    "DecodeError",
    "DecodeOutcome",
    "DecodeStatus",
    "EncodeError",
    "EnumWireError",
    "IntegerNotAllowedError",
    "MemberEntry",
    "MemberTable",
    "NO_MATCH",
    "NullNotAllowedError",
    "NumericLikeNameError",
    "PayloadError",
    "UnexpectedTokenError",
    "UnknownMemberError",
    "WireKind",
    "WireValue",
]
