from __future__ import annotations

from enum import Enum
from typing import Optional

import pytest

from lib_enum_wire.domain import (
    NO_MATCH,
    AmbiguousWireNameError,
    ConversionFailedError,
    DeclaredType,
    DecodeError,
    DecodeOutcome,
    DecodeStatus,
    EncodeError,
    EnumWireError,
    IntegerNotAllowedError,
    NullNotAllowedError,
    NumericLikeNameError,
    PayloadError,
    UnexpectedTokenError,
    UnknownMemberError,
)


class Status(Enum):
    Ok = 1


@pytest.mark.parametrize(
    "error, message",
    [
        (NumericLikeNameError("123"), "Integer value 123 is not allowed."),
        (IntegerNotAllowedError(7), "Integer value 7 is not allowed."),
        (NullNotAllowedError(Status), "Cannot convert null value to Status."),
        (UnexpectedTokenError("array"), "Unexpected token array when parsing enum."),
        (ConversionFailedError("ok", DeclaredType.of(Optional[Status])), "Error converting value 'ok' to type 'Optional[Status]'."),
        (UnknownMemberError("nope", Status), "Value 'nope' does not name a member of 'Status'."),
    ],
)
def test_messages_are_stable(error: Exception, message: str) -> None:
    assert str(error) == message


def test_hierarchy_groups_encode_and_decode_failures() -> None:
    assert issubclass(NumericLikeNameError, EncodeError)
    assert issubclass(IntegerNotAllowedError, DecodeError)
    assert issubclass(DecodeError, ValueError)
    assert issubclass(EncodeError, ValueError)
    for kind in (AmbiguousWireNameError, PayloadError, EncodeError, DecodeError):
        assert issubclass(kind, EnumWireError)


def test_payload_error_keeps_path_and_inner_error() -> None:
    inner = IntegerNotAllowedError(1)
    error = PayloadError("Message.subtype", inner)

    assert error.path == "Message.subtype"
    assert error.error is inner
    assert str(error) == "Message.subtype: Integer value 1 is not allowed."


def test_no_match_is_a_falsy_singleton() -> None:
    assert not NO_MATCH
    assert repr(NO_MATCH) == "NO_MATCH"
    assert type(NO_MATCH)() is NO_MATCH


def test_outcome_unwrap() -> None:
    assert DecodeOutcome.from_value(Status.Ok).unwrap() is Status.Ok
    assert DecodeOutcome.from_value(None).unwrap() is None
    assert DecodeOutcome.from_value(NO_MATCH).unwrap() is NO_MATCH
    assert DecodeOutcome.from_value(NO_MATCH).status is DecodeStatus.NO_MATCH

    failed = DecodeOutcome.failed(UnexpectedTokenError("object"))
    with pytest.raises(UnexpectedTokenError):
        failed.unwrap()
