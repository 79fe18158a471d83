"""Error taxonomy raised by the enum codec and the payload serializer.

Every failure is a distinct subclass so callers can branch on the kind of
problem without parsing messages. Encode and decode errors also derive from
:class:`ValueError` so generic ``except ValueError`` handlers keep working.
"""

from __future__ import annotations

from typing import Any, Sequence


class EnumWireError(Exception):
    """Root of all codec and serializer failures."""


class EncodeError(EnumWireError, ValueError):
    """An enum value could not be rendered on the wire."""


class NumericLikeNameError(EncodeError):
    def __init__(self, name: str):
        super().__init__(f"Integer value {name} is not allowed.")
        self.name = name


class CompositeValueError(EncodeError):
    def __init__(self, value: Any):
        super().__init__(f"Composite flag value {value!r} has no single declared name.")
        self.value = value


class DecodeError(EnumWireError, ValueError):
    """A wire token could not be turned into an enum value."""


class NullNotAllowedError(DecodeError):
    def __init__(self, target_type: Any):
        super().__init__(f"Cannot convert null value to {_type_name(target_type)}.")
        self.target_type = target_type


class IntegerNotAllowedError(DecodeError):
    def __init__(self, value: int):
        super().__init__(f"Integer value {value} is not allowed.")
        self.value = value


class UnexpectedTokenError(DecodeError):
    def __init__(self, kind: str):
        super().__init__(f"Unexpected token {kind} when parsing enum.")
        self.kind = kind


class ConversionFailedError(DecodeError):
    """An internal step failed; the original exception is chained as ``__cause__``."""

    def __init__(self, wire_text: str, target_type: Any):
        super().__init__(f"Error converting value {wire_text!r} to type '{_type_name(target_type)}'.")
        self.wire_text = wire_text
        self.target_type = target_type


class UnknownMemberError(DecodeError):
    def __init__(self, wire_text: str, target_type: Any):
        super().__init__(f"Value {wire_text!r} does not name a member of '{_type_name(target_type)}'.")
        self.wire_text = wire_text
        self.target_type = target_type


class AmbiguousWireNameError(EnumWireError):
    """Two members of one enum render to the same wire name."""

    def __init__(self, enum_type: type, wire_name: str, members: Sequence[str]):
        joined = ", ".join(members)
        super().__init__(f"Wire name {wire_name!r} is shared by {_type_name(enum_type)} members: {joined}")
        self.enum_type = enum_type
        self.wire_name = wire_name
        self.members = tuple(members)


class PayloadError(EnumWireError):
    """A field of a payload failed to (de)serialize; aborts the whole payload."""

    def __init__(self, path: str, error: Exception):
        super().__init__(f"{path}: {error}")
        self.path = path
        self.error = error


def _type_name(target_type: Any) -> str:
    if isinstance(target_type, type):
        return target_type.__name__
    name = getattr(target_type, "name", None)
    if isinstance(name, str):
        return name
    return getattr(target_type, "__name__", str(target_type))


__all__ = [
    "AmbiguousWireNameError",
    "CompositeValueError",
    "ConversionFailedError",
    "DecodeError",
    "EncodeError",
    "EnumWireError",
    "IntegerNotAllowedError",
    "NullNotAllowedError",
    "NumericLikeNameError",
    "PayloadError",
    "UnexpectedTokenError",
    "UnknownMemberError",
]
