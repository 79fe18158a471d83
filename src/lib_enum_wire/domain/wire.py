"""Wire tokens exchanged between the serializer and the enum codec.

Purpose
-------
Give the codec a closed set of token classes to discriminate on, independent
of the JSON library that produced them.

Contents
--------
* :class:`WireKind` enum naming the four token classes.
* :class:`WireValue` immutable token carrying the raw payload.

System Role
-----------
Domain value objects. The serializer classifies decoded JSON scalars into
:class:`WireValue` instances before handing them to
:class:`lib_enum_wire.application.codec.EnumCodec`, and turns the codec's
output back into JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any


class WireKind(Enum):
    """Token classes the codec distinguishes on input."""

    NULL = "null"
    STRING = "string"
    INTEGER = "integer"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class WireValue:
    """Single token read from, or written to, the wire.

    Attributes
    ----------
    kind:
        :class:`WireKind` of the token.
    payload:
        Raw Python value (``None`` for null, ``str`` for strings, ``int`` for
        integers, anything else for :attr:`WireKind.OTHER`).
    token:
        Human readable token name used in diagnostics (``"boolean"``,
        ``"array"``...).

    Examples
    --------
    >>> WireValue.from_json("reply_broadcast").kind
    <WireKind.STRING: 'string'>
    >>> WireValue.from_json(True).token
    'boolean'
    >>> WireValue.string("asc").to_json()
    '"asc"'
    """

    kind: WireKind
    payload: Any = None
    token: str = "null"

    @classmethod
    def null(cls) -> "WireValue":
        return cls(WireKind.NULL, None, "null")

    @classmethod
    def string(cls, text: str) -> "WireValue":
        return cls(WireKind.STRING, text, "string")

    @classmethod
    def integer(cls, number: int) -> "WireValue":
        return cls(WireKind.INTEGER, number, "integer")

    @classmethod
    def other(cls, payload: Any, token: str) -> "WireValue":
        return cls(WireKind.OTHER, payload, token)

    @classmethod
    def from_json(cls, value: Any) -> "WireValue":
        """Classify a value produced by :func:`json.loads`.

        ``bool`` is checked before ``int`` because it subclasses ``int``; JSON
        ``true``/``false`` must never pass as an integer token.
        """

        if value is None:
            return cls.null()
        if isinstance(value, bool):
            return cls.other(value, "boolean")
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, int):
            return cls.integer(value)
        return cls.other(value, _token_name(value))

    @property
    def text(self) -> str:
        """Return the payload as it would appear in an error message."""

        if self.kind is WireKind.NULL:
            return "null"
        return str(self.payload)

    def to_python(self) -> Any:
        """Return the JSON-compatible Python value for this token."""

        return self.payload

    def to_json(self) -> str:
        """Render the token as JSON text."""

        return json.dumps(self.payload)


def _token_name(value: Any) -> str:
    if isinstance(value, float):
        return "float"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


__all__ = ["WireKind", "WireValue"]
