"""Public package surface for the string-only enum codec.

``import lib_enum_wire`` exposes the codec, the payload serializer, the
naming strategies, the error taxonomy, and the shared-instance helpers.
"""

from __future__ import annotations

from .adapters import CamelCaseNaming, IdentityNaming, KebabCaseNaming, SnakeCaseNaming, resolve_naming
from .application import EnumCodec, NamingStrategy, PayloadSerializer
from .config import CodecSettings
from .domain import (
    NO_MATCH,
    AmbiguousWireNameError,
    CompositeValueError,
    ConversionFailedError,
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
    WireKind,
    WireValue,
)
from .lib_enum_wire import decode, encode, load_enum, summary_info
from .runtime import clear_codecs, get_codec, get_serializer

__all__ = [
    "AmbiguousWireNameError",
    "CamelCaseNaming",
    "CodecSettings",
    "CompositeValueError",
    "ConversionFailedError",
    "DecodeError",
    "DecodeOutcome",
    "DecodeStatus",
    "EncodeError",
    "EnumCodec",
    "EnumWireError",
    "IdentityNaming",
    "IntegerNotAllowedError",
    "KebabCaseNaming",
    "NO_MATCH",
    "NamingStrategy",
    "NullNotAllowedError",
    "NumericLikeNameError",
    "PayloadError",
    "PayloadSerializer",
    "SnakeCaseNaming",
    "UnexpectedTokenError",
    "UnknownMemberError",
    "WireKind",
    "WireValue",
    "clear_codecs",
    "decode",
    "encode",
    "get_codec",
    "get_serializer",
    "load_enum",
    "resolve_naming",
    "summary_info",
]
