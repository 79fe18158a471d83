"""Process-wide codec registry and access helpers."""

from __future__ import annotations

from collections.abc import Hashable
from threading import RLock

from lib_enum_wire.application.codec import EnumCodec
from lib_enum_wire.application.ports import NamingStrategy

_RegistryKey = tuple[Hashable, bool, bool]

_CODECS: dict[_RegistryKey, EnumCodec] = {}
_STATE_LOCK = RLock()


def _strategy_key(naming: NamingStrategy) -> Hashable:
    """Equal strategies share a codec; unhashable ones are keyed by identity.

    The registered codec keeps its strategy alive, so an ``id`` stays unique
    for as long as the entry exists.
    """

    try:
        hash(naming)
    except TypeError:
        return ("id", id(naming))
    return naming


def shared_codec(naming: NamingStrategy, *, strict_unknown: bool, validate_unique: bool) -> EnumCodec:
    """Return the codec registered for this strategy and flags, creating it once."""

    key = (_strategy_key(naming), strict_unknown, validate_unique)
    with _STATE_LOCK:
        codec = _CODECS.get(key)
        if codec is None:
            codec = EnumCodec(naming, strict_unknown=strict_unknown, validate_unique=validate_unique)
            _CODECS[key] = codec
        return codec


def clear_codecs() -> None:
    """Drop every registered codec (tests and reconfiguration)."""

    with _STATE_LOCK:
        _CODECS.clear()


def registered_count() -> int:
    with _STATE_LOCK:
        return len(_CODECS)


__all__ = ["clear_codecs", "registered_count", "shared_codec"]
