"""Shared codec instances for the whole process.

Purpose
-------
Codecs are built once per naming strategy and reused for the lifetime of the
serialization layer. This module is the composition point that turns
:class:`lib_enum_wire.config.CodecSettings` (or an explicit strategy) into
that shared instance.

Contents
--------
* :func:`get_codec` / :func:`get_serializer` - accessors for shared instances.
* :func:`clear_codecs` - reset hook for tests and reconfiguration.
"""

from __future__ import annotations

from lib_enum_wire.adapters.naming import resolve_naming
from lib_enum_wire.application.codec import EnumCodec
from lib_enum_wire.application.ports import NamingStrategy
from lib_enum_wire.application.serializer import PayloadSerializer
from lib_enum_wire.config import CodecSettings

from ._state import clear_codecs, registered_count, shared_codec


def get_codec(naming: NamingStrategy | str | None = None, settings: CodecSettings | None = None) -> EnumCodec:
    """Return the shared codec for ``naming``.

    ``naming`` may be a strategy instance, a configuration name such as
    ``"snake"``, or ``None`` to use ``settings.naming``. Without explicit
    ``settings`` the environment is consulted via
    :meth:`CodecSettings.from_env`.

    Examples
    --------
    >>> get_codec("snake") is get_codec("snake")
    True
    """

    resolved = settings if settings is not None else CodecSettings.from_env()
    if naming is None:
        strategy = resolve_naming(resolved.naming)
    elif isinstance(naming, str):
        strategy = resolve_naming(naming)
    else:
        strategy = naming
    return shared_codec(
        strategy,
        strict_unknown=resolved.strict_unknown,
        validate_unique=resolved.validate_unique,
    )


def get_serializer(naming: NamingStrategy | str | None = None, settings: CodecSettings | None = None) -> PayloadSerializer:
    return PayloadSerializer(get_codec(naming, settings))


__all__ = ["clear_codecs", "get_codec", "get_serializer", "registered_count"]
