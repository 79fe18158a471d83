"""Convenience façade over the shared codec.

Purpose
-------
Offer module-level helpers for callers that do not want to manage codec
instances: encode a member to its JSON wire value, decode a JSON value back,
load an enum class from a ``module:Class`` path, and render the metadata
banner used by the CLI.

System Role
-----------
Outer shell. Delegates to :mod:`lib_enum_wire.runtime` so all helpers share
the process-wide codec for the configured naming strategy.
"""

from __future__ import annotations

import importlib
from enum import Enum
from typing import Any

from .application.ports import NamingStrategy
from .runtime import get_codec


def encode(value: Enum | None, naming: NamingStrategy | str | None = None) -> str | None:
    """Return the JSON wire value (a string, or ``None``) for ``value``.

    Examples
    --------
    >>> from enum import Enum
    >>> class Parse(Enum):
    ...     Full = 1
    ...     NoLinks = 2
    >>> encode(Parse.NoLinks, "snake")
    'no_links'
    >>> encode(None) is None
    True
    """

    return get_codec(naming).to_json(value)


def decode(value: Any, declared_type: Any, naming: NamingStrategy | str | None = None) -> Any:
    """Decode a JSON value (as returned by :func:`json.loads`) into ``declared_type``."""

    return get_codec(naming).from_json(value, declared_type)


def load_enum(path: str) -> type[Enum]:
    """Import an enum class from a ``package.module:ClassName`` path.

    Examples
    --------
    >>> load_enum("lib_enum_wire.domain.wire:WireKind").__name__
    'WireKind'
    """

    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Expected 'module:ClassName', got {path!r}")
    target: Any = importlib.import_module(module_name)
    for part in attribute.split("."):
        target = getattr(target, part)
    if not (isinstance(target, type) and issubclass(target, Enum)):
        raise TypeError(f"{path!r} is not an Enum class")
    return target


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["decode", "encode", "load_enum", "summary_info"]
