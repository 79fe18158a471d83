"""Codec configuration sourced from keyword arguments, environment, and ``.env``.

Purpose
-------
Collect the few knobs the codec exposes (naming strategy, strict handling of
unknown names, wire-name uniqueness validation) in one frozen dataclass and
define how environment variables override them.

Contents
--------
* :class:`CodecSettings` - resolved settings with :meth:`CodecSettings.from_env`.
* :func:`enable_dotenv` - load the nearest ``.env`` once per process.
* ``ENV_*`` / :data:`DOTENV_ENV_VAR` - recognised environment variable names.

System Role
-----------
Read by :mod:`lib_enum_wire.runtime` when building the shared codec and by the
CLI before dispatching subcommands.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from threading import Lock
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .adapters.naming import NAMING_STRATEGIES

logger = logging.getLogger(__name__)

ENV_NAMING = "ENUM_WIRE_NAMING"
ENV_STRICT_UNKNOWN = "ENUM_WIRE_STRICT_UNKNOWN"
ENV_VALIDATE_UNIQUE = "ENUM_WIRE_VALIDATE_UNIQUE"
DOTENV_ENV_VAR = "ENUM_WIRE_USE_DOTENV"
DEFAULT_NAMING = "snake"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def env_bool(name: str, default: bool) -> bool:
    """Interpret the environment variable ``name`` as a boolean flag.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('ENUM_WIRE_EXAMPLE_BOOL', None)
    >>> env_bool('ENUM_WIRE_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['ENUM_WIRE_EXAMPLE_BOOL'] = 'off'
    >>> env_bool('ENUM_WIRE_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('ENUM_WIRE_EXAMPLE_BOOL', None)
    """

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(slots=True, frozen=True)
class CodecSettings:
    """Resolved codec settings.

    Attributes
    ----------
    naming:
        Key into :data:`lib_enum_wire.adapters.naming.NAMING_STRATEGIES`.
    strict_unknown:
        Promote "no member matched" from the soft ``NO_MATCH`` result to
        :class:`lib_enum_wire.domain.UnknownMemberError`.
    validate_unique:
        Refuse enums whose members collide on a wire name.
    """

    naming: str = DEFAULT_NAMING
    strict_unknown: bool = False
    validate_unique: bool = False

    def __post_init__(self) -> None:
        normalized = self.naming.strip().lower()
        if normalized not in NAMING_STRATEGIES:
            choices = ", ".join(sorted(NAMING_STRATEGIES))
            raise ValueError(f"Unknown naming strategy: {self.naming!r} (expected one of {choices})")
        object.__setattr__(self, "naming", normalized)

    @classmethod
    def from_env(cls, **overrides: Any) -> "CodecSettings":
        """Build settings from ``ENUM_WIRE_*`` variables, then apply ``overrides``.

        ``None`` overrides are ignored so CLI options that were not given keep
        the environment value.
        """

        base = cls(
            naming=os.getenv(ENV_NAMING) or DEFAULT_NAMING,
            strict_unknown=env_bool(ENV_STRICT_UNKNOWN, False),
            validate_unique=env_bool(ENV_VALIDATE_UNIQUE, False),
        )
        given = {key: value for key, value in overrides.items() if value is not None}
        return replace(base, **given) if given else base


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    The search walks upward from ``search_from`` (default: the current working
    directory). Only the first call per process touches the filesystem; later
    calls return the cached result.
    """

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_LOADED
        _DOTENV_ATTEMPTED = True

        found = _find_dotenv(search_from)
        if found is None:
            logger.debug("No .env file found")
            return None
        load_dotenv(found, override=False)
        _DOTENV_LOADED = found.resolve()
        logger.debug("Loaded environment overrides from %s", _DOTENV_LOADED)
        return _DOTENV_LOADED


def _find_dotenv(search_from: Path | None) -> Path | None:
    if search_from is None:
        found = find_dotenv(usecwd=True)
        return Path(found) if found else None
    start = Path(search_from).resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None
        _DOTENV_ATTEMPTED = False


__all__ = [
    "CodecSettings",
    "DOTENV_ENV_VAR",
    "ENV_NAMING",
    "ENV_STRICT_UNKNOWN",
    "ENV_VALIDATE_UNIQUE",
    "enable_dotenv",
    "env_bool",
]
