"""Concrete naming strategies.

Purpose
-------
Provide the word-splitting conventions the Slack-style Web API expects for
enum values (``snake_case`` above all) plus a few common alternatives.

Contents
--------
* :class:`SnakeCaseNaming` / :class:`KebabCaseNaming` - separator based.
* :class:`CamelCaseNaming` - lowers the leading capital run.
* :class:`IdentityNaming` - passes canonical names through.
* :func:`resolve_naming` - look up a strategy by its configuration name.

System Role
-----------
Adapters implementing :class:`lib_enum_wire.application.ports.NamingStrategy`.
Every strategy is stateless and safe to share between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from lib_enum_wire.application.ports.naming import NamingStrategy


class _WordState(Enum):
    START = 0
    LOWER = 1
    UPPER = 2
    NEW_WORD = 3


@dataclass(slots=True, frozen=True)
class SeparatedNaming(NamingStrategy):
    """Lower-case words joined by ``separator``.

    Word boundaries are a lower-to-upper transition, the last capital of an
    upper-case run that precedes a lower-case letter, and spaces. Existing
    separators are kept, so ``REPLY_BROADCAST`` and ``ReplyBroadcast`` both
    become ``reply_broadcast``.

    Examples
    --------
    >>> naming = SeparatedNaming("_")
    >>> naming("ReplyBroadcast")
    'reply_broadcast'
    >>> naming("HTTPServer")
    'http_server'
    >>> naming("REPLY_BROADCAST")
    'reply_broadcast'
    """

    separator: str = "_"

    def __call__(self, canonical_name: str) -> str:
        if not canonical_name:
            return canonical_name

        out: list[str] = []
        state = _WordState.START
        length = len(canonical_name)
        for index, char in enumerate(canonical_name):
            if char == " ":
                if state is not _WordState.START:
                    state = _WordState.NEW_WORD
            elif char.isupper():
                if state is _WordState.UPPER:
                    has_next = index + 1 < length
                    if index > 0 and has_next:
                        following = canonical_name[index + 1]
                        if not following.isupper() and following != self.separator:
                            out.append(self.separator)
                elif state in (_WordState.LOWER, _WordState.NEW_WORD):
                    out.append(self.separator)
                out.append(char.lower())
                state = _WordState.UPPER
            elif char == self.separator:
                out.append(self.separator)
                state = _WordState.START
            else:
                if state is _WordState.NEW_WORD:
                    out.append(self.separator)
                out.append(char)
                state = _WordState.LOWER
        return "".join(out)


@dataclass(slots=True, frozen=True)
class SnakeCaseNaming(SeparatedNaming):
    separator: str = "_"


@dataclass(slots=True, frozen=True)
class KebabCaseNaming(SeparatedNaming):
    separator: str = "-"


@dataclass(slots=True, frozen=True)
class CamelCaseNaming(NamingStrategy):
    """Lower the leading capital (or leading acronym) of a name.

    Examples
    --------
    >>> CamelCaseNaming()("ReplyBroadcast")
    'replyBroadcast'
    >>> CamelCaseNaming()("URLValue")
    'urlValue'
    """

    def __call__(self, canonical_name: str) -> str:
        if not canonical_name or not canonical_name[0].isupper():
            return canonical_name

        chars = list(canonical_name)
        for index, char in enumerate(chars):
            if index == 1 and not char.isupper():
                break
            has_next = index + 1 < len(chars)
            if index > 0 and has_next and not chars[index + 1].isupper():
                if chars[index + 1].isspace():
                    chars[index] = char.lower()
                break
            chars[index] = char.lower()
        return "".join(chars)


@dataclass(slots=True, frozen=True)
class IdentityNaming(NamingStrategy):
    def __call__(self, canonical_name: str) -> str:
        return canonical_name


NAMING_STRATEGIES: Mapping[str, Callable[[], NamingStrategy]] = MappingProxyType(
    {
        "snake": SnakeCaseNaming,
        "kebab": KebabCaseNaming,
        "camel": CamelCaseNaming,
        "identity": IdentityNaming,
    }
)


def resolve_naming(name: str) -> NamingStrategy:
    """Return a fresh strategy for a configuration name such as ``"snake"``."""

    key = name.strip().lower()
    try:
        factory = NAMING_STRATEGIES[key]
    except KeyError as exc:
        choices = ", ".join(sorted(NAMING_STRATEGIES))
        raise ValueError(f"Unknown naming strategy: {name!r} (expected one of {choices})") from exc
    return factory()


__all__ = [
    "CamelCaseNaming",
    "IdentityNaming",
    "KebabCaseNaming",
    "NAMING_STRATEGIES",
    "SeparatedNaming",
    "SnakeCaseNaming",
    "resolve_naming",
]
