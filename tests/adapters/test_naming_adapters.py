from __future__ import annotations

import pytest

from lib_enum_wire.adapters.naming import (
    NAMING_STRATEGIES,
    CamelCaseNaming,
    IdentityNaming,
    KebabCaseNaming,
    SnakeCaseNaming,
    resolve_naming,
)
from lib_enum_wire.application.ports import NamingStrategy


@pytest.mark.parametrize(
    "canonical, expected",
    [
        ("ReplyBroadcast", "reply_broadcast"),
        ("GroupJoin", "group_join"),
        ("Score", "score"),
        ("REPLY_BROADCAST", "reply_broadcast"),
        ("HTTPServer", "http_server"),
        ("already_snake", "already_snake"),
        ("Mpim", "mpim"),
        ("Two Words", "two_words"),
        ("A", "a"),
        ("", ""),
    ],
)
def test_snake_case(canonical: str, expected: str) -> None:
    assert SnakeCaseNaming()(canonical) == expected


@pytest.mark.parametrize(
    "canonical, expected",
    [
        ("ReplyBroadcast", "reply-broadcast"),
        ("HTTPServer", "http-server"),
    ],
)
def test_kebab_case(canonical: str, expected: str) -> None:
    assert KebabCaseNaming()(canonical) == expected


@pytest.mark.parametrize(
    "canonical, expected",
    [
        ("ReplyBroadcast", "replyBroadcast"),
        ("URLValue", "urlValue"),
        ("ID", "id"),
        ("score", "score"),
        ("", ""),
    ],
)
def test_camel_case(canonical: str, expected: str) -> None:
    assert CamelCaseNaming()(canonical) == expected


def test_identity_passes_names_through() -> None:
    assert IdentityNaming()("ReplyBroadcast") == "ReplyBroadcast"


@pytest.mark.parametrize("name", sorted(NAMING_STRATEGIES))
def test_every_registered_strategy_satisfies_the_port(name: str) -> None:
    strategy = resolve_naming(name)

    assert isinstance(strategy, NamingStrategy)


def test_resolve_naming_is_case_insensitive_and_stable() -> None:
    assert resolve_naming(" Snake ") == SnakeCaseNaming()
    assert hash(resolve_naming("snake")) == hash(SnakeCaseNaming())


def test_resolve_naming_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown naming strategy"):
        resolve_naming("pascal")
