from __future__ import annotations

from enum import Enum

from lib_enum_wire.application.codec import EnumCodec
from lib_enum_wire.application.ports import NamingStrategy


class Suit(Enum):
    Hearts = 1
    Spades = 2


class _UpperNaming(NamingStrategy):
    def __call__(self, canonical_name: str) -> str:
        return canonical_name.upper()


def test_explicit_port_implementation_is_recognised() -> None:
    assert isinstance(_UpperNaming(), NamingStrategy)


def test_plain_functions_satisfy_the_port() -> None:
    assert isinstance(str.lower, NamingStrategy)
    assert isinstance(lambda name: name, NamingStrategy)


def test_codec_only_calls_the_strategy_with_declared_names() -> None:
    seen: list[str] = []

    def recording(name: str) -> str:
        seen.append(name)
        return name.lower()

    codec = EnumCodec(recording)
    codec.to_json(Suit.Spades)

    assert seen == ["Hearts", "Spades"]


def test_codec_exposes_its_strategy() -> None:
    naming = _UpperNaming()

    assert EnumCodec(naming).naming is naming
    assert EnumCodec(naming).to_json(Suit.Hearts) == "HEARTS"
