"""Behavioral tests for the module-level façade helpers."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Optional

import pytest

import lib_enum_wire
from lib_enum_wire import NO_MATCH, IntegerNotAllowedError, decode, encode, load_enum, summary_info


class DndState(Enum):
    SnoozeEnabled = 1
    DndEnabled = 2


@pytest.fixture(autouse=True)
def _fresh_codecs(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("ENUM_WIRE_NAMING", raising=False)
    monkeypatch.delenv("ENUM_WIRE_STRICT_UNKNOWN", raising=False)
    lib_enum_wire.clear_codecs()
    yield
    lib_enum_wire.clear_codecs()


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()

    assert "Info for lib_enum_wire" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_encode_and_decode_use_snake_case_by_default() -> None:
    assert encode(DndState.SnoozeEnabled) == "snooze_enabled"
    assert decode("dnd_enabled", DndState) is DndState.DndEnabled


def test_facade_accepts_explicit_naming() -> None:
    assert encode(DndState.DndEnabled, "camel") == "dndEnabled"
    assert decode("dndEnabled", DndState, "camel") is DndState.DndEnabled


def test_facade_applies_codec_policies() -> None:
    assert decode(None, Optional[DndState]) is None
    assert decode("snooze", DndState) is NO_MATCH
    with pytest.raises(IntegerNotAllowedError):
        decode(1, DndState)


def test_load_enum_resolves_nested_attributes() -> None:
    assert load_enum("lib_enum_wire.domain.outcome:DecodeStatus") is lib_enum_wire.DecodeStatus


@pytest.mark.parametrize("path", ["lib_enum_wire", ":DecodeStatus", "lib_enum_wire.domain.outcome:"])
def test_load_enum_rejects_malformed_paths(path: str) -> None:
    with pytest.raises(ValueError, match="module:ClassName"):
        load_enum(path)


def test_load_enum_rejects_non_enums() -> None:
    with pytest.raises(TypeError, match="not an Enum class"):
        load_enum("lib_enum_wire.config:CodecSettings")
