from __future__ import annotations

from enum import Enum

from lib_enum_wire.domain.member_table import MemberTable


class Presence(Enum):
    Active = 1
    Away = 2
    Online = 1  # alias of Active


class Loud(Enum):
    Away = 1
    AWAY = 2
    Idle = 3


def test_rows_follow_declaration_order_and_skip_aliases() -> None:
    table = MemberTable.build(Presence, str.lower)

    assert [entry.canonical_name for entry in table] == ["Active", "Away"]
    assert len(table) == 2


def test_lookup_is_exact() -> None:
    table = MemberTable.build(Presence, str.lower)

    assert table.lookup("away") is Presence.Away
    assert table.lookup("Away") is None
    assert table.lookup("online") is None


def test_first_declared_member_wins_on_collision() -> None:
    table = MemberTable.build(Loud, str.lower)

    assert table.lookup("away") is Loud.Away
    assert dict(table.duplicates()) == {"away": ("Away", "AWAY")}


def test_wire_name_and_entry_for() -> None:
    table = MemberTable.build(Loud, str.upper)

    assert table.wire_name(Loud.Idle) == "IDLE"
    entry = table.entry_for(Loud.AWAY)
    assert entry is not None
    assert (entry.canonical_name, entry.wire_name) == ("AWAY", "AWAY")


def test_no_duplicates_for_injective_strategy() -> None:
    assert dict(MemberTable.build(Loud, lambda name: name).duplicates()) == {}
