"""Per-enum lookup table of canonical and wire names.

Purpose
-------
Resolve every member of an enum through the naming strategy once, so encode
and decode become dictionary lookups instead of repeated introspection.

Contents
--------
* :class:`MemberEntry` - one ``(member, canonical name, wire name)`` row.
* :class:`MemberTable` - ordered rows plus the two lookup indexes.

System Role
-----------
Built by :meth:`lib_enum_wire.application.codec.EnumCodec.register` and
cached for the lifetime of the codec. Tables are never mutated after
construction, so concurrent readers need no locking.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


@dataclass(slots=True, frozen=True)
class MemberEntry:
    member: Enum
    canonical_name: str
    wire_name: str


class MemberTable:
    """Ordered name table for one enum type.

    Rows follow declaration order and skip aliases. When two members share a
    wire name, :meth:`lookup` returns the one declared first.

    Examples
    --------
    >>> from enum import Enum
    >>> class Sort(Enum):
    ...     Score = 1
    ...     Timestamp = 2
    >>> table = MemberTable.build(Sort, str.lower)
    >>> table.wire_name(Sort.Timestamp)
    'timestamp'
    >>> table.lookup("score") is Sort.Score
    True
    >>> table.lookup("Score") is None
    True
    """

    __slots__ = ("_by_member", "_by_wire", "_entries", "enum_type")

    def __init__(self, enum_type: type[Enum], entries: tuple[MemberEntry, ...]) -> None:
        self.enum_type = enum_type
        self._entries = entries
        self._by_member: dict[Enum, MemberEntry] = {entry.member: entry for entry in entries}
        by_wire: dict[str, MemberEntry] = {}
        for entry in entries:
            by_wire.setdefault(entry.wire_name, entry)
        self._by_wire = by_wire

    @classmethod
    def build(cls, enum_type: type[Enum], naming: Callable[[str], str]) -> "MemberTable":
        """Run ``naming`` over every declared member of ``enum_type``."""

        entries = tuple(
            MemberEntry(member, name, naming(name))
            for name, member in enum_type.__members__.items()
            if member.name == name
        )
        return cls(enum_type, entries)

    def __iter__(self) -> Iterator[MemberEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def entry_for(self, member: Enum) -> MemberEntry | None:
        return self._by_member.get(member)

    def wire_name(self, member: Enum) -> str:
        return self._by_member[member].wire_name

    def lookup(self, wire_name: str) -> Enum | None:
        """Return the member rendering to ``wire_name`` (exact match) or ``None``."""

        entry = self._by_wire.get(wire_name)
        return entry.member if entry is not None else None

    def duplicates(self) -> Mapping[str, tuple[str, ...]]:
        """Return wire names shared by more than one member, in declaration order."""

        groups: dict[str, list[str]] = {}
        for entry in self._entries:
            groups.setdefault(entry.wire_name, []).append(entry.canonical_name)
        return MappingProxyType({wire: tuple(names) for wire, names in groups.items() if len(names) > 1})


__all__ = ["MemberEntry", "MemberTable"]
