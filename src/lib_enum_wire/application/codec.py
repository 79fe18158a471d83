"""Enum codec rendering members as names chosen by a naming strategy.

Purpose
-------
Keep enum fields on the JSON wire as strings only. Members are written as the
naming strategy's rendition of their declared name and read back by exact
comparison against those renditions. Integer tokens are refused outright
because member values are not stable across API versions.

Contents
--------
* :class:`EnumCodec` - ``can_handle`` / ``encode`` / ``decode`` plus the
  result-type ``decode_outcome`` and JSON convenience helpers.

System Role
-----------
Application service selected by
:class:`lib_enum_wire.application.serializer.PayloadSerializer` for every
field declared as an enum or optional enum. One codec exists per naming
strategy (see :mod:`lib_enum_wire.runtime`); it is safe to share between
threads once constructed.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any

from lib_enum_wire.application.ports.naming import NamingStrategy
from lib_enum_wire.domain import (
    NO_MATCH,
    AmbiguousWireNameError,
    CompositeValueError,
    ConversionFailedError,
    DeclaredType,
    DecodeError,
    DecodeOutcome,
    EncodeError,
    IntegerNotAllowedError,
    MemberTable,
    NullNotAllowedError,
    NumericLikeNameError,
    UnexpectedTokenError,
    UnknownMemberError,
    WireKind,
    WireValue,
)

logger = logging.getLogger(__name__)


def _looks_numeric(name: str) -> bool:
    return bool(name) and (name[0].isnumeric() or name[0] == "-")


class EnumCodec:
    """Encode and decode enum members through a naming strategy.

    Parameters
    ----------
    naming:
        Strategy mapping declared member names to wire names.
    strict_unknown:
        When ``True`` a string naming no member raises
        :class:`UnknownMemberError`; by default decode returns ``NO_MATCH``.
    validate_unique:
        When ``True`` registering an enum whose members collide on a wire
        name raises :class:`AmbiguousWireNameError`; by default a warning is
        logged and the member declared first wins.

    Examples
    --------
    >>> from enum import Enum
    >>> from typing import Optional
    >>> from lib_enum_wire.adapters.naming import SnakeCaseNaming
    >>> class Subtype(Enum):
    ...     ReplyBroadcast = 1
    ...     GroupJoin = 2
    >>> codec = EnumCodec(SnakeCaseNaming())
    >>> codec.to_json(Subtype.ReplyBroadcast)
    'reply_broadcast'
    >>> codec.from_json("group_join", Subtype) is Subtype.GroupJoin
    True
    >>> codec.from_json(None, Optional[Subtype]) is None
    True
    """

    def __init__(self, naming: NamingStrategy, *, strict_unknown: bool = False, validate_unique: bool = False) -> None:
        self._naming = naming
        self._strict_unknown = strict_unknown
        self._validate_unique = validate_unique
        self._tables: dict[type[Enum], MemberTable] = {}
        self._lock = threading.Lock()

    @property
    def naming(self) -> NamingStrategy:
        return self._naming

    @property
    def strict_unknown(self) -> bool:
        return self._strict_unknown

    def can_handle(self, declared_type: Any) -> bool:
        """Return ``True`` for enum types and ``Optional`` enum types."""

        return DeclaredType.of(declared_type).is_enum

    def register(self, enum_type: type[Enum]) -> MemberTable:
        """Build (once) and return the name table for ``enum_type``."""

        table = self._tables.get(enum_type)
        if table is not None:
            return table
        with self._lock:
            table = self._tables.get(enum_type)
            if table is None:
                table = MemberTable.build(enum_type, self._naming)
                self._check_unique(table)
                self._tables[enum_type] = table
                logger.debug("Registered %s with %d wire names", enum_type.__name__, len(table))
        return table

    def _check_unique(self, table: MemberTable) -> None:
        for wire_name, members in table.duplicates().items():
            if self._validate_unique:
                raise AmbiguousWireNameError(table.enum_type, wire_name, members)
            logger.warning(
                "Wire name %r is shared by %s members %s; decoding picks %s",
                wire_name,
                table.enum_type.__name__,
                ", ".join(members),
                members[0],
            )

    def encode(self, value: Enum | None, declared_type: Any = None) -> WireValue:
        """Render ``value`` as a wire token.

        ``None`` always encodes to a null token, whatever the declared type.

        The first call for an enum builds its whole name table (see
        :meth:`register`). A naming strategy that raises for any one member
        therefore makes every member of that enum fail with
        :class:`EncodeError`, not only the member it cannot name.
        """

        if value is None:
            return WireValue.null()
        if not isinstance(value, Enum):
            raise EncodeError(f"Cannot encode {type(value).__name__} value {value!r} as an enum.")
        if declared_type is not None:
            declared = DeclaredType.of(declared_type)
            if declared.is_enum and not isinstance(value, declared.underlying):
                raise EncodeError(f"{value!r} is not a member of {declared.name}.")

        try:
            table = self.register(type(value))
        except AmbiguousWireNameError:
            raise
        except Exception as exc:
            raise EncodeError(f"Naming strategy failed for {type(value).__name__}: {exc}") from exc

        entry = table.entry_for(value)
        if entry is None:
            raise CompositeValueError(value)
        if _looks_numeric(entry.canonical_name):
            raise NumericLikeNameError(entry.canonical_name)
        return WireValue.string(entry.wire_name)

    def decode(self, wire_value: WireValue, declared_type: Any) -> Any:
        """Turn a wire token back into a member of ``declared_type``.

        Returns the member, ``None`` for a null token on a nullable type, or
        ``NO_MATCH`` when a string names no member (unless ``strict_unknown``).
        """

        declared = DeclaredType.of(declared_type)
        if not declared.is_enum:
            raise DecodeError(f"{declared.name} is not an enum type.")

        if wire_value.kind is WireKind.NULL:
            if declared.nullable:
                return None
            raise NullNotAllowedError(declared)
        if wire_value.kind is WireKind.INTEGER:
            raise IntegerNotAllowedError(wire_value.payload)
        if wire_value.kind is not WireKind.STRING:
            raise UnexpectedTokenError(wire_value.token)

        try:
            member = self.register(declared.underlying).lookup(wire_value.payload)
        except DecodeError:
            raise
        except Exception as exc:
            raise ConversionFailedError(wire_value.text, declared) from exc

        if member is None:
            if self._strict_unknown:
                raise UnknownMemberError(wire_value.payload, declared)
            return NO_MATCH
        return member

    def decode_outcome(self, wire_value: WireValue, declared_type: Any) -> DecodeOutcome:
        """Like :meth:`decode` but report failures as a :class:`DecodeOutcome`."""

        try:
            return DecodeOutcome.from_value(self.decode(wire_value, declared_type))
        except DecodeError as error:
            return DecodeOutcome.failed(error)

    def to_json(self, value: Enum | None, declared_type: Any = None) -> str | None:
        return self.encode(value, declared_type).to_python()

    def from_json(self, value: Any, declared_type: Any) -> Any:
        """Decode a value as produced by :func:`json.loads`."""

        return self.decode(WireValue.from_json(value), declared_type)


__all__ = ["EnumCodec"]
