"""Declared field types as seen by the enum codec.

The serializer hands the codec whatever annotation a field carries. This
module peels at most one ``Optional`` layer off that annotation and records
whether the field accepts ``None``.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union, get_args, get_origin

_UNION_ORIGINS: tuple[Any, ...] = (Union, types.UnionType)


@dataclass(slots=True, frozen=True)
class DeclaredType:
    """An annotation split into its underlying type and nullability.

    Examples
    --------
    >>> from enum import Enum
    >>> from typing import Optional
    >>> class Sort(Enum):
    ...     Score = 1
    ...     Timestamp = 2
    >>> declared = DeclaredType.of(Optional[Sort])
    >>> declared.underlying is Sort, declared.nullable
    (True, True)
    >>> declared.name
    'Optional[Sort]'
    >>> DeclaredType.of(Sort).is_enum
    True
    >>> DeclaredType.of(int).is_enum
    False
    """

    annotation: Any
    underlying: Any
    nullable: bool

    @classmethod
    def of(cls, annotation: Any) -> "DeclaredType":
        """Unwrap ``Optional[X]`` / ``X | None`` into ``X`` plus a nullable flag.

        Unions with more than one non-``None`` member are left untouched.
        """

        if isinstance(annotation, DeclaredType):
            return annotation
        if get_origin(annotation) in _UNION_ORIGINS:
            args = get_args(annotation)
            remaining = [arg for arg in args if arg is not type(None)]
            if len(remaining) == 1 and len(args) == 2:
                return cls(annotation, remaining[0], True)
        return cls(annotation, annotation, False)

    @property
    def is_enum(self) -> bool:
        underlying = self.underlying
        if get_origin(underlying) is not None or not isinstance(underlying, type):
            return False
        return issubclass(underlying, Enum)

    @property
    def name(self) -> str:
        """Short name used in error messages (``Color`` or ``Optional[Color]``)."""

        base = getattr(self.underlying, "__name__", repr(self.underlying))
        return f"Optional[{base}]" if self.nullable else base

    def __str__(self) -> str:
        return self.name


__all__ = ["DeclaredType"]
