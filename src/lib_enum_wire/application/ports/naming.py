"""Port for converting canonical enum member names into wire names."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NamingStrategy(Protocol):
    """Map a member's declared name to the string sent on the wire.

    Implementations must be pure and deterministic. Within one enum type no
    two members may map to the same wire name. Plain functions such as
    ``str.lower`` satisfy the protocol.
    """

    def __call__(self, canonical_name: str) -> str: ...


__all__ = ["NamingStrategy"]
