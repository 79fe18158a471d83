"""Application services: the enum codec and the payload serializer."""

from __future__ import annotations

from .codec import EnumCodec
from .ports import NamingStrategy
from .serializer import PayloadSerializer

__all__ = ["EnumCodec", "NamingStrategy", "PayloadSerializer"]
