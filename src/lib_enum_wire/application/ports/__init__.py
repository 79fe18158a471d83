"""Protocols describing the collaborators injected into the codec."""

from __future__ import annotations

from .naming import NamingStrategy

__all__ = ["NamingStrategy"]
