"""Concrete naming strategies for the enum codec."""

from __future__ import annotations

from .naming import (
    NAMING_STRATEGIES,
    CamelCaseNaming,
    IdentityNaming,
    KebabCaseNaming,
    SeparatedNaming,
    SnakeCaseNaming,
    resolve_naming,
)

__all__ = [
    "CamelCaseNaming",
    "IdentityNaming",
    "KebabCaseNaming",
    "NAMING_STRATEGIES",
    "SeparatedNaming",
    "SnakeCaseNaming",
    "resolve_naming",
]
