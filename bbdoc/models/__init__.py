"""Public exports for document schema models."""

from __future__ import annotations

from ._base import DocModel
from .roster import Enemies, Enemy, Roster

__all__ = [
    "DocModel",
    "Enemies",
    "Enemy",
    "Roster",
]
