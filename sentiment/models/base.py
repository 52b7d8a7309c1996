"""Base record type for the in-memory stores."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Record:
    """Base class for all stored records. ``id`` is assigned by the owning store."""

    id: int
