"""
patron.py
---------
Patron records loaded from the roster.

A patron is immutable for the session. Placement is explicit only when
both floor and room_number are given; anything else is packed
automatically by the OccupancyAssigner.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Tier(Enum):
    """Patron tier classification."""
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    DIAMOND = "diamond"


@dataclass(frozen=True)
class Patron:
    """A roster entry placed into at most one room."""
    id: str
    name: str
    dialog_text: str = ""
    floor: Optional[int] = None
    room_number: Optional[int] = None
    tier: Optional[Tier] = None
    join_date: Optional[str] = None
    special_notes: Optional[str] = None

    @property
    def has_explicit_placement(self) -> bool:
        return self.floor is not None and self.room_number is not None

    @property
    def placement(self) -> Optional[tuple]:
        """(floor, room_number) when explicitly placed, else None."""
        if not self.has_explicit_placement:
            return None
        return self.floor, self.room_number
