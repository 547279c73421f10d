"""
building.py
-----------
Floors × rooms grid that holds patron references.

The building owns its room slots; patrons belong to the roster and rooms
only point at them. Rooms are filled during a single assignment pass,
after which the building is frozen and read-only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from src.systems.occupancy.patron import Patron


# ===========================================================
# Rooms & Floors
# ===========================================================

class Room:
    """One slot on a floor. Empty exactly when it holds no patron."""

    __slots__ = ("floor_number", "room_number", "_patron")

    def __init__(self, floor_number: int, room_number: int):
        self.floor_number = floor_number
        self.room_number = room_number
        self._patron: Optional[Patron] = None

    @property
    def patron(self) -> Optional[Patron]:
        return self._patron

    @property
    def is_empty(self) -> bool:
        return self._patron is None

    @property
    def position(self) -> Tuple[int, int]:
        return self.floor_number, self.room_number

    def __repr__(self):
        occupant = self._patron.id if self._patron else None
        return f"Room({self.floor_number}-{self.room_number}, patron={occupant!r})"


class Floor:
    """Ordered rooms numbered 1..rooms_per_floor."""

    __slots__ = ("floor_number", "rooms")

    def __init__(self, floor_number: int, rooms_per_floor: int):
        self.floor_number = floor_number
        self.rooms: Tuple[Room, ...] = tuple(
            Room(floor_number, number) for number in range(1, rooms_per_floor + 1)
        )

    def room(self, room_number: int) -> Optional[Room]:
        if 1 <= room_number <= len(self.rooms):
            return self.rooms[room_number - 1]
        return None

    def __len__(self):
        return len(self.rooms)

    def __repr__(self):
        return f"Floor({self.floor_number}, rooms={len(self.rooms)})"


# ===========================================================
# Conflicts
# ===========================================================

class ConflictReason(Enum):
    """Why an explicit placement could not be honored."""
    OCCUPIED = "occupied"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class PlacementConflict:
    """An explicit placement request that was skipped."""
    patron: Patron
    floor: int
    room_number: int
    reason: ConflictReason
    occupant: Optional[Patron] = None


# ===========================================================
# Building
# ===========================================================

class Building:
    """Ordered floors plus the outcome of the assignment pass."""

    def __init__(self, floor_count: int, rooms_per_floor: int):
        self.rooms_per_floor = rooms_per_floor
        self.floors: Tuple[Floor, ...] = tuple(
            Floor(number, rooms_per_floor) for number in range(1, floor_count + 1)
        )
        self.conflicts: List[PlacementConflict] = []
        self.unplaced: List[Patron] = []
        self._frozen = False

    # ===========================================================
    # Build-time Mutation
    # ===========================================================

    def place(self, room: Room, patron: Patron):
        """
        Put patron into an empty room.

        Raises:
            RuntimeError: building already frozen, or room occupied
        """
        if self._frozen:
            raise RuntimeError("Building is frozen; rooms cannot change after assignment")
        if not room.is_empty:
            raise RuntimeError(f"Room {room.floor_number}-{room.room_number} is already occupied")
        room._patron = patron

    def freeze(self):
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def floor_count(self) -> int:
        return len(self.floors)

    @property
    def capacity(self) -> int:
        return self.floor_count * self.rooms_per_floor

    def floor(self, floor_number: int) -> Optional[Floor]:
        if 1 <= floor_number <= len(self.floors):
            return self.floors[floor_number - 1]
        return None

    def room(self, floor_number: int, room_number: int) -> Optional[Room]:
        floor = self.floor(floor_number)
        return floor.room(room_number) if floor else None

    def iter_rooms(self):
        """Rooms in floor-major, room-minor order."""
        for floor in self.floors:
            yield from floor.rooms

    def occupied_rooms(self) -> List[Tuple[int, int]]:
        """(floor, room_number) pairs holding a patron, in scan order."""
        return [room.position for room in self.iter_rooms() if not room.is_empty]

    @property
    def placed_count(self) -> int:
        return sum(1 for room in self.iter_rooms() if not room.is_empty)

    def __repr__(self):
        return (f"Building(floors={self.floor_count}, rooms_per_floor={self.rooms_per_floor}, "
                f"placed={self.placed_count}, unplaced={len(self.unplaced)})")
