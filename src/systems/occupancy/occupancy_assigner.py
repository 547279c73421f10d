"""
occupancy_assigner.py
---------------------
Deterministic placement of patrons into the building grid.

Algorithm
---------
1. Split the roster into explicit (floor and room given) and auto patrons.
2. floors = max(ceil(total / rooms_per_floor), highest explicit floor, 1),
   clamped to max_floors.
3. Explicit patrons, in roster order: placed if the room exists and is
   empty, otherwise recorded as a conflict and left unplaced.
4. Auto patrons, in roster order: first empty room from a floor-major scan
   cursor that never rewinds. Left unplaced once the building is full.

Neither conflicts nor a full building are errors. Every patron ends up
either in exactly one room or in Building.unplaced.
"""

import math
from typing import Iterable, List, Optional, Tuple

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import BuildingSettings
from src.systems.occupancy.building import Building, ConflictReason, Floor, PlacementConflict
from src.systems.occupancy.patron import Patron


class OccupancyAssigner:
    """Builds the building from a roster and answers room queries."""

    def __init__(self, rooms_per_floor: int = BuildingSettings.ROOMS_PER_FLOOR,
                 max_floors: int = BuildingSettings.MAX_FLOORS):
        """
        Args:
            rooms_per_floor: Default rooms per floor for build()
            max_floors: Default floor limit for build()
        """
        self.rooms_per_floor = rooms_per_floor
        self.max_floors = max_floors
        self._patrons: List[Patron] = []
        self._building = Building(0, rooms_per_floor)
        self._building.freeze()

    # ===========================================================
    # Build
    # ===========================================================

    def build(self, patrons: Iterable[Patron],
              rooms_per_floor: Optional[int] = None,
              max_floors: Optional[int] = None) -> Building:
        """
        Run the assignment pass and keep the result for queries.

        Args:
            patrons: Roster in input order
            rooms_per_floor: Overrides the constructor default
            max_floors: Overrides the constructor default

        Returns:
            Frozen Building

        Raises:
            ValueError: rooms_per_floor or max_floors below 1
        """
        rooms_per_floor = self.rooms_per_floor if rooms_per_floor is None else rooms_per_floor
        max_floors = self.max_floors if max_floors is None else max_floors
        if rooms_per_floor < 1:
            raise ValueError(f"rooms_per_floor must be at least 1, got {rooms_per_floor}")
        if max_floors < 1:
            raise ValueError(f"max_floors must be at least 1, got {max_floors}")

        roster = list(patrons)
        explicit = [p for p in roster if p.has_explicit_placement]
        auto = [p for p in roster if not p.has_explicit_placement]

        floor_count = self._floors_needed(roster, explicit, rooms_per_floor, max_floors)
        building = Building(floor_count, rooms_per_floor)

        self._place_explicit(building, explicit)
        self._place_auto(building, auto)
        building.freeze()

        self._patrons = roster
        self._building = building

        if building.unplaced:
            DebugLogger.warn(
                f"{len(building.unplaced)} patron(s) left without a room "
                f"({len(building.conflicts)} conflict(s))",
                category="occupancy"
            )
        DebugLogger.system(
            f"Generated building with {building.floor_count} floor(s), "
            f"{building.placed_count}/{len(roster)} patrons placed",
            category="occupancy"
        )
        return building

    @staticmethod
    def _floors_needed(roster, explicit, rooms_per_floor, max_floors) -> int:
        highest_explicit = max((p.floor for p in explicit), default=0)
        needed = max(math.ceil(len(roster) / rooms_per_floor), highest_explicit, 1)
        return min(needed, max_floors)

    @staticmethod
    def _place_explicit(building: Building, explicit: List[Patron]):
        for patron in explicit:
            room = building.room(patron.floor, patron.room_number)

            if room is None:
                reason, occupant = ConflictReason.OUT_OF_RANGE, None
            elif not room.is_empty:
                reason, occupant = ConflictReason.OCCUPIED, room.patron
            else:
                building.place(room, patron)
                DebugLogger.trace(
                    f"Placed {patron.name} in requested room {patron.floor}-{patron.room_number}",
                    category="occupancy"
                )
                continue

            building.conflicts.append(PlacementConflict(
                patron=patron,
                floor=patron.floor,
                room_number=patron.room_number,
                reason=reason,
                occupant=occupant,
            ))
            building.unplaced.append(patron)
            DebugLogger.warn(
                f"Room {patron.floor}-{patron.room_number} is {reason.value} "
                f"for patron {patron.name}",
                category="occupancy"
            )

    @staticmethod
    def _place_auto(building: Building, auto: List[Patron]):
        rooms = list(building.iter_rooms())
        cursor = 0

        for patron in auto:
            placed = False
            while cursor < len(rooms):
                room = rooms[cursor]
                cursor += 1
                if room.is_empty:
                    building.place(room, patron)
                    placed = True
                    DebugLogger.trace(
                        f"Assigned {patron.name} to Floor {room.floor_number}, Room {room.room_number}",
                        category="occupancy"
                    )
                    break

            if not placed:
                building.unplaced.append(patron)
                DebugLogger.warn(
                    f"Could not assign room for patron {patron.name} - building is full",
                    category="occupancy"
                )

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def building(self) -> Building:
        return self._building

    def patrons(self) -> List[Patron]:
        """Copy of the last roster, in input order."""
        return list(self._patrons)

    def patron_by_id(self, patron_id: str) -> Optional[Patron]:
        for patron in self._patrons:
            if patron.id == patron_id:
                return patron
        return None

    def patron_in_room(self, floor: int, room_number: int) -> Optional[Patron]:
        room = self._building.room(floor, room_number)
        return room.patron if room else None

    def occupied_rooms(self) -> List[Tuple[int, int]]:
        return self._building.occupied_rooms()

    def floor_count(self) -> int:
        return self._building.floor_count

    def floor(self, floor_number: int) -> Optional[Floor]:
        return self._building.floor(floor_number)

    def room_count(self, floor: int) -> int:
        floor_data = self._building.floor(floor)
        return len(floor_data) if floor_data else 0

    def is_room_empty(self, floor: int, room_number: int) -> bool:
        """True for empty rooms and for rooms that do not exist."""
        room = self._building.room(floor, room_number)
        return room.is_empty if room else True

    @property
    def conflicts(self) -> List[PlacementConflict]:
        return list(self._building.conflicts)

    @property
    def unplaced(self) -> List[Patron]:
        return list(self._building.unplaced)
