"""
Occupancy system exports.

Provides patrons, the building grid, and the assignment algorithm.
"""

from src.systems.occupancy.patron import Patron, Tier
from src.systems.occupancy.building import (
    Building,
    ConflictReason,
    Floor,
    PlacementConflict,
    Room,
)
from src.systems.occupancy.occupancy_assigner import OccupancyAssigner
from src.systems.occupancy.patron_roster import load_roster, parse_roster

__all__ = [
    # Records
    'Patron',
    'Tier',
    # Grid
    'Building',
    'Floor',
    'Room',
    'ConflictReason',
    'PlacementConflict',
    # Assignment
    'OccupancyAssigner',
    'load_roster',
    'parse_roster',
]
