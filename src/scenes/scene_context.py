"""
scene_context.py
----------------
Typed objects handed to scene constructors.

SceneContext carries the shared services a scene may use. Parameter
objects carry per-scene data (which floor, which room) so nothing has to
be attached to a scene after construction.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from src.core.layout.geometry_engine import GeometryEngine
    from src.core.services.scene_manager import SceneManager
    from src.systems.occupancy.occupancy_assigner import OccupancyAssigner


@dataclass(frozen=True)
class SceneContext:
    """Shared services owned by the host loop."""
    geometry: "GeometryEngine"
    occupancy: "OccupancyAssigner"
    scenes: "SceneManager"


@dataclass(frozen=True)
class HallwayParams:
    floor: int = 1
    player_x: Optional[float] = None   # Base-resolution x; None means the start position


@dataclass(frozen=True)
class RoomParams:
    floor: int
    room_number: int
