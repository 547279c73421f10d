"""
Scene module exports.

Provides the base scene class, lifecycle states, and scene parameters.
Concrete scenes are imported from their own modules.
"""

from src.scenes.scene_state import LifecycleState, SwitchResult
from src.scenes.scene_context import SceneContext, HallwayParams, RoomParams
from src.scenes.base_scene import BaseScene

__all__ = [
    # Core
    'BaseScene',
    'LifecycleState',
    'SwitchResult',
    # Parameters
    'SceneContext',
    'HallwayParams',
    'RoomParams',
]
