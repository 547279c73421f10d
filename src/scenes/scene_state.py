"""
scene_state.py
--------------
Defines the states of the scene slot and the outcome of a switch.
"""

from enum import Enum


class LifecycleState(Enum):
    """States of the single scene slot."""
    IDLE = "idle"                    # No scene attached
    ACTIVE = "active"                # One scene attached and entered
    TRANSITIONING = "transitioning"  # Exit/enter hooks in progress


class SwitchResult(Enum):
    """Outcome of SceneManager.switch_to()."""
    SUCCESS = "success"      # New scene is active
    REJECTED = "rejected"    # Another switch was in progress; caller may retry
    FAILED = "failed"        # A hook or the constructor raised; slot is idle
