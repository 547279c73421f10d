"""
Runtime configuration exports.

Provides constants and the frame scheduler. All settings are lightweight
class constants with no initialization overhead.
"""

from src.core.runtime.game_settings import (
    Display,
    LayoutSettings,
    Room,
    BuildingSettings,
    Metrics,
    FontSizes,
    Timing,
    Colors,
)
from src.core.runtime.frame_scheduler import FrameScheduler

__all__ = [
    # Display & Layout
    'Display',
    'LayoutSettings',
    'Room',
    'Metrics',
    'FontSizes',
    'Colors',
    # Building
    'BuildingSettings',
    # Timing
    'Timing',
    'FrameScheduler',
]
