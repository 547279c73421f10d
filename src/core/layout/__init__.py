"""
Layout module exports.

Provides the geometry engine, snapshots, and easing curves.
"""

from src.core.layout.easing import elastic_ease_out, lerp
from src.core.layout.geometry_engine import (
    AnimationState,
    GeometryEngine,
    GeometrySnapshot,
    compute_snapshot,
)

__all__ = [
    'AnimationState',
    'GeometryEngine',
    'GeometrySnapshot',
    'compute_snapshot',
    'elastic_ease_out',
    'lerp',
]
