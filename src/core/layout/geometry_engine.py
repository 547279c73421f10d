"""
geometry_engine.py
------------------
Responsive layout: one base resolution, one animated scale factor.

Responsibilities
----------------
- Convert a viewport size into an aspect-preserving GeometrySnapshot
- Animate between snapshots with an elastic bounce instead of snapping
- Notify subscribers on every recompute (resize or animation tick)
- Expose scaled() / font_size() so no caller multiplies by scale by hand

Committed vs animated
---------------------
committed: last settled target. Subscribers are always called with it.
animated:  value interpolated every tick. Placement code reads it for
           continuous motion during a resize.

At most one animation exists at a time and at most one frame callback is
outstanding. Starting a transition cancels the previous one outright.
"""

from dataclasses import dataclass, fields
from typing import Callable, List, Optional

from src.core.debug.debug_logger import DebugLogger
from src.core.layout.easing import clamp, elastic_ease_out, lerp
from src.core.runtime.frame_scheduler import FrameScheduler
from src.core.runtime.game_settings import Display, LayoutSettings, Metrics, Room


# ===========================================================
# Snapshots
# ===========================================================

@dataclass(frozen=True)
class GeometrySnapshot:
    """Immutable set of derived geometry values for one instant."""
    base_width: float
    base_height: float
    scale: float
    derived_width: float
    derived_height: float
    room_width: float
    room_height: float

    def interpolate(self, target: "GeometrySnapshot", t: float) -> "GeometrySnapshot":
        """Interpolate every field toward target. t may leave [0, 1]."""
        return GeometrySnapshot(**{
            f.name: lerp(getattr(self, f.name), getattr(target, f.name), t)
            for f in fields(self)
        })


def compute_snapshot(base_width: float, base_height: float,
                     viewport_width: float, viewport_height: float,
                     scale_cap: float = LayoutSettings.SCALE_CAP,
                     room_width: float = Room.WIDTH,
                     room_height: float = Room.HEIGHT) -> GeometrySnapshot:
    """
    Fit the base resolution inside the viewport.

    scale = min(vw / bw, vh / bh, scale_cap). No lower clamp: a tiny
    viewport produces a tiny scale.

    Raises:
        ValueError: base size not positive or viewport size negative
    """
    if base_width <= 0 or base_height <= 0:
        raise ValueError(f"Base resolution must be positive, got {base_width}x{base_height}")
    if viewport_width < 0 or viewport_height < 0:
        raise ValueError(f"Viewport size cannot be negative, got {viewport_width}x{viewport_height}")

    scale = min(viewport_width / base_width, viewport_height / base_height, scale_cap)

    return GeometrySnapshot(
        base_width=base_width,
        base_height=base_height,
        scale=scale,
        derived_width=base_width * scale,
        derived_height=base_height * scale,
        room_width=room_width * scale,
        room_height=room_height * scale,
    )


# ===========================================================
# Animation State
# ===========================================================

@dataclass(frozen=True)
class AnimationState:
    """One in-flight transition between two snapshots."""
    start: GeometrySnapshot
    target: GeometrySnapshot
    start_time: float
    duration: float
    is_animating: bool = True

    def progress(self, now: float) -> float:
        """Raw progress in [0, 1]. Zero duration completes immediately."""
        if self.duration <= 0:
            return 1.0
        return clamp((now - self.start_time) / self.duration)

    def sample(self, now: float) -> GeometrySnapshot:
        """Snapshot at time now. Returns target itself once progress hits 1."""
        progress = self.progress(now)
        if progress >= 1:
            return self.target
        return self.start.interpolate(self.target, elastic_ease_out(progress))


GeometryCallback = Callable[[GeometrySnapshot], None]


# ===========================================================
# Geometry Engine
# ===========================================================

class GeometryEngine:
    """
    Single geometry authority for a running session.

    Constructed by the host loop and passed to scenes explicitly.
    """

    def __init__(self, scheduler: FrameScheduler,
                 viewport_size: Optional[tuple] = None,
                 base_width: float = Display.BASE_WIDTH,
                 base_height: float = Display.BASE_HEIGHT,
                 duration_ms: float = LayoutSettings.BOUNCE_DURATION_MS,
                 scale_cap: float = LayoutSettings.SCALE_CAP):
        """
        Args:
            scheduler: Frame scheduler that drives animation ticks
            viewport_size: Initial (width, height). Defaults to the base size.
            base_width: Logical layout width
            base_height: Logical layout height
            duration_ms: Default resize animation length
            scale_cap: Upper bound on scale
        """
        self.scheduler = scheduler
        self.base_width = base_width
        self.base_height = base_height
        self.duration_ms = duration_ms
        self.scale_cap = scale_cap

        width, height = viewport_size or (base_width, base_height)
        initial = self.compute(width, height)
        self._committed = initial
        self._animated = initial
        self._animation: Optional[AnimationState] = None
        self._frame_handle: Optional[int] = None
        self._subscribers: List[GeometryCallback] = []

        DebugLogger.init_entry("GeometryEngine")
        DebugLogger.init_sub(f"Base {base_width}x{base_height}, scale={initial.scale:.3f}")

    # ===========================================================
    # Snapshot Access
    # ===========================================================

    @property
    def committed(self) -> GeometrySnapshot:
        return self._committed

    @property
    def animated(self) -> GeometrySnapshot:
        return self._animated

    @property
    def animation(self) -> Optional[AnimationState]:
        return self._animation

    @property
    def is_animating(self) -> bool:
        return self._animation is not None

    @property
    def scale(self) -> float:
        """Current (animated) scale."""
        return self._animated.scale

    def compute(self, viewport_width: float, viewport_height: float) -> GeometrySnapshot:
        """compute_snapshot() bound to this engine's base size and cap."""
        return compute_snapshot(self.base_width, self.base_height,
                                viewport_width, viewport_height,
                                scale_cap=self.scale_cap)

    # ===========================================================
    # Scaled Metrics
    # ===========================================================

    def scaled(self, constant: float) -> float:
        """Base-resolution constant converted to current pixels."""
        return constant * self._animated.scale

    def font_size(self, base: float) -> float:
        """Scaled font size, never below the legibility floor."""
        return max(LayoutSettings.MIN_FONT_SIZE, base * self._animated.scale)

    def center_x(self, width: float = 0) -> float:
        return (self._animated.derived_width - width) / 2

    def center_y(self, height: float = 0) -> float:
        return (self._animated.derived_height - height) / 2

    def button_size(self) -> tuple:
        return self.scaled(Metrics.BUTTON_WIDTH), self.scaled(Metrics.BUTTON_HEIGHT)

    @property
    def margin(self) -> float:
        return self.scaled(Metrics.MARGIN)

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, callback: GeometryCallback) -> None:
        """Register a callback for geometry recomputes. Duplicates are ignored."""
        if callback in self._subscribers:
            return
        self._subscribers.append(callback)

    def unsubscribe(self, callback: GeometryCallback) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _notify(self):
        """Call every subscriber with the committed snapshot."""
        snapshot = self._committed
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in geometry callback {callback_name}: {e}", category="layout")

    # ===========================================================
    # Resize & Animation
    # ===========================================================

    def on_viewport_change(self, width: float, height: float) -> GeometrySnapshot:
        """
        Host entry point for every resize event.

        Returns:
            The new target snapshot
        """
        target = self.compute(width, height)
        DebugLogger.state(
            f"Viewport {width}x{height} → scale={target.scale:.3f}",
            category="layout"
        )
        self.begin_transition(target)
        self._notify()
        return target

    def begin_transition(self, target: GeometrySnapshot, duration_ms: Optional[float] = None):
        """
        Animate from the current animated snapshot to target.

        Any in-flight animation is cancelled first; its scheduled tick is
        withdrawn so only one callback is ever outstanding.
        """
        self._cancel_frame()

        duration = self.duration_ms if duration_ms is None else duration_ms
        self._animation = AnimationState(
            start=self._animated,
            target=target,
            start_time=self.scheduler.now_ms(),
            duration=duration,
        )
        self._frame_handle = self.scheduler.request_frame(self._tick)

    def cancel_transition(self):
        """Stop animating and stay at the committed snapshot."""
        self._cancel_frame()
        self._animation = None
        self._animated = self._committed

    def _cancel_frame(self):
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None

    def _tick(self, now: float):
        """Frame callback: advance the animation by one step."""
        self._frame_handle = None
        animation = self._animation
        if animation is None:
            return

        if animation.progress(now) >= 1:
            self._committed = animation.target
            self._animated = animation.target
            self._animation = None
            DebugLogger.trace(f"Settled at scale={self._committed.scale:.3f}", category="layout")
            self._notify()
            return

        self._animated = animation.sample(now)
        self._notify()

        # A subscriber may have started a new transition during notify
        if self._animation is animation and self._frame_handle is None:
            self._frame_handle = self.scheduler.request_frame(self._tick)
