"""
transition_scene.py
-------------------
"Now entering" card between the title screen and the first hallway.

Phases: fade text in → hold → fade text out → switch to the hallway.
Space, Enter, or Escape skips straight to the hallway.
"""

from src.core.runtime.game_settings import Colors, FontSizes, Timing
from src.scenes.base_scene import BaseScene
from src.scenes.scene_context import HallwayParams

SKIP_KEYS = ("space", "return", "escape")


class TransitionScene(BaseScene):
    """Timed text card."""

    FADE_IN = "fade_in"
    HOLD = "hold"
    FADE_OUT = "fade_out"
    DONE = "done"

    def __init__(self, context, text: str = "Now entering the workshop!"):
        super().__init__(context)
        self.text = text
        self.phase = self.FADE_IN
        self.phase_timer = 0.0   # ms
        self.alpha = 0.0

    async def enter(self):
        await super().enter()
        self.phase = self.FADE_IN
        self.phase_timer = 0.0

    def update(self, dt: float):
        """
        Args:
            dt: Seconds since the last frame
        """
        if self.phase == self.DONE:
            return

        self.phase_timer += dt * 1000.0

        if self.phase == self.FADE_IN:
            self.alpha = min(self.phase_timer / Timing.FADE_DURATION, 1.0)
            if self.phase_timer >= Timing.FADE_DURATION:
                self._next_phase(self.HOLD)
        elif self.phase == self.HOLD:
            if self.phase_timer >= Timing.TRANSITION_HOLD:
                self._next_phase(self.FADE_OUT)
        elif self.phase == self.FADE_OUT:
            self.alpha = max(1.0 - self.phase_timer / Timing.FADE_DURATION, 0.0)
            if self.phase_timer >= Timing.FADE_DURATION:
                self.go_to_hallway()

    def _next_phase(self, phase: str):
        self.phase = phase
        self.phase_timer = 0.0

    def handle_key_down(self, code: str):
        super().handle_key_down(code)
        if code in SKIP_KEYS:
            self.go_to_hallway()

    def go_to_hallway(self):
        if self.phase == self.DONE:
            return None
        previous, self.phase = self.phase, self.DONE

        from src.scenes.hallway_scene import HallwayScene
        task = self.scenes.request_switch(lambda: HallwayScene(self.context, HallwayParams(floor=1)))
        if task is None:
            # Rejected: retry on a later frame or key press
            self.phase = previous
        return task

    def draw(self, surface):
        surface.fill((0, 0, 0))
        g = self.geometry
        self._draw_text(surface, self.text, FontSizes.TITLE,
                        (g.center_x(), g.center_y()), Colors.TEXT,
                        alpha=int(self.alpha * 255))
