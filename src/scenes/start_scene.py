"""
start_scene.py
--------------
Title screen. Enter or Space walks into the building; I opens the About page.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors, FontSizes
from src.scenes.base_scene import BaseScene

START_KEYS = ("return", "space")
ABOUT_KEYS = ("i",)


class StartScene(BaseScene):
    """Title and prompt."""

    async def enter(self):
        await super().enter()
        DebugLogger.action("Welcome to the workshop!", category="scene")

    def handle_key_down(self, code: str):
        super().handle_key_down(code)
        if code in START_KEYS:
            self.begin()
        elif code in ABOUT_KEYS:
            self.about()

    def begin(self):
        from src.scenes.transition_scene import TransitionScene
        return self.scenes.request_switch(lambda: TransitionScene(self.context))

    def about(self):
        from src.scenes.about_scene import AboutScene
        return self.scenes.request_switch(lambda: AboutScene(self.context))

    def draw(self, surface):
        g = self.geometry
        self._draw_text(surface, "Patron Hall", FontSizes.TITLE,
                        (g.center_x(), g.center_y() - g.scaled(60)), Colors.ACCENT)
        self._draw_text(surface, f"{len(self.occupancy.patrons())} patrons inside",
                        FontSizes.SUBTITLE, (g.center_x(), g.center_y()))
        self._draw_text(surface, "Press ENTER to begin", FontSizes.BODY,
                        (g.center_x(), g.center_y() + g.scaled(80)))
        self._draw_text(surface, "Press I for About", FontSizes.SMALL,
                        (g.center_x(), g.center_y() + g.scaled(115)))
