"""
about_scene.py
--------------
Credits page reached from the title screen. Escape, Backspace, or Enter
goes back to the title.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors, Display, FontSizes
from src.scenes.base_scene import BaseScene

BACK_KEYS = ("escape", "backspace", "return")

DESCRIPTION = (
    "Welcome to Patron Hall!",
    "",
    "Every patron lives under one roof here,",
    "each in a room of their own with a story to tell.",
    "",
    "Walk the floors, ride the elevator, and meet",
    "the people who make our work possible.",
    "",
    "Use the arrow keys to move and SPACE to interact!",
)


class AboutScene(BaseScene):
    """Static text page."""

    async def enter(self):
        await super().enter()
        DebugLogger.state("About page", category="scene")

    def handle_key_down(self, code: str):
        super().handle_key_down(code)
        if code in BACK_KEYS:
            self.go_back()

    def go_back(self):
        from src.scenes.start_scene import StartScene
        return self.scenes.request_switch(lambda: StartScene(self.context))

    def draw(self, surface):
        g = self.geometry
        self._draw_text(surface, "About Patron Hall", FontSizes.TITLE,
                        (g.center_x(), g.scaled(Display.BASE_HEIGHT * 0.15)), Colors.ACCENT)

        line_height = FontSizes.BODY * 1.3
        top = Display.BASE_HEIGHT * 0.28
        for index, line in enumerate(DESCRIPTION):
            if line:
                self._draw_text(surface, line, FontSizes.BODY,
                                (g.center_x(), g.scaled(top + index * line_height)))

        self._draw_text(surface, "Thank you to our supporters!", FontSizes.SMALL,
                        (g.center_x(), g.scaled(Display.BASE_HEIGHT * 0.82)))
        self._draw_text(surface, "Press ESC to go back", FontSizes.BODY,
                        (g.center_x(), g.scaled(Display.BASE_HEIGHT * 0.9)), Colors.ACCENT)
