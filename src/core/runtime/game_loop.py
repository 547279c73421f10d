"""
game_loop.py
------------
Defines the GameLoop class that hosts the scene lifecycle.

Responsibilities
----------------
- Load settings and the patron roster, build the building once
- Construct the geometry engine, frame scheduler, display, and scene
  manager, and hand them to scenes through a SceneContext
- Run the frame loop on asyncio so scene hooks may await:
  events → scene frame update → animation ticks → render
"""

import asyncio

import pygame

from src.core.debug.debug_logger import DebugLogger, LoggerConfig
from src.core.layout.geometry_engine import GeometryEngine
from src.core.runtime.frame_scheduler import FrameScheduler
from src.core.runtime.game_settings import BuildingSettings, Display, LayoutSettings
from src.core.services.config_manager import load_config
from src.core.services.display_manager import DisplayManager
from src.core.services.scene_manager import SceneManager
from src.scenes.scene_context import SceneContext
from src.scenes.start_scene import StartScene
from src.systems.occupancy.occupancy_assigner import OccupancyAssigner
from src.systems.occupancy.patron_roster import load_roster


DEFAULT_SETTINGS = {
    "display": {
        "window_size": Display.DEFAULT_WINDOW_SIZE,
    },
    "building": {
        "rooms_per_floor": BuildingSettings.ROOMS_PER_FLOOR,
        "max_floors": BuildingSettings.MAX_FLOORS,
    },
    "layout": {
        "bounce_duration_ms": LayoutSettings.BOUNCE_DURATION_MS,
    },
    "logging": {},
    "roster": {
        "file": "patrons.json",
    },
}

MAX_FRAME_TIME = 0.1   # seconds; clamps dt after stalls


class GameLoop:
    """Host loop: owns every long-lived service and the frame ticker."""

    def __init__(self, settings_file: str = "settings.json"):
        DebugLogger.section("Initializing GameLoop")

        self.settings = load_config(settings_file, DEFAULT_SETTINGS)
        LoggerConfig.apply(self.settings["logging"])

        # -------------------------------------------------------
        # Roster & Building
        # -------------------------------------------------------
        building = self.settings["building"]
        self.occupancy = OccupancyAssigner(
            rooms_per_floor=building["rooms_per_floor"],
            max_floors=building["max_floors"],
        )
        self.occupancy.build(load_roster(self.settings["roster"]["file"]))

        # -------------------------------------------------------
        # Window & Geometry
        # -------------------------------------------------------
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

        self.scheduler = FrameScheduler()
        self.geometry = GeometryEngine(
            self.scheduler,
            duration_ms=self.settings["layout"]["bounce_duration_ms"],
        )
        self.display = DisplayManager(self.geometry, self.settings["display"]["window_size"])
        self.geometry.on_viewport_change(*self.display.get_window_size())

        # -------------------------------------------------------
        # Scene Management
        # -------------------------------------------------------
        self.scenes = SceneManager(self.display)
        self.context = SceneContext(
            geometry=self.geometry,
            occupancy=self.occupancy,
            scenes=self.scenes,
        )

        self.clock = pygame.time.Clock()
        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    async def run(self):
        """Run until the window is closed."""
        DebugLogger.section("Game Loop")

        result = await self.scenes.switch_to(lambda: StartScene(self.context))
        DebugLogger.state(f"Initial scene: {result.value}", category="scene")

        while self.running:
            dt = min(self.clock.tick(Display.FPS) / 1000.0, MAX_FRAME_TIME)

            self._handle_events()
            self.scenes.dispatch_frame(dt)
            self.scheduler.run_frame()
            self.display.render()

            # Let pending scene switches and hooks make progress
            await asyncio.sleep(0)

        await self.scenes.shutdown()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Route pygame events to the display, geometry, and scene slot."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.VIDEORESIZE:
                self.display.handle_resize(event.w, event.h)
                self.geometry.on_viewport_change(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_F11:
                    self.display.toggle_fullscreen()
                    continue
                self.scenes.dispatch_key_down(pygame.key.name(event.key))

            elif event.type == pygame.KEYUP:
                self.scenes.dispatch_key_up(pygame.key.name(event.key))
