"""
display_manager.py
------------------
Window management and the scene host.

Responsibilities:
- Resizable window creation and fullscreen toggling
- Holding the single attached scene (attach / detach)
- Rendering the attached scene at the animated geometry size, centered
  with letterbox bars
- Window-to-layout coordinate conversion
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors, Display


class DisplayManager:
    """
    Owns the pygame window and acts as host for the scene slot.

    Scene geometry comes from the GeometryEngine; this class never
    computes a scale of its own.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, geometry, window_size=None):
        """
        Args:
            geometry: GeometryEngine shared with the scenes
            window_size: Initial (width, height) or preset name
        """
        DebugLogger.init_entry("DisplayManager")

        self.geometry = geometry
        self.window = None
        self.is_fullscreen = False
        self._windowed_size = self._resolve_size(window_size)

        self._attached_scene = None
        self._scene_surface = None

        self._create_window(self._windowed_size)
        DebugLogger.init_sub(f"Display Mode: Windowed {self._windowed_size[0]}x{self._windowed_size[1]}")

    @staticmethod
    def _resolve_size(window_size):
        if window_size is None:
            window_size = Display.DEFAULT_WINDOW_SIZE
        if isinstance(window_size, str):
            if window_size not in Display.WINDOW_SIZES:
                DebugLogger.warn(f"Unknown window size preset: {window_size}", category="display")
                window_size = Display.DEFAULT_WINDOW_SIZE
            return Display.WINDOW_SIZES[window_size]
        return tuple(window_size)

    # ===========================================================
    # Scene Host
    # ===========================================================

    def attach(self, scene):
        """
        Mount a scene for rendering.

        Raises:
            RuntimeError: another scene is still attached
        """
        if self._attached_scene is not None:
            raise RuntimeError(
                f"Cannot attach {scene.__class__.__name__}: "
                f"{self._attached_scene.__class__.__name__} is still attached"
            )
        self._attached_scene = scene
        DebugLogger.trace(f"Attached {scene.__class__.__name__}", category="display")

    def detach(self, scene):
        if self._attached_scene is scene:
            self._attached_scene = None
            DebugLogger.trace(f"Detached {scene.__class__.__name__}", category="display")

    @property
    def attached_scene(self):
        return self._attached_scene

    # ===========================================================
    # Window Management
    # ===========================================================

    def handle_resize(self, width: int, height: int):
        """Recreate the window surface after a VIDEORESIZE event."""
        if not self.is_fullscreen:
            self._windowed_size = (width, height)
            self._create_window(self._windowed_size)

    def toggle_fullscreen(self):
        """Toggle fullscreen and report the new viewport to the geometry engine."""
        if self.is_fullscreen:
            self._create_window(self._windowed_size)
        else:
            self._create_window((0, 0), fullscreen=True)
        self.geometry.on_viewport_change(*self.get_window_size())
        state = "ON" if self.is_fullscreen else "OFF"
        DebugLogger.state(f"Toggled fullscreen → {state}", category="display")

    def get_window_size(self) -> tuple:
        return self.window.get_size()

    def _create_window(self, size, fullscreen=False):
        flags = pygame.FULLSCREEN if fullscreen else pygame.RESIZABLE
        self.window = pygame.display.set_mode(size, flags)
        self.is_fullscreen = fullscreen

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self):
        """Draw the attached scene centered in the window, then flip."""
        self.window.fill((0, 0, 0))

        if self._attached_scene is not None:
            surface = self._get_scene_surface()
            surface.fill(Colors.BACKGROUND)
            self._attached_scene.draw(surface)
            self.window.blit(surface, self._scene_offset())

        pygame.display.flip()

    def _scene_size(self) -> tuple:
        snapshot = self.geometry.animated
        return max(int(snapshot.derived_width), 1), max(int(snapshot.derived_height), 1)

    def _scene_offset(self) -> tuple:
        window_w, window_h = self.get_window_size()
        scene_w, scene_h = self._scene_size()
        return (window_w - scene_w) // 2, (window_h - scene_h) // 2

    def _get_scene_surface(self):
        """Reuse the scene surface until the animated size changes."""
        size = self._scene_size()
        if self._scene_surface is None or self._scene_surface.get_size() != size:
            self._scene_surface = pygame.Surface(size)
        return self._scene_surface

    # ===========================================================
    # Coordinate Conversion
    # ===========================================================

    def screen_to_layout_pos(self, screen_x: float, screen_y: float) -> tuple:
        """Convert window pixels to base-resolution coordinates."""
        offset_x, offset_y = self._scene_offset()
        scale = self.geometry.scale or 1.0
        return (screen_x - offset_x) / scale, (screen_y - offset_y) / scale
