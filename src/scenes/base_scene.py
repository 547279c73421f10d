"""
base_scene.py
-------------
Abstract base class for all scenes.

Scene contract (what SceneManager relies on):
- async enter() / async exit()        lifecycle hooks, may await
- destroy()                           synchronous, releases everything, never raises
- update(dt), handle_key_down(code),
  handle_key_up(code)                 optional; called only when present
- draw(surface)                       called by the host while attached

BaseScene adds pressed-key tracking, geometry subscription with an
optional on_resize() hook, and access to the shared SceneContext.
The subscription is taken in enter(), so a scene that fails to construct
leaves nothing registered.
"""

from abc import ABC, abstractmethod

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors
from src.scenes.scene_context import SceneContext


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        context: Shared services (geometry, occupancy, scene manager)
        keys_pressed: Key codes currently held
        destroyed: True once destroy() ran
    """

    def __init__(self, context: SceneContext):
        """
        Args:
            context: SceneContext built by the host loop
        """
        self.context = context
        self.keys_pressed = set()
        self.destroyed = False
        self._subscribed = False

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def geometry(self):
        return self.context.geometry

    @property
    def occupancy(self):
        return self.context.occupancy

    @property
    def scenes(self):
        return self.context.scenes

    @property
    def name(self) -> str:
        return self.__class__.__name__

    # ===========================================================
    # Lifecycle Hooks
    # ===========================================================

    async def enter(self):
        """
        Called after the scene is attached to the host.

        Subscribes to geometry changes; subclasses extend it and call super().
        """
        if not self.destroyed and not self._subscribed:
            self.context.geometry.subscribe(self._on_geometry_changed)
            self._subscribed = True

    async def exit(self):
        """Called before the scene is detached. Override if needed."""

    def destroy(self):
        """Release subscriptions and per-scene state."""
        if self.destroyed:
            return
        if self._subscribed:
            self.context.geometry.unsubscribe(self._on_geometry_changed)
            self._subscribed = False
        self.keys_pressed.clear()
        self.destroyed = True
        DebugLogger.trace(f"{self.name} destroyed", category="scene")

    # ===========================================================
    # Input
    # ===========================================================

    def handle_key_down(self, code: str):
        self.keys_pressed.add(code)

    def handle_key_up(self, code: str):
        self.keys_pressed.discard(code)

    def is_key_pressed(self, *codes: str) -> bool:
        return any(code in self.keys_pressed for code in codes)

    # ===========================================================
    # Layout
    # ===========================================================

    def _on_geometry_changed(self, snapshot):
        handler = getattr(self, "on_resize", None)
        if handler is not None:
            handler(snapshot)

    # ===========================================================
    # Rendering
    # ===========================================================

    _font_cache = {}

    def _font(self, base_size: float):
        """Default pygame font at the scaled size (cached per pixel size)."""
        size = int(self.geometry.font_size(base_size))
        font = BaseScene._font_cache.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            BaseScene._font_cache[size] = font
        return font

    def _draw_text(self, surface, text: str, base_size: float, center: tuple,
                   color=Colors.TEXT, alpha: int = 255):
        """Render text centered on a point given in pixels."""
        rendered = self._font(base_size).render(text, True, color)
        if alpha < 255:
            rendered.set_alpha(alpha)
        rect = rendered.get_rect(center=(int(center[0]), int(center[1])))
        surface.blit(rendered, rect)

    def _rect(self, x: float, y: float, width: float, height: float):
        """pygame.Rect from base-resolution values."""
        scaled = self.geometry.scaled
        return pygame.Rect(int(scaled(x)), int(scaled(y)), int(scaled(width)), int(scaled(height)))

    @abstractmethod
    def draw(self, surface):
        """
        Render the scene.

        Args:
            surface: pygame surface sized to the animated geometry
        """
