"""
room_scene.py
-------------
Inside a patron's room.

The patron paces back and forth; walking up to them and pressing
Space/Enter toggles their dialog. Escape or Backspace returns to the
hallway in front of the same door.
"""

from typing import Optional

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors, Display, FontSizes, Metrics, Room
from src.scenes.base_scene import BaseScene
from src.scenes.scene_context import HallwayParams, RoomParams

LEFT_KEYS = ("left", "a")
RIGHT_KEYS = ("right", "d")
TALK_KEYS = ("space", "return")
LEAVE_KEYS = ("escape", "backspace")


class RoomScene(BaseScene):
    """A single room and its occupant."""

    def __init__(self, context, params: RoomParams):
        super().__init__(context)
        self.floor = params.floor
        self.room_number = params.room_number
        self.patron = self.occupancy.patron_in_room(self.floor, self.room_number)

        # Base-resolution positions inside the room rectangle
        self.player_x = Metrics.ROOM_SIDE_MARGIN + Metrics.PLAYER_WIDTH
        self.npc_home_x = Room.WIDTH * 0.6
        self.npc_x = self.npc_home_x
        self.npc_direction = 1
        self.dialog_open = False

    async def enter(self):
        await super().enter()
        who = self.patron.name if self.patron else "nobody"
        DebugLogger.state(f"Room {self.floor}-{self.room_number} ({who})", category="scene")

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt: float):
        self._pace_npc(dt)

        if self.dialog_open:
            return

        direction = 0
        if self.is_key_pressed(*LEFT_KEYS):
            direction -= 1
        if self.is_key_pressed(*RIGHT_KEYS):
            direction += 1
        if direction:
            self.player_x += direction * Metrics.PLAYER_SPEED * dt
            low = Metrics.ROOM_SIDE_MARGIN
            high = Room.WIDTH - Metrics.ROOM_SIDE_MARGIN
            self.player_x = max(low, min(self.player_x, high))

    def _pace_npc(self, dt: float):
        if self.patron is None or self.dialog_open:
            return
        self.npc_x += self.npc_direction * Metrics.NPC_SPEED * dt
        offset = self.npc_x - self.npc_home_x
        if abs(offset) >= Metrics.NPC_PACE_DISTANCE / 2:
            self.npc_x = self.npc_home_x + (Metrics.NPC_PACE_DISTANCE / 2) * self.npc_direction
            self.npc_direction = -self.npc_direction

    def near_patron(self) -> bool:
        return self.patron is not None and abs(self.player_x - self.npc_x) < Metrics.INTERACTION_DISTANCE

    # ===========================================================
    # Input
    # ===========================================================

    def handle_key_down(self, code: str):
        super().handle_key_down(code)

        if code in LEAVE_KEYS:
            if self.dialog_open:
                self.dialog_open = False
            else:
                self.leave()
        elif code in TALK_KEYS:
            if self.dialog_open:
                self.dialog_open = False
            elif self.near_patron():
                self.dialog_open = True

    def leave(self):
        from src.scenes.hallway_scene import HallwayScene, door_x

        player_x = door_x(self.room_number, self.occupancy.room_count(self.floor))
        params = HallwayParams(floor=self.floor, player_x=player_x)
        return self.scenes.request_switch(lambda: HallwayScene(self.context, params))

    # ===========================================================
    # Rendering
    # ===========================================================

    def _room_origin(self) -> tuple:
        """Top-left of the room rectangle in base units."""
        return (Display.BASE_WIDTH - Room.WIDTH) / 2, (Display.BASE_HEIGHT - Room.HEIGHT) / 2

    def draw(self, surface):
        g = self.geometry
        ox, oy = self._room_origin()
        floor_y = oy + Room.HEIGHT

        pygame.draw.rect(surface, Colors.WALL, self._rect(ox, oy, Room.WIDTH, Room.HEIGHT))

        if self.patron is not None:
            color = Colors.TIERS.get(self.patron.tier.value, Colors.NPC) if self.patron.tier else Colors.NPC
            pygame.draw.rect(surface, color, self._rect(ox + self.npc_x - Metrics.NPC_WIDTH / 2,
                                                        floor_y - Metrics.NPC_HEIGHT,
                                                        Metrics.NPC_WIDTH, Metrics.NPC_HEIGHT))
            self._draw_text(surface, self.patron.name, FontSizes.SMALL,
                            (g.scaled(ox + self.npc_x), g.scaled(floor_y - Metrics.NPC_HEIGHT - 12)))

        pygame.draw.rect(surface, Colors.PLAYER, self._rect(ox + self.player_x - Metrics.PLAYER_WIDTH / 2,
                                                            floor_y - Metrics.PLAYER_HEIGHT,
                                                            Metrics.PLAYER_WIDTH, Metrics.PLAYER_HEIGHT))

        self._draw_text(surface, f"Room {self.floor}0{self.room_number}", FontSizes.SUBTITLE,
                        (g.center_x(), g.scaled(oy - 30)))

        prompt = self._prompt()
        if prompt:
            self._draw_text(surface, prompt, FontSizes.BODY,
                            (g.center_x(), g.scaled(floor_y + 40)), Colors.ACCENT)

    def _prompt(self) -> Optional[str]:
        if self.dialog_open and self.patron is not None:
            return f"{self.patron.name}: {self.patron.dialog_text}"
        if self.near_patron():
            return "Press SPACE to talk"
        if self.patron is None:
            return "This room is empty. Press ESC to leave."
        return None
