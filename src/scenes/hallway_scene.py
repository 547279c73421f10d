"""
hallway_scene.py
----------------
One floor of the building: a row of doors and an elevator.

Responsibilities
----------------
- Walk the player left/right along the floor
- Enter an occupied room at a door (Up / Enter)
- Ride the elevator: floor picker with Up/Down, digits, Enter, Escape

All positions are kept in base-resolution units and scaled only when
drawing, so a resize never moves the player relative to the doors.
"""

from typing import Optional

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors, Display, FontSizes, Metrics
from src.scenes.base_scene import BaseScene
from src.scenes.scene_context import HallwayParams, RoomParams

LEFT_KEYS = ("left", "a")
RIGHT_KEYS = ("right", "d")
INTERACT_KEYS = ("up", "w", "return", "space")

ELEVATOR_X = Display.BASE_WIDTH - Metrics.ELEVATOR_MARGIN - Metrics.ELEVATOR_WIDTH / 2


def door_x(room_number: int, room_count: int) -> float:
    """Center of a door; doors are spread evenly left of the elevator."""
    usable = ELEVATOR_X - Metrics.ELEVATOR_WIDTH / 2
    return usable * room_number / (room_count + 1)


class HallwayScene(BaseScene):
    """A single floor."""

    def __init__(self, context, params: HallwayParams = HallwayParams()):
        super().__init__(context)
        self.floor = params.floor
        self.player_x = Metrics.PLAYER_START_X if params.player_x is None else params.player_x
        self.message: Optional[str] = None
        self.floor_picker: Optional[int] = None   # Selected floor while the picker is open

    async def enter(self):
        await super().enter()
        DebugLogger.state(f"Hallway on floor {self.floor}", category="scene")

    # ===========================================================
    # Layout (base units)
    # ===========================================================

    @property
    def room_count(self) -> int:
        return self.occupancy.room_count(self.floor)

    @property
    def elevator_x(self) -> float:
        """Center of the elevator."""
        return ELEVATOR_X

    def door_x(self, room_number: int) -> float:
        return door_x(room_number, self.room_count)

    @property
    def floor_y(self) -> float:
        return Display.BASE_HEIGHT * 0.75

    def nearby_door(self) -> Optional[int]:
        for room_number in range(1, self.room_count + 1):
            if abs(self.player_x - self.door_x(room_number)) < Metrics.INTERACTION_DISTANCE:
                return room_number
        return None

    def near_elevator(self) -> bool:
        return abs(self.player_x - self.elevator_x) < Metrics.INTERACTION_DISTANCE

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt: float):
        if self.floor_picker is not None:
            return

        direction = 0
        if self.is_key_pressed(*LEFT_KEYS):
            direction -= 1
        if self.is_key_pressed(*RIGHT_KEYS):
            direction += 1

        if direction:
            self.player_x += direction * Metrics.PLAYER_SPEED * dt
            low = Metrics.HALLWAY_SIDE_MARGIN
            high = Display.BASE_WIDTH - Metrics.HALLWAY_SIDE_MARGIN
            self.player_x = max(low, min(self.player_x, high))
            self.message = None

    # ===========================================================
    # Input
    # ===========================================================

    def handle_key_down(self, code: str):
        super().handle_key_down(code)

        if self.floor_picker is not None:
            self._handle_picker_key(code)
            return

        if code not in INTERACT_KEYS:
            return

        if self.near_elevator():
            self.open_elevator()
            return

        room_number = self.nearby_door()
        if room_number is not None:
            self.enter_room(room_number)

    def _handle_picker_key(self, code: str):
        floor_count = self.occupancy.floor_count()

        if code == "escape":
            self.floor_picker = None
        elif code in ("up", "w"):
            self.floor_picker = min(self.floor_picker + 1, floor_count)
        elif code in ("down", "s"):
            self.floor_picker = max(self.floor_picker - 1, 1)
        elif code in ("return", "space"):
            self.select_floor(self.floor_picker)
        elif code.isdigit() and 1 <= int(code) <= floor_count:
            self.select_floor(int(code))

    # ===========================================================
    # Actions
    # ===========================================================

    def enter_room(self, room_number: int):
        patron = self.occupancy.patron_in_room(self.floor, room_number)
        if patron is None:
            self.message = f"Room {self.floor}0{room_number} is empty"
            return None

        DebugLogger.action(f"Entering room {room_number} on floor {self.floor}", category="scene")
        from src.scenes.room_scene import RoomScene
        params = RoomParams(floor=self.floor, room_number=room_number)
        return self.scenes.request_switch(lambda: RoomScene(self.context, params))

    def open_elevator(self):
        if self.occupancy.floor_count() <= 1:
            self.message = "This elevator doesn't seem to go anywhere!"
            return
        self.floor_picker = self.floor

    def select_floor(self, floor: int):
        self.floor_picker = None
        if floor == self.floor:
            return None

        DebugLogger.action(f"Elevator to floor {floor}", category="scene")
        params = HallwayParams(floor=floor, player_x=self.elevator_x)
        return self.scenes.request_switch(lambda: HallwayScene(self.context, params))

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface):
        g = self.geometry
        width = Display.BASE_WIDTH

        pygame.draw.rect(surface, Colors.WALL, self._rect(0, Metrics.CEILING_HEIGHT, width,
                                                          self.floor_y - Metrics.CEILING_HEIGHT))
        pygame.draw.rect(surface, Colors.FLOOR, self._rect(0, self.floor_y, width,
                                                           Display.BASE_HEIGHT - self.floor_y))

        for room_number in range(1, self.room_count + 1):
            x = self.door_x(room_number)
            patron = self.occupancy.patron_in_room(self.floor, room_number)
            color = Colors.DOOR if patron else Colors.DOOR_EMPTY
            pygame.draw.rect(surface, color, self._rect(x - Metrics.DOOR_WIDTH / 2,
                                                        self.floor_y - Metrics.DOOR_HEIGHT,
                                                        Metrics.DOOR_WIDTH, Metrics.DOOR_HEIGHT))
            label = f"{self.floor}0{room_number}"
            self._draw_text(surface, label, FontSizes.SMALL,
                            (g.scaled(x), g.scaled(self.floor_y - Metrics.DOOR_HEIGHT - Metrics.ROOM_LABEL_OFFSET)))
            if patron and patron.tier:
                tier_color = Colors.TIERS[patron.tier.value]
                pygame.draw.circle(surface, tier_color,
                                   (int(g.scaled(x)), int(g.scaled(self.floor_y - Metrics.DOOR_HEIGHT / 2))),
                                   max(int(g.scaled(4)), 1))

        pygame.draw.rect(surface, Colors.BUTTON, self._rect(self.elevator_x - Metrics.ELEVATOR_WIDTH / 2,
                                                            self.floor_y - Metrics.ELEVATOR_HEIGHT,
                                                            Metrics.ELEVATOR_WIDTH, Metrics.ELEVATOR_HEIGHT))

        pygame.draw.rect(surface, Colors.PLAYER, self._rect(self.player_x - Metrics.PLAYER_WIDTH / 2,
                                                            self.floor_y - Metrics.PLAYER_HEIGHT,
                                                            Metrics.PLAYER_WIDTH, Metrics.PLAYER_HEIGHT))

        self._draw_text(surface, f"Floor {self.floor}", FontSizes.SUBTITLE,
                        (g.scaled(Metrics.MARGIN + 50), g.scaled(Metrics.MARGIN + 10)))

        if self.floor_picker is not None:
            self._draw_text(surface, f"Floor {self.floor_picker}  (Up/Down, Enter)", FontSizes.BODY,
                            (g.center_x(), g.center_y()), Colors.ACCENT)
        elif self.message:
            self._draw_text(surface, self.message, FontSizes.BODY,
                            (g.center_x(), g.scaled(Metrics.CEILING_HEIGHT + 40)), Colors.ACCENT)
