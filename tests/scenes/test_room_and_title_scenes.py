"""
test_room_and_title_scenes.py
-----------------------------
Unit tests for the title and About screens, the transition card, and rooms.
"""

from unittest.mock import MagicMock

import pytest

from src.core.runtime.game_settings import Metrics
from src.scenes.about_scene import AboutScene
from src.scenes.hallway_scene import HallwayScene
from src.scenes.room_scene import RoomScene
from src.scenes.scene_context import RoomParams
from src.scenes.start_scene import StartScene
from src.scenes.transition_scene import TransitionScene


def requested_scene(scene_context):
    construct_fn = scene_context.scenes.request_switch.call_args[0][0]
    return construct_fn()


# ===========================================================
# Title & Transition
# ===========================================================

class TestStartScene:

    def test_enter_key_begins(self, scene_context):
        scene = StartScene(scene_context)
        scene.handle_key_down("x")
        scene_context.scenes.request_switch.assert_not_called()

        scene.handle_key_down("return")
        assert isinstance(requested_scene(scene_context), TransitionScene)

    def test_about_key(self, scene_context):
        StartScene(scene_context).handle_key_down("i")
        assert isinstance(requested_scene(scene_context), AboutScene)

    def test_draw_smoke(self, scene_context):
        StartScene(scene_context).draw(MagicMock())


class TestAboutScene:

    def test_other_keys_stay(self, scene_context):
        scene = AboutScene(scene_context)
        scene.handle_key_down("space")
        scene.handle_key_down("left")
        scene_context.scenes.request_switch.assert_not_called()

    @pytest.mark.parametrize("code", ["escape", "backspace", "return"])
    def test_back_to_title(self, scene_context, code):
        AboutScene(scene_context).handle_key_down(code)
        assert isinstance(requested_scene(scene_context), StartScene)

    def test_draw_smoke(self, scene_context):
        AboutScene(scene_context).draw(MagicMock())


class TestTransitionScene:

    def test_phases_then_hallway(self, scene_context):
        scene = TransitionScene(scene_context)

        scene.update(0.5)
        assert scene.phase == TransitionScene.FADE_IN
        assert scene.alpha == pytest.approx(0.5)

        scene.update(0.5)
        assert scene.phase == TransitionScene.HOLD
        scene.update(2.0)
        assert scene.phase == TransitionScene.FADE_OUT
        scene.update(1.0)
        assert scene.phase == TransitionScene.DONE

        scene.update(5.0)
        scene_context.scenes.request_switch.assert_called_once()
        hallway = requested_scene(scene_context)
        assert isinstance(hallway, HallwayScene)
        assert hallway.floor == 1

    def test_skip_key(self, scene_context):
        scene = TransitionScene(scene_context)
        scene.handle_key_down("escape")
        scene.handle_key_down("space")
        scene_context.scenes.request_switch.assert_called_once()

    def test_rejected_switch_is_retried(self, scene_context):
        scene_context.scenes.request_switch.return_value = None
        scene = TransitionScene(scene_context)

        assert scene.go_to_hallway() is None
        assert scene.phase == TransitionScene.FADE_IN

        scene.handle_key_down("space")
        assert scene_context.scenes.request_switch.call_count == 2


# ===========================================================
# Room
# ===========================================================

@pytest.fixture
def room(scene_context):
    return RoomScene(scene_context, RoomParams(floor=2, room_number=3))


class TestRoomScene:

    def test_occupant(self, room):
        assert room.patron.name == "Dana"
        assert not room.near_patron()

    def test_talk_toggle(self, room):
        room.handle_key_down("space")
        assert not room.dialog_open

        room.player_x = room.npc_x
        room.handle_key_down("space")
        assert room.dialog_open
        assert room._prompt() == "Dana: Hello"

        room.handle_key_down("return")
        assert not room.dialog_open

    def test_escape_closes_dialog_before_leaving(self, room, scene_context):
        room.player_x = room.npc_x
        room.handle_key_down("space")
        room.handle_key_down("escape")

        assert not room.dialog_open
        scene_context.scenes.request_switch.assert_not_called()

    def test_leave_returns_to_door(self, room, scene_context):
        room.handle_key_down("backspace")

        hallway = requested_scene(scene_context)
        assert isinstance(hallway, HallwayScene)
        assert hallway.floor == 2
        assert hallway.player_x == hallway.door_x(3)
        assert hallway.nearby_door() == 3

    def test_npc_paces_within_range(self, room):
        positions = []
        for _ in range(200):
            room.update(0.1)
            positions.append(room.npc_x)

        half = Metrics.NPC_PACE_DISTANCE / 2
        assert min(positions) >= room.npc_home_x - half
        assert max(positions) <= room.npc_home_x + half
        assert len(set(positions)) > 2

    def test_dialog_freezes_movement(self, room):
        room.player_x = room.npc_x
        room.handle_key_down("space")
        npc_x, player_x = room.npc_x, room.player_x

        room.handle_key_down("right")
        room.update(1.0)
        assert (room.npc_x, room.player_x) == (npc_x, player_x)

    def test_empty_room(self, scene_context):
        room = RoomScene(scene_context, RoomParams(floor=2, room_number=2))
        assert room.patron is None
        assert not room.near_patron()
        assert room._prompt() == "This room is empty. Press ESC to leave."
        room.update(1.0)

    def test_draw_smoke(self, room, scene_context):
        room.draw(MagicMock())
        TransitionScene(scene_context).draw(MagicMock())
