"""
test_display_manager.py
-----------------------
Unit tests for the window host: scene slot, fullscreen, coordinates.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from src.core.services.display_manager import DisplayManager


@pytest.fixture
def window(monkeypatch):
    """Fake window surface returned by pygame.display.set_mode."""
    surface = MagicMock(name="window")
    surface.get_size.return_value = (1200, 800)
    set_mode = MagicMock(return_value=surface)
    monkeypatch.setattr(pygame.display, "set_mode", set_mode)
    return surface


@pytest.fixture
def display(geometry, window):
    return DisplayManager(geometry, "medium")


class TestWindowSize:

    @pytest.mark.parametrize("requested, expected", [
        ("small", (900, 600)),
        ("large", (1800, 1200)),
        ("unknown", (1200, 800)),
        (None, (1200, 800)),
        ((640, 480), (640, 480)),
    ])
    def test_initial_size(self, geometry, window, requested, expected):
        DisplayManager(geometry, requested)
        pygame.display.set_mode.assert_called_with(expected, pygame.RESIZABLE)

    def test_resize_recreates_window(self, display):
        display.handle_resize(1000, 700)
        pygame.display.set_mode.assert_called_with((1000, 700), pygame.RESIZABLE)

    def test_fullscreen_round_trip(self, display, geometry, window):
        window.get_size.return_value = (1920, 1080)
        display.toggle_fullscreen()

        assert display.is_fullscreen
        pygame.display.set_mode.assert_called_with((0, 0), pygame.FULLSCREEN)
        assert geometry.animation.target == geometry.compute(1920, 1080)

        display.handle_resize(500, 500)
        pygame.display.set_mode.assert_called_with((0, 0), pygame.FULLSCREEN)

        window.get_size.return_value = (1200, 800)
        display.toggle_fullscreen()
        assert not display.is_fullscreen
        pygame.display.set_mode.assert_called_with((1200, 800), pygame.RESIZABLE)


class TestSceneSlot:

    def test_single_attached_scene(self, display):
        first, second = MagicMock(), MagicMock()
        display.attach(first)

        with pytest.raises(RuntimeError):
            display.attach(second)

        display.detach(second)
        assert display.attached_scene is first

        display.detach(first)
        display.attach(second)
        assert display.attached_scene is second

    def test_render_draws_attached_scene(self, display):
        scene = MagicMock()
        display.render()
        scene.draw.assert_not_called()

        display.attach(scene)
        display.render()
        scene.draw.assert_called_once()


def test_screen_to_layout_pos(display, window):
    window.get_size.return_value = (1400, 800)
    assert display.screen_to_layout_pos(150, 50) == (50, 50)
