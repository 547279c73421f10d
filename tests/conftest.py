"""
conftest.py
-----------
Shared pytest configuration and fixtures for Patron Hall tests.

Contains:
- Global pygame mock so no display is needed
- Manual clock / frame scheduler for deterministic animation
- Recording scene host and scripted scenes for lifecycle tests
- Sample patron rosters
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Project root on sys.path so "src." imports resolve without installation
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Mock pygame globally before any imports that might use it
mock_pygame = MagicMock()
sys.modules["pygame"] = mock_pygame
sys.modules["pygame.font"] = MagicMock()
sys.modules["pygame.display"] = MagicMock()
sys.modules["pygame.draw"] = MagicMock()
sys.modules["pygame.key"] = MagicMock()
sys.modules["pygame.event"] = MagicMock()

mock_pygame.QUIT = 256
mock_pygame.KEYDOWN = 768
mock_pygame.KEYUP = 769
mock_pygame.VIDEORESIZE = 32769
mock_pygame.RESIZABLE = 16
mock_pygame.FULLSCREEN = -2147483648
mock_pygame.K_F11 = 1073741892

from src.core.layout.geometry_engine import GeometryEngine  # noqa: E402
from src.core.runtime.frame_scheduler import FrameScheduler  # noqa: E402
from src.core.services.scene_manager import SceneManager  # noqa: E402
from src.scenes.scene_context import SceneContext  # noqa: E402
from src.systems.occupancy.occupancy_assigner import OccupancyAssigner  # noqa: E402
from src.systems.occupancy.patron import Patron, Tier  # noqa: E402

# ===========================================================
# Time & Geometry
# ===========================================================

class ManualClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now

@pytest.fixture
def clock():
    return ManualClock()

@pytest.fixture
def scheduler(clock):
    return FrameScheduler(clock=clock)

@pytest.fixture
def geometry(scheduler):
    """Engine at exactly the base resolution (scale 1.0)."""
    return GeometryEngine(scheduler, viewport_size=(1200, 800))

# ===========================================================
# Scene Host & Scripted Scenes
# ===========================================================

class RecordingHost:
    """Scene host double that logs attach/detach and checks exclusivity."""

    def __init__(self):
        self.events = []
        self.attached = []
        self.max_attached = 0

    def attach(self, scene):
        self.attached.append(scene)
        self.max_attached = max(self.max_attached, len(self.attached))
        self.events.append(("attach", scene.label))

    def detach(self, scene):
        self.attached.remove(scene)
        self.events.append(("detach", scene.label))

class ScriptedScene:
    """
    Minimal scene that records its lifecycle into a shared journal.

    Hooks can be held open with gates (asyncio.Event) or made to raise.
    """

    def __init__(self, label, journal, enter_gate=None, exit_gate=None,
                 fail_on=None, handlers=True):
        self.label = label
        self.journal = journal
        self.enter_gate = enter_gate
        self.exit_gate = exit_gate
        self.fail_on = fail_on
        self.destroy_calls = 0
        self.keys = []
        self.frames = []
        if not handlers:
            self.handle_key_down = None
            self.handle_key_up = None
            self.update = None
        journal.append(("construct", label))

    async def enter(self):
        self.journal.append(("enter", self.label))
        if self.enter_gate is not None:
            await self.enter_gate.wait()
        if self.fail_on == "enter":
            raise RuntimeError(f"{self.label} enter failed")
        self.journal.append(("entered", self.label))

    async def exit(self):
        self.journal.append(("exit", self.label))
        if self.exit_gate is not None:
            await self.exit_gate.wait()
        if self.fail_on == "exit":
            raise RuntimeError(f"{self.label} exit failed")
        self.journal.append(("exited", self.label))

    def destroy(self):
        self.destroy_calls += 1
        self.journal.append(("destroy", self.label))
        if self.fail_on == "destroy":
            raise RuntimeError(f"{self.label} destroy failed")

    def handle_key_down(self, code):
        self.keys.append(("down", code))

    def handle_key_up(self, code):
        self.keys.append(("up", code))

    def update(self, dt):
        self.frames.append(dt)

@pytest.fixture
def host():
    return RecordingHost()

@pytest.fixture
def journal():
    return []

@pytest.fixture
def scene_manager(host):
    return SceneManager(host)

@pytest.fixture
def make_scene(journal):
    """Factory: make_scene("a", fail_on="enter") → construct function."""
    created = {}

    def factory(label, **kwargs):
        def construct():
            scene = ScriptedScene(label, journal, **kwargs)
            created[label] = scene
            return scene
        return construct

    factory.created = created
    return factory


# ===========================================================
# Rosters
# ===========================================================

@pytest.fixture
def sample_roster():
    return [
        Patron(id="ada", name="Ada", dialog_text="Hi", floor=1, room_number=1, tier=Tier.DIAMOND),
        Patron(id="bruno", name="Bruno", dialog_text="Yo"),
        Patron(id="chen", name="Chen", dialog_text="Hey", tier=Tier.SILVER),
        Patron(id="dana", name="Dana", dialog_text="Hello", floor=2, room_number=3),
        Patron(id="emil", name="Emil", dialog_text="Sup"),
    ]

@pytest.fixture
def occupancy(sample_roster):
    assigner = OccupancyAssigner(rooms_per_floor=3, max_floors=5)
    assigner.build(sample_roster)
    return assigner

@pytest.fixture
def scene_context(geometry, occupancy):
    """Context for real scenes; the scene manager is a mock."""
    scenes = MagicMock()
    scenes.request_switch.return_value = MagicMock(name="task")
    return SceneContext(geometry=geometry, occupancy=occupancy, scenes=scenes)

# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")

def pytest_collection_modifyitems(config, items):
    """Add the unit marker to everything outside integration modules."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
