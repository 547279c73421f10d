"""
game_settings.py
----------------
Centralized constants for all systems.

Every on-screen size is expressed at the base resolution and turned into
pixels through GeometryEngine.scaled(), never multiplied by hand.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Base resolution and window configuration."""
    BASE_WIDTH: int = 1200
    BASE_HEIGHT: int = 800
    FPS: int = 60
    CAPTION: str = "Patron Hall"

    WINDOW_SIZES = {
        "small": (900, 600),
        "medium": (1200, 800),
        "large": (1800, 1200),
    }
    DEFAULT_WINDOW_SIZE: str = "medium"


# ===========================================================
# Responsive Layout
# ===========================================================

class LayoutSettings:
    """Scale clamping and resize animation."""
    SCALE_CAP: float = 1.2          # Text never grows past 120%
    MIN_FONT_SIZE: int = 12
    BOUNCE_DURATION_MS: float = 300.0
    ELASTIC_PERIOD: float = 0.3


class Room:
    """Room interior size at the base resolution (16:9)."""
    WIDTH: int = 800
    HEIGHT: int = 450


# ===========================================================
# Building Layout
# ===========================================================

class BuildingSettings:
    """Capacity of the patron building."""
    ROOMS_PER_FLOOR: int = 3
    MAX_FLOORS: int = 5


# ===========================================================
# Scaled Metrics (base-resolution pixels)
# ===========================================================

class Metrics:
    """UI metrics at scale 1.0. Read through GeometryEngine.scaled()."""
    MARGIN: int = 20

    # Characters
    PLAYER_WIDTH: int = 32
    PLAYER_HEIGHT: int = 90
    PLAYER_SPEED: int = 150         # px / second
    PLAYER_START_X: int = 100
    NPC_WIDTH: int = 32
    NPC_HEIGHT: int = 48
    NPC_SPEED: int = 50
    NPC_PACE_DISTANCE: int = 100
    INTERACTION_DISTANCE: int = 50

    # Doors
    DOOR_WIDTH: int = 80
    DOOR_HEIGHT: int = 120
    ROOM_LABEL_OFFSET: int = 20

    # Elevator
    ELEVATOR_WIDTH: int = 100
    ELEVATOR_HEIGHT: int = 150
    ELEVATOR_MARGIN: int = 50

    # Buttons
    BUTTON_WIDTH: int = 150
    BUTTON_HEIGHT: int = 50

    # Movement boundaries
    HALLWAY_SIDE_MARGIN: int = 50
    ROOM_SIDE_MARGIN: int = 25
    CEILING_HEIGHT: int = 80


class FontSizes:
    TITLE: int = 48
    SUBTITLE: int = 24
    BODY: int = 18
    SMALL: int = 14


# ===========================================================
# Timing
# ===========================================================

class Timing:
    """Scene timings in milliseconds."""
    FADE_DURATION: float = 1000.0
    TRANSITION_HOLD: float = 2000.0


# ===========================================================
# Colors
# ===========================================================

class Colors:
    BACKGROUND = (26, 26, 46)
    TEXT = (255, 255, 255)
    ACCENT = (255, 215, 0)
    BUTTON = (44, 62, 80)
    WALL = (149, 165, 166)
    FLOOR = (141, 110, 99)
    DOOR = (108, 92, 231)
    DOOR_EMPTY = (80, 80, 90)
    NPC = (255, 107, 107)
    PLAYER = (78, 205, 196)

    TIERS = {
        "bronze": (205, 127, 50),
        "silver": (192, 192, 192),
        "gold": (255, 215, 0),
        "diamond": (185, 242, 255),
    }
