"""
Core services exports.

Provides configuration loading, the scene host window, and the scene
lifecycle manager.
"""

from src.core.services.config_manager import load_config
from src.core.services.display_manager import DisplayManager
from src.core.services.scene_manager import SceneManager

__all__ = [
    # Config
    'load_config',
    # Services
    'DisplayManager',
    'SceneManager',
]
