"""
config_manager.py
-----------------
JSON configuration loader for settings and the patron roster.

Features:
- Builds a file index once for O(1) lookups by file name
- Searches the working directory before the packaged config/ directory
- Recursively merges over defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
from src.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_ROOT = os.path.join(PACKAGE_ROOT, "config")

# Earlier directories win when the same file name exists twice
SEARCH_DIRS = [
    ".",
    DATA_ROOT,
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: File name (looked up in the index) or path
        default_dict: Default fallback config
        strict: If True, raise on a missing or unreadable file

    Returns:
        dict: Defaults merged with file contents

    Raises:
        FileNotFoundError: strict and the file is missing or invalid
    """
    if default_dict is None:
        default_dict = {}

    path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"top-level value in {path} is not an object")
        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def build_file_index():
    """Scan config directories and cache JSON file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        # Only the top level of "." so a checkout's tests/ never shadows config/
        if directory == ".":
            entries = [(directory, os.listdir(directory))]
        else:
            entries = [(root, files) for root, _, files in os.walk(directory)]
        for root, files in entries:
            for file in files:
                if file.endswith(".json") and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def rebuild_file_index():
    """Clear and rebuild the index."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Existing paths pass through; bare names use the index."""
    if os.path.isfile(filename):
        return filename

    if _FILE_INDEX is None:
        build_file_index()

    name = filename.replace("\\", "/").lstrip("/")
    if name in _FILE_INDEX:
        return _FILE_INDEX[name]
    if name + ".json" in _FILE_INDEX:
        return _FILE_INDEX[name + ".json"]

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts without mutating either. Ignores '_notes'."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
