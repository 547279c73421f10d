"""
patron_roster.py
----------------
Loads the static patron roster from JSON.

Roster format:
    {
        "patrons": [
            {"id": "ada", "name": "Ada", "dialog_text": "Hello!",
             "floor": 1, "room_number": 2, "tier": "gold"}
        ]
    }

Entries without an id or name, and repeated ids, are skipped with a
warning. Unknown tiers and unusable placements are dropped from the entry
(the patron is still loaded).
"""

from typing import List, Optional

from src.core.debug.debug_logger import DebugLogger
from src.core.services.config_manager import load_config
from src.systems.occupancy.patron import Patron, Tier


DEFAULT_ROSTER_FILE = "patrons.json"


def load_roster(filename: str = DEFAULT_ROSTER_FILE, strict: bool = False) -> List[Patron]:
    """
    Read and validate the roster file.

    Args:
        filename: Roster file name or path
        strict: Raise FileNotFoundError if the file is missing

    Returns:
        Patrons in file order
    """
    data = load_config(filename, {"patrons": []}, strict=strict)
    patrons = parse_roster(data.get("patrons", []))
    DebugLogger.system(f"Loaded {len(patrons)} patrons", category="loading")
    return patrons


def parse_roster(entries) -> List[Patron]:
    """Convert raw roster entries into Patron records."""
    if not isinstance(entries, list):
        DebugLogger.warn("Roster 'patrons' is not a list - ignoring", category="occupancy")
        return []

    patrons = []
    seen_ids = set()

    for index, entry in enumerate(entries):
        patron = parse_patron(entry, index)
        if patron is None:
            continue
        if patron.id in seen_ids:
            DebugLogger.warn(f"Duplicate patron id '{patron.id}' at entry {index} - skipped", category="occupancy")
            continue
        seen_ids.add(patron.id)
        patrons.append(patron)

    return patrons


def parse_patron(entry, index: int = 0) -> Optional[Patron]:
    """Build one Patron, or None if the entry is unusable."""
    if not isinstance(entry, dict):
        DebugLogger.warn(f"Roster entry {index} is not an object - skipped", category="occupancy")
        return None

    patron_id = entry.get("id")
    name = entry.get("name")
    if not patron_id or not name:
        DebugLogger.warn(f"Roster entry {index} is missing 'id' or 'name' - skipped", category="occupancy")
        return None

    floor = _parse_number(entry.get("floor"), "floor", patron_id)
    room_number = _parse_number(entry.get("room_number"), "room_number", patron_id)

    return Patron(
        id=str(patron_id),
        name=str(name),
        dialog_text=str(entry.get("dialog_text", "")),
        floor=floor,
        room_number=room_number,
        tier=_parse_tier(entry.get("tier"), patron_id),
        join_date=entry.get("join_date"),
        special_notes=entry.get("special_notes"),
    )


def _parse_number(value, field: str, patron_id) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        DebugLogger.warn(f"Patron '{patron_id}' has non-integer {field}={value!r} - ignored", category="occupancy")
        return None
    return value


def _parse_tier(value, patron_id) -> Optional[Tier]:
    if value is None:
        return None
    try:
        return Tier(str(value).lower())
    except ValueError:
        DebugLogger.warn(f"Patron '{patron_id}' has unknown tier {value!r} - ignored", category="occupancy")
        return None
