"""
test_patron_roster.py
---------------------
Unit tests for roster parsing and loading.
"""

import json

import pytest

from src.core.debug.debug_logger import LoggerConfig
from src.systems.occupancy.patron import Tier
from src.systems.occupancy.patron_roster import load_roster, parse_patron, parse_roster


class TestParsePatron:

    def test_full_entry(self):
        patron = parse_patron({
            "id": "ada", "name": "Ada", "dialog_text": "Hello!",
            "floor": 1, "room_number": 2, "tier": "Gold",
            "join_date": "2024-01-01", "special_notes": "VIP",
        })
        assert patron.id == "ada"
        assert patron.placement == (1, 2)
        assert patron.tier is Tier.GOLD
        assert patron.join_date == "2024-01-01"

    def test_minimal_entry(self):
        patron = parse_patron({"id": "b", "name": "Bo"})
        assert patron.dialog_text == ""
        assert patron.placement is None
        assert not patron.has_explicit_placement

    @pytest.mark.parametrize("entry", [
        "not a dict",
        {"name": "No Id"},
        {"id": "no-name"},
        {"id": "", "name": "Blank"},
    ])
    def test_unusable_entries(self, entry):
        assert parse_patron(entry) is None

    def test_bad_fields_are_dropped(self):
        patron = parse_patron({"id": "x", "name": "X", "floor": "2", "room_number": True, "tier": "platinum"})
        assert patron.floor is None
        assert patron.room_number is None
        assert patron.tier is None

    def test_half_placement_is_auto(self):
        patron = parse_patron({"id": "x", "name": "X", "floor": 2})
        assert patron.floor == 2
        assert not patron.has_explicit_placement


class TestParseRoster:

    def test_keeps_order_and_skips_duplicates(self):
        patrons = parse_roster([
            {"id": "a", "name": "A"},
            {"id": "b", "name": "B"},
            {"id": "a", "name": "A again"},
            42,
        ])
        assert [p.id for p in patrons] == ["a", "b"]
        assert patrons[0].name == "A"

    def test_non_list(self):
        assert parse_roster({"id": "a"}) == []

    def test_skipped_entries_logged_under_occupancy(self, capsys, monkeypatch):
        monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", True)
        monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
        monkeypatch.setitem(LoggerConfig.CATEGORIES, "loading", False)
        monkeypatch.setitem(LoggerConfig.CATEGORIES, "occupancy", True)

        parse_roster([{"id": "a", "name": "A"}, {"id": "a", "name": "A again"}])

        out = capsys.readouterr().out
        assert "Duplicate patron id 'a'" in out
        assert "[occupancy]" in out


class TestLoadRoster:

    def test_from_path(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({
            "_notes": "test roster",
            "patrons": [{"id": "a", "name": "A", "floor": 1, "room_number": 1}],
        }))

        patrons = load_roster(str(path))
        assert [p.id for p in patrons] == ["a"]

    def test_missing_file(self, tmp_path):
        assert load_roster(str(tmp_path / "missing_roster.json")) == []

    def test_missing_file_strict(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_roster(str(tmp_path / "missing_roster.json"), strict=True)

    def test_packaged_roster(self):
        patrons = load_roster()
        assert len(patrons) > 0
        assert len({p.id for p in patrons}) == len(patrons)
