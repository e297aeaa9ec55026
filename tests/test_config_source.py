"""Tests for the INI configuration source."""

import pytest

from src.configuration.config_source import ConfigSource, ConfigurationError


def _make_source():
    return ConfigSource.from_string(
        "[General]\n"
        "rounds_per_game = 4\n"
        "water_delivery_series = 0, 0.9\n"
        "bad_int = four\n"
    )


class TestLoading:
    def test_from_string(self):
        source = _make_source()
        assert source.has_section("General")
        assert source.sections() == ["General"]

    def test_from_file(self, tmp_path):
        path = tmp_path / "game.ini"
        path.write_text("[General]\nrounds_per_game = 2\n", encoding="utf-8")
        source = ConfigSource.from_file(path)
        assert source.section("General").get_int("rounds_per_game") == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigSource.from_file(tmp_path / "nope.ini")

    def test_unparseable_document(self):
        with pytest.raises(ConfigurationError, match="Configuration load failed"):
            ConfigSource.from_string("rounds_per_game = 4\n")

    def test_duplicate_section_is_rejected(self):
        with pytest.raises(ConfigurationError):
            ConfigSource.from_string("[General]\na = 1\n[General]\nb = 2\n")


class TestSectionLookups:
    def test_get_string(self):
        general = _make_source().section("General")
        assert general.get_string("water_delivery_series") == "0, 0.9"

    def test_keys_are_case_insensitive(self):
        general = _make_source().section("General")
        assert general.contains("ROUNDS_PER_GAME")
        assert general.get_int("Rounds_Per_Game") == 4

    def test_missing_key(self):
        general = _make_source().section("General")
        assert not general.contains("missing")
        with pytest.raises(ConfigurationError, match="Missing key 'missing'"):
            general.get_string("missing")

    def test_get_int_rejects_non_integer(self):
        with pytest.raises(ConfigurationError, match="not an integer"):
            _make_source().section("General").get_int("bad_int")

    def test_missing_section(self):
        source = _make_source()
        assert not source.has_section("Factories")
        with pytest.raises(ConfigurationError, match=r"\[Factories\]"):
            source.section("Factories")

    def test_keys(self):
        keys = _make_source().section("General").keys()
        assert "rounds_per_game" in keys
        assert "water_delivery_series" in keys
