"""Tests for the level registry"""

import pytest

from leveled_logger import LEVELS, Logger, LogLevel, strip_colors
from leveled_logger.core.log_level import colorize, level_name


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.SEVERE < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.FINE
        assert LogLevel.FINE < LogLevel.FINER
        assert LogLevel.FINER < LogLevel.FINEST

    def test_ranks(self):
        assert [int(level) for level in LogLevel] == [1, 2, 3, 4, 5, 6]

    def test_from_string(self):
        assert LogLevel.from_string("SEVERE") == LogLevel.SEVERE
        assert LogLevel.from_string("finest") == LogLevel.FINEST

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("debug")

    def test_str(self):
        assert str(LogLevel.WARNING) == "WARNING"

    def test_colors_are_distinct_for_main_levels(self):
        codes = {
            LogLevel.SEVERE.color_code,
            LogLevel.WARNING.color_code,
            LogLevel.INFO.color_code,
            LogLevel.FINE.color_code,
        }
        assert len(codes) == 4


class TestLevelsMapping:
    """Test the frozen name -> rank mapping."""

    def test_contents(self):
        assert dict(LEVELS) == {
            "SEVERE": 1,
            "WARNING": 2,
            "INFO": 3,
            "FINE": 4,
            "FINER": 5,
            "FINEST": 6,
        }

    def test_exposed_on_logger(self):
        assert Logger.levels is LEVELS
        assert Logger.levels["INFO"] == 3

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            LEVELS["DEBUG"] = 7
        with pytest.raises(TypeError):
            del LEVELS["INFO"]
        assert "DEBUG" not in LEVELS


class TestLevelName:
    """Test reverse lookup and color helpers."""

    def test_known_ranks(self):
        for name, rank in LEVELS.items():
            assert level_name(rank) == name

    def test_unknown_rank(self):
        assert level_name(9) == "9"

    def test_colored_name(self):
        colored = level_name(1, colored=True)
        assert colored != "SEVERE"
        assert colored.startswith(LogLevel.SEVERE.color_code)
        assert strip_colors(colored) == "SEVERE"

    def test_colorize_empty(self):
        assert colorize("", "\033[35m") == ""

    def test_strip_colors_plain_text(self):
        assert strip_colors("[a][b] *** c") == "[a][b] *** c"
