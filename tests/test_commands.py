"""Tests for the PathCommand variants and the COMMAND_INFO registry."""

import pytest

from avsvg.commands import COMMAND_INFO, PathCommand, PathCommandInfo
from avsvg.common import CommandFamily


class TestPathCommandInfo:
    """Tests for PathCommandInfo dataclass."""

    def test_command_info_immutable(self):
        """PathCommandInfo should be frozen (immutable)."""
        info = PathCommandInfo(2, CommandFamily.OTHER)
        with pytest.raises(Exception):  # FrozenInstanceError
            info.group_size = 4

    def test_command_info_default_is_drawing(self):
        """PathCommandInfo should default is_drawing to True."""
        assert PathCommandInfo(2, CommandFamily.OTHER).is_drawing is True

    def test_all_commands_registered(self):
        """All variants should be in the registry."""
        assert set(COMMAND_INFO.keys()) == set(PathCommand)


class TestPathCommand:
    """Tests for PathCommand."""

    @pytest.mark.parametrize(
        "letter, command",
        [
            ("M", PathCommand.MOVE_TO),
            ("l", PathCommand.LINE_TO),
            ("H", PathCommand.HLINE_TO),
            ("v", PathCommand.VLINE_TO),
            ("C", PathCommand.CUBIC_CURVE),
            ("s", PathCommand.SMOOTH_CUBIC_CURVE),
            ("Q", PathCommand.QUAD_CURVE),
            ("t", PathCommand.SMOOTH_QUAD_CURVE),
            ("A", PathCommand.ELLIPTICAL_ARC),
            ("z", PathCommand.CLOSE_PATH),
            ("X", PathCommand.UNKNOWN),
            ("b", PathCommand.UNKNOWN),
        ],
    )
    def test_from_letter(self, letter, command):
        """Letters of both cases map onto their command."""
        assert PathCommand.from_letter(letter) is command

    def test_is_relative(self):
        """Lowercase letters denote relative coordinates."""
        assert PathCommand.is_relative("m") is True
        assert PathCommand.is_relative("M") is False

    def test_group_sizes(self):
        """Verify the number of values per group for each command."""
        sizes = {letter: PathCommand.from_letter(letter).group_size for letter in "MLHVCSQTAZ"}
        assert sizes == {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "T": 2, "A": 7, "Z": 0}

    def test_families(self):
        """Smooth curves share the family of their full curve command."""
        assert PathCommand.CUBIC_CURVE.family is PathCommand.SMOOTH_CUBIC_CURVE.family is CommandFamily.CUBIC
        assert PathCommand.QUAD_CURVE.family is PathCommand.SMOOTH_QUAD_CURVE.family is CommandFamily.QUAD
        assert PathCommand.ELLIPTICAL_ARC.family is CommandFamily.OTHER

    def test_move_is_not_drawing(self):
        """MoveTo is the only known command which does not draw."""
        assert PathCommand.MOVE_TO.info.is_drawing is False
        assert PathCommand.LINE_TO.info.is_drawing is True
