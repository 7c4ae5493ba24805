"""Path command variants and their metadata.

This module maps the command letters of the SVG path mini-language onto
PathCommand variants and keeps the metadata (group size, curve family)
the dispatcher needs to validate and process the arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from avsvg.common import CommandFamily

###############################################################################
# PathCommandInfo
###############################################################################


@dataclass(frozen=True)
class PathCommandInfo:
    """Metadata for SVG path commands.

    Attributes:
        group_size: Number of values one repetition of the command consumes
        family: Curve family used to decide about control point reflection
        is_drawing: Whether this command draws (vs. move)
    """

    group_size: int
    family: CommandFamily
    is_drawing: bool = True


###############################################################################
# PathCommand
###############################################################################


class PathCommand(Enum):
    """The commands of the path mini-language, independent of absolute/relative notation."""

    MOVE_TO = "M"
    LINE_TO = "L"
    HLINE_TO = "H"
    VLINE_TO = "V"
    CUBIC_CURVE = "C"
    SMOOTH_CUBIC_CURVE = "S"
    QUAD_CURVE = "Q"
    SMOOTH_QUAD_CURVE = "T"
    ELLIPTICAL_ARC = "A"
    CLOSE_PATH = "Z"
    UNKNOWN = "?"

    @classmethod
    def from_letter(cls, letter: str) -> PathCommand:
        """Return the command for the given _letter_ (either case), UNKNOWN for any other letter."""
        try:
            return cls(letter.upper())
        except ValueError:
            return cls.UNKNOWN

    @staticmethod
    def is_relative(letter: str) -> bool:
        """Return True if the _letter_ denotes relative coordinates (lowercase)."""
        return letter.islower()

    @property
    def info(self) -> PathCommandInfo:
        """Metadata of this command."""
        return COMMAND_INFO[self]

    @property
    def group_size(self) -> int:
        """Number of values one repetition of this command consumes."""
        return COMMAND_INFO[self].group_size

    @property
    def family(self) -> CommandFamily:
        """Curve family of this command."""
        return COMMAND_INFO[self].family


# Command registry with metadata
COMMAND_INFO = {
    PathCommand.MOVE_TO: PathCommandInfo(2, CommandFamily.OTHER, False),  # MoveTo - not drawing
    PathCommand.LINE_TO: PathCommandInfo(2, CommandFamily.OTHER),
    PathCommand.HLINE_TO: PathCommandInfo(1, CommandFamily.OTHER),
    PathCommand.VLINE_TO: PathCommandInfo(1, CommandFamily.OTHER),
    PathCommand.CUBIC_CURVE: PathCommandInfo(6, CommandFamily.CUBIC),
    PathCommand.SMOOTH_CUBIC_CURVE: PathCommandInfo(4, CommandFamily.CUBIC),
    PathCommand.QUAD_CURVE: PathCommandInfo(4, CommandFamily.QUAD),
    PathCommand.SMOOTH_QUAD_CURVE: PathCommandInfo(2, CommandFamily.QUAD),
    PathCommand.ELLIPTICAL_ARC: PathCommandInfo(7, CommandFamily.OTHER),
    PathCommand.CLOSE_PATH: PathCommandInfo(0, CommandFamily.OTHER),
    PathCommand.UNKNOWN: PathCommandInfo(0, CommandFamily.OTHER, False),
}
