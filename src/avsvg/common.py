"""Central module containing types, enums and errors for SVG path compiling."""

from __future__ import annotations

from enum import Enum, auto
from typing import Literal

###############################################################################
# Types
###############################################################################


SvgPathCmds = Literal[  # Type-Definition for SvgPath-Commands; uppercase = absolute; lowercase = relative
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    "m",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    "l",
    # Horizontal LineTo (1) - draw a horizontal line to the given x coordinate (y stays unchanged)
    "H",
    "h",
    # Vertical LineTo (1) - draw a vertical line to the given y coordinate (x stays unchanged)
    "V",
    "v",
    # Cubic Bezier To (6) - draw a cubic Bezier curve with two control points and an endpoint (x,y)
    "C",
    "c",
    # Smooth cubic Bezier To (4) - Cubic curve to (x,y) using the reflection of the previous cubic control point
    "S",
    "s",
    # Quadratic Bezier To (4) - draw a quadratic Bezier curve with one control point and an endpoint (x,y)
    "Q",
    "q",
    # Smooth quadratic Bezier To (2) - Quadratic curve to (x,y) using the reflection of the previous control point
    "T",
    "t",
    # Arc (7) - draw an elliptical arc with parameters (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
    "A",
    "a",
    # ClosePath (0) - close subpath by drawing a line from the current point to start point
    "Z",
    "z",
]


###############################################################################
# Enums and Consts
###############################################################################


class ErrorMode(Enum):
    """Enum to define how the parser reacts to unknown path commands."""

    IGNORE = auto()  # skip silently
    WARN = auto()  # skip and log a warning
    STRICT = auto()  # raise UnknownCommandError


class CommandFamily(Enum):
    """Enum to define the curve family of the last processed command.

    Smooth curve commands only reflect the previous control point
    if the previous command belongs to the same family.
    """

    NONE = auto()
    CUBIC = auto()
    QUAD = auto()
    OTHER = auto()


###############################################################################
# Errors
###############################################################################


class SvgPathError(Exception):
    """Base exception for SVG path compiling errors."""


class ParseFailureError(SvgPathError, ValueError):
    """Raised when a numeric argument run is not a valid number."""


class ParamMismatchError(SvgPathError, ValueError):
    """Raised when the argument count does not fit the command's group size."""


class UnknownCommandError(SvgPathError):
    """Raised in strict mode when an unknown command letter is found."""
