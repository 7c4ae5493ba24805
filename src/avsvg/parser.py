"""Compiling SVG path strings into drawing primitives.

The AvSvgPathParser splits a path string into command segments, tokenizes
and resolves the arguments of each segment and issues the corresponding
primitives (move, line, cubic, quadratic, close) to an AvDrawingSink.
The parser state (cursor, subpath start, last control point) is threaded
through the commands of one path string and reset for every new one.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Union

from avsvg.bezier import ARC_MAX_SEGMENT_ANGLE, BezierCurve
from avsvg.commands import PathCommand
from avsvg.common import (
    CommandFamily,
    ErrorMode,
    ParamMismatchError,
    UnknownCommandError,
)
from avsvg.coords import CoordinateResolver
from avsvg.sink import AvDrawingSink
from avsvg.splitter import PathSplitter
from avsvg.tokenizer import NumberTokenizer

logger = logging.getLogger(__name__)


###############################################################################
# ParserConfig
###############################################################################


@dataclass(frozen=True)
class ParserConfig:
    """Configuration of the path parser.

    Attributes:
        error_mode: Reaction on unknown command letters (IGNORE, WARN, STRICT).
        arc_max_segment_angle: Maximum angle (degrees) of one cubic curve approximating an arc.
    """

    error_mode: ErrorMode = ErrorMode.IGNORE
    arc_max_segment_angle: float = ARC_MAX_SEGMENT_ANGLE

    def __post_init__(self):
        if not 0.0 < self.arc_max_segment_angle <= 180.0:
            raise ValueError(f"arc_max_segment_angle must be in ]0, 180], got {self.arc_max_segment_angle}")

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary for serialization."""
        return {
            "error_mode": self.error_mode.name,
            "arc_max_segment_angle": self.arc_max_segment_angle,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ParserConfig:
        """Create a ParserConfig from a dictionary, error_mode given by name (case-insensitive)."""
        error_mode: Union[ErrorMode, str] = data.get("error_mode", ErrorMode.IGNORE)
        if isinstance(error_mode, str):
            error_mode = ErrorMode[error_mode.upper()]
        return cls(
            error_mode=error_mode,
            arc_max_segment_angle=data.get("arc_max_segment_angle", ARC_MAX_SEGMENT_ANGLE),
        )


###############################################################################
# ParserState
###############################################################################


@dataclass
class ParserState:
    """Mutable state threaded through the commands of one path string.

    Attributes:
        cursor: Current point, the endpoint of the last emitted primitive
        path_start: Start point of the current subpath, used by close
        control_point: Last control point, used for smooth curve reflection
        last_family: Curve family of the last processed command
        points: Numeric arguments of the command in process
        in_path: True while a subpath is open
    """

    cursor: Tuple[float, float] = (0.0, 0.0)
    path_start: Tuple[float, float] = (0.0, 0.0)
    control_point: Tuple[float, float] = (0.0, 0.0)
    last_family: CommandFamily = CommandFamily.NONE
    points: List[float] = field(default_factory=list)
    in_path: bool = False

    def reset(self) -> None:
        """Restore the defaults, done at the start of every path string."""
        self.cursor = (0.0, 0.0)
        self.path_start = (0.0, 0.0)
        self.control_point = (0.0, 0.0)
        self.last_family = CommandFamily.NONE
        self.points = []
        self.in_path = False


###############################################################################
# AvSvgPathParser
###############################################################################


class AvSvgPathParser:
    """
    Translates SVG path strings into drawing primitives issued to a sink.

    Commands (command : number of values : command-character):
        MoveTo:           2: Mm
        LineTo:           2: Ll   1: Hh(x)   1:Vv(y)
        CubicBezier:      6: Cc   4: Ss
        QuadraticBezier:  4: Qq   2: Tt
        ArcCurve:         7: Aa
        ClosePath:        0: Zz

    An instance must not be used by several threads at the same time,
    its state is reset at each call of compile_path().
    """

    def __init__(
        self,
        sink: AvDrawingSink,
        error_mode: Optional[ErrorMode] = None,
        config: Optional[ParserConfig] = None,
    ):
        """
        Initialize the parser.

        Args:
            sink (AvDrawingSink): receives the drawing primitives
            error_mode (ErrorMode, optional): overrides the error_mode of _config_. Defaults to None.
            config (ParserConfig, optional): parser configuration. Defaults to ParserConfig().
        """
        self.config = config or ParserConfig()
        self.error_mode = error_mode if error_mode is not None else self.config.error_mode
        self.sink = sink
        self.state = ParserState()
        self._handlers: Dict[PathCommand, Callable[[], None]] = {
            PathCommand.MOVE_TO: self._move_to,
            PathCommand.LINE_TO: self._line_to,
            PathCommand.HLINE_TO: self._hline_to,
            PathCommand.VLINE_TO: self._vline_to,
            PathCommand.CUBIC_CURVE: self._cubic_curve,
            PathCommand.SMOOTH_CUBIC_CURVE: self._smooth_cubic_curve,
            PathCommand.QUAD_CURVE: self._quad_curve,
            PathCommand.SMOOTH_QUAD_CURVE: self._smooth_quad_curve,
            PathCommand.ELLIPTICAL_ARC: self._elliptical_arc,
            PathCommand.CLOSE_PATH: self._close_path,
        }

    # Entry point -------------------------------------------------------------
    def compile_path(self, path_string: str) -> None:
        """Translate the _path_string_ and draw it to the sink.

        Primitives already drawn are not rolled back if an error occurs.

        Raises:
            ParseFailureError: if an argument is not a valid number
            ParamMismatchError: if the argument count does not fit a command
            UnknownCommandError: if an unknown command is found in STRICT mode
        """
        self.state.reset()
        logger.debug("Compiling svg path of length %d", len(path_string))
        for letter, argument_text in PathSplitter.iter_segments(path_string):
            self.add_segment(letter, argument_text)
        logger.debug("Compiled svg path, cursor at %s", self.state.cursor)

    def add_segment(self, letter: str, argument_text: str) -> None:
        """Process one command _letter_ with its _argument_text_."""
        command = PathCommand.from_letter(letter)
        if command is PathCommand.UNKNOWN:
            self._unknown_command(letter)
            self.state.last_family = CommandFamily.OTHER
            return

        state = self.state
        state.points = NumberTokenizer.tokenize(argument_text)
        self._check_arity(command, letter)
        if PathCommand.is_relative(letter):
            state.points = self._resolve_relative(command)
        self._handlers[command]()
        state.points = []
        state.last_family = command.family

    def ellipse_at(self, cx: float, cy: float, rx: float, ry: float) -> None:
        """Draw a closed ellipse centered at (cx, cy) with radii _rx_ and _ry_.

        The subpath starts and ends at (cx + rx, cy) and consists of cubic curves.
        """
        curves = BezierCurve.ellipse_arc_to_cubic_curves(
            (cx, cy), abs(rx), abs(ry), 0.0, 0.0, 2 * math.pi, self.config.arc_max_segment_angle
        )
        start = (cx + abs(rx), cy)
        curves[-1, 3] = start
        self.sink.move_to(*start)
        for curve in curves.tolist():
            (c1x, c1y), (c2x, c2y), (x, y) = curve[1:]
            self.sink.cubic_to(c1x, c1y, c2x, c2y, x, y)
        self.sink.close_path()
        self.state.cursor = self.state.path_start = start
        self.state.in_path = False
        self.state.last_family = CommandFamily.OTHER

    # Argument handling -------------------------------------------------------
    def _check_arity(self, command: PathCommand, letter: str) -> None:
        count = len(self.state.points)
        group_size = command.group_size
        if group_size == 0:
            if count != 0:
                raise ParamMismatchError(f"Command {letter!r} takes no arguments, got {count}")
        elif count == 0 or count % group_size != 0:
            raise ParamMismatchError(
                f"Command {letter!r} needs a positive multiple of {group_size} arguments, got {count}"
            )

    def _resolve_relative(self, command: PathCommand) -> List[float]:
        state = self.state
        if command is PathCommand.HLINE_TO:
            return CoordinateResolver.values_to_abs(state.points, state.cursor[0])
        if command is PathCommand.VLINE_TO:
            return CoordinateResolver.values_to_abs(state.points, state.cursor[1])
        if command is PathCommand.ELLIPTICAL_ARC:
            return CoordinateResolver.arc_to_abs(state.points, state.cursor)
        if command is PathCommand.CLOSE_PATH:
            return state.points
        return CoordinateResolver.points_to_abs(state.points, command.group_size, state.cursor)

    def _groups(self, size: int) -> List[List[float]]:
        points = self.state.points
        return [points[i : i + size] for i in range(0, len(points), size)]

    def _reflected_control_point(self, family: CommandFamily) -> Tuple[float, float]:
        state = self.state
        if state.last_family is family:
            return BezierCurve.reflect_point(state.control_point, state.cursor)
        return state.cursor

    def _unknown_command(self, letter: str) -> None:
        if self.error_mode is ErrorMode.STRICT:
            raise UnknownCommandError(f"Unknown svg path command {letter!r}")
        if self.error_mode is ErrorMode.WARN:
            logger.warning("Ignoring svg path command %r", letter)

    # Command handlers --------------------------------------------------------
    def _move_to(self) -> None:
        state = self.state
        x, y = state.points[0], state.points[1]
        self.sink.move_to(x, y)
        state.cursor = state.path_start = (x, y)
        state.in_path = True
        # further pairs are implicit lineto commands
        for x, y in self._groups(2)[1:]:
            self.sink.line_to(x, y)
            state.cursor = (x, y)

    def _line_to(self) -> None:
        state = self.state
        for x, y in self._groups(2):
            self.sink.line_to(x, y)
            state.cursor = (x, y)
        state.in_path = True

    def _hline_to(self) -> None:
        state = self.state
        for x in state.points:
            self.sink.line_to(x, state.cursor[1])
            state.cursor = (x, state.cursor[1])
        state.in_path = True

    def _vline_to(self) -> None:
        state = self.state
        for y in state.points:
            self.sink.line_to(state.cursor[0], y)
            state.cursor = (state.cursor[0], y)
        state.in_path = True

    def _cubic_curve(self) -> None:
        state = self.state
        for c1x, c1y, c2x, c2y, x, y in self._groups(6):
            self.sink.cubic_to(c1x, c1y, c2x, c2y, x, y)
            state.control_point = (c2x, c2y)
            state.cursor = (x, y)
        state.in_path = True

    def _smooth_cubic_curve(self) -> None:
        state = self.state
        for c2x, c2y, x, y in self._groups(4):
            c1x, c1y = self._reflected_control_point(CommandFamily.CUBIC)
            self.sink.cubic_to(c1x, c1y, c2x, c2y, x, y)
            state.control_point = (c2x, c2y)
            state.cursor = (x, y)
            state.last_family = CommandFamily.CUBIC
        state.in_path = True

    def _quad_curve(self) -> None:
        state = self.state
        for cx, cy, x, y in self._groups(4):
            self.sink.quad_to(cx, cy, x, y)
            state.control_point = (cx, cy)
            state.cursor = (x, y)
        state.in_path = True

    def _smooth_quad_curve(self) -> None:
        state = self.state
        for x, y in self._groups(2):
            cx, cy = self._reflected_control_point(CommandFamily.QUAD)
            self.sink.quad_to(cx, cy, x, y)
            state.control_point = (cx, cy)
            state.cursor = (x, y)
            state.last_family = CommandFamily.QUAD
        state.in_path = True

    def _elliptical_arc(self) -> None:
        state = self.state
        for rx, ry, rotation, large_arc, sweep, x, y in self._groups(7):
            if (x, y) == state.cursor:
                # arc to the current point draws nothing
                continue
            curves = None
            if rx != 0 and ry != 0:
                curves = BezierCurve.arc_to_cubic_curves(
                    state.cursor,
                    rx,
                    ry,
                    rotation,
                    large_arc != 0,
                    sweep != 0,
                    (x, y),
                    self.config.arc_max_segment_angle,
                )
            if curves is None:
                # zero radius or no finite ellipse: straight line
                logger.debug("Drawing arc to (%s, %s) as line", x, y)
                self.sink.line_to(x, y)
            else:
                for curve in curves.tolist():
                    (c1x, c1y), (c2x, c2y), (ex, ey) = curve[1:]
                    self.sink.cubic_to(c1x, c1y, c2x, c2y, ex, ey)
            state.cursor = (x, y)
        state.in_path = True

    def _close_path(self) -> None:
        state = self.state
        if state.in_path:
            self.sink.close_path()
            state.cursor = state.path_start
            state.in_path = False


def compile_path(path_string: str, sink: AvDrawingSink, error_mode: ErrorMode = ErrorMode.IGNORE) -> None:
    """Translate the _path_string_ and draw it to the _sink_ using a fresh parser.

    Example:
        "M75 0, 0 200, 150 200 Z" draws move_to(75, 0), line_to(0, 200), line_to(150, 200), close_path()
    """
    AvSvgPathParser(sink, error_mode=error_mode).compile_path(path_string)
