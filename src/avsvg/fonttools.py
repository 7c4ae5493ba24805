"""Classes related to the FontTools library."""

from __future__ import annotations

from typing import Optional, Tuple

from fontTools.pens.basePen import AbstractPen

from avsvg.common import ErrorMode
from avsvg.parser import AvSvgPathParser
from avsvg.sink import AvDrawingSink


class AvPenSink(AvDrawingSink):
    """
    Drawing sink forwarding the primitives to a FontTools pen
    (e.g. RecordingPen, BoundsPen, TTGlyphPen or a svgPathPen).

    FontTools pens need each contour to be ended by closePath() or endPath().
    An open contour is ended by endPath() when a new one starts, drawing after
    a close starts a new contour at the current point.
    Call end_path() after the last primitive to end a remaining open contour.
    """

    def __init__(self, pen: AbstractPen):
        self.pen = pen
        self._contour_open = False
        self._current_point: Tuple[float, float] = (0.0, 0.0)
        self._start_point: Tuple[float, float] = (0.0, 0.0)

    def _ensure_contour(self) -> None:
        if not self._contour_open:
            self.pen.moveTo(self._current_point)
            self._start_point = self._current_point
            self._contour_open = True

    def move_to(self, x: float, y: float) -> None:
        self.end_path()
        self.pen.moveTo((x, y))
        self._contour_open = True
        self._current_point = self._start_point = (x, y)

    def line_to(self, x: float, y: float) -> None:
        self._ensure_contour()
        self.pen.lineTo((x, y))
        self._current_point = (x, y)

    def cubic_to(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> None:
        self._ensure_contour()
        self.pen.curveTo((c1x, c1y), (c2x, c2y), (x, y))
        self._current_point = (x, y)

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._ensure_contour()
        self.pen.qCurveTo((cx, cy), (x, y))
        self._current_point = (x, y)

    def close_path(self) -> None:
        if self._contour_open:
            self.pen.closePath()
            self._contour_open = False
        self._current_point = self._start_point

    def end_path(self) -> None:
        """End an open contour without closing it."""
        if self._contour_open:
            self.pen.endPath()
            self._contour_open = False


def draw_svg_path(path_string: str, pen: AbstractPen, error_mode: Optional[ErrorMode] = None) -> None:
    """
    Draw the SVG _path_string_ to the FontTools _pen_.

    Args:
        path_string (str): SVG path string
        pen (AbstractPen): FontTools pen to draw to
        error_mode (ErrorMode, optional): reaction on unknown commands. Defaults to ErrorMode.IGNORE.
    """
    sink = AvPenSink(pen)
    AvSvgPathParser(sink, error_mode=error_mode).compile_path(path_string)
    sink.end_path()
