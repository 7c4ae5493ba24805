"""Drawing sinks receiving the primitives emitted by the path compiler.

AvDrawingSink is the abstract interface the compiler draws to. The sinks in
this module record the primitives, compute their bounds or forward them to
another sink after transforming or polygonizing them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from fontTools.misc.bezierTools import calcCubicBounds, calcQuadraticBounds
from numpy.typing import NDArray

from avsvg.bezier import BezierCurve
from avsvg.geom import AvBox, GeomMath

###############################################################################
# AvDrawingSink
###############################################################################


class AvDrawingSink(ABC):
    """Abstract consumer of the drawing primitives. All coordinates are absolute."""

    @abstractmethod
    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""

    @abstractmethod
    def line_to(self, x: float, y: float) -> None:
        """Draw a straight line from the current point to (x, y)."""

    @abstractmethod
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
        """Draw a cubic Bezier curve with control points (c1x, c1y), (c2x, c2y) to (x, y)."""

    @abstractmethod
    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Draw a quadratic Bezier curve with control point (cx, cy) to (x, y)."""

    @abstractmethod
    def close_path(self) -> None:
        """Close the current subpath."""


###############################################################################
# AvRecordingSink
###############################################################################


class AvRecordingSink(AvDrawingSink):
    """
    Records the drawing primitives.

    Access the plain calls via `.calls`, e.g. [("move_to", (0.0, 0.0)), ("close_path", ())].
    Additionally a compact representation is kept in `.commands` (M, L, C, Q, Z)
    and `.points`, a NDArray[np.float64] of shape (n, 3) = (x, y, type).
    Type is 0.0 for start/end point, 2.0 for quadratic, 3.0 for cubic control point.
    """

    def __init__(self):
        self._calls: List[Tuple[str, Tuple[float, ...]]] = []
        self._commands: List[str] = []
        self._points: List[Tuple[float, float, float]] = []

    def move_to(self, x: float, y: float) -> None:
        self._calls.append(("move_to", (x, y)))
        self._commands.append("M")
        self._points.append((x, y, 0.0))

    def line_to(self, x: float, y: float) -> None:
        self._calls.append(("line_to", (x, y)))
        self._commands.append("L")
        self._points.append((x, y, 0.0))

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
        self._calls.append(("cubic_to", (c1x, c1y, c2x, c2y, x, y)))
        self._commands.append("C")
        self._points.extend([(c1x, c1y, 3.0), (c2x, c2y, 3.0), (x, y, 0.0)])

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._calls.append(("quad_to", (cx, cy, x, y)))
        self._commands.append("Q")
        self._points.extend([(cx, cy, 2.0), (x, y, 0.0)])

    def close_path(self) -> None:
        self._calls.append(("close_path", ()))
        self._commands.append("Z")

    @property
    def calls(self) -> List[Tuple[str, Tuple[float, ...]]]:
        """Return the recorded calls as (method-name, arguments) tuples."""
        return self._calls

    @property
    def commands(self) -> List[str]:
        """Return the recorded commands as a list (uppercase commands)."""
        return self._commands

    @property
    def points(self) -> NDArray[np.float64]:
        """Return recorded points as an (n_points, 3) ndarray of float64."""
        return np.array(self._points, dtype=np.float64).reshape((-1, 3))

    def reset(self) -> None:
        """Clear recorded calls, commands and points."""
        self._calls = []
        self._commands = []
        self._points = []


###############################################################################
# AvBoundsSink
###############################################################################


class AvBoundsSink(AvDrawingSink):
    """Computes the exact bounding box of the drawn primitives (curve extrema, not control points)."""

    def __init__(self):
        self._bounds: Optional[AvBox] = None
        self._current_point: Tuple[float, float] = (0.0, 0.0)
        self._start_point: Tuple[float, float] = (0.0, 0.0)

    def _add_box(self, box: AvBox) -> None:
        self._bounds = box if self._bounds is None else self._bounds.union(box)

    def move_to(self, x: float, y: float) -> None:
        self._add_box(AvBox(x, y, x, y))
        self._current_point = self._start_point = (x, y)

    def line_to(self, x: float, y: float) -> None:
        self._add_box(AvBox(x, y, x, y))
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
        self._add_box(AvBox.from_extent(calcCubicBounds(self._current_point, (c1x, c1y), (c2x, c2y), (x, y))))
        self._current_point = (x, y)

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._add_box(AvBox.from_extent(calcQuadraticBounds(self._current_point, (cx, cy), (x, y))))
        self._current_point = (x, y)

    def close_path(self) -> None:
        self._current_point = self._start_point

    @property
    def bounds(self) -> Optional[AvBox]:
        """The bounding box of everything drawn so far, None if nothing was drawn."""
        return self._bounds


###############################################################################
# AvTransformSink
###############################################################################


class AvTransformSink(AvDrawingSink):
    """
    Forwards all primitives to another sink after applying an affine transformation.

    The transformation is given as [a00, a01, a10, a11, b0, b1], see GeomMath.transform_point.
    """

    def __init__(self, sink: AvDrawingSink, affine_trafo: Sequence[Union[int, float]]):
        self._sink = sink
        self._affine_trafo = affine_trafo

    def _transform(self, x: float, y: float) -> Tuple[float, float]:
        return GeomMath.transform_point(self._affine_trafo, (x, y))

    def move_to(self, x: float, y: float) -> None:
        self._sink.move_to(*self._transform(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._sink.line_to(*self._transform(x, y))

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
        self._sink.cubic_to(*self._transform(c1x, c1y), *self._transform(c2x, c2y), *self._transform(x, y))

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._sink.quad_to(*self._transform(cx, cy), *self._transform(x, y))

    def close_path(self) -> None:
        self._sink.close_path()


###############################################################################
# AvPolylineSink
###############################################################################


class AvPolylineSink(AvDrawingSink):
    """
    Forwards all primitives to another sink converting curves into line segments.

    Each curve is divided into _steps_ straight lines.
    """

    def __init__(self, sink: AvDrawingSink, steps: int = 10):
        if steps < 1:
            raise ValueError(f"Polygonize steps must be positive, got {steps}")
        self._sink = sink
        self._steps = steps
        self._current_point: Tuple[float, float] = (0.0, 0.0)
        self._start_point: Tuple[float, float] = (0.0, 0.0)

    def _lines_to(self, points: NDArray[np.float64]) -> None:
        # first point is the current point
        for x, y, _ in points[1:]:
            self._sink.line_to(float(x), float(y))

    def move_to(self, x: float, y: float) -> None:
        self._sink.move_to(x, y)
        self._current_point = self._start_point = (x, y)

    def line_to(self, x: float, y: float) -> None:
        self._sink.line_to(x, y)
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
        points = BezierCurve.polygonize_cubic_curve(
            [self._current_point, (c1x, c1y), (c2x, c2y), (x, y)], self._steps
        )
        points[-1, :2] = (x, y)
        self._lines_to(points)
        self._current_point = (x, y)

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        points = BezierCurve.polygonize_quadratic_curve([self._current_point, (cx, cy), (x, y)], self._steps)
        points[-1, :2] = (x, y)
        self._lines_to(points)
        self._current_point = (x, y)

    def close_path(self) -> None:
        self._sink.close_path()
        self._current_point = self._start_point
