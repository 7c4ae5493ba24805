"""Bezier curve and elliptical arc utilities for SVG path compiling."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Arcs are split into segments of at most this angle (degrees) before converting them into cubics
ARC_MAX_SEGMENT_ANGLE: float = 90.0
_ARC_SEGMENT_COUNT_EPS: float = 1.0e-9


class BezierCurve:
    """Class to handle quadratic and cubic Bezier curve operations.

    Provides control point reflection for smooth curves, the conversion of
    elliptical arcs into cubic Bezier curves and NumPy based polygonization.
    """

    @staticmethod
    def reflect_point(point: Tuple[float, float], about: Tuple[float, float]) -> Tuple[float, float]:
        """Reflect _point_ about the point _about_, i.e. return 2 * about - point."""
        return 2.0 * about[0] - point[0], 2.0 * about[1] - point[1]

    @classmethod
    def polygonize_cubic_curve(
        cls, points: Union[Sequence[Tuple[float, float]], NDArray[np.float64]], steps: int
    ) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve into line segments.

        Args:
            points: Control points as Sequence[Tuple[float, float]] or NDArray[np.float64]
                    Must contain exactly 4 points: start, control1, control2, end
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 3) containing the polygonized points (x, y, type=3.0)
            First and last point are of type 0.0
        """
        points_array = np.array(points, dtype=np.float64)
        t = np.linspace(0, 1, steps + 1, dtype=np.float64)

        # Cubic Bezier basis functions
        omt = 1 - t
        omt2 = omt**2
        omt3 = omt2 * omt
        t2 = t**2
        t3 = t2 * t

        result = np.empty((steps + 1, 3), dtype=np.float64)
        result[:, :2] = (
            np.outer(omt3, points_array[0])
            + np.outer(3 * omt2 * t, points_array[1])
            + np.outer(3 * omt * t2, points_array[2])
            + np.outer(t3, points_array[3])
        )
        result[:, 2] = 3.0
        result[0, 2] = 0.0
        result[-1, 2] = 0.0
        return result

    @classmethod
    def polygonize_quadratic_curve(
        cls, points: Union[Sequence[Tuple[float, float]], NDArray[np.float64]], steps: int
    ) -> NDArray[np.float64]:
        """
        Polygonize a quadratic Bezier curve into line segments.

        Args:
            points: Control points as Sequence[Tuple[float, float]] or NDArray[np.float64]
                    Must contain exactly 3 points: start, control, end
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 3) containing the polygonized points (x, y, type=2.0)
            First and last point are of type 0.0
        """
        points_array = np.array(points, dtype=np.float64)
        t = np.linspace(0, 1, steps + 1, dtype=np.float64)

        # Quadratic Bezier basis functions
        omt = 1 - t

        result = np.empty((steps + 1, 3), dtype=np.float64)
        result[:, :2] = (
            np.outer(omt**2, points_array[0]) + np.outer(2 * omt * t, points_array[1]) + np.outer(t**2, points_array[2])
        )
        result[:, 2] = 2.0
        result[0, 2] = 0.0
        result[-1, 2] = 0.0
        return result

    @staticmethod
    def ellipse_arc_to_cubic_curves(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        center: Tuple[float, float],
        rx: float,
        ry: float,
        phi: float,
        eta: float,
        eta_delta: float,
        max_segment_angle: float = ARC_MAX_SEGMENT_ANGLE,
    ) -> NDArray[np.float64]:
        """Approximate an arc given in center parameterization by a sequence of cubic Bezier curves.

        The arc is A(a) = R(phi) @ [rx * cos(a), ry * sin(a)] + center for a in [eta, eta + eta_delta].
        It is split into segments of at most _max_segment_angle_ degrees, each segment from eta_1 to eta_2
        is approximated by
            P0 = A(eta_1)
            P1 = P0 + alpha * A'(eta_1)
            P2 = P3 - alpha * A'(eta_2)
            P3 = A(eta_2)
        with the standard handle length alpha = 4 / 3 * tan((eta_2 - eta_1) / 4),
        which makes the curve meet the arc at its midpoint.

        Args:
            center: center of the ellipse
            rx, ry: radii of the ellipse
            phi: rotation of the ellipse's x-axis in radians
            eta: start angle in radians
            eta_delta: swept angle in radians (negative for clockwise)
            max_segment_angle: maximum angle of one segment in degrees

        Returns:
            NDArray[np.float64] of shape (n, 4, 2): n cubic curves (start, control1, control2, end)
        """
        rotation = np.array([[math.cos(phi), -math.sin(phi)], [math.sin(phi), math.cos(phi)]], dtype=np.float64)
        center_array = np.array(center, dtype=np.float64)

        def arc(angle: float) -> NDArray[np.float64]:
            return rotation @ np.array([rx * math.cos(angle), ry * math.sin(angle)]) + center_array

        def arc_derivative(angle: float) -> NDArray[np.float64]:
            return rotation @ np.array([-rx * math.sin(angle), ry * math.cos(angle)])

        segment_count = max(1, math.ceil(abs(eta_delta) / math.radians(max_segment_angle) - _ARC_SEGMENT_COUNT_EPS))
        etas = np.linspace(eta, eta + eta_delta, segment_count + 1)

        curves = np.empty((segment_count, 4, 2), dtype=np.float64)
        for i, (eta_1, eta_2) in enumerate(zip(etas[:-1], etas[1:])):
            alpha = 4.0 / 3.0 * math.tan((eta_2 - eta_1) / 4)
            p0 = arc(eta_1)
            p3 = arc(eta_2)
            curves[i, 0] = p0
            curves[i, 1] = p0 + alpha * arc_derivative(eta_1)
            curves[i, 2] = p3 - alpha * arc_derivative(eta_2)
            curves[i, 3] = p3
        return curves

    @staticmethod
    def arc_to_cubic_curves(
        # pylint: disable=too-many-arguments,too-many-positional-arguments,too-many-locals
        start: Tuple[float, float],
        rx: float,
        ry: float,
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool,
        end: Tuple[float, float],
        max_segment_angle: float = ARC_MAX_SEGMENT_ANGLE,
    ) -> Optional[NDArray[np.float64]]:
        """Convert an SVG elliptical arc (endpoint parameterization) into cubic Bezier curves.

        Follows the SVG arc implementation notes
        (https://www.w3.org/TR/SVG/implnote.html#ArcImplementationNotes):
        the radii are scaled up if they are too small to reach the endpoint.
        The equations are evaluated on the unit circle (coordinates divided by the radii)
        so large or tiny values do not overflow.

        Args:
            start: current point
            rx, ry: radii (their sign is ignored, both must be non-zero)
            x_axis_rotation: rotation of the ellipse's x-axis in degrees
            large_arc: large-arc-flag
            sweep: sweep-flag (True = positive angle direction)
            end: endpoint of the arc
            max_segment_angle: maximum angle of one cubic segment in degrees

        Returns:
            NDArray[np.float64] of shape (n, 4, 2), empty (0, 4, 2) if start equals end.
            None if the arc has no finite center parameterization, callers draw a straight line then.
        """
        if start[0] == end[0] and start[1] == end[1]:
            return np.empty((0, 4, 2), dtype=np.float64)
        if not all(math.isfinite(value) for value in (*start, *end, rx, ry, x_axis_rotation)):
            return None

        rx, ry = abs(rx), abs(ry)
        phi = math.radians(x_axis_rotation)
        cos_phi, sin_phi = math.cos(phi), math.sin(phi)

        # Eq 5.1, divided by the radii
        dx2 = start[0] / 2 - end[0] / 2
        dy2 = start[1] / 2 - end[1] / 2
        u = (cos_phi * dx2 + sin_phi * dy2) / rx
        v = (-sin_phi * dx2 + cos_phi * dy2) / ry
        lam = math.hypot(u, v)
        if not math.isfinite(lam) or lam == 0.0:
            return None

        # scale radii (Eq 6.2)
        if lam > 1:
            rx *= lam
            ry *= lam
            u /= lam
            v /= lam
            lam = 1.0

        # Eq 5.2: center relative to the unit circle is coef * (v, -u)
        coef = math.sqrt(max(0.0, (1.0 - lam) * (1.0 + lam))) / lam
        if large_arc == sweep:
            coef = -coef
        cxp = coef * rx * v
        cyp = -coef * ry * u

        # Eq 5.3
        cx = cos_phi * cxp - sin_phi * cyp + (start[0] / 2 + end[0] / 2)
        cy = sin_phi * cxp + cos_phi * cyp + (start[1] / 2 + end[1] / 2)

        # Eq 5.5-6
        theta_1 = math.atan2(v + coef * u, u - coef * v)
        theta_2 = math.atan2(-v + coef * u, -u - coef * v)
        delta_theta = theta_2 - theta_1
        if sweep and delta_theta < 0:
            delta_theta += 2 * math.pi
        elif not sweep and delta_theta > 0:
            delta_theta -= 2 * math.pi

        if not all(math.isfinite(value) for value in (cx, cy, rx, ry, delta_theta)):
            return None
        with np.errstate(over="ignore", invalid="ignore"):
            curves = BezierCurve.ellipse_arc_to_cubic_curves(
                (cx, cy), rx, ry, phi, theta_1, delta_theta, max_segment_angle
            )
        if not np.all(np.isfinite(curves)):
            return None
        # pin the exact start and end points
        curves[0, 0] = start
        curves[-1, 3] = end
        return curves
