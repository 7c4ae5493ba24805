"""Test module for avsvg.fonttools

The tests are run using pytest.
Path strings are drawn to the RecordingPen and BoundsPen of fontTools.
"""

import pytest
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen

from avsvg.common import ErrorMode, UnknownCommandError
from avsvg.fonttools import AvPenSink, draw_svg_path


def test_closed_contour():
    """A closed polygon is drawn as one closed contour."""
    pen = RecordingPen()
    draw_svg_path("M75 0, 0 200, 150 200 Z", pen)
    assert pen.value == [
        ("moveTo", ((75, 0),)),
        ("lineTo", ((0, 200),)),
        ("lineTo", ((150, 200),)),
        ("closePath", ()),
    ]


def test_open_contours_are_ended():
    """Open contours are ended by endPath."""
    pen = RecordingPen()
    draw_svg_path("M0 0 L10 0 M5 5 L6 6", pen)
    assert pen.value == [
        ("moveTo", ((0, 0),)),
        ("lineTo", ((10, 0),)),
        ("endPath", ()),
        ("moveTo", ((5, 5),)),
        ("lineTo", ((6, 6),)),
        ("endPath", ()),
    ]


def test_drawing_after_close_starts_contour():
    """After closing a contour the next one starts at the subpath start."""
    pen = RecordingPen()
    draw_svg_path("M0 0 L10 0 Z L5 5", pen)
    assert pen.value == [
        ("moveTo", ((0, 0),)),
        ("lineTo", ((10, 0),)),
        ("closePath", ()),
        ("moveTo", ((0, 0),)),
        ("lineTo", ((5, 5),)),
        ("endPath", ()),
    ]


def test_curves():
    """Cubic and quadratic curves map onto curveTo and qCurveTo."""
    pen = RecordingPen()
    draw_svg_path("M0 0 C0 10 10 10 10 0 q5 -5 10 0 z", pen)
    assert pen.value == [
        ("moveTo", ((0, 0),)),
        ("curveTo", ((0, 10), (10, 10), (10, 0))),
        ("qCurveTo", ((15, -5), (20, 0))),
        ("closePath", ()),
    ]


def test_bounds_pen():
    """The bounds computed by fontTools include the curve extrema."""
    pen = BoundsPen(None)
    draw_svg_path("M0 0 C0 10 10 10 10 0 Z", pen)
    assert pen.bounds == pytest.approx((0, 0, 10, 7.5))


def test_error_mode():
    """The error mode is passed to the parser."""
    with pytest.raises(UnknownCommandError):
        draw_svg_path("M0 0 X1 1", RecordingPen(), ErrorMode.STRICT)


def test_pen_sink_without_move():
    """Drawing without moveto starts a contour at the origin."""
    pen = RecordingPen()
    sink = AvPenSink(pen)
    sink.line_to(1, 1)
    sink.end_path()
    sink.end_path()
    assert pen.value == [("moveTo", ((0, 0),)), ("lineTo", ((1, 1),)), ("endPath", ())]
