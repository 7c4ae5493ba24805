"""Test module for avsvg.sink

The tests are run using pytest.
"""

import numpy as np
import pytest

from avsvg.geom import AvBox
from avsvg.parser import compile_path
from avsvg.sink import AvBoundsSink, AvPolylineSink, AvRecordingSink, AvTransformSink


class TestAvRecordingSink:
    """Tests for AvRecordingSink"""

    def test_calls_commands_points(self):
        """All primitives are recorded in three representations"""
        sink = AvRecordingSink()
        compile_path("M0 0 Q5 10 10 0 C10 5 20 5 20 0 Z", sink)
        assert sink.calls == [
            ("move_to", (0, 0)),
            ("quad_to", (5, 10, 10, 0)),
            ("cubic_to", (10, 5, 20, 5, 20, 0)),
            ("close_path", ()),
        ]
        assert sink.commands == ["M", "Q", "C", "Z"]
        np.testing.assert_array_equal(
            sink.points,
            [[0, 0, 0], [5, 10, 2], [10, 0, 0], [10, 5, 3], [20, 5, 3], [20, 0, 0]],
        )

    def test_empty_and_reset(self):
        """An empty sink has an empty (0, 3) point array"""
        sink = AvRecordingSink()
        assert sink.points.shape == (0, 3)
        sink.line_to(1, 2)
        sink.reset()
        assert not sink.calls
        assert not sink.commands
        assert sink.points.shape == (0, 3)


class TestAvBoundsSink:
    """Tests for AvBoundsSink"""

    def test_nothing_drawn(self):
        """Without primitives there are no bounds"""
        assert AvBoundsSink().bounds is None

    def test_lines(self):
        """Bounds of a polygon"""
        sink = AvBoundsSink()
        compile_path("M75 0, 0 200, 150 200 Z", sink)
        assert sink.bounds.extent == (0, 0, 150, 200)

    def test_several_subpaths(self):
        """The bounds are the union of all subpaths"""
        sink = AvBoundsSink()
        compile_path("M0 0 L1 1 M-5 10 Q-4 14 -3 10", sink)
        assert isinstance(sink.bounds, AvBox)
        assert sink.bounds.extent == pytest.approx((-5, 0, 1, 12))

    def test_cubic_uses_extrema(self):
        """Curve bounds are tight, control points are not included"""
        sink = AvBoundsSink()
        compile_path("M0 0 C0 10 10 10 10 0", sink)
        assert sink.bounds.extent == pytest.approx((0, 0, 10, 7.5))

    def test_quadratic_uses_extrema(self):
        """Quadratic curve bounds"""
        sink = AvBoundsSink()
        compile_path("M0 0 Q5 10 10 0", sink)
        assert sink.bounds.extent == pytest.approx((0, 0, 10, 5))

    def test_circle(self):
        """An arc circle has bounds close to the exact circle"""
        sink = AvBoundsSink()
        compile_path("M0 0 A10 10 0 1 1 0 20 A10 10 0 1 1 0 0 Z", sink)
        assert sink.bounds.extent == pytest.approx((-10, 0, 10, 20), abs=1e-6)

    def test_close_resets_current_point(self):
        """Curves after close start at the subpath start"""
        sink = AvBoundsSink()
        sink.move_to(0, 0)
        sink.line_to(100, 0)
        sink.close_path()
        sink.quad_to(0, -10, 0, 0)
        assert sink.bounds.extent == pytest.approx((0, -5, 100, 0))


class TestAvTransformSink:
    """Tests for AvTransformSink"""

    def test_translation_and_scaling(self):
        """All points are transformed, close is forwarded"""
        recorder = AvRecordingSink()
        compile_path("M1 2 L3 4 Q5 6 7 8 C1 1 2 2 3 3 Z", AvTransformSink(recorder, [2, 0, 0, 2, 10, 20]))
        assert recorder.calls == [
            ("move_to", (12, 24)),
            ("line_to", (16, 28)),
            ("quad_to", (20, 32, 24, 36)),
            ("cubic_to", (12, 22, 14, 24, 16, 26)),
            ("close_path", ()),
        ]

    def test_rotation(self):
        """Rotation by 90 degrees"""
        recorder = AvRecordingSink()
        AvTransformSink(recorder, [0, -1, 1, 0, 0, 0]).line_to(1, 0)
        assert recorder.calls == [("line_to", (0, 1))]


class TestAvPolylineSink:
    """Tests for AvPolylineSink"""

    def test_quadratic_curve(self):
        """Curves become line segments ending exactly at the curve end"""
        recorder = AvRecordingSink()
        compile_path("M0 0 Q5 10 10 0 Z", AvPolylineSink(recorder, steps=2))
        assert recorder.calls == [
            ("move_to", (0, 0)),
            ("line_to", (5, 5)),
            ("line_to", (10, 0)),
            ("close_path", ()),
        ]

    def test_cubic_curve(self):
        """Number of line segments"""
        recorder = AvRecordingSink()
        compile_path("M0 0 C0 10 10 10 10 0 L20 0", AvPolylineSink(recorder))
        assert recorder.commands == ["M"] + ["L"] * 11
        assert recorder.calls[5] == ("line_to", pytest.approx((5, 7.5)))

    def test_invalid_steps(self):
        """At least one step is needed"""
        with pytest.raises(ValueError):
            AvPolylineSink(AvRecordingSink(), steps=0)
