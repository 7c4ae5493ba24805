"""Test module for avsvg.geom

The tests are run using pytest.
"""

from avsvg.geom import AvBox, GeomMath

###############################################################################
# GeomMath Tests
###############################################################################


class TestGeomMath:
    """Test class for GeomMath functionality."""

    def test_transform_point_identity(self):
        """Test point transformation with identity matrix."""
        assert GeomMath.transform_point([1, 0, 0, 1, 0, 0], (10.0, 20.0)) == (10.0, 20.0)

    def test_transform_point_scale_translate(self):
        """Test point transformation with scaling and translation."""
        result = GeomMath.transform_point([2, 0, 0, 3, 5.0, 10.0], (10.0, 20.0))

        assert result == (25.0, 70.0)

    def test_transform_point_rotation(self):
        """Test point transformation with scaling, rotation, and translation."""
        # x' = 0*10 + (-2)*20 + 5 = -35
        # y' = 2*10 + 0*20 + 10 = 30
        result = GeomMath.transform_point([0, -2, 2, 0, 5.0, 10.0], (10.0, 20.0))

        assert result == (-35.0, 30.0)
        assert all(isinstance(value, float) for value in result)


###############################################################################
# AvBox Tests
###############################################################################


class TestAvBox:
    """Test class for AvBox functionality."""

    def test_normalization(self):
        """Swapped min/max values are normalized."""
        box = AvBox(10, 20, 0, 5)

        assert box.extent == (0, 5, 10, 20)
        assert box.width == 10
        assert box.height == 15

    def test_union(self):
        """Union contains both boxes."""
        box = AvBox(0, 0, 1, 1).union(AvBox(-1, 0.5, 0.5, 3))

        assert box.extent == (-1, 0, 1, 3)

    def test_from_extent(self):
        """Creation from a fontTools style extent."""
        box = AvBox.from_extent((1, 2, 3, 4))

        assert (box.xmin, box.ymin, box.xmax, box.ymax) == (1, 2, 3, 4)
        assert box == AvBox(3, 4, 1, 2)
