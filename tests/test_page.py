"""Test module for avsvg.page

The tests are run using pytest.
"""

import gzip

import pytest

from avsvg.common import ErrorMode, UnknownCommandError
from avsvg.page import AvSvgPage


@pytest.fixture(name="page")
def fixture_page():
    """A4 page with a path on the main layer and bounds on the debug layer."""
    page = AvSvgPage(210, 297)
    page.add_path("m10 10 h5 v5 z", fill="black")
    page.add_bounds("M0 0 Q5 10 10 0")
    return page


def test_main_layer_contains_compiled_path(page):
    """Paths are written with absolute commands."""
    svg = page.tostring()
    assert 'd="M10 10 L15 10 L15 15 Z"' in svg
    assert 'inkscape:label="main"' in svg
    assert 'inkscape:label="debug"' not in svg
    assert 'width="210mm"' in svg
    assert 'viewBox="0 0 210 297"' in svg


def test_debug_layer(page):
    """The debug layer is only written on request."""
    svg = page.tostring(include_debug_layer=True)
    assert 'inkscape:label="debug"' in svg
    assert "<rect" in svg
    assert svg.index('inkscape:label="debug"') < svg.index('inkscape:label="main"')


def test_tostring_does_not_modify_page(page):
    """Writing the page twice gives the same result."""
    assert page.tostring(include_debug_layer=True) == page.tostring(include_debug_layer=True)
    assert page.tostring() == page.tostring()


def test_add_bounds_of_empty_path():
    """Nothing is added for a path without primitives."""
    assert AvSvgPage(100, 100).add_bounds("") is None


def test_viewbox():
    """The viewbox can be set explicitly."""
    page = AvSvgPage(100, 50, viewbox=(0, 0, 2, 1))
    assert 'viewBox="0 0 2 1"' in page.tostring()


def test_error_mode():
    """Unknown commands fail in strict mode."""
    page = AvSvgPage(100, 100, error_mode=ErrorMode.STRICT)
    with pytest.raises(UnknownCommandError):
        page.add_path("M0 0 X1 1")


def test_save_as(page, tmp_path):
    """Plain and compressed files."""
    svg_file = tmp_path / "page.svg"
    svgz_file = tmp_path / "page.svgz"

    page.save_as(str(svg_file), include_debug_layer=True, pretty=True)
    page.save_as(str(svgz_file), compressed=True)

    svg = svg_file.read_text(encoding="utf-8")
    assert "<svg" in svg
    assert 'inkscape:label="debug"' in svg
    svgz = gzip.decompress(svgz_file.read_bytes()).decode("utf-8")
    assert 'd="M10 10 L15 10 L15 15 Z"' in svgz
    assert 'inkscape:label="debug"' not in svgz
