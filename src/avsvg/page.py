"""SVG page writing compiled paths into SVG documents."""

from __future__ import annotations

import copy
import gzip
import io
from dataclasses import dataclass
from typing import Optional, Sequence

import svgwrite
import svgwrite.base
import svgwrite.container
from svgwrite.extensions import Inkscape

from avsvg.common import ErrorMode
from avsvg.parser import AvSvgPathParser
from avsvg.sink import AvBoundsSink
from avsvg.svgpath import AvSvgPathWriter


@dataclass
class AvSvgPage:
    """A page (canvas) described by SVG with a viewbox to draw inside.

    Contains groups/layers:
        - main   -- editable->locked=False  --  hidden->display="block"
        - debug  -- editable->locked=False  --  hidden->display="none"
    Paths added to the page are compiled, i.e. written using absolute M, L, C, Q, Z commands.
    """

    _inkscape: Inkscape  # extension to support layers

    drawing: svgwrite.Drawing
    main_layer: svgwrite.container.Group
    debug_layer: svgwrite.container.Group
    error_mode: ErrorMode

    def __init__(
        self,
        canvas_width_mm: float,
        canvas_height_mm: float,
        viewbox: Optional[Sequence[float]] = None,
        error_mode: ErrorMode = ErrorMode.IGNORE,
    ):
        """
        Initialize the SVG page with specified canvas and viewbox dimensions.

        Args:
            canvas_width_mm (float): The width of the canvas (=whole page) in millimeters.
            canvas_height_mm (float): The height of the canvas (=whole page) in millimeters.
            viewbox (Sequence[float], optional): (x, y, width, height) of the viewbox.
                Defaults to None = (0, 0, canvas_width_mm, canvas_height_mm).
            error_mode (ErrorMode, optional): reaction on unknown path commands. Defaults to ErrorMode.IGNORE.
        """
        if viewbox is None:
            viewbox = (0, 0, canvas_width_mm, canvas_height_mm)
        vb_x, vb_y, vb_width, vb_height = viewbox

        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(f"{canvas_width_mm}mm", f"{canvas_height_mm}mm"),
            viewBox=f"{vb_x:g} {vb_y:g} {vb_width:g} {vb_height:g}",
            profile="full",
        )
        self.error_mode = error_mode

        # Initialize Inkscape extension for layer support
        self._inkscape = Inkscape(self.drawing)
        self.main_layer = self._inkscape.layer(label="main", locked=False)
        self.debug_layer = self._inkscape.layer(label="debug", locked=False, display="none")

    def add_path(self, path_string: str, add_to_debug_layer: bool = False, **attributes) -> svgwrite.base.BaseElement:
        """Compile the _path_string_ and add it as path element to the main or debug layer.

        Args:
            path_string (str): SVG path string, relative/smooth/arc commands are allowed
            add_to_debug_layer (bool, optional): True if element should be added to debug layer. Defaults to False.
            **attributes: further SVG attributes like fill="black", stroke="none"

        Returns:
            svgwrite.base.BaseElement: the added path element
        """
        writer = AvSvgPathWriter()
        AvSvgPathParser(writer, error_mode=self.error_mode).compile_path(path_string)
        element = self.drawing.path(d=writer.path_string, **attributes)
        if add_to_debug_layer:
            return self.debug_layer.add(element)
        return self.main_layer.add(element)

    def add_bounds(self, path_string: str, **attributes) -> Optional[svgwrite.base.BaseElement]:
        """Add the bounding box of the _path_string_ as rectangle to the debug layer.

        Returns:
            svgwrite.base.BaseElement: the added rectangle, None if the path draws nothing
        """
        bounds_sink = AvBoundsSink()
        AvSvgPathParser(bounds_sink, error_mode=self.error_mode).compile_path(path_string)
        bounds = bounds_sink.bounds
        if bounds is None:
            return None
        attributes.setdefault("fill", "none")
        attributes.setdefault("stroke", "red")
        rect = self.drawing.rect(insert=(bounds.xmin, bounds.ymin), size=(bounds.width, bounds.height), **attributes)
        return self.debug_layer.add(rect)

    def _assemble(self, include_debug_layer: bool) -> svgwrite.Drawing:
        drawing = copy.deepcopy(self.drawing)
        if include_debug_layer:
            drawing.add(copy.deepcopy(self.debug_layer))
        drawing.add(copy.deepcopy(self.main_layer))
        return drawing

    def tostring(self, include_debug_layer: bool = False, pretty: bool = False, indent: int = 2) -> str:
        """Return the page as SVG document string."""
        svg_buffer = io.StringIO()
        self._assemble(include_debug_layer).write(svg_buffer, pretty=pretty, indent=indent)
        return svg_buffer.getvalue()

    def save_as(
        self,
        filename: str,
        include_debug_layer: bool = False,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ):
        """Save as SVG file

        Args:
            filename (str): path and filename
            include_debug_layer (bool, optional): True if file should contain debug_layer. Defaults to False.
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        output_data = self.tostring(include_debug_layer, pretty, indent).encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)

        with open(filename, "wb") as svg_file:
            svg_file.write(output_data)
