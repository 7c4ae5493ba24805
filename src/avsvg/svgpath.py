"""Handling Paths for SVG"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Union

from avsvg.common import ErrorMode
from avsvg.parser import AvSvgPathParser
from avsvg.sink import AvDrawingSink, AvTransformSink


class AvSvgPathWriter(AvDrawingSink):
    """
    Drawing sink serializing the primitives into an SVG path string using absolute commands.

    Numbers are written in their shortest exact form (without a trailing ".0") after being
    rounded by the optional _round_func_, e.g. "M10 20 L30 40 C1 2 3 4 5 6 Q1 2 3 4 Z".
    """

    def __init__(self, round_func: Optional[Callable[[float], float]] = None):
        self._round_func = round_func
        self._commands: List[str] = []

    def _append(self, command_letter: str, *values: float) -> None:
        if self._round_func:
            values = tuple(self._round_func(value) for value in values)
        self._commands.append(command_letter + " ".join(self.format_number(value) for value in values))

    @staticmethod
    def format_number(value: float) -> str:
        """Return the shortest string which reads back as the same float, e.g. "10" for 10.0."""
        text = repr(float(value))
        if text.endswith(".0"):
            text = text[:-2]
        return text

    def move_to(self, x: float, y: float) -> None:
        self._append("M", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._append("L", x, y)

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
        self._append("C", c1x, c1y, c2x, c2y, x, y)

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._append("Q", cx, cy, x, y)

    def close_path(self) -> None:
        self._append("Z")

    @property
    def path_string(self) -> str:
        """The SVG path string of all primitives written so far."""
        return " ".join(self._commands)

    def reset(self) -> None:
        """Clear the written commands."""
        self._commands = []


class AvSvgPath:
    """
    This class provides a collection of static methods for manipulation of SVG-paths.
    All of them compile the given path string, so the results only contain the
    absolute commands M, L, C, Q and Z: relative coordinates are resolved,
    H/V become L, S/T become C/Q with explicit control points and arcs become cubic curves.
    """

    @staticmethod
    def beautify_commands(
        path_string: str,
        round_func: Optional[Callable[[float], float]] = None,
        error_mode: ErrorMode = ErrorMode.IGNORE,
    ) -> str:
        """
        Takes the given _path_string_ and rounds (mathematical) each point of the path
            by using the given _round_func_.

        Args:
            path_string (str): a SVG path string
            round_func (Optional[Callable], optional):
                a function that takes a float and returns a float. Defaults to None.
            error_mode (ErrorMode, optional): reaction on unknown commands. Defaults to ErrorMode.IGNORE.

        Returns:
            str: the beautified path_string
        """
        writer = AvSvgPathWriter(round_func)
        AvSvgPathParser(writer, error_mode=error_mode).compile_path(path_string)
        return writer.path_string

    @staticmethod
    def convert_relative_to_absolute(path_string: str) -> str:
        """Take the given SVG _path_string_ and convert it into absolute commands.
        The representation (i.e. geometry) of the path is still the same.
        Use this function before doing a transform on the string level.

        Args:
            path_string (str): SVG path string input

        Returns:
            str: path_string using absolute coordinates
        """
        return AvSvgPath.beautify_commands(path_string)

    @staticmethod
    def transform_path_string(path_string: str, affine_trafo: Sequence[Union[int, float]]) -> str:
        """Transform the given SVG-_path_string_ by using the given _affine_trafo_.

        The given _affine_trafo_ is a list of 6 floats, performing an affine transformation.
        The transformation is defined as:
            | x' | = | a00 a01 b0 |   | x |
            | y' | = | a10 a11 b1 | * | y |
            | 1  | = |  0   0  1  |   | 1 |
        with
            affine_trafo = [a00, a01, a10, a11, b0, b1]

        Args:
            path_string (str): SVG-path-string input (absolute or relative coordinates)
            affine_trafo (List[float]): Affine transformation

        Returns:
            str: the transformed _path_string_
        """
        writer = AvSvgPathWriter()
        AvSvgPathParser(AvTransformSink(writer, affine_trafo)).compile_path(path_string)
        return writer.path_string
