"""Tokenizing the numeric argument runs of SVG path commands"""

from __future__ import annotations

import re
from typing import ClassVar, List, Tuple

from avsvg.common import ParseFailureError

# Suffixes sometimes applied to the width and height attributes of the svg element.
UNIT_SUFFIXES: Tuple[str, ...] = ("cm", "mm", "px", "pt")


class NumberTokenizer:
    """
    This class provides a collection of static methods to split the argument text
    of a path command into floating point values.

    Rules for number boundaries:
        - a number run consists of digits, decimal points, exponent markers (e/E)
          and a sign directly following an exponent marker
        - a run may start with a minus sign, so "1-2" are two numbers
        - any other character is a separator
        - a second decimal point within one number starts the next number,
          i.e. "1.5.5" is read as "1.5 .5"
    """

    # Definition of a number run (a lone "-" is matched to be reported as failure):
    NUMBER_RUN: ClassVar[re.Pattern] = re.compile(r"-?(?:[0-9.]|[eE][-+]?)+|-")

    @staticmethod
    def trim_suffixes(text: str) -> str:
        """Remove the unit suffixes from _text_ if it does not end in a digit.

        Args:
            text (str): a number string, e.g. "210mm"

        Returns:
            str: the number string without unit suffix
        """
        if not text or text[-1].isdigit():
            return text
        for suffix in UNIT_SUFFIXES:
            if text.endswith(suffix):
                text = text[: -len(suffix)]
        return text

    @staticmethod
    def parse_float(text: str) -> float:
        """Convert _text_ into a float after stripping unit suffixes.

        Raises:
            ParseFailureError: if _text_ is not a valid number
        """
        value = NumberTokenizer.trim_suffixes(text)
        try:
            return float(value)
        except ValueError as e:
            raise ParseFailureError(f"Invalid number {text!r}") from e

    @staticmethod
    def parse_length(text: str) -> float:
        """Parse a length attribute value like "210mm" or " 12.5px " into a float."""
        return NumberTokenizer.parse_float(text.strip())

    @staticmethod
    def read_float(number_run: str) -> List[float]:
        """Read all numbers of a single _number_run_.

        Every decimal point after the first one terminates the current number
        and starts the next one at that decimal point.

        Args:
            number_run (str): a run like "1.5" or "1.5.5" (no separators)

        Returns:
            List[float]: the values, e.g. [1.5, 0.5] for "1.5.5"
        """
        values: List[float] = []
        start = 0
        seen_decimal_point = False
        for i, char in enumerate(number_run):
            if char != ".":
                continue
            if not seen_decimal_point:
                seen_decimal_point = True
                continue
            values.append(NumberTokenizer.parse_float(number_run[start:i]))
            start = i
        values.append(NumberTokenizer.parse_float(number_run[start:]))
        return values

    @staticmethod
    def tokenize(text: str) -> List[float]:
        """Split the argument _text_ of one path command into floats.

        Args:
            text (str): argument text without the leading command letter, e.g. " 10,20-5.5.5"

        Returns:
            List[float]: the values in order of appearance, e.g. [10.0, 20.0, -5.5, 0.5]

        Raises:
            ParseFailureError: if a number run does not form a valid number
        """
        values: List[float] = []
        for match in NumberTokenizer.NUMBER_RUN.finditer(text):
            values.extend(NumberTokenizer.read_float(match.group()))
        return values
