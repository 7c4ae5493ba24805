"""Splitting SVG path strings into command segments"""

from __future__ import annotations

from typing import ClassVar, Iterator, List, Tuple


class PathSplitter:
    """Utility class for splitting a path string into (command-letter, argument-text) segments."""

    # Letters which are part of a number and never start a command
    EXPONENT_MARKERS: ClassVar[str] = "eE"

    @staticmethod
    def is_command_letter(char: str) -> bool:
        """Return True if _char_ starts a new command segment."""
        return char.isalpha() and char not in PathSplitter.EXPONENT_MARKERS

    @staticmethod
    def iter_segments(path_string: str) -> Iterator[Tuple[str, str]]:
        """Yield the (command-letter, argument-text) segments of _path_string_ in order.

        The argument text is every character up to (not including) the next command letter.
        Text in front of the first command letter is ignored.
        """
        last_index = -1
        for i, char in enumerate(path_string):
            if PathSplitter.is_command_letter(char):
                if last_index != -1:
                    yield path_string[last_index], path_string[last_index + 1 : i]
                last_index = i
        if last_index != -1:
            yield path_string[last_index], path_string[last_index + 1 :]

    @staticmethod
    def split_segments(path_string: str) -> List[Tuple[str, str]]:
        """Return all (command-letter, argument-text) segments of _path_string_.

        Example:
            "M75 0, 0 200Z" -> [("M", "75 0, 0 200"), ("Z", "")]
        """
        return list(PathSplitter.iter_segments(path_string))
