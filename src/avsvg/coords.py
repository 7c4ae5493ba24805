"""Resolving relative path coordinates into absolute ones"""

from __future__ import annotations

from typing import List, Sequence, Tuple


class CoordinateResolver:
    """Static helpers converting relative argument blocks into absolute coordinates.

    All methods return a new list and leave the given values untouched.
    """

    @staticmethod
    def points_to_abs(values: Sequence[float], group_size: int, cursor: Tuple[float, float]) -> List[float]:
        """Convert a block of relative (x, y) pairs into absolute coordinates.

        Every pair of a group is relative to the start point of the group.
        The start point of the next group is the last pair of the previous group.

        Args:
            values (Sequence[float]): relative values, a multiple of _group_size_
            group_size (int): number of values of one group (even)
            cursor (Tuple[float, float]): start point of the first group

        Returns:
            List[float]: absolute values
        """
        result = list(values)
        last_x, last_y = cursor
        for j in range(0, len(result) - group_size + 1, group_size):
            for i in range(j, j + group_size, 2):
                result[i] += last_x
                result[i + 1] += last_y
            last_x, last_y = result[j + group_size - 2], result[j + group_size - 1]
        return result

    @staticmethod
    def values_to_abs(values: Sequence[float], start: float) -> List[float]:
        """Convert relative single-axis values (H/V commands) into absolute ones by a running sum."""
        result: List[float] = []
        last = start
        for value in values:
            last += value
            result.append(last)
        return result

    @staticmethod
    def arc_to_abs(values: Sequence[float], cursor: Tuple[float, float]) -> List[float]:
        """Convert relative arc groups (rx ry rotation large-arc sweep x y) into absolute ones.

        Only the endpoint of each group is translated, radii, rotation and flags stay as they are.
        """
        result = list(values)
        last_x, last_y = cursor
        for j in range(0, len(result) - 6, 7):
            result[j + 5] += last_x
            result[j + 6] += last_y
            last_x, last_y = result[j + 5], result[j + 6]
        return result
