"""Combiner that tracks the maximum aggregate value and where it occurs."""

from __future__ import annotations

from typing import Any, Optional


def _format_number(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


class RangedMaxCombiner:
    """Keeps the maximum aggregate value below a node and the range it spans.

    Besides the maximum, the combiner stores the left and right border of the
    range of points over which the maximum occurs. A border that is not valid
    means the range extends without limit in that direction. When several
    disjoint ranges share the maximum, the leftmost one is kept.
    """

    __slots__ = (
        "val",
        "left_border",
        "left_border_valid",
        "right_border",
        "right_border_valid",
    )

    def __init__(
        self,
        val: Any = 0,
        left_border: Any = 0,
        left_border_valid: bool = False,
        right_border: Any = 0,
        right_border_valid: bool = False,
    ) -> None:
        self.val = val
        self.left_border = left_border
        self.left_border_valid = left_border_valid
        self.right_border = right_border
        self.right_border_valid = right_border_valid

    def __repr__(self) -> str:
        return (
            f"RangedMaxCombiner(val={self.val!r}, "
            f"left_border={self.left_border!r}, left_border_valid={self.left_border_valid!r}, "
            f"right_border={self.right_border!r}, right_border_valid={self.right_border_valid!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangedMaxCombiner):
            return NotImplemented
        return (
            self.val == other.val
            and self.left_border == other.left_border
            and self.left_border_valid == other.left_border_valid
            and self.right_border == other.right_border
            and self.right_border_valid == other.right_border_valid
        )

    @staticmethod
    def _child_value(child: Optional["RangedMaxCombiner"]) -> Any:
        return 0 if child is None else child.get()

    def _take_left(self, my_point: Any, left: Optional["RangedMaxCombiner"]) -> None:
        """Adopt the maximum range of the left side, cut off at ``my_point``."""
        if left is not None:
            self.left_border = left.left_border
            self.left_border_valid = left.left_border_valid
            if left.right_border_valid:
                self.right_border = min(my_point, left.right_border)
            else:
                self.right_border = my_point
        else:
            self.left_border_valid = False
            self.right_border = my_point
        self.right_border_valid = True

    def _take_right(self, my_point: Any, right: Optional["RangedMaxCombiner"]) -> None:
        """Adopt the maximum range of the right side, cut off at ``my_point``."""
        if right is not None:
            self.right_border = right.right_border
            self.right_border_valid = right.right_border_valid
            if right.left_border_valid:
                self.left_border = max(my_point, right.left_border)
            else:
                self.left_border = my_point
        else:
            self.right_border_valid = False
            self.left_border = my_point
        self.left_border_valid = True

    def collect_left(
        self, my_point: Any, left_child_combiner: Optional["RangedMaxCombiner"], edge_val: Any
    ) -> bool:
        """Fold in the left child's maximum plus the left edge value."""
        candidate = self._child_value(left_child_combiner) + edge_val
        uninitialised = not self.right_border_valid and not self.left_border_valid

        if candidate > self.val or uninitialised:
            self.val = candidate
            self._take_left(my_point, left_child_combiner)
        elif candidate == self.val:
            child = left_child_combiner
            if child is not None:
                mergeable = (not self.left_border_valid or self.left_border <= my_point) and (
                    not child.right_border_valid or child.right_border >= my_point
                )
                self.left_border = child.left_border
                self.left_border_valid = child.left_border_valid
                if not mergeable:
                    # Two disjoint ranges with the same maximum: prefer the left one.
                    self.right_border = child.right_border
                    self.right_border_valid = True
            elif my_point >= self.left_border:
                # An unlimited range of the same value to our left joins ours.
                self.left_border_valid = False
            else:
                self.right_border = my_point
                self.right_border_valid = True
                self.left_border_valid = False
        return False

    def collect_right(
        self, my_point: Any, right_child_combiner: Optional["RangedMaxCombiner"], edge_val: Any
    ) -> bool:
        """Fold in the right child's maximum plus the right edge value."""
        candidate = self._child_value(right_child_combiner) + edge_val
        uninitialised = not self.right_border_valid and not self.left_border_valid

        if candidate > self.val or uninitialised:
            self.val = candidate
            self._take_right(my_point, right_child_combiner)
        elif candidate == self.val:
            child = right_child_combiner
            if child is not None:
                mergeable = (not self.right_border_valid or self.right_border >= my_point) and (
                    not child.left_border_valid or child.left_border <= my_point
                )
                if mergeable:
                    self.right_border = child.right_border
                    self.right_border_valid = child.right_border_valid
                # Otherwise the ranges are disjoint and ours, the left one, is kept.
            elif my_point <= self.right_border:
                self.right_border_valid = False
        return False

    def traverse_left_edge_up(self, new_point: Any, edge_val: Any) -> bool:
        """Add the value of a left edge walked up; the range ends by ``new_point``."""
        self.val += edge_val
        if self.right_border_valid:
            self.right_border = min(new_point, self.right_border)
        else:
            self.right_border = new_point
            self.right_border_valid = True
        return False

    def traverse_right_edge_up(self, new_point: Any, edge_val: Any) -> bool:
        """Add the value of a right edge walked up; the range starts at ``new_point``."""
        self.val += edge_val
        if self.left_border_valid:
            self.left_border = max(new_point, self.left_border)
        else:
            self.left_border = new_point
            self.left_border_valid = True
        return False

    def rebuild(
        self,
        my_point: Any,
        left_child_combiner: Optional["RangedMaxCombiner"],
        left_edge_val: Any,
        right_child_combiner: Optional["RangedMaxCombiner"],
        right_edge_val: Any,
    ) -> bool:
        """Recompute maximum and range from both children; return True if the maximum changed."""
        old_val = self.val
        left_val = self._child_value(left_child_combiner) + left_edge_val
        right_val = self._child_value(right_child_combiner) + right_edge_val

        if left_val > right_val:
            self.val = left_val
            self._take_left(my_point, left_child_combiner)
        elif right_val > left_val:
            self.val = right_val
            self._take_right(my_point, right_child_combiner)
        else:
            self.val = left_val
            left, right = left_child_combiner, right_child_combiner
            merge_left = left is None or not left.right_border_valid or left.right_border >= my_point
            merge_right = right is None or not right.left_border_valid or right.left_border <= my_point

            if merge_left and merge_right:
                if right is not None:
                    self.right_border = right.right_border
                    self.right_border_valid = right.right_border_valid
                else:
                    self.right_border_valid = False
                if left is not None:
                    self.left_border = left.left_border
                    self.left_border_valid = left.left_border_valid
                else:
                    self.left_border_valid = False
            else:
                self._take_left(my_point, left)

        return old_val != self.val

    def get(self) -> Any:
        """Return the stored maximum."""
        return self.val

    @staticmethod
    def get_name() -> str:
        return "RangedMaxCombiner"

    def get_dbg_value(self) -> str:
        """Return ``value@[left:right]`` with ``--`` for unlimited borders."""
        left = _format_number(self.left_border) if self.left_border_valid else "--"
        right = _format_number(self.right_border) if self.right_border_valid else "--"
        return f"{_format_number(self.val)}@[{left}:{right}]"

    def copy(self) -> "RangedMaxCombiner":
        """Return an independent combiner with the same state."""
        return RangedMaxCombiner(
            self.val,
            self.left_border,
            self.left_border_valid,
            self.right_border,
            self.right_border_valid,
        )