"""Combiner that tracks the maximum aggregate value over a range of events."""

from __future__ import annotations

from typing import Any, Optional


class MaxCombiner:
    """Keeps the maximum aggregate value found below a node of the segment tree.

    The combiner of a tree node holds the largest aggregate value reachable in
    its subtree, relative to the node itself. Walking up an edge adds that
    edge's value to the maximum; collecting from a child takes the larger of
    the current maximum and the child's maximum plus the edge value.
    """

    __slots__ = ("val",)

    def __init__(self, val: Any = 0) -> None:
        self.val = val

    def __repr__(self) -> str:
        return f"MaxCombiner(val={self.val!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaxCombiner):
            return NotImplemented
        return self.val == other.val

    @staticmethod
    def _child_value(child: Optional["MaxCombiner"]) -> Any:
        return 0 if child is None else child.get()

    def collect_left(self, my_point: Any, left_child_combiner: Optional["MaxCombiner"], edge_val: Any) -> bool:
        """Fold in the left child's maximum plus the left edge value."""
        self.val = max(self.val, self._child_value(left_child_combiner) + edge_val)
        return False

    def collect_right(self, my_point: Any, right_child_combiner: Optional["MaxCombiner"], edge_val: Any) -> bool:
        """Fold in the right child's maximum plus the right edge value."""
        self.val = max(self.val, self._child_value(right_child_combiner) + edge_val)
        return False

    def traverse_left_edge_up(self, new_point: Any, edge_val: Any) -> bool:
        """Add the value of a left edge that was walked up."""
        self.val += edge_val
        return False

    def traverse_right_edge_up(self, new_point: Any, edge_val: Any) -> bool:
        """Add the value of a right edge that was walked up."""
        self.val += edge_val
        return False

    def rebuild(
        self,
        my_point: Any,
        left_child_combiner: Optional["MaxCombiner"],
        left_edge_val: Any,
        right_child_combiner: Optional["MaxCombiner"],
        right_edge_val: Any,
    ) -> bool:
        """Recompute the maximum from both children; return True if it changed."""
        old_val = self.val
        self.val = max(
            self._child_value(left_child_combiner) + left_edge_val,
            self._child_value(right_child_combiner) + right_edge_val,
        )
        return old_val != self.val

    def get(self) -> Any:
        """Return the stored maximum."""
        return self.val

    @staticmethod
    def get_name() -> str:
        return "MaxCombiner"

    def get_dbg_value(self) -> str:
        """Return the stored maximum as text for debugging output."""
        if isinstance(self.val, float):
            return f"{self.val:f}"
        return str(self.val)

    def copy(self) -> "MaxCombiner":
        """Return an independent combiner with the same state."""
        return MaxCombiner(self.val)