"""A bundle of combiners kept together at every node of the segment tree."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

C = TypeVar("C")


class CombinerPack:
    """Holds one instance of each combiner type and forwards every operation to all of them.

    Each combiner is paired with the combiner of the same type in the child
    pack that an operation is given, so that several metrics (maximum, ranged
    maximum, ...) can be maintained side by side over the same tree.
    """

    __slots__ = ("combiner_types", "_data")

    def __init__(self, *combiner_types: type) -> None:
        if len(set(combiner_types)) != len(combiner_types):
            raise ValueError("each combiner type may appear only once in a pack")
        self.combiner_types: tuple[type, ...] = tuple(combiner_types)
        self._data: dict[type, Any] = {ctype: ctype() for ctype in self.combiner_types}

    def __repr__(self) -> str:
        inner = ", ".join(repr(combiner) for combiner in self._data.values())
        return f"CombinerPack({inner})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CombinerPack):
            return NotImplemented
        return self.combiner_types == other.combiner_types and self._data == other._data

    def _child_combiner(self, child: Optional["CombinerPack"], combiner_type: type) -> Any:
        if child is None:
            return None
        return child.get_combiner(combiner_type)

    def rebuild(
        self,
        my_point: Any,
        left_child: Optional["CombinerPack"],
        left_edge_val: Any,
        right_child: Optional["CombinerPack"],
        right_edge_val: Any,
    ) -> bool:
        """Rebuild every combiner from the children's packs; return True if any changed."""
        changed = False
        for ctype, combiner in self._data.items():
            # Every combiner is rebuilt, even once a change has been seen.
            changed |= bool(
                combiner.rebuild(
                    my_point,
                    self._child_combiner(left_child, ctype),
                    left_edge_val,
                    self._child_combiner(right_child, ctype),
                    right_edge_val,
                )
            )
        return changed

    def collect_left(
        self, my_point: Any, left_child_combiner: Optional["CombinerPack"], edge_val: Any
    ) -> bool:
        """Fold the left pack plus the edge value into every combiner."""
        for ctype, combiner in self._data.items():
            combiner.collect_left(my_point, self._child_combiner(left_child_combiner, ctype), edge_val)
        return False

    def collect_right(
        self, my_point: Any, right_child_combiner: Optional["CombinerPack"], edge_val: Any
    ) -> bool:
        """Fold the right pack plus the edge value into every combiner."""
        for ctype, combiner in self._data.items():
            combiner.collect_right(my_point, self._child_combiner(right_child_combiner, ctype), edge_val)
        return False

    def traverse_left_edge_up(self, new_point: Any, edge_val: Any) -> bool:
        """Apply a walk up a left edge to every combiner."""
        for combiner in self._data.values():
            combiner.traverse_left_edge_up(new_point, edge_val)
        return False

    def traverse_right_edge_up(self, new_point: Any, edge_val: Any) -> bool:
        """Apply a walk up a right edge to every combiner."""
        for combiner in self._data.values():
            combiner.traverse_right_edge_up(new_point, edge_val)
        return False

    def get(self, combiner_type: type) -> Any:
        """Return the combined value of the combiner of ``combiner_type``."""
        return self.get_combiner(combiner_type).get()

    def get_combiner(self, combiner_type: type[C]) -> C:
        """Return the combiner of ``combiner_type`` held in this pack."""
        try:
            return self._data[combiner_type]
        except KeyError:
            raise KeyError(f"no {combiner_type.__name__} in this combiner pack") from None

    def copy(self) -> "CombinerPack":
        """Return an independent pack with copies of all combiners."""
        duplicate = CombinerPack(*self.combiner_types)
        duplicate._data = {ctype: combiner.copy() for ctype, combiner in self._data.items()}
        return duplicate