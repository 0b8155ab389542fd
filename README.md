# wowlib

A small pure-Python library with the building blocks for aggregating values
over the nodes of a binary segment tree, plus a few filter and record types.

## Modules

- `wowlib.max_combiner.MaxCombiner` – keeps the largest aggregate value found
  below a tree node. `rebuild(...)` recomputes it from the two children and the
  values on the edges to them and returns `True` if it changed;
  `collect_left` / `collect_right` fold in one side; `traverse_left_edge_up` /
  `traverse_right_edge_up` add an edge value while walking up; `get()` returns
  the maximum; `copy()` makes an independent copy.
- `wowlib.ranged_max_combiner.RangedMaxCombiner` – the same operations, but
  also records the range of points over which the maximum occurs
  (`left_border`, `right_border` and their `*_valid` flags; an invalid border
  means the range is unlimited on that side). Of several disjoint ranges with
  the same maximum, the leftmost is kept. `get_dbg_value()` renders it as
  `value@[left:right]`, with `--` for an unlimited border.
- `wowlib.combiner_pack.CombinerPack` – holds one instance of each given
  combiner type and forwards every operation to all of them, pairing each
  combiner with the one of the same type in the child pack. `get(type)` returns
  a combiner's value, `get_combiner(type)` the combiner itself. Listing the same
  type twice raises `ValueError`; asking for a type not in the pack raises
  `KeyError`.
- `wowlib.utils` – `Range` (inclusive `lower <= value <= upper` test),
  `SetFilter` (membership test over values added with `set`) and `DistIdPair`
  (a distance and an id, ordered by distance only).

## Example

```python
from wowlib.combiner_pack import CombinerPack
from wowlib.max_combiner import MaxCombiner
from wowlib.ranged_max_combiner import RangedMaxCombiner

# A leaf at point 5 with edge values 3 (left) and 1 (right).
leaf = CombinerPack(MaxCombiner, RangedMaxCombiner)
leaf.rebuild(5, None, 3, None, 1)          # True
leaf.get(MaxCombiner)                      # 3
leaf.get_combiner(RangedMaxCombiner).get_dbg_value()  # '3@[--:5]'

# Its parent at point 10, reached from the leaf over an edge worth 2.
parent = CombinerPack(MaxCombiner, RangedMaxCombiner)
parent.rebuild(10, leaf, 2, None, 0)
parent.get(MaxCombiner)                    # 5
parent.get_combiner(RangedMaxCombiner).get_dbg_value()  # '5@[--:5]'
```

```python
from wowlib.utils import DistIdPair, Range, SetFilter

Range(1, 5).test(3)                        # True
tags = SetFilter()
tags.set("red")
tags.test("red")                           # True
min(DistIdPair(0.7, 1), DistIdPair(0.2, 9)).id   # 9
```

## What this package does not do

It provides the per-node combiners only. There is no segment tree that
stores intervals, answers stabbing queries or keeps the combiners up to date
as intervals are inserted and removed; the caller builds and walks the tree
and calls `rebuild`, `collect_*` and `traverse_*` itself. There are also no
visited-set helpers for graph searches and no tree printers or DOT exporters.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```