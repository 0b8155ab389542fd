import pytest

from wowlib.combiner_pack import CombinerPack
from wowlib.max_combiner import MaxCombiner
from wowlib.ranged_max_combiner import RangedMaxCombiner


def _pack():
    return CombinerPack(MaxCombiner, RangedMaxCombiner)


def test_empty_pack_rebuild_reports_no_change():
    pack = CombinerPack()
    assert pack.rebuild(1, None, 4, None, 7) is False


def test_rebuild_matches_individual_combiners():
    pack = _pack()
    lone_max = MaxCombiner()
    lone_ranged = RangedMaxCombiner()

    changed = pack.rebuild(10, None, 3, None, 5)
    lone_max.rebuild(10, None, 3, None, 5)
    lone_ranged.rebuild(10, None, 3, None, 5)

    assert changed is True
    assert pack.get_combiner(MaxCombiner) == lone_max
    assert pack.get_combiner(RangedMaxCombiner) == lone_ranged
    assert pack.get(MaxCombiner) == 5


def test_rebuild_twice_reports_no_change():
    pack = _pack()
    pack.rebuild(2, None, 1, None, 6)
    assert pack.rebuild(2, None, 1, None, 6) is False


def test_rebuild_uses_child_combiners_of_same_type():
    left = _pack()
    left.rebuild(1, None, 8, None, 2)
    right = _pack()
    right.rebuild(5, None, 1, None, 1)

    pack = _pack()
    pack.rebuild(3, left, 1, right, 0)

    lone = MaxCombiner()
    lone.rebuild(3, left.get_combiner(MaxCombiner), 1, right.get_combiner(MaxCombiner), 0)
    lone_ranged = RangedMaxCombiner()
    lone_ranged.rebuild(
        3, left.get_combiner(RangedMaxCombiner), 1, right.get_combiner(RangedMaxCombiner), 0
    )
    assert pack.get_combiner(MaxCombiner) == lone
    assert pack.get_combiner(RangedMaxCombiner) == lone_ranged


def test_collect_and_traverse_forward_to_all_combiners():
    child = _pack()
    child.rebuild(4, None, 2, None, 9)

    pack = _pack()
    lone_max = MaxCombiner()
    lone_ranged = RangedMaxCombiner()

    assert pack.collect_left(6, child, 1) is False
    lone_max.collect_left(6, child.get_combiner(MaxCombiner), 1)
    lone_ranged.collect_left(6, child.get_combiner(RangedMaxCombiner), 1)

    assert pack.collect_right(6, None, 3) is False
    lone_max.collect_right(6, None, 3)
    lone_ranged.collect_right(6, None, 3)

    assert pack.traverse_left_edge_up(8, 2) is False
    lone_max.traverse_left_edge_up(8, 2)
    lone_ranged.traverse_left_edge_up(8, 2)

    assert pack.traverse_right_edge_up(0, -1) is False
    lone_max.traverse_right_edge_up(0, -1)
    lone_ranged.traverse_right_edge_up(0, -1)

    assert pack.get_combiner(MaxCombiner) == lone_max
    assert pack.get_combiner(RangedMaxCombiner) == lone_ranged


def test_traverse_adds_edge_value_to_max():
    pack = CombinerPack(MaxCombiner)
    before = pack.get(MaxCombiner)
    pack.traverse_left_edge_up(1, 4)
    pack.traverse_right_edge_up(2, 3)
    assert pack.get(MaxCombiner) == before + 4 + 3


def test_get_combiner_missing_type_raises():
    pack = CombinerPack(MaxCombiner)
    with pytest.raises(KeyError):
        pack.get_combiner(RangedMaxCombiner)
    with pytest.raises(KeyError):
        pack.get(RangedMaxCombiner)


def test_duplicate_types_rejected():
    with pytest.raises(ValueError):
        CombinerPack(MaxCombiner, MaxCombiner)


def test_copy_is_independent():
    pack = _pack()
    pack.rebuild(1, None, 2, None, 3)
    duplicate = pack.copy()
    assert duplicate == pack

    duplicate.traverse_left_edge_up(5, 10)
    assert duplicate != pack
    assert pack.get(MaxCombiner) + 10 == duplicate.get(MaxCombiner)


def test_combiner_types_preserved_in_order():
    pack = CombinerPack(RangedMaxCombiner, MaxCombiner)
    assert pack.combiner_types == (RangedMaxCombiner, MaxCombiner)
    assert pack.copy().combiner_types == (RangedMaxCombiner, MaxCombiner)