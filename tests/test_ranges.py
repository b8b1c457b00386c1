import pytest

from rigsmith.ranges import Range, RangeArray


def test_last_is_first_plus_length():
    r = Range(4, ["a", "b", "c"])
    assert r.last == 4 + 3


def test_contains_is_half_open():
    r = Range(2, [1, 2])
    assert r.contains(2)
    assert r.contains(3)
    assert not r.contains(4)
    assert not r.contains(1)


def test_adjacent_ranges_intersect():
    assert Range(0, [1, 2, 3]).intersects(Range(3, [4]))
    assert Range(3, [4]).intersects(Range(0, [1, 2, 3]))


def test_distant_ranges_do_not_intersect():
    assert not Range(0, [1, 2]).intersects(Range(5, [9]))


def test_merge_extends_to_the_right_with_other_winning():
    r = Range(0, [1, 2, 3])
    r.merge(Range(2, [7, 8, 9]))
    assert r.first == 0
    assert r.data == [1, 2, 7, 8, 9]


def test_merge_extends_to_the_left():
    r = Range(2, [5, 6, 7])
    r.merge(Range(0, [1, 2, 3]))
    assert r.first == 0
    assert r.data == [1, 2, 3, 6, 7]


def test_merge_inner_overwrites_middle():
    r = Range(0, [1, 2, 3, 4, 5])
    r.merge(Range(1, [8, 9]))
    assert r.first == 0
    assert r.data == [1, 8, 9, 4, 5]


def test_merge_covering_range_replaces():
    r = Range(2, [1, 2])
    r.merge(Range(0, [5, 6, 7, 8]))
    assert r == Range(0, [5, 6, 7, 8])


def test_merge_of_disjoint_range_does_nothing():
    r = Range(0, [1, 2])
    r.merge(Range(10, [3]))
    assert r == Range(0, [1, 2])


def test_empty_array_is_falsy():
    array = RangeArray()
    assert not array
    assert len(array) == 0


def test_disjoint_ranges_are_kept_sorted():
    array = RangeArray()
    array.add(Range(10, ["x"]))
    array.add(Range(0, ["a", "b"]))
    assert [r.first for r in array] == [0, 10]
    assert len(array) == 2


def test_overlapping_add_merges():
    array = RangeArray()
    array.add(Range(0, [1, 2, 3]))
    array.add(Range(1, [9]))
    assert list(array) == [Range(0, [1, 9, 3])]


def test_bridging_range_joins_neighbours():
    array = RangeArray()
    array.add(Range(0, ["a", "b"]))
    array.add(Range(5, ["f", "g"]))
    array.add(Range(2, ["c", "d", "e"]))
    assert list(array) == [Range(0, ["a", "b", "c", "d", "e", "f", "g"])]


def test_add_stores_a_copy():
    array = RangeArray()
    original = Range(0, [1, 2])
    array.add(original)
    original.data.append(3)
    assert next(iter(array)).data == [1, 2]


def test_clear_empties():
    array = RangeArray()
    array.add(Range(0, [1]))
    array.clear()
    assert len(array) == 0
    assert not array


@pytest.mark.parametrize("starts", [[0, 4, 8], [8, 4, 0], [4, 0, 8]])
def test_ranges_stay_ordered_and_separate(starts):
    array = RangeArray()
    for start in starts:
        array.add(Range(start, [start]))
    firsts = [r.first for r in array]
    assert firsts == sorted(starts)
    pairs = list(zip(list(array), list(array)[1:]))
    assert all(a.last < b.first for a, b in pairs)