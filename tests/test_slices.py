from splash_cli.slices import every, filter_items, map_items, reduce_items, some

SLICE_INT = [-3, -2, -1, 0, 1, 2, 3]
POSITIVE_SLICE = [1, 2, 3]


def test_some_slice():
    assert some(SLICE_INT, lambda item: item == 0) is True


def test_some_slice_none_match():
    assert some(POSITIVE_SLICE, lambda item: item < 0) is False


def test_every_slice():
    assert every(POSITIVE_SLICE, lambda item: item > 0) is True


def test_every_empty_is_false():
    assert every([], lambda item: True) is False


def test_filter_slice():
    filtered = filter_items(SLICE_INT, lambda item: item > 0)
    assert len(filtered) == 3
    assert filtered == [1, 2, 3]


def test_map_slice():
    assert map_items(POSITIVE_SLICE, lambda n: n + 1) == [2, 3, 4]


def test_map_empty():
    assert map_items([], lambda n: n + 1) == []


def test_reduce_slice():
    assert reduce_items(0, POSITIVE_SLICE, lambda acc, curr, idx: acc + curr) == 6


def test_reduce_passes_indexes():
    indexes = reduce_items([], POSITIVE_SLICE, lambda acc, curr, idx: acc + [idx])
    assert indexes == [0, 1, 2]