# scenarios run through the public package import
# for unit tests, go to the `tests` folder of the package
import pytest

from collection_utils import Collection, EmptyReduceError


def ascending(a, b, ka, kb):
    return a - b


def above_one(v, k, c):
    return v > 1


def test_filter_before_sort():
    coll = Collection([('a', 3), ('b', 1), ('c', 2)])

    filtered = coll.filter(above_one)
    coll.sort(ascending)

    assert list(filtered.items()) == [('a', 3), ('c', 2)]
    assert list(coll.items()) == [('b', 1), ('c', 2), ('a', 3)]


def test_filter_after_sort():
    coll = Collection([('a', 3), ('b', 1), ('c', 2)])

    coll.sort(ascending)
    filtered = coll.filter(above_one)

    assert list(filtered.items()) == [('c', 2), ('a', 3)]


def test_empty_collection():
    coll = Collection()

    assert coll.some(lambda v, k, c: True) is False
    assert coll.every(lambda v, k, c: False) is True
    with pytest.raises(EmptyReduceError):
        coll.reduce(lambda acc, v, k, c: acc + v)
    assert coll.reduce(lambda acc, v, k, c: acc + v, 0) == 0
