import pytest

from studykit.lru import LRUCache


def test_case_one_capacity_two():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    with pytest.raises(KeyError):
        cache.get(2)
    cache.put(4, 4)
    with pytest.raises(KeyError):
        cache.get(1)
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_case_two_update_refreshes_entry():
    cache = LRUCache(2)
    cache.put(2, 1)
    cache.put(1, 1)
    cache.put(2, 3)
    cache.put(4, 1)
    with pytest.raises(KeyError):
        cache.get(1)
    assert cache.get(2) == 3


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(20):
        cache.put(key, key * 10)
        assert len(cache) <= 3
    assert all(key in cache for key in (17, 18, 19))
    assert 16 not in cache


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        LRUCache(0)