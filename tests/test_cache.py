# tests/test_cache.py

import threading

import litcal
from litcal.cache import YearCache
from litcal.engines.specs import TraditionSpec


def test_hits_and_misses():
    calls = []

    def builder(y):
        calls.append(y)
        return litcal.build_year(y)

    cache = YearCache(builder)
    a = cache.get(2024)
    b = cache.get(2024)
    assert a is b
    assert calls == [2024]
    assert (cache.hits, cache.misses) == (1, 1)
    assert 2024 in cache
    assert len(cache) == 1


def test_eviction_is_fifo():
    cache = YearCache(lambda y: y * 2, maxsize=2)
    for y in (2020, 2021, 2022):
        cache.get(y)
    assert 2020 not in cache
    assert 2021 in cache and 2022 in cache
    assert len(cache) == 2


def test_clear():
    cache = YearCache(lambda y: y)
    cache.get(2000)
    cache.clear()
    assert len(cache) == 0
    assert cache.hits == cache.misses == 0


def test_concurrent_readers_share_result():
    eng = litcal.make_engine(TraditionSpec.like("rcl"))
    cache = YearCache(eng.build, maxsize=None)
    results = []

    def worker():
        results.append(cache.get(2030))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    first = results[0]
    assert all(r == first for r in results)
    assert len(cache) == 1
