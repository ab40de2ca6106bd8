from practicekit.caching import Cacher, make_offset


def test_cacher_keeps_first_result():
    cacher = Cacher(lambda x: x + 1)
    assert cacher.get_value(1) == 2
    assert cacher.get_value(2) == 2


def test_cacher_calls_query_once():
    calls = []

    def query(x):
        calls.append(x)
        return x * 10

    cacher = Cacher(query)
    assert cacher.get_value(3) == 30
    assert cacher.get_value(4) == 30
    assert calls == [3]


def test_cacher_caches_falsy_result():
    calls = []

    def query(x):
        calls.append(x)
        return 0

    cacher = Cacher(query)
    assert cacher.get_value(1) == 0
    assert cacher.get_value(2) == 0
    assert calls == [1]


def test_make_offset_adds_for_small():
    assert make_offset(1)(1) == 6


def test_make_offset_subtracts_for_large():
    assert make_offset(8)(1) == -4


def test_make_offset_boundary():
    assert make_offset(5)(0) == 5
    assert make_offset(6)(0) == -5