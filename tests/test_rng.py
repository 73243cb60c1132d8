import pytest

from binevo.core.rng import Randomizer


def test_same_seed_same_stream():
    a = Randomizer.from_seed(7)
    b = Randomizer.from_seed(7)
    assert [a.integer(0, 100) for _ in range(20)] == [b.integer(0, 100) for _ in range(20)]
    assert a.probability() == b.probability()


def test_integer_range_is_inclusive():
    rng = Randomizer.from_seed(1)
    draws = {rng.integer(0, 2) for _ in range(300)}
    assert draws == {0, 1, 2}


def test_probability_in_unit_interval():
    rng = Randomizer.from_seed(2)
    assert all(0.0 <= rng.probability() < 1.0 for _ in range(1000))


def test_distinct_pair():
    rng = Randomizer.from_seed(3)
    for _ in range(200):
        a, b = rng.distinct_pair(0, 3)
        assert a != b
        assert 0 <= a <= 3 and 0 <= b <= 3
    with pytest.raises(ValueError):
        rng.distinct_pair(4, 4)


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        Randomizer.from_seed(0).integer(3, 2)


def test_shuffle_is_a_permutation():
    rng = Randomizer.from_seed(4)
    items = list(range(10))
    rng.shuffle(items)
    assert sorted(items) == list(range(10))
