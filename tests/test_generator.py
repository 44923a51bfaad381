import itertools

import pytest

from diceforge.generator import Generator

MASK64 = (1 << 64) - 1
MAX32 = (1 << 32) - 1


class Scripted(Generator):
    """Replays a fixed list of raw values, rotated by the seed."""

    bits = 32

    def __init__(self, values):
        self._values = list(values)
        self.reset_seed(0)

    def _reseed(self, seed):
        shift = seed % len(self._values)
        self._it = itertools.cycle(self._values[shift:] + self._values[:shift])

    def _generate(self):
        return next(self._it)


class Lcg(Generator):
    bits = 32

    def __init__(self, seed):
        self.reset_seed(seed)

    def _reseed(self, seed):
        self._state = seed & MASK64

    def _generate(self):
        self._state = (self._state * 6364136223846793005 + 1442695040888963407) & MASK64
        return self._state >> 32


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Generator()


def test_max_value_follows_bits():
    gen = Scripted([MAX32])
    assert gen.max_value == MAX32
    assert Generator.next(gen) == MAX32


def test_next_is_truncated_to_width():
    assert Generator.next(Scripted([(1 << 32) + 5])) == 5


def test_next_unit_skips_one():
    gen = Scripted([MAX32, MAX32, 0])
    assert Generator.next_unit(gen) == 0.0


def test_next_unit_stays_in_unit_interval():
    gen = Lcg(7)
    values = [Generator.next_unit(gen) for _ in range(5000)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_next_in_range_low_end():
    assert Generator.next_in_range(Scripted([0]), 3, 9) == 3


def test_next_in_range_high_end():
    assert Generator.next_in_range(Scripted([MAX32 - 1]), 3, 9) == 9


def test_next_in_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        Generator.next_in_range(Lcg(1), 5, 2)


def test_mod_frequency_covers_every_residue():
    gen = Lcg(123)
    values = [Generator.next_in_range(gen, 0, 9) for _ in range(10000)]
    assert set(values) == set(range(10))
    assert all(800 < values.count(r) < 1200 for r in range(10))


def test_bin_frequency_stays_in_bins():
    gen = Lcg(123)
    bins = 20
    values = [Generator.next_in_crange(gen, 0.0, bins + 1) for _ in range(5000)]
    assert all(0.0 <= v < bins + 1 for v in values)
    assert {int(v) for v in values} == set(range(bins + 1))


def test_statistical_properties():
    gen = Lcg(123)
    count = 20000
    samples = [Generator.next_unit(gen) for _ in range(count)]
    mean = sum(samples) / count
    variance = sum(s * s for s in samples) / count - mean * mean
    assert abs(mean - 0.5) < 0.02
    assert abs(variance - 1 / 12) < 0.01
    assert min(samples) >= 0.0
    assert max(samples) < 1.0


def test_next_in_crange_bounds():
    gen = Lcg(99)
    values = [Generator.next_in_crange(gen, -2.5, 4.0) for _ in range(2000)]
    assert all(-2.5 <= v < 4.0 for v in values)


def test_next_in_crange_rejects_empty_interval():
    with pytest.raises(ValueError):
        Generator.next_in_crange(Lcg(1), 1.0, 1.0)


def test_reset_seed_reproduces_sequence():
    gen = Lcg(5)
    first = [Generator.next(gen) for _ in range(20)]
    Generator.next(gen)
    Generator.reset_seed(gen, 5)
    assert [Generator.next(gen) for _ in range(20)] == first
    fresh = Lcg(5)
    assert [Generator.next(fresh) for _ in range(20)] == first


def test_choice_unweighted_first():
    assert Generator.choice(Scripted([0]), ["a", "b", "c"], None) == "a"


def test_choice_unweighted_empty():
    with pytest.raises(IndexError):
        Generator.choice(Scripted([0]), [], None)


def test_choice_weighted_only_positive_weight():
    gen = Lcg(11)
    picks = {Generator.choice(gen, ["x", "y", "z"], [0, 1, 0]) for _ in range(200)}
    assert picks == {"y"}


def test_choice_weighted_extremes():
    assert Generator.choice(Scripted([0]), ["a", "b"], [1, 1]) == "a"
    assert Generator.choice(Scripted([MAX32 - 1]), ["a", "b"], [1, 1]) == "b"


def test_choice_weighted_length_mismatch():
    with pytest.raises(ValueError):
        Generator.choice(Lcg(1), [1, 2, 3], [1, 1])


def test_choice_weighted_empty():
    with pytest.raises(ValueError):
        Generator.choice(Lcg(1), [], [])


def test_shuffle_is_permutation():
    gen = Lcg(42)
    items = list(range(50))
    Generator.shuffle(gen, items)
    assert sorted(items) == list(range(50))


def test_shuffle_always_first_keeps_order():
    items = [1, 2, 3, 4, 5]
    Generator.shuffle(Scripted([0]), items)
    assert items == [1, 2, 3, 4, 5]


def test_shuffle_always_last_reverses():
    items = [1, 2, 3, 4, 5]
    Generator.shuffle(Scripted([MAX32 - 1]), items)
    assert items == [5, 4, 3, 2, 1]