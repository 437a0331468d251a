import math

import numpy as np
import pytest

from nbstats.errors import EmptyInputError
from nbstats.stats import (
    Dataset,
    arithmetic_mean,
    find_modes,
    median,
    population_variance,
    summarize,
    value_range,
)


def test_dataset_is_sorted_and_read_only():
    ds = Dataset.from_values([3.0, 1.0, 2.0])
    assert list(ds.values) == [1.0, 2.0, 3.0]
    assert not ds.values.flags.writeable
    assert ds.size == 3


def test_sorting_is_idempotent():
    ds = Dataset.from_values([5, 0.5, 12, 3, 3])
    again = Dataset.from_values(ds.values)
    assert np.array_equal(ds.values, again.values)


def test_empty_dataset_is_fatal():
    with pytest.raises(EmptyInputError):
        Dataset.from_values([])


def test_single_value():
    s = summarize(Dataset.from_values([7.5]))
    assert s.count == 1
    assert s.mean == 7.5
    assert s.median == 7.5
    assert s.variance == 0.0
    assert s.std_dev == 0.0
    assert (s.minimum, s.maximum) == (7.5, 7.5)
    assert s.modes.values == (7.5,)
    assert s.modes.frequency == 1
    assert not s.modes.has_mode


def test_median_odd_and_even():
    assert median(Dataset.from_values([3, 1, 2])) == 2.0
    assert median(Dataset.from_values([4, 1, 3, 2])) == 2.5


def test_population_variance_and_std_dev():
    ds = Dataset.from_values([2, 4, 4, 4, 5, 5, 7, 9])
    assert arithmetic_mean(ds) == 5.0
    assert population_variance(ds) == pytest.approx(4.0)
    s = summarize(ds)
    assert s.std_dev == pytest.approx(2.0)
    assert value_range(ds) == (2.0, 9.0)


def test_mean_keeps_small_terms():
    ds = Dataset.from_values([1e16] + [1.0] * 10)
    assert arithmetic_mean(ds) == pytest.approx((1e16 + 10) / 11, rel=1e-15)


def test_single_mode():
    m = find_modes(Dataset.from_values([2, 2, 3]))
    assert m.values == (2.0,)
    assert m.frequency == 2
    assert m.has_mode


def test_no_repeats_means_no_mode():
    assert not find_modes(Dataset.from_values([1, 2, 3])).has_mode


def test_equal_frequencies_mean_no_mode():
    m = find_modes(Dataset.from_values([1, 1, 2, 2]))
    assert m.frequency == 2
    assert not m.has_mode


def test_multi_modal():
    m = find_modes(Dataset.from_values([3, 1, 2, 1, 2]))
    assert m.values == (1.0, 2.0)
    assert m.frequency == 2
    assert m.has_mode


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_summary_bounds(seed):
    rng = np.random.default_rng(seed)
    values = rng.lognormal(mean=2.0, sigma=1.5, size=257)
    s = summarize(Dataset.from_values(values))
    assert s.minimum <= s.median <= s.maximum
    assert s.variance >= 0
    assert math.isclose(s.std_dev, math.sqrt(s.variance))
    assert s.mean == pytest.approx(float(np.mean(values)))
    assert s.variance == pytest.approx(float(np.var(values)))
