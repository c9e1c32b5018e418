import numpy as np
import pytest

from ra_sampling.scripts.distinct import obtain_distinct_samples


def test_no_samples_gives_empty_set():
    samples = obtain_distinct_samples(0, 100, rng=0)
    assert samples.size == 0


def test_samples_are_sorted_unique_and_in_range():
    samples = obtain_distinct_samples(500, 2000, rng=7)

    assert 0 < samples.size <= 500
    assert np.all(np.diff(samples) > 0)
    assert samples.min() >= 0
    assert samples.max() < 2000


def test_collisions_shrink_the_set():
    # 200 draws over 100 points cannot all be distinct
    samples = obtain_distinct_samples(200, 100, rng=3)
    assert samples.size < 200
    assert samples.size <= 100


def test_seed_is_deterministic():
    first = obtain_distinct_samples(300, 1000, rng=42)
    second = obtain_distinct_samples(300, 1000, rng=42)
    np.testing.assert_array_equal(first, second)


def test_generator_handle_is_consumed():
    rng = np.random.default_rng(11)
    first = obtain_distinct_samples(50, 10**6, rng=rng)
    second = obtain_distinct_samples(50, 10**6, rng=rng)
    assert not np.array_equal(first, second)


def test_many_draws_cover_small_range():
    covered = [
        obtain_distinct_samples(1000, 10, rng=seed).size == 10 for seed in range(20)
    ]
    assert all(covered)
    np.testing.assert_array_equal(
        obtain_distinct_samples(1000, 10, rng=0), np.arange(10)
    )


def test_invalid_arguments():
    with pytest.raises(ValueError):
        obtain_distinct_samples(-1, 10)
    with pytest.raises(ValueError):
        obtain_distinct_samples(10, 0)
