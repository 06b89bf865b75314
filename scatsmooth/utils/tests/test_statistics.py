import numpy as np
import pytest
from numpy.testing import assert_allclose

from scatsmooth.exceptions import DimensionMismatchError, InvalidParameterError, NumericError
from scatsmooth.utils import dot, make_sampling_grid, mean, sample_sd, sort_by_x, vectorize, weighted_mean


def test_mean_happy_case():
    assert mean([1.0, 2.0, 3.0, 6.0]) == 3.0
    assert isinstance(mean(np.array([1, 2])), float)


def test_mean_empty():
    with pytest.raises(NumericError, match="empty array"):
        mean([])


def test_mean_2d_input():
    with pytest.raises(DimensionMismatchError, match="v must be a 1D array."):
        mean(np.ones((2, 2)))


def test_weighted_mean_happy_case():
    assert_allclose(weighted_mean([1.0, 3.0], [1.0, 3.0]), 2.5)
    # weights need not be normalised
    assert_allclose(weighted_mean([1.0, 3.0], [10.0, 30.0]), 2.5)


def test_weighted_mean_equal_weights_is_mean():
    v = np.array([0.3, -1.2, 4.5, 2.2])
    assert_allclose(weighted_mean(v, np.full(4, 0.7)), mean(v))


def test_weighted_mean_length_mismatch():
    with pytest.raises(DimensionMismatchError, match="w must have the same size as v."):
        weighted_mean([1.0, 2.0], [1.0])


def test_weighted_mean_zero_weights():
    with pytest.raises(NumericError, match="Weights sum to zero"):
        weighted_mean([1.0, 2.0], [0.0, 0.0])


def test_weighted_mean_empty():
    with pytest.raises(NumericError):
        weighted_mean([], [])


def test_sample_sd():
    # sd of 1..5 with ddof=1 is sqrt(2.5)
    assert_allclose(sample_sd([1.0, 2.0, 3.0, 4.0, 5.0]), np.sqrt(2.5))
    assert sample_sd([4.0, 4.0, 4.0]) == 0.0


@pytest.mark.parametrize("v", [[], [1.0]])
def test_sample_sd_too_few_values(v):
    with pytest.raises(NumericError, match="at least 2 values"):
        sample_sd(v)


def test_dot():
    assert dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0
    assert dot([], []) == 0.0
    with pytest.raises(DimensionMismatchError):
        dot([1.0], [1.0, 2.0])


def test_vectorize():
    squared = vectorize(lambda x: x * x)
    result = squared([1.0, 2.0, 3.0])
    assert isinstance(result, np.ndarray)
    assert_allclose(result, [1.0, 4.0, 9.0])
    assert squared([]).shape == (0,)


def test_sort_by_x_keeps_pairs_together():
    xs, ys = sort_by_x([0.3, 0.1, 0.2], [3.0, 1.0, 2.0])
    assert_allclose(xs, [0.1, 0.2, 0.3])
    assert_allclose(ys, [1.0, 2.0, 3.0])


def test_sort_by_x_is_stable():
    xs, ys = sort_by_x([1.0, 0.0, 1.0, 0.0], [10.0, 20.0, 30.0, 40.0])
    assert_allclose(xs, [0.0, 0.0, 1.0, 1.0])
    assert_allclose(ys, [20.0, 40.0, 10.0, 30.0])


def test_sort_by_x_does_not_modify_input():
    xs = np.array([2.0, 1.0])
    sort_by_x(xs, np.array([0.0, 1.0]))
    assert_allclose(xs, [2.0, 1.0])


def test_make_sampling_grid_default():
    grid = make_sampling_grid()
    assert grid.shape == (100,)
    assert grid[0] == 0.0
    assert_allclose(grid[-1], 0.99)
    assert np.all(grid < 1.0)


def test_make_sampling_grid_custom():
    assert_allclose(make_sampling_grid(0.0, 1.0, 0.25), [0.0, 0.25, 0.5, 0.75])


def test_make_sampling_grid_invalid():
    with pytest.raises(InvalidParameterError, match="step must be positive."):
        make_sampling_grid(step=0.0)
    with pytest.raises(InvalidParameterError, match="stop must be greater than start."):
        make_sampling_grid(1.0, 0.0)
