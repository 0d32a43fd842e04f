import numpy as np
import pytest

from src.rowstats.stats import EmptySequenceError, mean, median

SAMPLES = [
    [1, 4, 8, 5, 10, 6, 5, 2, 5, 10],
    [1, 3, 8, 7, 8, 7, 4, 2, 4, 10],
    [1, 1, 2, 2, 5, 6, 6, 8, 8],
    [7],
    [2.5, -1.0],
    [-3, 0.5, 12, 12, 9.25, -7, 4],
]


@pytest.mark.parametrize(
    "data,expected_median,expected_mean",
    [
        ([1, 4, 8, 5, 10, 6, 5, 2, 5, 10], 5, 5.6),
        ([1, 3, 8, 7, 8, 7, 4, 2, 4, 10], 5.5, 5.4),
        ([1, 1, 2, 2, 5, 6, 6, 8, 8], 5, 4.333333333333333),
    ],
)
def test_concrete_scenarios(data, expected_median, expected_mean):
    """Known rows produce exactly the documented statistics"""
    assert median(data) == expected_median
    assert mean(data) == expected_mean


@pytest.mark.parametrize("data", SAMPLES)
def test_median_within_bounds(data):
    assert min(data) <= median(data) <= max(data)


def test_median_odd_length_is_middle_element():
    data = [9, 1, 5, 3, 7]
    assert median(data) == sorted(data)[2]


def test_median_even_length_averages_central_pair():
    data = [10, 2, 8, 4]
    s = sorted(data)
    assert median(data) == (s[1] + s[2]) / 2


def test_median_sorts_numerically_not_lexicographically():
    # Lexicographic order would put 10 before 2
    assert median([10, 2, 3]) == 3


def test_median_does_not_mutate_input():
    data = [5, 1, 4, 2, 3]
    median(data)
    assert data == [5, 1, 4, 2, 3]


def test_median_accepts_tuples():
    assert median((3, 1, 2)) == 2


def test_mean_is_idempotent_and_non_mutating():
    data = [3, 1, 2, 8]
    first = mean(data)
    assert mean(data) == first
    assert first == sum(data) / len(data)
    assert data == [3, 1, 2, 8]


@pytest.mark.parametrize("data", SAMPLES)
def test_against_numpy_reference(data):
    """Results agree with numpy's implementation"""
    assert median(data) == pytest.approx(float(np.median(data)))
    assert mean(data) == pytest.approx(float(np.mean(data)))


@pytest.mark.parametrize("func", [mean, median])
def test_empty_sequence_raises(func):
    with pytest.raises(EmptySequenceError):
        func([])


def test_empty_sequence_error_is_value_error():
    with pytest.raises(ValueError, match="empty"):
        mean(())
