import random

from patternkit.subarray_min import MODULUS, sum_subarray_mins


def _brute_force(values):
    return sum(
        min(values[start:end])
        for start in range(len(values))
        for end in range(start + 1, len(values) + 1)
    )


def test_worked_example():
    assert sum_subarray_mins([3, 1, 2, 4]) == 17


def test_empty_input():
    assert sum_subarray_mins([]) == 0


def test_single_value():
    assert sum_subarray_mins([42]) == 42


def test_random_small_arrays_match_brute_force():
    rng = random.Random(2024)
    for _ in range(200):
        values = [rng.randint(1, 30) for _ in range(rng.randint(1, 12))]
        assert sum_subarray_mins(values) == _brute_force(values) % MODULUS


def test_repeated_values():
    values = [2, 2, 2, 2, 2]
    assert sum_subarray_mins(values) == _brute_force(values)


def test_result_is_reduced_modulo():
    values = [30_000] * 60
    result = sum_subarray_mins(values)
    assert 0 <= result < MODULUS
    assert result == _brute_force(values) % MODULUS