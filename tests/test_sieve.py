import pytest

from katas.sieve import primes


def test_no_primes_under_two():
    assert primes(1) == []


def test_negative_limit_gives_nothing():
    assert primes(-10) == []


def test_find_first_prime():
    assert primes(2) == [2]


def test_find_primes_up_to_10():
    assert primes(10) == [2, 3, 5, 7]


def test_limit_is_prime():
    assert primes(13) == [2, 3, 5, 7, 11, 13]


def test_primes_up_to_1000_count_and_bounds():
    result = primes(1000)
    assert len(result) == 168
    assert result[:5] == [2, 3, 5, 7, 11]
    assert result[-3:] == [983, 991, 997]


def test_primes_up_to_1000_sum():
    assert sum(primes(1000)) == 76127


def test_primes_are_strictly_increasing():
    result = primes(500)
    assert all(a < b for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("composite", [4, 9, 25, 91, 561, 999])
def test_composites_are_excluded(composite):
    assert composite not in primes(1000)