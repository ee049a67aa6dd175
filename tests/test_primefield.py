"""Prime field kernel: primality, inverses and the parameter predicate."""

import numpy as np
import pytest

from primefield import MAX_MODULUS, inverse, is_prime, is_valid_params


def _sieve(limit):
    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False
    for n in range(2, int(limit ** 0.5) + 1):
        if flags[n]:
            flags[n * n::n] = False
    return flags


def test_is_prime_small_values():
    assert not is_prime(0)
    assert not is_prime(1)
    assert is_prime(2)
    assert is_prime(3)
    assert not is_prime(4)
    assert not is_prime(9)
    assert not is_prime(25)
    assert is_prime(7919)


def test_is_prime_matches_sieve_up_to_a_million():
    limit = 10 ** 6
    expected = np.flatnonzero(_sieve(limit)).tolist()
    found = [n for n in range(limit + 1) if is_prime(n)]
    assert found == expected


def test_is_prime_32_bit_boundary():
    assert is_prime(4294967291)
    assert not is_prime(2 ** 32 - 1)
    assert not is_prime(65537 * 65521)


@pytest.mark.parametrize("p", [5, 7, 7919, 65521])
def test_inverse_every_element(p):
    for y in range(1, p):
        z = inverse(y, p)
        assert 1 <= z < p
        assert y * z % p == 1


def test_inverse_large_prime():
    p = 4294967291
    for y in (2, 3, 12345, 2 ** 31, p - 2, p - 1):
        assert y * inverse(y, p) % p == 1


def test_inverse_out_of_contract_inputs():
    assert inverse(0, 7) == 0
    assert inverse(1, 7) == 1
    assert inverse(7, 7) == 0
    assert inverse(100, 7) == 0


def test_inverse_known_values():
    assert inverse(5, 7) == 3
    assert inverse(4, 7) == 2
    assert inverse(2, 7) == 4


def test_valid_params():
    assert is_valid_params(7, 3, 2, 1)
    assert is_valid_params(5, 0, 0, 0)
    assert is_valid_params(15485863, 213, 64, 15485862)


@pytest.mark.parametrize(
    "p, a, b, seed",
    [
        (2, 1, 1, 1),
        (3, 1, 1, 1),
        (9, 1, 1, 1),
        (7, 7, 2, 1),
        (7, 3, 7, 1),
        (7, 3, 2, 7),
        (7, -1, 2, 1),
    ],
)
def test_invalid_params(p, a, b, seed):
    assert not is_valid_params(p, a, b, seed)


def test_modulus_limit():
    assert (MAX_MODULUS - 1) / MAX_MODULUS < 1.0
    assert not is_valid_params(2 ** 55 - 55, 1, 0, 1)
    assert not is_valid_params(MAX_MODULUS + 1, 1, 0, 1)
