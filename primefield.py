import math

# largest modulus for which step / p stays below 1.0 in double precision
MAX_MODULUS = 2 ** 53


def is_prime(n: int) -> bool:
    # trial division, only called when parameters change
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0:
        return False

    limit = math.isqrt(n)
    divisor = 3
    while divisor <= limit:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def inverse(y: int, p: int) -> int:
    """Inverse of y in Z/pZ by the extended Euclidean algorithm.

    Returns 0 for y == 0 and for y outside (0, p).
    """
    if y <= 0:
        return 0
    if y == 1:
        return 1
    if y >= p:
        return 0

    r_prev, r = p, y
    # Bezout coefficients of y
    t_prev, t = 0, 1
    while r_prev % r != 0:
        q = r_prev // r
        r_prev, r = r, r_prev - q * r
        t_prev, t = t, t_prev - q * t

    while t < 0:
        t += p
    return t


def is_valid_params(p: int, a: int, b: int, seed: int) -> bool:
    return (
        3 < p <= MAX_MODULUS
        and is_prime(p)
        and 0 <= a < p
        and 0 <= b < p
        and 0 <= seed < p
    )
