"""Process-wide ICG for callers that don't want to pick primes and seeds.

The shared generator is built once at import time from the wall clock.
Calls are forwarded without locking or reseeding, so concurrent use from
several threads gives no ordering guarantee.
"""
import time

from icg import ICG


class ICGStaticConfig:
    PRIME: int = 15485863
    A: int = 213
    B: int = 64


def _clock_seed() -> int:
    return int(time.time()) % ICGStaticConfig.PRIME


_icg = ICG(ICGStaticConfig.PRIME, ICGStaticConfig.A, ICGStaticConfig.B, _clock_seed())


def shared_generator() -> ICG:
    return _icg


def rand(upper: int) -> int:
    return _icg.rand(upper)


def rand01() -> float:
    return _icg.rand01()


def rand_interval(lo: float, hi: float) -> float:
    return _icg.rand_interval(lo, hi)


def rand_normal(mu: float, ss: float) -> float:
    return _icg.rand_normal(mu, ss)


def rand_std_norm() -> float:
    return _icg.rand_std_norm()
