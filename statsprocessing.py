import math
from typing import Callable, Optional

import numpy as np
from scipy import stats

from icg import ICG


def draw(sampler: Callable[[], float], n: int) -> np.ndarray:
    if n < 0:
        raise ValueError("Sample count must be non-negative")
    return np.fromiter((sampler() for _ in range(n)), dtype=np.float64, count=n)


def _as_array(samples) -> np.ndarray:
    arr = np.asarray(samples, dtype=np.float64)
    if arr.size == 0:
        raise ValueError("No samples to process")
    return arr


def extract_mean(samples):
    return float(np.mean(_as_array(samples)))


def extract_variance(samples):
    return float(np.var(_as_array(samples)))


def extract_base_metrics(samples):
    arr = _as_array(samples)
    return {
        'mean': float(np.mean(arr)),
        'variance': float(np.var(arr)),
        'min': float(np.min(arr)),
        'max': float(np.max(arr)),
        'count': int(arr.size),
    }


def uniformity_pvalue(samples):
    return float(stats.kstest(_as_array(samples), 'uniform').pvalue)


def normality_pvalue(samples, mu=0.0, ss=1.0):
    # ss is the variance, as in ICG.rand_normal
    return float(stats.kstest(_as_array(samples), 'norm', args=(mu, math.sqrt(ss))).pvalue)


def period_length(gen: ICG, limit: int) -> Optional[int]:
    """Cycle length of the field sequence starting at gen.current (Brent).

    Works on a copy of the state, `gen` is not advanced. Returns None for
    an invalid generator or when no cycle closes within `limit` steps.
    """
    if not gen.is_valid():
        return None
    probe = ICG(gen.p, gen.a, gen.b, gen.current)

    power = lam = 1
    tortoise = probe.current
    hare = probe.rand()
    steps = 1
    while tortoise != hare:
        if steps >= limit:
            return None
        if power == lam:
            tortoise = hare
            power *= 2
            lam = 0
        hare = probe.rand()
        lam += 1
        steps += 1
    return lam
