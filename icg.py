import math

from primefield import inverse, is_valid_params


class ICG:
    """Inversive congruential generator over the prime field Z/pZ.

    next = (a * inverse(current) + b) % p

    p must be a prime > 3 and a, b, seed must lie in [0, p). A generator
    with any other parameters is invalid: it never advances and every
    sampler returns 0. Python ints do not overflow, but p is capped at
    2**53 (primefield.MAX_MODULUS) so that step / p is always below 1.0
    as a double. The trial-division check costs O(sqrt(p)) per
    (re)parametrization.

    Usage:

        icg = ICG(15485863, 213, 64, int(time.time()) % 15485863)
        icg.rand(100)               # 0 <= x < 100
        icg.rand01()                # 0.0 <= x < 1.0
        icg.rand_interval(20, 25)   # 20.0 <= x < 25.0
        icg.rand_std_norm()         # N(0, 1)
        icg.rand_normal(5.0, 2.0)   # N(5, 2), second argument is the variance
    """

    EPS = 1e-4  # smallest accepted radius^2 in the polar method

    _p: int         # prime modulus
    _a: int         # multiplier
    _b: int         # addend
    _seed: int
    _current: int
    _valid: bool
    _spare: float
    _spare_ready: bool

    def __init__(self, p, a, b, seed):
        self._set_params(p, a, b, seed)

    def _set_params(self, p, a, b, seed):
        self._p = p
        self._a = a
        self._b = b
        self._restart(seed)

    def _restart(self, seed):
        self._seed = seed
        self._current = seed
        self._spare = 0.0
        self._spare_ready = False
        self._valid = is_valid_params(self._p, self._a, self._b, self._seed)

    def reparametrize(self, p, a, b, seed) -> bool:
        self._set_params(p, a, b, seed)
        return self._valid

    def reseed(self, seed) -> bool:
        """Restart the sequence at `seed`, keeping p, a and b."""
        self._restart(seed)
        return self._valid

    def is_valid(self) -> bool:
        return self._valid

    @property
    def p(self) -> int:
        return self._p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def current(self) -> int:
        return self._current

    @property
    def spare_ready(self) -> bool:
        return self._spare_ready

    def _step(self) -> int:
        if not self._valid:
            return 0
        if self._current == 0:
            # 0 has no inverse, treat a * 0^-1 as 0
            self._current = self._b
            return self._current
        self._current = (self._a * inverse(self._current, self._p) + self._b) % self._p
        return self._current

    def rand(self, upper=None) -> int:
        """Field element in [0, p), or an integer in [0, upper) if given.

        No modulo-bias correction is applied to the bounded form, the
        bias is at most upper / p.
        """
        if upper is None:
            return self._step()
        return int(self.rand01() * upper)

    def rand01(self) -> float:
        if not self._valid:
            return 0.0
        return self._step() / self._p

    def rand_interval(self, lo: float, hi: float) -> float:
        """Uniform real in [min(lo, hi), max(lo, hi))."""
        if not self._valid:
            return 0.0
        if lo == hi:
            return lo
        if hi < lo:
            lo, hi = hi, lo
        return self._step() / self._p * (hi - lo) + lo

    def rand_normal(self, mu: float, ss: float) -> float:
        """Normal sample with mean `mu` and variance `ss` (not standard deviation)."""
        if not self._valid:
            return 0.0
        return math.sqrt(ss) * self.rand_std_norm() + mu

    def rand_std_norm(self) -> float:
        # polar Box-Muller, the second value of each accepted pair is kept for the next call
        if self._spare_ready:
            self._spare_ready = False
            return self._spare
        if not self._valid:
            return 0.0

        while True:
            u1 = self.rand_interval(-1.0, 1.0)
            u2 = self.rand_interval(-1.0, 1.0)
            q = u1 * u1 + u2 * u2
            if self.EPS < q <= 1.0:
                break

        r = math.sqrt(-2.0 * math.log(q) / q)
        self._spare = r * u2
        self._spare_ready = True
        return r * u1
