"""Modular arithmetic, number-theoretic transform, prime sieve and 128-bit text I/O."""

from __future__ import annotations

MOD = 10**9 + 7
PRIMITIVE_ROOT = 3

INT128_MIN = -(1 << 127)
INT128_MAX = (1 << 127) - 1


class Mint:
    """Integer modulo MOD."""

    __slots__ = ("v",)

    def __init__(self, value: int = 0) -> None:
        self.v = int(value) % MOD

    @staticmethod
    def _coerce(other):
        if isinstance(other, Mint):
            return other
        if isinstance(other, int):
            return Mint(other)
        return None

    def __add__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else Mint(self.v + o.v)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else Mint(self.v - o.v)

    def __rsub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else Mint(o.v - self.v)

    def __mul__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else Mint(self.v * o.v)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self * o.inv()

    def __rtruediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else o * self.inv()

    def __neg__(self) -> Mint:
        return Mint(-self.v)

    def __eq__(self, other) -> bool:
        o = self._coerce(other)
        return NotImplemented if o is None else self.v == o.v

    def __hash__(self) -> int:
        return hash(self.v)

    def __int__(self) -> int:
        return self.v

    def __str__(self) -> str:
        return str(self.v)

    def __repr__(self) -> str:
        return f"Mint({self.v})"

    def pow(self, exponent: int) -> Mint:
        """Return self ** exponent; a non-positive exponent gives 1."""
        if exponent <= 0:
            return Mint(1)
        return Mint(pow(self.v, exponent, MOD))

    def inv(self) -> Mint:
        """Return the multiplicative inverse."""
        if self.v == 0:
            raise ZeroDivisionError("zero has no inverse modulo MOD")
        return self.pow(MOD - 2)


def mod_exp(base: int, exp: int, mod: int) -> int:
    """Return base ** exp modulo mod; a non-positive exponent gives 1."""
    if exp <= 0:
        return 1
    return pow(base, exp, mod)


def ntt(values: list[int], invert: bool) -> list[int]:
    """Return the transform of values, whose length must be a power of two."""
    a = list(values)
    n = len(a)
    if n & (n - 1):
        raise ValueError("length must be a power of two")
    j = 0
    for i in range(1, n):
        bit = n // 2
        while j >= bit:
            j -= bit
            bit //= 2
        j += bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    length = 2
    while length <= n:
        wlen = mod_exp(PRIMITIVE_ROOT, (MOD - 1) // length, MOD)
        if invert:
            wlen = mod_exp(wlen, MOD - 2, MOD)
        half = length // 2
        for start in range(0, n, length):
            w = 1
            for k in range(start, start + half):
                u = a[k]
                v = a[k + half] * w % MOD
                a[k] = (u + v) % MOD
                a[k + half] = (u - v) % MOD
                w = w * wlen % MOD
        length *= 2
    if invert:
        n_inv = mod_exp(n, MOD - 2, MOD)
        a = [x * n_inv % MOD for x in a]
    return a


def multiply(a: list[int], b: list[int]) -> list[int]:
    """Multiply two coefficient lists by transform; trailing zeros are dropped."""
    n = 1
    while n < len(a) + len(b):
        n *= 2
    fa = ntt(list(a) + [0] * (n - len(a)), False)
    fb = ntt(list(b) + [0] * (n - len(b)), False)
    product = ntt([x * y % MOD for x, y in zip(fa, fb)], True)
    while product and product[-1] == 0:
        product.pop()
    return product


def sieve(limit: int) -> list[int]:
    """Return all primes not greater than limit."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    i = 3
    while i * i <= limit:
        if is_prime[i]:
            is_prime[i * i::2 * i] = bytes(len(range(i * i, limit + 1, 2 * i)))
        i += 2
    return [2] + [k for k in range(3, limit + 1, 2) if is_prime[k]]


def _check_range(value: int) -> None:
    if not INT128_MIN <= value <= INT128_MAX:
        raise OverflowError("value does not fit in a signed 128-bit integer")


def parse_int128(text: str) -> int:
    """Parse a non-negative decimal number that fits in a signed 128-bit integer."""
    digits = text.strip()
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise ValueError(f"not a decimal number: {text!r}")
    value = 0
    for c in digits:
        value = value * 10 + (ord(c) - ord("0"))
    _check_range(value)
    return value


def format_int128(value: int) -> str:
    """Format a signed 128-bit integer in decimal."""
    _check_range(value)
    return str(value)