"""
Schoolbook polynomial products

Direct double-loop convolutions in Z[x], Z[x]/(x^n - 1) and Z[x]/(x^n + 1).
These are the O(n^2) oracles the NTT path is checked against, and the
fallback for lengths where a transform does not pay off.

Accumulation is exact unless a modulus q is passed, in which case every
partial sum is reduced and results lie in [0, q).
"""

from .errors import EmptyInputError, InvalidTransformLengthError


def _check_operands(g, h):
    if len(g) == 0 or len(h) == 0:
        raise EmptyInputError(
            f"Convolution needs non-empty operands, got lengths {len(g)} and {len(h)}"
        )


def _ring_dimension(g, h, n):
    if n is None:
        return max(len(g), len(h))
    if n < 1:
        raise InvalidTransformLengthError(f"Ring dimension must be positive, got {n}")
    return n


def linear_convolve(g, h, q=None):
    """Multiply polynomials: return g*h, length len(g)+len(h)-1."""
    _check_operands(g, h)
    res = [0] * (len(g) + len(h) - 1)
    for i in range(len(g)):
        for j in range(len(h)):
            res[i + j] += int(g[i]) * int(h[j])
            if q is not None:
                res[i + j] %= q
    return res


def positive_wrapped_convolve(g, h, n=None, q=None):
    """
    Multiply polynomials g*h mod x^n - 1 (cyclic convolution).

    Exponents >= n fold back onto (i+j) mod n with coefficient +1.
    n defaults to max(len(g), len(h)); shorter operands are zero-padded.
    """
    _check_operands(g, h)
    n = _ring_dimension(g, h, n)
    res = [0] * n
    for i in range(len(g)):
        for j in range(len(h)):
            k = (i + j) % n
            res[k] += int(g[i]) * int(h[j])
            if q is not None:
                res[k] %= q
    return res


def negative_wrapped_convolve(g, h, n=None, q=None):
    """
    Multiply polynomials g*h mod x^n + 1 (negacyclic convolution).

    Every wrap past x^n flips the sign, so the term g[i]*h[j] lands on
    (i+j) mod n with sign (-1)^((i+j) // n).
    """
    _check_operands(g, h)
    n = _ring_dimension(g, h, n)
    res = [0] * n
    for i in range(len(g)):
        for j in range(len(h)):
            wraps, k = divmod(i + j, n)
            # product taken at full precision before the sign
            term = int(g[i]) * int(h[j])
            if wraps % 2:
                res[k] -= term
            else:
                res[k] += term
            if q is not None:
                res[k] %= q
    return res
