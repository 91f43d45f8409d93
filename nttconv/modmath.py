"""
Modular arithmetic over Z_q for the NTT routines

Covers the scalar operations used by the butterflies, the search for a
primitive 2n-th root of unity (psi) and the search for an NTT-friendly
prime q = k*2n + 1.
"""

import logging

import numpy as np
import sympy

from .errors import InvalidTransformLengthError, ModulusTooSmallError, NoPrimitiveRootError

logger = logging.getLogger(__name__)


def mod_add(a, b, q):
    """Modular addition"""
    return (a + b) % q


def mod_sub(a, b, q):
    """Modular subtraction, result in [0, q)"""
    return (a - b) % q


def mod_mul(a, b, q):
    """Modular multiplication"""
    return (a * b) % q


def mod_exp(base, exp, mod):
    """Modular exponentiation, left-to-right square-and-multiply (exp >= 0)"""
    if exp < 0:
        raise ValueError(f"Exponent must be non-negative, got {exp}")
    base = base % mod
    result = 1 % mod
    for bit in bin(exp)[2:]:
        result = (result * result) % mod
        if bit == "1":
            result = (result * base) % mod
    return result


def mod_inv(a, mod):
    """Modular inverse, iterative extended Euclid"""
    r0, r1 = a % mod, mod
    s0, s1 = 1, 0
    while r1:
        quotient = r0 // r1
        r0, r1 = r1, r0 - quotient * r1
        s0, s1 = s1, s0 - quotient * s1
    if r0 != 1:
        raise ValueError(f"{a} has no inverse mod {mod}")
    return s0 % mod


def is_power_of_two(n) -> bool:
    """Return True if n is a positive power of 2."""
    if n <= 0:
        return False
    return (n & (n - 1)) == 0


def is_prime(q) -> bool:
    return bool(sympy.isprime(q))


def bit_reverse_order(n):
    """
    Generate bit-reversed indices for size n.

    For n=4, indices [0, 1, 2, 3] -> [0, 2, 1, 3].
    """
    bits = n.bit_length() - 1
    table = np.zeros(n, dtype=int)
    for i in range(1, n):
        # shift the previous entry and bring the low bit of i in at the top
        table[i] = (table[i >> 1] >> 1) | ((i & 1) << (bits - 1))
    return table


def is_primitive_2n_root(psi, n, q) -> bool:
    """
    Check that psi has multiplicative order exactly 2n mod q.

    Only defined for n a power of two, where the order test reduces to
    psi^n = -1 (which also implies psi^(2n) = 1). Other n give False.
    """
    if not is_power_of_two(n):
        return False
    return 0 < psi < q and mod_exp(psi, n, q) == q - 1


def find_psi(n, q, max_search=None):
    """
    Find a primitive 2n-th root of unity psi mod q

    Each candidate generator g is raised to (q-1)/(2n); the result is
    accepted when its order is exactly 2n (psi^n = -1 mod q).

    Args:
        n: NTT size (power of 2)
        q: Prime modulus with q = 1 mod 2n
        max_search: Upper bound (exclusive) on candidate generators,
            defaults to q

    Returns:
        psi
    """
    if not is_power_of_two(n):
        raise InvalidTransformLengthError(f"Transform length must be a power of 2, got {n}")
    if q <= n:
        raise ModulusTooSmallError(f"Modulus {q} must exceed transform length {n}")
    if (q - 1) % (2 * n) != 0:
        raise NoPrimitiveRootError(f"{2 * n} does not divide q-1 = {q - 1}")

    cofactor = (q - 1) // (2 * n)
    limit = q if max_search is None else min(max_search, q)
    for g in range(2, limit):
        psi = mod_exp(g, cofactor, q)
        if is_primitive_2n_root(psi, n, q):
            logger.debug("Found psi=%d from generator %d for n=%d, q=%d", psi, g, n, q)
            return psi

    raise NoPrimitiveRootError(
        f"No primitive {2 * n}-th root of unity mod {q} in [2, {limit})"
    )


def find_modulus(n, min_value=None):
    """
    Smallest prime q >= min_value with q = 1 mod 2n

    The default lower bound 2n + 1 is the smallest value that can work.
    """
    if not is_power_of_two(n):
        raise InvalidTransformLengthError(f"Transform length must be a power of 2, got {n}")
    step = 2 * n
    if min_value is None or min_value <= step:
        min_value = step + 1
    # first candidate of the form k*2n + 1 not below min_value
    q = ((min_value - 1 + step - 1) // step) * step + 1
    while not is_prime(q):
        q += step
    logger.debug("Selected modulus q=%d for n=%d", q, n)
    return q


def center(coeffs, q):
    """Map residues mod q onto the symmetric range (-q/2, q/2]."""
    out = []
    for c in coeffs:
        c = int(c) % q
        if c > q // 2:
            c -= q
        out.append(c)
    return out
