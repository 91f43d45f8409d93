"""
Number-theoretic transform over Z_q

Two transform pairs are provided:

- ntt_forward / ntt_inverse: the plain length-n NTT, evaluating a
  polynomial at the powers of omega = psi^2. Natural order in and out,
  iterative radix-2 Cooley-Tukey after a bit-reversal permutation.
- ntt_forward_psi / ntt_inverse_psi: the negative-wrapped (NWC) NTT with
  psi-power twiddles. Forward is Cooley-Tukey from normal order (NO) to
  bit-reversed order (BO); inverse is Gentleman-Sande from BO back to NO.
  The x -> psi*x twist is folded into the butterflies, so pointwise
  products of these transforms give negacyclic convolution directly.

Arithmetic runs on numpy object arrays so every intermediate is an exact
Python int.
"""

import numpy as np

from .errors import (
    CoefficientOutOfRangeError,
    InvalidModulusError,
    InvalidRootError,
    InvalidTransformLengthError,
    ModulusTooSmallError,
)
from .modmath import bit_reverse_order, is_power_of_two, is_prime, is_primitive_2n_root, mod_exp, mod_inv


def check_transform_params(q, psi, n):
    """Validate (q, psi, n) for a length-n transform."""
    if not is_power_of_two(n):
        raise InvalidTransformLengthError(f"Transform length must be a power of 2, got {n}")
    if q <= n:
        raise ModulusTooSmallError(f"Modulus {q} must exceed transform length {n}")
    if not is_prime(q):
        raise InvalidModulusError(f"Modulus {q} is not prime")
    if not is_primitive_2n_root(psi, n, q):
        raise InvalidRootError(f"psi={psi} is not a primitive {2 * n}-th root of unity mod {q}")


def check_coefficients(coeffs, q):
    """Return coeffs as Python ints, rejecting any outside [0, q)."""
    values = [int(c) for c in coeffs]
    for i, c in enumerate(values):
        if c < 0 or c >= q:
            raise CoefficientOutOfRangeError(f"Coefficient {i} = {c} outside [0, {q})")
    return values


def _load(coeffs, q, n):
    if len(coeffs) != n:
        raise InvalidTransformLengthError(f"Input must have {n} coefficients, got {len(coeffs)}")
    return np.array(check_coefficients(coeffs, q), dtype=object)


def _cooley_tukey(values, root, q):
    """Radix-2 NTT of a natural-order vector with n-th root `root`."""
    n = len(values)
    result = values[bit_reverse_order(n)]

    length = 2
    while length <= n:
        half = length // 2
        w_len = mod_exp(root, n // length, q)
        for start in range(0, n, length):
            w = 1
            for j in range(half):
                u = result[start + j]
                v = (result[start + j + half] * w) % q
                result[start + j] = (u + v) % q
                result[start + j + half] = (u - v) % q
                w = (w * w_len) % q
        length *= 2

    return result


def _scale_by_n_inv(values, q, n):
    return (values * mod_inv(n, q)) % q


def ntt_forward(poly, q, psi, n):
    """
    Forward NTT: coefficients -> evaluations at omega^0, ..., omega^(n-1)

    Args:
        poly: n coefficients in [0, q)
        q: Prime modulus, q = 1 mod 2n
        psi: Primitive 2n-th root of unity mod q (omega = psi^2)
        n: Transform length (power of 2)

    Returns:
        List of n values in natural order
    """
    check_transform_params(q, psi, n)
    values = _load(poly, q, n)
    omega = (psi * psi) % q
    return _cooley_tukey(values, omega, q).astype(np.int64).tolist()


def ntt_inverse(transformed, q, psi, n):
    """
    Inverse NTT: evaluations -> coefficients

    Runs the forward schedule with omega^(-1) and scales by n^(-1) mod q.
    """
    check_transform_params(q, psi, n)
    values = _load(transformed, q, n)
    omega_inv = mod_inv((psi * psi) % q, q)
    result = _cooley_tukey(values, omega_inv, q)

    return _scale_by_n_inv(result, q, n).astype(np.int64).tolist()


def _twiddle_table(root, n, q):
    """root^brv[i] mod q for i in [0, n), the order the NWC butterflies consume them."""
    return [mod_exp(root, int(p), q) for p in bit_reverse_order(n)]


def ntt_forward_psi(coeffs, q, psi, n):
    """
    Fast NWC NTT using Cooley-Tukey with psi-based twiddles

    Input: Normal Order (NO)
    Output: Bit-Reversed Order (BO)

    Output position brv[k] holds the evaluation at psi^(2k+1).
    """
    check_transform_params(q, psi, n)
    result = _load(coeffs, q, n)
    zetas = _twiddle_table(psi, n, q)

    # blocks halve in size each stage; block b of a stage with t blocks uses zetas[t + b]
    k = 1
    half = n // 2
    while half >= 1:
        for start in range(0, n, 2 * half):
            w = zetas[k]
            k += 1
            for j in range(start, start + half):
                v = (result[j + half] * w) % q
                result[j], result[j + half] = (result[j] + v) % q, (result[j] - v) % q
        half //= 2

    return result.astype(np.int64).tolist()


def ntt_inverse_psi(coeffs, q, psi, n):
    """
    Fast inverse NWC NTT using Gentleman-Sande with psi^(-1) twiddles

    Input: Bit-Reversed Order (BO), as produced by ntt_forward_psi
    Output: Normal Order (NO)
    """
    check_transform_params(q, psi, n)
    result = _load(coeffs, q, n)
    zetas_inv = _twiddle_table(mod_inv(psi, q), n, q)

    half = 1
    while half < n:
        blocks = n // (2 * half)
        for b in range(blocks):
            w = zetas_inv[blocks + b]
            start = 2 * half * b
            for j in range(start, start + half):
                u, v = result[j], result[j + half]
                result[j] = (u + v) % q
                result[j + half] = ((u - v) * w) % q
        half *= 2

    return _scale_by_n_inv(result, q, n).astype(np.int64).tolist()
