"""
NTT-based polynomial multiplication

cyclic:      c = INTT(NTT(a) o NTT(b))                      mod x^n - 1
negacyclic:  c = psi^-i * INTT(NTT(psi^i a) o NTT(psi^i b))  mod x^n + 1
merged:      c = INTT_psi(NTT_psi(a) o NTT_psi(b))           mod x^n + 1

`convolve` picks the schoolbook or transform path from the operand
lengths and the parameters it is given.
"""

import logging

import numpy as np

from .errors import EmptyInputError, InvalidTransformLengthError
from .modmath import mod_inv
from .naive import linear_convolve, negative_wrapped_convolve, positive_wrapped_convolve
from .ntt import check_coefficients, ntt_forward, ntt_forward_psi, ntt_inverse, ntt_inverse_psi
from .params import NAIVE_THRESHOLD

logger = logging.getLogger(__name__)

KINDS = ("linear", "cyclic", "negacyclic")


def _pad(coeffs, q, n):
    if len(coeffs) == 0:
        raise EmptyInputError("Convolution needs non-empty operands")
    if len(coeffs) > n:
        raise InvalidTransformLengthError(f"Operand of length {len(coeffs)} exceeds transform length {n}")
    values = check_coefficients(coeffs, q)
    return values + [0] * (n - len(values))


def _twist(coeffs, root, q):
    """Multiply coefficient i by root^i mod q."""
    out = []
    w = 1
    for c in coeffs:
        out.append((c * w) % q)
        w = (w * root) % q
    return out


def pointwise_multiply(a_hat, b_hat, q):
    """Element-wise product of two transformed vectors mod q."""
    a = np.array([int(x) for x in a_hat], dtype=object)
    b = np.array([int(x) for x in b_hat], dtype=object)
    return ((a * b) % q).astype(np.int64).tolist()


def cyclic_convolve_fast(g, h, q, psi, n):
    """
    Cyclic convolution mod (x^n - 1, q) via the length-n NTT.

    Operands shorter than n are zero-padded.
    """
    a = _pad(g, q, n)
    b = _pad(h, q, n)

    a_hat = ntt_forward(a, q, psi, n)
    b_hat = ntt_forward(b, q, psi, n)
    c_hat = pointwise_multiply(a_hat, b_hat, q)
    return ntt_inverse(c_hat, q, psi, n)


def negacyclic_convolve_fast(g, h, q, psi, n):
    """
    Negacyclic convolution mod (x^n + 1, q) via the length-n NTT.

    Substituting x -> psi*x turns x^n + 1 into psi^n (x^n - 1) = -(x^n - 1),
    so twisting both operands by psi^i, convolving cyclically and
    untwisting by psi^-i gives the negacyclic product.
    """
    a = _pad(g, q, n)
    b = _pad(h, q, n)

    a_hat = ntt_forward(_twist(a, psi, q), q, psi, n)
    b_hat = ntt_forward(_twist(b, psi, q), q, psi, n)
    c = ntt_inverse(pointwise_multiply(a_hat, b_hat, q), q, psi, n)
    return _twist(c, mod_inv(psi, q), q)


def negacyclic_convolve_merged(g, h, q, psi, n):
    """
    Negacyclic convolution using the NWC transforms.

    Both transforms emit bit-reversed order, so matching indices are
    multiplied directly.
    """
    a = _pad(g, q, n)
    b = _pad(h, q, n)

    a_hat = ntt_forward_psi(a, q, psi, n)
    b_hat = ntt_forward_psi(b, q, psi, n)
    return ntt_inverse_psi(pointwise_multiply(a_hat, b_hat, q), q, psi, n)


def convolve(g, h, kind="negacyclic", params=None, threshold=NAIVE_THRESHOLD):
    """
    Multiply two polynomials under the given ring structure.

    Args:
        g, h: Coefficient sequences
        kind: "linear", "cyclic" or "negacyclic"
        params: NTTParams; without it the exact schoolbook product is returned
        threshold: Ring dimensions below this use the schoolbook product

    Returns:
        List of coefficients; reduced into [0, q) whenever params is given
    """
    if kind not in KINDS:
        raise ValueError(f"Unknown convolution kind {kind!r}, expected one of {KINDS}")

    q = None if params is None else params.q

    if kind == "linear":
        return linear_convolve(g, h, q=q)

    naive = positive_wrapped_convolve if kind == "cyclic" else negative_wrapped_convolve
    fast = cyclic_convolve_fast if kind == "cyclic" else negacyclic_convolve_fast

    if params is None:
        return naive(g, h)

    n = params.n
    if max(len(g), len(h)) > n:
        raise InvalidTransformLengthError(
            f"Operands of length {len(g)} and {len(h)} exceed transform length {n}"
        )
    if n < threshold:
        logger.debug("%s convolution of size %d: schoolbook path", kind, n)
        return naive(g, h, n=n, q=q)

    logger.debug("%s convolution of size %d: NTT path", kind, n)
    return fast(
        [int(c) % q for c in g],
        [int(c) % q for c in h],
        q,
        params.psi,
        n,
    )
