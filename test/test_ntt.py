"""
Tests for the forward/inverse NTT and the NWC (psi) transforms
"""

import random

import numpy as np
import pytest

from nttconv import (
    CoefficientOutOfRangeError,
    InvalidModulusError,
    InvalidRootError,
    InvalidTransformLengthError,
    ModulusTooSmallError,
    N,
    NTTParams,
    PSI,
    Q,
    bit_reverse_order,
    ntt_forward,
    ntt_forward_psi,
    ntt_inverse,
    ntt_inverse_psi,
)
from nttconv.modmath import mod_exp

# Small worked example: n=4, q=7681, psi=1925
N_TOY = 4
Q_TOY = 7681
PSI_TOY = 1925

PARAM_SETS = [
    (4, 7681, 1925),
    (N, Q, PSI),
    (8, 17, None),
    (1, 7681, 7680),
]


def _params(n, q, psi):
    if psi is None:
        return NTTParams.generate(n, q)
    return NTTParams(n, q, psi)


def naive_dft(coeffs, n, q, omega):
    """Direct O(n^2) evaluation at omega^k"""
    return [sum(c * mod_exp(omega, j * k, q) for j, c in enumerate(coeffs)) % q for k in range(n)]


def naive_nwc_ntt(coeffs, n, q, psi):
    """Direct O(n^2) evaluation at psi^(2k+1), natural order"""
    return [
        sum(c * mod_exp(psi, (2 * k + 1) * j, q) for j, c in enumerate(coeffs)) % q
        for k in range(n)
    ]


def test_forward_known_answer():
    assert ntt_forward([1, 2, 3, 4], Q_TOY, PSI_TOY, N_TOY) == [10, 913, 7679, 6764]


def test_forward_psi_known_answer():
    """Output is in bit-reversed order: NO [1467, 2807, 3471, 7621]"""
    g_hat = ntt_forward_psi([1, 2, 3, 4], Q_TOY, PSI_TOY, N_TOY)
    assert g_hat == [1467, 3471, 2807, 7621]
    assert ntt_inverse_psi(g_hat, Q_TOY, PSI_TOY, N_TOY) == [1, 2, 3, 4]


def test_impulse_and_ones():
    impulse = [1] + [0] * (N - 1)
    assert ntt_forward(impulse, Q, PSI, N) == [1] * N
    assert ntt_forward([0] * N, Q, PSI, N) == [0] * N

    ones_hat = ntt_forward([1] * N, Q, PSI, N)
    assert ones_hat[0] == N
    assert ones_hat[1:] == [0] * (N - 1)


@pytest.mark.parametrize("n", [4, 8, 16])
def test_forward_matches_naive_dft(n):
    params = NTTParams.generate(n, 7681)
    random.seed(n)
    poly = [random.randrange(params.q) for _ in range(n)]
    assert ntt_forward(poly, params.q, params.psi, n) == naive_dft(poly, n, params.q, params.omega)


@pytest.mark.parametrize("n", [4, 8, 16])
def test_forward_psi_matches_naive_nwc(n):
    params = NTTParams.generate(n, 7681)
    random.seed(n)
    poly = [random.randrange(params.q) for _ in range(n)]
    bo = ntt_forward_psi(poly, params.q, params.psi, n)
    brv = bit_reverse_order(n)
    no = [bo[brv[k]] for k in range(n)]
    assert no == naive_nwc_ntt(poly, n, params.q, params.psi)


@pytest.mark.parametrize("n, q, psi", PARAM_SETS)
def test_round_trip(n, q, psi):
    """INTT(NTT(x)) = x"""
    params = _params(n, q, psi)
    random.seed(42)
    fixed = [
        [1] + [0] * (n - 1),
        [1] * n,
        [params.q - 1] * n,
    ]
    randomized = [[random.randrange(params.q) for _ in range(n)] for _ in range(5)]
    for poly in fixed + randomized:
        poly_hat = ntt_forward(poly, params.q, params.psi, n)
        assert all(0 <= v < params.q for v in poly_hat)
        assert ntt_inverse(poly_hat, params.q, params.psi, n) == poly

        poly_hat = ntt_forward_psi(poly, params.q, params.psi, n)
        assert ntt_inverse_psi(poly_hat, params.q, params.psi, n) == poly


def test_inverse_then_forward():
    random.seed(3)
    evals = [random.randrange(Q_TOY) for _ in range(N_TOY)]
    coeffs = ntt_inverse(evals, Q_TOY, PSI_TOY, N_TOY)
    assert ntt_forward(coeffs, Q_TOY, PSI_TOY, N_TOY) == evals


def test_linearity():
    """NTT(a*x + b*y) = a*NTT(x) + b*NTT(y)"""
    params = NTTParams.generate(16, 7681)
    q = params.q
    random.seed(5)
    x = [random.randrange(q) for _ in range(16)]
    y = [random.randrange(q) for _ in range(16)]
    a, b = 5, 7

    lhs = ntt_forward([(a * xi + b * yi) % q for xi, yi in zip(x, y)], q, params.psi, 16)
    x_hat = ntt_forward(x, q, params.psi, 16)
    y_hat = ntt_forward(y, q, params.psi, 16)
    rhs = [(a * xh + b * yh) % q for xh, yh in zip(x_hat, y_hat)]
    assert lhs == rhs


def test_numpy_input():
    poly = np.array([1, 2, 3, 4], dtype=np.int64)
    assert ntt_forward(poly, Q_TOY, PSI_TOY, N_TOY) == [10, 913, 7679, 6764]


@pytest.mark.parametrize("transform", [ntt_forward, ntt_inverse, ntt_forward_psi, ntt_inverse_psi])
def test_transform_errors(transform):
    with pytest.raises(InvalidTransformLengthError):
        transform([0, 0, 0], Q_TOY, PSI_TOY, 3)
    with pytest.raises(InvalidTransformLengthError):
        transform([0, 0], Q_TOY, PSI_TOY, N_TOY)
    with pytest.raises(ModulusTooSmallError):
        transform([0, 0, 0, 0], 3, 2, N_TOY)
    with pytest.raises(InvalidModulusError):
        transform([0, 0], 10, 3, 2)
    with pytest.raises(InvalidRootError):
        transform([0, 0, 0, 0], Q_TOY, 2, N_TOY)
    with pytest.raises(CoefficientOutOfRangeError):
        transform([Q_TOY, 0, 0, 0], Q_TOY, PSI_TOY, N_TOY)
    with pytest.raises(CoefficientOutOfRangeError):
        transform([0, -1, 0, 0], Q_TOY, PSI_TOY, N_TOY)
