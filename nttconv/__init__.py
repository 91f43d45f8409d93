"""Polynomial convolution in Z[x], Z_q[x]/(x^n - 1) and Z_q[x]/(x^n + 1) with NTT acceleration."""

import logging

from .convolution import (
    convolve,
    cyclic_convolve_fast,
    negacyclic_convolve_fast,
    negacyclic_convolve_merged,
    pointwise_multiply,
)
from .errors import (
    CoefficientOutOfRangeError,
    EmptyInputError,
    InvalidModulusError,
    InvalidRootError,
    InvalidTransformLengthError,
    ModulusTooSmallError,
    NoPrimitiveRootError,
    NTTError,
)
from .modmath import (
    bit_reverse_order,
    center,
    find_modulus,
    find_psi,
    mod_add,
    mod_exp,
    mod_inv,
    mod_mul,
    mod_sub,
)
from .naive import linear_convolve, negative_wrapped_convolve, positive_wrapped_convolve
from .ntt import ntt_forward, ntt_forward_psi, ntt_inverse, ntt_inverse_psi
from .params import N, NAIVE_THRESHOLD, OMEGA, PRESETS, PSI, Q, NTTParams

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "N",
    "Q",
    "PSI",
    "OMEGA",
    "NAIVE_THRESHOLD",
    "PRESETS",
    "NTTParams",
    "mod_add",
    "mod_sub",
    "mod_mul",
    "mod_exp",
    "mod_inv",
    "bit_reverse_order",
    "center",
    "find_modulus",
    "find_psi",
    "linear_convolve",
    "positive_wrapped_convolve",
    "negative_wrapped_convolve",
    "ntt_forward",
    "ntt_inverse",
    "ntt_forward_psi",
    "ntt_inverse_psi",
    "pointwise_multiply",
    "cyclic_convolve_fast",
    "negacyclic_convolve_fast",
    "negacyclic_convolve_merged",
    "convolve",
    "NTTError",
    "EmptyInputError",
    "InvalidTransformLengthError",
    "ModulusTooSmallError",
    "InvalidModulusError",
    "NoPrimitiveRootError",
    "InvalidRootError",
    "CoefficientOutOfRangeError",
]
