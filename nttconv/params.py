"""
NTT parameter sets

Default parameters: N=256, q=8380417, psi=1239911 (primitive 512-th root)
"""

import logging
from dataclasses import dataclass

from .errors import InvalidModulusError, InvalidRootError, InvalidTransformLengthError, ModulusTooSmallError
from .modmath import find_modulus, find_psi, is_power_of_two, is_prime, is_primitive_2n_root, mod_inv

logger = logging.getLogger(__name__)

# Default parameters
N = 256
Q = 8380417
PSI = 1239911      # Primitive 2N-th root (psi^512 = 1, psi^256 = -1)
OMEGA = 169688     # omega = psi^2 (primitive N-th root)

# Below this ring dimension the dispatcher uses the schoolbook product
NAIVE_THRESHOLD = 16

# name -> (n, q, psi); psi=None is searched on first use
PRESETS = {
    "toy": (4, 7681, 1925),
    "dilithium": (N, Q, PSI),
    "kyber-like": (256, 7681, None),
    "falcon": (512, 12289, None),
}


@dataclass(frozen=True)
class NTTParams:
    """A validated (n, q, psi) triple for length-n transforms."""

    n: int
    q: int
    psi: int

    def __post_init__(self):
        if not is_power_of_two(self.n):
            raise InvalidTransformLengthError(f"Transform length must be a power of 2, got {self.n}")
        if self.q <= self.n:
            raise ModulusTooSmallError(f"Modulus {self.q} must exceed transform length {self.n}")
        if not is_prime(self.q):
            raise InvalidModulusError(f"Modulus {self.q} is not prime")
        if (self.q - 1) % (2 * self.n) != 0:
            raise InvalidModulusError(f"Modulus {self.q} is not 1 mod {2 * self.n}")
        if not is_primitive_2n_root(self.psi, self.n, self.q):
            raise InvalidRootError(
                f"psi={self.psi} is not a primitive {2 * self.n}-th root of unity mod {self.q}"
            )

    @property
    def omega(self):
        return (self.psi * self.psi) % self.q

    @property
    def psi_inv(self):
        return mod_inv(self.psi, self.q)

    @property
    def omega_inv(self):
        return mod_inv(self.omega, self.q)

    @property
    def n_inv(self):
        return mod_inv(self.n, self.q)

    @classmethod
    def generate(cls, n, min_modulus=None):
        """Pick the smallest NTT-friendly prime >= min_modulus and a psi for it."""
        if not is_power_of_two(n):
            raise InvalidTransformLengthError(f"Transform length must be a power of 2, got {n}")
        q = find_modulus(n, min_modulus)
        psi = find_psi(n, q)
        logger.debug("Generated parameters n=%d, q=%d, psi=%d", n, q, psi)
        return cls(n, q, psi)

    @classmethod
    def preset(cls, name):
        """Parameters for one of the named sets in PRESETS."""
        try:
            n, q, psi = PRESETS[name]
        except KeyError:
            raise ValueError(f"Unknown parameter set {name!r}, expected one of {sorted(PRESETS)}") from None
        if psi is None:
            psi = find_psi(n, q)
        return cls(n, q, psi)
