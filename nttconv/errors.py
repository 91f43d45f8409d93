"""Exceptions raised by the convolution and NTT routines."""


class NTTError(ValueError):
    """Base class for invalid arguments to the convolution/NTT routines."""


class EmptyInputError(NTTError):
    """An operand polynomial has no coefficients."""


class InvalidTransformLengthError(NTTError):
    """Transform length is not a power of two, or does not match the input."""


class ModulusTooSmallError(NTTError):
    """No n-th root of unity can exist because q <= n."""


class InvalidModulusError(NTTError):
    """Modulus is not a prime congruent to 1 mod 2n."""


class NoPrimitiveRootError(NTTError):
    """No primitive 2n-th root of unity was found mod q."""


class InvalidRootError(NTTError):
    """Supplied psi is not a primitive 2n-th root of unity mod q."""


class CoefficientOutOfRangeError(NTTError):
    """A coefficient lies outside [0, q)."""
