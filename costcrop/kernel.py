"""Square weighting kernels used by obstacle inflation.

A kernel is an odd-sized square of non-negative weights. Any tap with a
positive weight is part of the kernel's support; the weight magnitudes only
matter to callers that inspect the raw response.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

import numpy as np
from scipy.signal import windows

from .errors import InvalidKernel

KERNEL_SHAPES = ("uniform", "ellipse", "gaussian")


@dataclass(frozen=True, eq=False)
class Kernel:
    """Immutable ``size x size`` weight matrix stored row-major."""

    size: int
    weights: np.ndarray

    def __post_init__(self) -> None:
        size = self.size
        if isinstance(size, bool) or not isinstance(size, numbers.Integral):
            raise InvalidKernel(f"kernel size must be an integer, got {size!r}.")
        if size < 1 or size % 2 == 0:
            raise InvalidKernel(f"kernel size must be a positive odd integer, got {size}.")

        try:
            flat = np.array(self.weights, dtype=float).ravel()
        except (TypeError, ValueError) as exc:
            raise InvalidKernel(f"kernel weights must be numeric: {exc}") from exc
        if flat.shape[0] != size * size:
            raise InvalidKernel(
                f"kernel of size {size} needs {size * size} weights, got {flat.shape[0]}."
            )
        if not np.all(np.isfinite(flat)):
            raise InvalidKernel("kernel weights must be finite.")
        if np.any(flat < 0.0):
            raise InvalidKernel("kernel weights must be non-negative.")

        flat.setflags(write=False)
        object.__setattr__(self, "size", int(size))
        object.__setattr__(self, "weights", flat)

    @property
    def half(self) -> int:
        """Offset of the centre tap from the kernel edge."""
        return self.size // 2

    def as_array(self) -> np.ndarray:
        """Return the read-only (size, size) weight matrix."""
        return self.weights.reshape(self.size, self.size)

    def support(self) -> np.ndarray:
        """Boolean (size, size) array of taps with positive weight."""
        return self.as_array() > 0.0

    def normalized(self) -> "Kernel":
        """Return a copy whose weights sum to 1 (unchanged if all weights are zero)."""
        total = float(self.weights.sum())
        if total <= 0.0:
            return Kernel(self.size, self.weights.copy())
        return Kernel(self.size, self.weights / total)


def kernel_from_weights(weights) -> Kernel:
    """Wrap an explicit square weight matrix."""
    arr = np.asarray(weights, dtype=float)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise InvalidKernel(f"kernel weights must be a square 2D matrix, got shape {arr.shape}.")
    return Kernel(int(arr.shape[0]), arr)


def uniform_kernel(size: int) -> Kernel:
    """All-ones kernel: classic binary dilation over a square."""
    _check_size(size)
    return Kernel(size, np.ones(size * size, dtype=float))


def ellipse_kernel(size: int) -> Kernel:
    """Elliptical structuring element inscribed in a ``size x size`` square.

    Row ``i`` is filled over ``[c - dx, c + dx]`` where
    ``dx = round(c * sqrt(1 - ((i - r) / r)^2))``.
    """
    _check_size(size)
    r = size // 2
    c = size // 2
    inv_r2 = 1.0 / float(r * r) if r else 0.0
    weights = np.zeros((size, size), dtype=float)
    for i in range(size):
        dy = i - r
        if abs(dy) > r:
            continue
        dx = int(round(c * math.sqrt((r * r - dy * dy) * inv_r2)))
        j1 = max(c - dx, 0)
        j2 = min(c + dx + 1, size)
        weights[i, j1:j2] = 1.0
    return Kernel(size, weights)


def default_sigma(size: int) -> float:
    """Sigma derived from kernel size when none is given."""
    return 0.3 * ((size - 1) * 0.5 - 1.0) + 0.8


def gaussian_kernel(size: int, sigma: float = 0.0, normalize: bool = True) -> Kernel:
    """Separable 2D Gaussian kernel built as the outer product of a 1D window.

    ``sigma <= 0`` selects :func:`default_sigma`.
    """
    _check_size(size)
    sigma = float(sigma)
    if not math.isfinite(sigma):
        raise InvalidKernel(f"gaussian sigma must be finite, got {sigma}.")
    if sigma <= 0.0:
        sigma = default_sigma(size)

    g = windows.gaussian(size, std=sigma, sym=True)
    if normalize:
        g = g / g.sum()
    return Kernel(size, np.outer(g, g))


def build_kernel(shape: str, size: int, sigma: float = 0.0, normalize: bool = True) -> Kernel:
    """Build a kernel by shape name."""
    name = str(shape).lower()
    if name == "uniform":
        return uniform_kernel(size)
    if name == "ellipse":
        return ellipse_kernel(size)
    if name == "gaussian":
        return gaussian_kernel(size, sigma=sigma, normalize=normalize)
    joined = ", ".join(KERNEL_SHAPES)
    raise InvalidKernel(f"kernel shape must be one of: {joined}. Got '{shape}'.")


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 1 or size % 2 == 0:
        raise InvalidKernel(f"kernel size must be a positive odd integer, got {size!r}.")
