"""
Gradient-map kernels with a Cython-accelerated backend.

Both backends take the same inputs and produce identical bytes; the compiled
one is used when it has been built.
"""

from enum import Enum
from typing import List, Optional, Union
import warnings
import numpy as np
from numpy import ndarray as NDArray

from ..buffer.pixel_buffer import PixelBufferView
from . import gradient_map_fallback


class Backend(str, Enum):
    """Kernel implementations."""
    CYTHON = "cython"
    NUMPY = "numpy"


# Try to import Cython implementation first
try:
    from ._gradient_map import apply_gradient_map as _compiled_gradient_map  # type: ignore
    HAS_COMPILED = True
except ImportError:
    # If Cython extension is not built, use numpy fallback
    warnings.warn(
        "Cython gradient-map extension not found, using numpy fallback. "
        "Performance may be reduced.",
        ImportWarning
    )
    _compiled_gradient_map = None
    HAS_COMPILED = False


def _run_cython(view: PixelBufferView, start: NDArray, end: NDArray) -> None:
    region = view.region
    if region.is_empty:
        return
    _compiled_gradient_map(
        view.data,
        view.region_start,
        view.stride,
        view.pixel_size,
        region.width,
        region.height,
        start,
        end,
    )


def _run_numpy(view: PixelBufferView, start: NDArray, end: NDArray) -> None:
    gradient_map_fallback.apply_gradient_map(view.region_array(), start, end)


_runners = {
    Backend.CYTHON: _run_cython,
    Backend.NUMPY: _run_numpy,
}


def available_backends() -> List[Backend]:
    """Backends importable in this environment, preferred first."""
    if HAS_COMPILED:
        return [Backend.CYTHON, Backend.NUMPY]
    return [Backend.NUMPY]


def get_backend() -> Backend:
    """The backend used when none is requested."""
    return available_backends()[0]


def run_gradient_map(
    view: PixelBufferView,
    start: NDArray,
    end: NDArray,
    backend: Optional[Union[Backend, str]] = None,
) -> None:
    """
    Apply the gradient map to ``view`` in place.

    Args:
        view: Validated pixel buffer view
        start: RGBA of the bright gradient end, any numeric sequence
        end: RGBA of the dark gradient end, any numeric sequence
        backend: Force a backend; defaults to :func:`get_backend`
    """
    chosen = get_backend() if backend is None else Backend(backend)
    if chosen not in available_backends():
        raise ValueError(f"Kernel backend {chosen.value!r} is not available")

    start = np.ascontiguousarray(start, dtype=np.float64)
    end = np.ascontiguousarray(end, dtype=np.float64)
    if start.shape != (4,) or end.shape != (4,):
        raise ValueError("Gradient colors must have exactly 4 channels (RGBA)")

    _runners[chosen](view, start, end)


__all__ = [
    "Backend",
    "HAS_COMPILED",
    "available_backends",
    "get_backend",
    "run_gradient_map",
]
