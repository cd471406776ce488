"""
Setup script for building the Cython gradient-map kernel in gradientmap.kernels

Usage:
    python setup_cython.py build_ext --inplace

Without the compiled kernel gradientmap falls back to numpy.
"""

from setuptools import setup, Extension
from Cython.Build import cythonize
import numpy as np
import os

# Get the directory containing this script
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
KERNELS_DIR = os.path.join(BASE_DIR, "gradientmap", "kernels")

extensions = [
    Extension(
        "gradientmap.kernels._gradient_map",
        [os.path.join(KERNELS_DIR, "_gradient_map.pyx")],
        include_dirs=[np.get_include()],
        # no FMA contraction: results must match the numpy fallback bit for bit
        extra_compile_args=['-O3', '-ffp-contract=off'],
    ),
]

# Compiler directives for Cython
compiler_directives = {
    'language_level': '3',
    'boundscheck': False,
    'wraparound': False,
    'nonecheck': False,
    'cdivision': True,
    'initializedcheck': False,
}

setup(
    name="gradientmap-cython-extensions",
    ext_modules=cythonize(
        extensions,
        compiler_directives=compiler_directives,
        annotate=False,  # Set to True to generate HTML annotation files
    ),
    include_dirs=[np.get_include()],
)

print("\n" + "=" * 70)
print("Cython extensions built successfully!")
print("=" * 70)
print("\nBuilt extensions:")
for ext in extensions:
    print(f"  - {ext.name}")
print("\nThe compiled kernel is picked up automatically:")
print("  >>> from gradientmap import get_backend")
print("  >>> get_backend()")
print("  <Backend.CYTHON: 'cython'>")
print("=" * 70)
