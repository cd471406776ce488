import sys
import os

import numpy as np
import pytest

# Add the project root to sys.path so the tests run without installing
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from gradientmap.kernels import available_backends  # noqa: E402


@pytest.fixture(params=[b.value for b in available_backends()])
def backend(request):
    """Every kernel backend importable here (numpy always, cython when built)."""
    return request.param


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
