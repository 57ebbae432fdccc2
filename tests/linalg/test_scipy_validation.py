"""
Cross-check determinant() and inverse() against scipy.linalg.
"""

import numpy as np
import pytest
from scipy import linalg as sla

from pylean import Matrix
from pylean.linalg import determinant, inverse


def _well_conditioned(rng, order):
    data = rng.uniform(-1.0, 1.0, size=(order, order)) + order * np.eye(order)
    return Matrix(np.float64, rows=data)


@pytest.mark.parametrize("order", [2, 3, 4, 5])
def test_determinant(rng, order):
    m = _well_conditioned(rng, order)
    np.testing.assert_allclose(determinant(m), sla.det(m.to_array()), rtol=1e-10)


@pytest.mark.parametrize("order", [2, 3, 4, 5])
def test_inverse(rng, order):
    m = _well_conditioned(rng, order)
    np.testing.assert_allclose(
        inverse(m).to_array(), sla.inv(m.to_array()), rtol=1e-9, atol=1e-12,
    )


def test_integer_determinant(rng):
    m = Matrix.random(5, 5, -9, 9, dtype=np.int64, rng=rng)
    assert determinant(m) == round(sla.det(m.to_array().astype(np.float64)))
