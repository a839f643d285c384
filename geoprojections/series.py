"""
Series expansions for the integrals that appear in the geodesic problem on an
ellipsoid of revolution, and their evaluation by Clenshaw summation.

With k2 = 4 * eps / (1 - eps)**2 and the third flattening n = f / (2 - f):

    I1 = integrate( sqrt(1 + k2 * sin(s)**2), s, 0, sigma )
       ~ A1 * ( sigma + sum(C1[l] * sin(2*l*sigma), l, 1, order) )

    I2 = integrate( 1 / sqrt(1 + k2 * sin(s)**2), s, 0, sigma )
       ~ A2 * ( sigma + sum(C2[l] * sin(2*l*sigma), l, 1, order) )

    I3 = integrate( (2 - f) / (1 + (1 - f) * sqrt(1 + k2 * sin(s)**2)), s, 0, sigma )
       ~ A3 * ( sigma + sum(C3[l] * sin(2*l*sigma), l, 1, order - 1) )

C1p holds the coefficients of the reverted series for I1 (sigma as a function
of the distance). The coefficients come from fixed rational tables per series
order (see geoprojections._series_tables); nothing is derived at runtime.

Coefficient containers are fixed-size numpy arrays allocated by the coeffs_*
helpers and filled in place by the evaluate_coeffs_* functions.
"""

__all__ = [
    'MAX_SERIES_ORDER',
    'coeffs_a3', 'coeffs_c1', 'coeffs_c1p', 'coeffs_c2', 'coeffs_c3', 'coeffs_c3x',
    'evaluate_a1', 'evaluate_a2',
    'evaluate_coeffs_a3', 'evaluate_coeffs_c1', 'evaluate_coeffs_c1p',
    'evaluate_coeffs_c2', 'evaluate_coeffs_c3', 'evaluate_coeffs_c3x',
    'horner_evaluate', 'sin_cos_series',
]

from typing import Dict, Sequence, Tuple

import numpy as np

from geoprojections._series_tables import (
    A1_TABLE, A2_TABLE, A3_TABLE, C1_TABLE, C1P_TABLE, C2_TABLE, C3X_TABLE
)

MAX_SERIES_ORDER = 8

_Row = Tuple[Tuple[int, ...], int]


def _check_order(order: int) -> int:
    if not 0 <= order <= MAX_SERIES_ORDER:
        raise ValueError(
            f'Unsupported series order {order}; must be between 0 and {MAX_SERIES_ORDER}'
        )
    return order


def horner_evaluate(x: float, coeffs: Sequence[float]) -> float:
    """
    Evaluate a polynomial whose coefficients are given in ascending powers of x.

    Args:
        x:
            The value at which to evaluate

        coeffs:
            The polynomial coefficients, constant term first

    Returns:
        (float) the value of the polynomial
    """
    result = 0.
    for coeff in reversed(coeffs):
        result = result * x + coeff
    return result


def _evaluate_row(x: float, row: _Row) -> float:
    coeffs, denom = row
    return horner_evaluate(x, coeffs) / denom


def evaluate_a1(eps: float, order: int) -> float:
    """
    Scale factor of the distance integral I1, as A1 - 1.

    Args:
        eps:
            The expansion parameter

        order:
            The series order; only order // 2 affects the result

    Returns:
        (float) A1 - 1
    """
    eps2 = eps * eps
    t = _evaluate_row(eps2, A1_TABLE[_check_order(order) // 2])
    return (t + eps) / (1. - eps)


def evaluate_a2(eps: float, order: int) -> float:
    """
    Scale factor of the reduced-length integral I2, as A2 - 1.

    Args:
        eps:
            The expansion parameter

        order:
            The series order; only order // 2 affects the result

    Returns:
        (float) A2 - 1
    """
    eps2 = eps * eps
    t = _evaluate_row(eps2, A2_TABLE[_check_order(order) // 2])
    return (t - eps) / (1. + eps)


def evaluate_coeffs_a3(coeffs: np.ndarray, n: float) -> None:
    """
    Fill the coefficients, in ascending powers of eps, of the scale factor A3.
    The series order is the size of the container.
    """
    rows = A3_TABLE[_check_order(coeffs.size)]
    for i, row in enumerate(rows):
        coeffs[i] = _evaluate_row(n, row)


def _evaluate_fourier_coeffs(
    coeffs: np.ndarray,
    eps: float,
    table: Dict[int, Tuple[_Row, ...]],
) -> None:
    """Fill coeffs[1:] from a table whose l-th row is scaled by eps**l"""
    rows = table[_check_order(coeffs.size - 1)]
    eps2 = eps * eps
    d = eps
    for l, (row_coeffs, denom) in enumerate(rows, start=1):
        if l > 1:
            d *= eps
        coeffs[l] = d * horner_evaluate(eps2, row_coeffs) / denom


def evaluate_coeffs_c1(coeffs: np.ndarray, eps: float) -> None:
    """Fill the Fourier coefficients C1[1..order] of I1; order is coeffs.size - 1"""
    _evaluate_fourier_coeffs(coeffs, eps, C1_TABLE)


def evaluate_coeffs_c1p(coeffs: np.ndarray, eps: float) -> None:
    """Fill the coefficients C1p[1..order] of the reverted I1 series"""
    _evaluate_fourier_coeffs(coeffs, eps, C1P_TABLE)


def evaluate_coeffs_c2(coeffs: np.ndarray, eps: float) -> None:
    """Fill the Fourier coefficients C2[1..order] of I2"""
    _evaluate_fourier_coeffs(coeffs, eps, C2_TABLE)


def evaluate_coeffs_c3x(coeffs: np.ndarray, n: float, order: int) -> None:
    """
    Fill the triangular table of polynomials in n from which the C3 coefficients
    are assembled. The container must hold exactly order * (order - 1) / 2 values.

    Args:
        coeffs:
            The container to fill

        n:
            The third flattening of the ellipsoid

        order:
            The series order
    """
    rows = C3X_TABLE[_check_order(order)]
    assert coeffs.size == (order * (order - 1)) // 2 == len(rows)

    for i, row in enumerate(rows):
        coeffs[i] = _evaluate_row(n, row)


def evaluate_coeffs_c3(coeffs1: np.ndarray, coeffs2: np.ndarray, eps: float) -> None:
    """
    Reduce the C3x table (coeffs2) at eps into the Fourier coefficients
    coeffs1[1 .. size - 1] of I3.
    """
    mult = 1.
    offset = 0
    size = coeffs1.size
    for i in range(1, size):
        # Order of the polynomial in eps for C3[i]
        m = size - i
        mult *= eps
        coeffs1[i] = mult * horner_evaluate(eps, coeffs2[offset:offset + m])
        offset += m


def sin_cos_series(sinx: float, cosx: float, coeffs: Sequence[float]) -> float:
    """
    Evaluate

        y = sum(c[i] * sin(2*i*x), i, 1, n)

    by Clenshaw summation, where n = len(coeffs) - 1 and coeffs[0] is ignored.

    Args:
        sinx:
            sin(x)

        cosx:
            cos(x)

        coeffs:
            The series coefficients

    Returns:
        (float) the sum
    """
    n = len(coeffs) - 1
    index = n + 1
    ar = 2 * (cosx - sinx) * (cosx + sinx)

    if n & 1:
        index -= 1
        k0 = coeffs[index]
    else:
        k0 = 0.
    k1 = 0.

    for _ in range(n // 2):
        # Unrolled by 2 so the accumulators return to their original roles
        index -= 1
        k1 = ar * k0 - k1 + coeffs[index]
        index -= 1
        k0 = ar * k1 - k0 + coeffs[index]

    return float(2 * sinx * cosx * k0)


def coeffs_c1(order: int, eps: float) -> np.ndarray:
    coeffs = np.zeros(_check_order(order) + 1)
    evaluate_coeffs_c1(coeffs, eps)
    return coeffs


def coeffs_c1p(order: int, eps: float) -> np.ndarray:
    coeffs = np.zeros(_check_order(order) + 1)
    evaluate_coeffs_c1p(coeffs, eps)
    return coeffs


def coeffs_c2(order: int, eps: float) -> np.ndarray:
    coeffs = np.zeros(_check_order(order) + 1)
    evaluate_coeffs_c2(coeffs, eps)
    return coeffs


def coeffs_c3x(order: int, n: float) -> np.ndarray:
    coeffs = np.zeros((_check_order(order) * (order - 1)) // 2)
    evaluate_coeffs_c3x(coeffs, n, order)
    return coeffs


def coeffs_c3(order: int, n: float, eps: float) -> np.ndarray:
    """C3[1 .. order-1], built from the C3x table for n and reduced at eps"""
    table = coeffs_c3x(order, n)
    coeffs = np.zeros(order)
    evaluate_coeffs_c3(coeffs, table, eps)
    return coeffs


def coeffs_a3(order: int, n: float) -> np.ndarray:
    coeffs = np.zeros(_check_order(order))
    evaluate_coeffs_a3(coeffs, n)
    return coeffs
