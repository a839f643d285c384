import math

import numpy as np
import pytest
from pytest import approx

from geoprojections.series import (
    MAX_SERIES_ORDER,
    coeffs_a3, coeffs_c1, coeffs_c1p, coeffs_c2, coeffs_c3, coeffs_c3x,
    evaluate_a1, evaluate_a2, evaluate_coeffs_c1, evaluate_coeffs_c3,
    evaluate_coeffs_c3x, horner_evaluate, sin_cos_series,
)

EPS = 0.0017


def test_horner_evaluate():
    assert horner_evaluate(2., [1., 2., 3.]) == 17.
    assert horner_evaluate(2., []) == 0.
    assert horner_evaluate(0.5, np.array([4.])) == 4.


def test_sin_cos_series_zero():
    x = 0.7
    assert sin_cos_series(math.sin(x), math.cos(x), np.zeros(7)) == 0.
    assert sin_cos_series(math.sin(x), math.cos(x), np.zeros(1)) == 0.


def test_sin_cos_series_single_term():
    x = 0.7
    actual = sin_cos_series(math.sin(x), math.cos(x), [0., 0.25])
    assert actual == approx(0.25 * math.sin(2 * x), abs=1e-16)


def test_sin_cos_series_against_direct_sum():
    x = -1.1
    for size in range(1, MAX_SERIES_ORDER + 2):
        coeffs = [0.] + [1. / (i + 1) ** 2 for i in range(1, size)]
        expected = sum(coeffs[i] * math.sin(2 * i * x) for i in range(1, size))
        assert sin_cos_series(math.sin(x), math.cos(x), coeffs) == approx(expected, abs=1e-14)


def test_sin_cos_series_ignores_first_coefficient():
    x = 0.3
    assert sin_cos_series(math.sin(x), math.cos(x), [5., 0.1, 0.2]) == \
        sin_cos_series(math.sin(x), math.cos(x), [0., 0.1, 0.2])


def test_sin_cos_series_deterministic():
    x = 0.123
    coeffs = coeffs_c1(6, EPS)
    first = sin_cos_series(math.sin(x), math.cos(x), coeffs)
    assert all(
        sin_cos_series(math.sin(x), math.cos(x), coeffs) == first
        for _ in range(5)
    )


def test_evaluate_a1():
    eps2 = EPS ** 2
    expected = (EPS + eps2 * (64 + eps2 * (4 + eps2)) / 256) / (1 - EPS)
    assert evaluate_a1(EPS, 6) == approx(expected, rel=1e-15)

    # Order 7 shares the order 6 expansion
    assert evaluate_a1(EPS, 7) == evaluate_a1(EPS, 6)
    assert evaluate_a1(0., 6) == 0.
    assert evaluate_a1(EPS, 0) == approx(EPS / (1 - EPS))


def test_evaluate_a2():
    eps2 = EPS ** 2
    expected = (eps2 * (-192 + eps2 * (-28 - 11 * eps2)) / 256 - EPS) / (1 + EPS)
    assert evaluate_a2(EPS, 6) == approx(expected, rel=1e-15)
    assert evaluate_a2(0., 8) == 0.


def test_evaluate_a1_orders_agree():
    values = [evaluate_a1(EPS, order) for order in range(4, MAX_SERIES_ORDER + 1)]
    assert values == approx([values[-1]] * len(values), rel=1e-10)


def test_coeffs_c1():
    coeffs = coeffs_c1(6, EPS)
    assert coeffs.shape == (7,)
    assert coeffs[0] == 0.
    assert coeffs[1] == approx(EPS * (-16 + 6 * EPS ** 2 - EPS ** 4) / 32, rel=1e-15)
    assert coeffs[6] == approx(-7 * EPS ** 6 / 2048, rel=1e-15)

    assert list(coeffs_c1(0, EPS)) == [0.]


def test_coeffs_c1p():
    coeffs = coeffs_c1p(6, EPS)
    assert coeffs[1] == approx(EPS * (768 - 432 * EPS ** 2 + 205 * EPS ** 4) / 1536, rel=1e-15)
    assert coeffs[2] == approx(EPS ** 2 * (3840 - 4736 * EPS ** 2 + 4005 * EPS ** 4) / 12288, rel=1e-15)


def test_coeffs_c2():
    coeffs = coeffs_c2(6, EPS)
    assert coeffs[1] == approx(EPS * (16 + 2 * EPS ** 2 + EPS ** 4) / 32, rel=1e-15)
    assert coeffs[6] == approx(77 * EPS ** 6 / 2048, rel=1e-15)


def test_coeffs_reuse_container():
    coeffs = np.full(5, 99.)
    evaluate_coeffs_c1(coeffs, EPS)
    assert coeffs[0] == 99.
    assert list(coeffs[1:]) == list(coeffs_c1(4, EPS)[1:])


def test_coeffs_a3():
    n = 0.0016792
    coeffs = coeffs_a3(6, n)
    assert coeffs.shape == (6,)
    assert coeffs[0] == 1.
    assert coeffs[1] == approx((n - 1) / 2, rel=1e-15)
    assert coeffs[5] == approx(-3 / 128, rel=1e-15)

    assert coeffs_a3(0, n).size == 0


def test_coeffs_c3x():
    n = 0.0016792
    coeffs = coeffs_c3x(6, n)
    assert coeffs.shape == (15,)
    assert coeffs[0] == approx((1 - n) / 4, rel=1e-15)
    assert coeffs[14] == approx((42 - 90 * n + 75 * n ** 2) / 5120, rel=1e-15)

    assert coeffs_c3x(1, n).size == 0


def test_evaluate_coeffs_c3x_size_mismatch():
    with pytest.raises(AssertionError):
        evaluate_coeffs_c3x(np.zeros(5), 0.001, 4)


def test_evaluate_coeffs_c3():
    coeffs = np.zeros(3)
    evaluate_coeffs_c3(coeffs, np.array([1., 2., 3.]), 0.5)
    assert list(coeffs) == [0., 1., 0.75]


def test_coeffs_c3():
    n, eps = 0.0016792, EPS
    coeffs = coeffs_c3(6, n, eps)
    table = coeffs_c3x(6, n)
    assert coeffs.shape == (6,)
    assert coeffs[1] == approx(eps * horner_evaluate(eps, table[:5]), rel=1e-15)
    assert coeffs[5] == approx(eps ** 5 * table[14], rel=1e-15)


def test_invalid_order():
    for func, args in (
        (evaluate_a1, (EPS, MAX_SERIES_ORDER + 1)),
        (evaluate_a2, (EPS, -1)),
        (coeffs_c1, (MAX_SERIES_ORDER + 1, EPS)),
        (coeffs_c1p, (-1, EPS)),
        (coeffs_c2, (9, EPS)),
        (coeffs_c3x, (9, 0.001)),
        (coeffs_a3, (9, 0.001)),
    ):
        with pytest.raises(ValueError):
            func(*args)
