''' Test quantiles of the Studentised maximum range '''
import logging
import numpy as np
from scipy import stats

from smrange import smrange_cdf, smrange_quantile, QuantileResult
from smrange import quantile


def test_saturation():
    assert smrange_quantile(0, 3, 10) == QuantileResult(0.0, 0, True)
    assert smrange_quantile(-0.5, 3, 10).x == 0
    result = smrange_quantile(1, 3, 10)
    assert result.x == 1E99
    assert result.iterations == 0
    assert smrange_quantile(1.5, 3, 10).x == 1E99


def test_roundtrip():
    for p, k, df, nrng in [(0.95, 3, 10, 1), (0.99, 5, 20, 1), (0.5, 4, 0, 1),
                           (0.95, 10, 60, 3), (0.9, 2, 1, 1), (0.05, 6, 8, 2)]:
        ptol = 1E-8 * p
        result = smrange_quantile(p, k, df, nrng, xtol=1E-8, ptol=ptol)
        assert result.converged
        assert 0 < result.iterations < 250
        assert abs(smrange_cdf(result.x, k, df, nrng) - p) < ptol


def test_two_treatments():
    # k=2: q = sqrt(2) * t quantile
    for df in [3, 5, 10, 30]:
        x, _, converged = smrange_quantile(0.95, 2, df)
        assert converged
        assert np.isclose(x, np.sqrt(2)*stats.t.ppf(0.975, df), rtol=1E-7)
    x, _, _ = smrange_quantile(0.95, 2, 0)
    assert np.isclose(x, np.sqrt(2)*stats.norm.ppf(0.975), rtol=1E-7)


def test_tukey_table():
    # Upper 5% points from published Studentised range tables
    assert np.isclose(smrange_quantile(0.95, 3, 10).x, 3.877, atol=.0006)
    assert np.isclose(smrange_quantile(0.95, 5, 20).x, 4.232, atol=.0006)
    assert np.isclose(smrange_quantile(0.95, 2, 1).x, 17.97, atol=.006)
    assert np.isclose(smrange_quantile(0.95, 3, 0).x, 3.314, atol=.0006)
    assert np.isclose(smrange_quantile(0.95, 10, 0).x, 4.474, atol=.0006)


def test_bracket():
    # Quantiles above the first bracket point of 2 need doubling
    result = smrange_quantile(0.999, 20, 2)
    assert result.converged
    assert result.x > 8
    assert np.isclose(smrange_cdf(result.x, 20, 2), 0.999, atol=1E-10)

    # Quantile below the first bracket point
    result = smrange_quantile(0.01, 3, 0)
    assert result.converged
    assert result.x < 2


def test_interpolate():
    # Quadratic through points on a parabola recovers the exact root
    def f(x):
        return 0.1 + 0.3*x - 0.02*x**2
    x1, x2, x3 = 1.0, 4.0, 6.0
    p = f(2.5)
    x = quantile._interpolate(p, x1, f(x1), x2, f(x2), x3, f(x3), 1E-8)
    assert np.isclose(x, 2.5)

    # Root outside the bracket is rejected
    assert quantile._interpolate(f(5), x1, f(x1), x2, f(x2), x3, f(x3), 1E-8) is None

    # Coincident third point falls back to the secant
    x = quantile._interpolate(0.5, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1E-8)
    assert np.isclose(x, 0.5)


def test_no_convergence(caplog):
    # Probability tolerance of zero can never be met
    with caplog.at_level(logging.WARNING):
        result = smrange_quantile(0.95, 3, 0, ptol=0)
    assert not result.converged
    assert result.iterations > quantile.MAXITER
    assert np.isclose(smrange_cdf(result.x, 3, 0), 0.95, atol=1E-10)
    assert 'did not converge' in caplog.text


def test_bracket_invariant(monkeypatch):
    # Every trial point lies inside the current bracket y1 < p <= y2
    for p, k, df in [(0.999, 20, 2), (0.95, 3, 10), (0.01, 3, 0)]:
        evals = []

        def cdf(x, k, df, nrng):
            y = smrange_cdf(x, k, df, nrng)
            evals.append((x, y))
            return y

        monkeypatch.setattr(quantile, 'smrange_cdf', cdf)
        result = smrange_quantile(p, k, df)
        monkeypatch.undo()
        assert result.converged

        # Doubling phase: x = 2, 4, 8, ... until the first y >= p
        nbracket = next(i for i, (x, y) in enumerate(evals) if y >= p) + 1
        assert [x for x, y in evals[:nbracket]] == [2.0 * 2**i for i in range(nbracket)]
        assert all(y < p for x, y in evals[:nbracket-1])
        if p == 0.999:
            assert nbracket > 2

        x1, y1 = (evals[nbracket-2] if nbracket > 1 else (0.0, 0.0))
        x2, y2 = evals[nbracket-1]
        for x, y in evals[nbracket:]:
            assert y1 < p <= y2
            assert x1 <= x <= x2
            if y >= p:
                x2, y2 = x, y
            else:
                x1, y1 = x, y
        assert y1 < p <= y2
