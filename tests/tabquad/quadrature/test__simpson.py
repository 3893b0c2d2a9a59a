import warnings

import hypothesis
import hypothesis.strategies
import pytest
import scipy.integrate
import torch

from tabquad.quadrature import (
    InsufficientSamplesError,
    InvalidPointCountError,
    QuadratureWarning,
    simpson,
    trapezoid,
)
from tabquad.testing.strategies import (
    point_counts,
    real_numbers,
    uniform_grids,
)


class TestSimpson:
    def test_matches_scipy(self):
        """Compare with scipy.integrate.simpson"""
        x = torch.linspace(0, torch.pi, 101, dtype=torch.float64)
        y = torch.sin(x)

        result = simpson(y, x)

        expected = scipy.integrate.simpson(y.numpy(), x=x.numpy())
        assert torch.allclose(
            result, torch.tensor(expected, dtype=result.dtype), rtol=1e-10
        )

    def test_squares(self):
        x = torch.tensor([0.0, 1.0, 2.0, 3.0, 4.0], dtype=torch.float64)

        result = simpson(x**2, x)

        assert result.item() == pytest.approx(64 / 3)

    def test_three_points(self):
        x = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
        y = torch.tensor([1.0, 2.0, 4.0], dtype=torch.float64)

        # (h/3) * (y0 + 4*y1 + y2) with h = 0.5
        assert simpson(y, x).item() == pytest.approx(0.5 / 3 * 13.0)

    def test_higher_order_accuracy(self):
        """Simpson beats trapezoid on smooth functions"""
        x = torch.linspace(0, 1, 11, dtype=torch.float64)
        y = x**4

        exact = 0.2
        trap_error = abs(trapezoid(y, x).item() - exact)
        simp_error = abs(simpson(y, x).item() - exact)

        assert simp_error < trap_error

    @hypothesis.given(
        n=point_counts(3, 31, where=lambda n: n % 2 == 1),
        coeffs=hypothesis.strategies.lists(
            real_numbers(-5.0, 5.0), min_size=4, max_size=4
        ),
    )
    def test_cubic_is_exact(self, n, coeffs):
        x = torch.linspace(-1.0, 2.0, n, dtype=torch.float64)
        c0, c1, c2, c3 = coeffs
        y = c0 + c1 * x + c2 * x**2 + c3 * x**3

        def antiderivative(t):
            return c0 * t + c1 * t**2 / 2 + c2 * t**3 / 3 + c3 * t**4 / 4

        exact = antiderivative(2.0) - antiderivative(-1.0)

        assert simpson(y, x).item() == pytest.approx(exact, rel=1e-9, abs=1e-9)

    @hypothesis.given(
        n=point_counts(3, 31, where=lambda n: n % 2 == 1),
        slope=real_numbers(-10.0, 10.0),
        intercept=real_numbers(-10.0, 10.0),
        data=hypothesis.strategies.data(),
    )
    def test_linear_is_exact(self, n, slope, intercept, data):
        x = data.draw(uniform_grids(n))
        y = slope * x + intercept

        a, b = x[0].item(), x[-1].item()
        exact = slope * (b**2 - a**2) / 2 + intercept * (b - a)

        assert simpson(y, x).item() == pytest.approx(exact, rel=1e-9, abs=1e-6)


class TestSimpsonPointCount:
    @hypothesis.given(n=point_counts(0, 40, where=lambda n: n % 2 == 0))
    def test_even_count_raises(self, n):
        x = torch.arange(n, dtype=torch.float64)

        with pytest.raises(InvalidPointCountError, match="must be odd"):
            simpson(x, x)

    @hypothesis.given(n=point_counts(3, 41, where=lambda n: n % 2 == 1))
    def test_odd_count_passes(self, n):
        x = torch.arange(n, dtype=torch.float64)

        simpson(x, x)

    def test_single_point_raises(self):
        x = torch.tensor([1.0], dtype=torch.float64)

        with pytest.raises(InsufficientSamplesError, match="at least 3"):
            simpson(x, x)


class TestSimpsonUniformity:
    def test_non_uniform_grid_warns(self):
        x = torch.tensor([0.0, 0.1, 1.0, 1.5, 4.0], dtype=torch.float64)

        with pytest.warns(QuadratureWarning, match="uniform grid"):
            simpson(x, x)

    def test_uniform_grid_does_not_warn(self):
        x = torch.linspace(0, 1, 21, dtype=torch.float64)

        with warnings.catch_warnings():
            warnings.simplefilter("error", QuadratureWarning)
            simpson(x**2, x)

    def test_step_from_endpoints(self):
        """Non-uniform grids still use (x[-1] - x[0]) / (n - 1)"""
        x = torch.tensor([0.0, 0.1, 2.0], dtype=torch.float64)
        y = torch.tensor([1.0, 1.0, 1.0], dtype=torch.float64)

        with pytest.warns(QuadratureWarning):
            result = simpson(y, x)

        assert result.item() == pytest.approx(2.0)


class TestSimpsonGradients:
    def test_gradcheck_y(self):
        x = torch.linspace(0, 1, 11, dtype=torch.float64)
        y = torch.randn(11, requires_grad=True, dtype=torch.float64)

        assert torch.autograd.gradcheck(
            lambda y_: simpson(y_, x),
            (y,),
            raise_exception=True,
        )
