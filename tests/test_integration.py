"""
Tests for the midpoint-rule kernels.
"""

import math

import pytest

from integration import (
    ConfigurationError,
    IntegrationRequest,
    f,
    get_kernel,
    integrate,
    integrate_numpy,
)


def test_integrand_values():
    assert f(0.0) == 4.0
    assert f(1.0) == 2.0
    assert f(-1.0) == 2.0


def test_golden_four_steps():
    # Midpoints 0.125, 0.375, 0.625, 0.875 -> 256 * (1/65 + 1/73 + 1/89 + 1/113) / 4
    assert integrate(0.0, 1.0, 4, 0.25) == pytest.approx(3.1468005183939425, abs=1e-13)


def test_single_step_is_midpoint_value():
    assert integrate(0.0, 1.0, 1, 1.0) == f(0.5)


def test_sub_interval():
    # Integral of 4/(1+x^2) over [0, 0.5] is 4 * atan(0.5)
    assert integrate(0.0, 0.5, 10_000, 0.5 / 10_000) == pytest.approx(4 * math.atan(0.5), abs=1e-9)


@pytest.mark.parametrize("steps", [1, 4, 1000, 12_345])
def test_numpy_kernel_matches_python_kernel(steps):
    step_size = 1.0 / steps
    expected = integrate(0.0, 1.0, steps, step_size)
    assert integrate_numpy(0.0, 1.0, steps, step_size) == expected


def test_numpy_kernel_chunking():
    request = IntegrationRequest(0.25, 0.75, 1001, 0.5 / 1001)
    whole = integrate_numpy(*request)
    chunked = integrate_numpy(*request, chunk_size=7)
    assert chunked == whole
    assert chunked == integrate(*request)


def test_get_kernel():
    assert get_kernel("python") is integrate
    assert get_kernel("numpy") is integrate_numpy
    with pytest.raises(ConfigurationError):
        get_kernel("fortran")


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
