import warnings

import numpy as np
import pytest

import cachematrix


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    monkeypatch.delenv("CACHEMATRIX_SOLVE_TOL", raising=False)
    cachematrix.reload_config()
    yield
    monkeypatch.undo()
    cachematrix.reload_config()


def test_invert_matches_numpy():
    m = np.array([[4.0, 7.0], [2.0, 6.0]])
    inv = cachematrix.invert(m)

    np.testing.assert_allclose(inv, np.linalg.inv(m))
    np.testing.assert_allclose(m @ inv, np.eye(2), atol=1e-12)


def test_invert_returns_new_array():
    m = np.eye(3)
    inv = cachematrix.invert(m)

    assert inv is not m
    inv[0, 0] = 5.0
    assert m[0, 0] == 1.0


def test_invert_integer_input_gives_float():
    inv = cachematrix.invert([[2, 0], [0, 4]])

    assert inv.dtype == np.float64
    np.testing.assert_allclose(inv, [[0.5, 0.0], [0.0, 0.25]])


def test_invert_complex_input():
    m = np.array([[1.0 + 1.0j, 0.0], [0.0, 2.0j]])
    inv = cachematrix.invert(m)

    assert np.iscomplexobj(inv)
    np.testing.assert_allclose(m @ inv, np.eye(2), atol=1e-12)


def test_invert_empty_matrix():
    inv = cachematrix.invert(np.zeros((0, 0)))
    assert inv.shape == (0, 0)


@pytest.mark.parametrize("shape", [(2, 3), (3, 1), (4,)])
def test_invert_rejects_non_square(shape):
    with pytest.raises(np.linalg.LinAlgError) as exc:
        cachematrix.invert(np.ones(shape))
    assert "square" in str(exc.value)
    assert not isinstance(exc.value, cachematrix.SingularMatrixError)


def test_invert_exactly_singular():
    with pytest.raises(cachematrix.SingularMatrixError) as exc:
        cachematrix.invert([[1.0, 2.0], [2.0, 4.0]])
    assert exc.value.rcond == 0.0
    assert isinstance(exc.value, np.linalg.LinAlgError)


def test_invert_zero_matrix_is_singular():
    with pytest.raises(cachematrix.SingularMatrixError):
        cachematrix.invert(np.zeros((3, 3)))


def test_invert_near_singular_respects_tolerance():
    m = [[1.0, 1.0], [1.0, 1.0 + 1e-10]]

    with pytest.raises(cachematrix.SingularMatrixError) as exc:
        cachematrix.invert(m, tol=1e-8)
    assert "computationally singular" in str(exc.value)
    assert 0.0 < exc.value.rcond < 1e-8

    # Default tolerance (machine epsilon) lets it through.
    cachematrix.invert(m)
    cachematrix.invert(m, tol=0.0)


def test_invert_tolerance_from_environment(monkeypatch):
    m = [[1.0, 1.0], [1.0, 1.0 + 1e-10]]
    monkeypatch.setenv("CACHEMATRIX_SOLVE_TOL", "1e-8")
    cachematrix.reload_config()

    with pytest.raises(cachematrix.SingularMatrixError):
        cachematrix.invert(m)

    # An explicit tol wins over the environment.
    cachematrix.invert(m, tol=1e-12)


def test_invalid_tolerance_in_environment_warns_and_uses_default(monkeypatch):
    monkeypatch.setenv("CACHEMATRIX_SOLVE_TOL", "not-a-number")
    cachematrix.reload_config()

    with warnings.catch_warnings(record=True) as w:
        warnings.simplefilter("always")
        cachematrix.invert([[2.0]])

    assert any(issubclass(x.category, cachematrix.CacheMatrixConfigWarning) for x in w)


def test_negative_tolerance_rejected():
    with pytest.raises(ValueError):
        cachematrix.invert([[1.0]], tol=-1.0)


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
def test_invert_rejects_non_finite(bad):
    m = np.array([[1.0, 0.0], [0.0, bad]])

    with pytest.raises(ValueError) as exc:
        cachematrix.invert(m)
    assert "infs or NaNs" in str(exc.value)


def test_invert_without_finite_check_treats_nan_as_singular():
    with pytest.raises(cachematrix.SingularMatrixError):
        cachematrix.invert([[np.nan]], check_finite=False)


def test_nan_tolerance_rejected():
    with pytest.raises(ValueError):
        cachematrix.invert([[1.0]], tol=float("nan"))


def test_invert_half_precision_is_widened():
    inv = cachematrix.invert(np.array([[2, 0], [0, 4]], dtype=np.float16))

    assert inv.dtype == np.float32
    np.testing.assert_allclose(inv, [[0.5, 0.0], [0.0, 0.25]])


def test_invert_long_double_is_widened():
    m = np.array([[4, 7], [2, 6]], dtype=np.longdouble)
    inv = cachematrix.invert(m)

    assert inv.dtype in (np.float64, np.longdouble)
    np.testing.assert_allclose(inv.astype(np.float64), [[0.6, -0.7], [-0.2, 0.4]])
