"""Tests for hfun_util/evalfun.py: field evaluation contract."""

import numpy as np
import numpy.testing as npt
import pytest

from pydistmesh.hfun_util.evalfun import evalfun


def _pts(n: int = 5) -> np.ndarray:
    return np.column_stack([np.linspace(0.0, 1.0, n), np.zeros(n)])


class TestEvalfun:
    def test_none_is_uniform(self):
        npt.assert_array_equal(evalfun(None, _pts()), np.ones(5))

    def test_scalar_is_constant(self):
        npt.assert_array_equal(evalfun(0.5, _pts()), np.full(5, 0.5))

    def test_callable(self):
        fval = evalfun(lambda p: p[:, 0] + 1.0, _pts())
        npt.assert_allclose(fval, np.linspace(1.0, 2.0, 5))

    def test_column_output_flattened(self):
        fval = evalfun(lambda p: p[:, [0]], _pts())
        assert fval.shape == (5,)

    def test_empty_points(self):
        fval = evalfun(lambda p: p[:, 0], np.empty((0, 2)))
        assert fval.shape == (0,)

    def test_wrong_size_rejected(self):
        with pytest.raises(ValueError, match="incorrectDimensions"):
            evalfun(lambda p: np.zeros(3), _pts())

    def test_nan_rejected(self):
        with pytest.raises(ValueError, match="invalidFieldValues"):
            evalfun(lambda p: np.full(p.shape[0], np.nan), _pts())

    def test_inf_rejected(self):
        with pytest.raises(ValueError, match="invalidFieldValues"):
            evalfun(lambda p: np.full(p.shape[0], np.inf), _pts())

    def test_field_errors_propagate(self):
        def bad(p):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            evalfun(bad, _pts())

    def test_not_callable(self):
        with pytest.raises(TypeError):
            evalfun(object(), _pts())

    def test_name_in_message(self):
        with pytest.raises(ValueError, match="^projpts:"):
            evalfun(lambda p: np.zeros(1), _pts(), "projpts")
