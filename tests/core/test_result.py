"""
Tests for the Result[P] envelope around inversion output.

Validates:
    - An InverseParams payload travels through the envelope unchanged
    - Frozen immutability of both envelope and payload
    - has_warning() on near-singular diagnostics
"""

from dataclasses import FrozenInstanceError

import pytest

from pymatrix import Matrix
from pymatrix.core.result import Result
from pymatrix.linalg.gauss_jordan import BACKEND_NAME, InverseParams


@pytest.fixture
def swap_params():
    # [[0, 1], [1, 0]] is its own inverse and needs one row exchange.
    return InverseParams(
        inverse=Matrix([[0, 1], [1, 0]]),
        pivots=(1.0, 1.0),
        row_swaps=1,
    )


def make_result(params, warnings=()):
    return Result(
        params=params,
        info={'method': 'gauss_jordan', 'n': 2, 'row_swaps': params.row_swaps},
        timing=None,
        backend_name=BACKEND_NAME,
        warnings=warnings,
    )


class TestEnvelope:

    def test_payload_preserved(self, swap_params):
        result = make_result(swap_params)
        assert result.params is swap_params
        assert result.params.inverse.equal(Matrix([[0, 1], [1, 0]]))
        assert result.info['row_swaps'] == result.params.row_swaps
        assert result.backend_name == 'cpu_gauss_jordan'

    def test_timing_may_be_omitted(self, swap_params):
        assert make_result(swap_params).timing is None

    def test_warnings_default_empty(self, swap_params):
        result = Result(params=swap_params, info={}, timing=None, backend_name=BACKEND_NAME)
        assert result.warnings == ()


class TestImmutability:

    def test_envelope_frozen(self, swap_params):
        result = make_result(swap_params)
        with pytest.raises(FrozenInstanceError):
            result.backend_name = 'other'

    def test_payload_frozen(self, swap_params):
        with pytest.raises(FrozenInstanceError):
            swap_params.row_swaps = 0


class TestHasWarning:

    def test_near_singular_message(self, swap_params):
        result = make_result(
            swap_params,
            warnings=("near-singular pivot 1e-17 in column 1 of 2",),
        )
        assert result.has_warning("near-singular")
        assert result.has_warning("column 1")
        assert not result.has_warning("column 0")

    def test_clean_inversion(self, swap_params):
        assert not make_result(swap_params).has_warning("near-singular")
