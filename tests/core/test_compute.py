"""
Tests for shared compute infrastructure: phase timing, tolerances, closeness.
"""

import numpy as np
import pytest

from pymatrix.core.compute import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    PIVOT_RTOL,
    Timer,
)
from pymatrix.core.compute.precision import is_close


class TestTimer:

    def test_phases_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('eliminate'):
            pass
        with timer.section('eliminate'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'eliminate'}
        assert result['eliminate'] >= 0.0
        assert result['total_seconds'] >= 0.0

    def test_phase_recorded_when_block_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('augment'):
                raise ValueError("boom")
        timer.stop()
        assert 'augment' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTolerances:

    def test_ill_conditioned_is_looser(self):
        assert CPU_FP64_ILL_CONDITIONED.rtol > CPU_FP64.rtol
        assert CPU_FP64_ILL_CONDITIONED.atol > CPU_FP64.atol

    def test_pivot_rtol_follows_fp64_tier(self):
        assert PIVOT_RTOL == CPU_FP64.rtol


class TestIsClose:

    def test_scalars(self):
        assert is_close(1.0, 1.0 + 1e-15)
        assert not is_close(1.0, 1.1)

    def test_arrays(self):
        result = is_close(np.array([1.0, 2.0]), np.array([1.0, 2.5]))
        assert result.tolist() == [True, False]

    def test_tier_tolerances(self):
        assert not is_close(1.0, 1.00001, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)
        assert is_close(
            1.0, 1.00001,
            rtol=CPU_FP64_ILL_CONDITIONED.rtol,
            atol=CPU_FP64_ILL_CONDITIONED.atol,
        )
