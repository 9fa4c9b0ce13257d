"""
Tests for copies, aliasing views and in-place writes.

Validates:
    - extend()/copy() produce independent storage
    - sub_matrix() windows alias the parent and check their bounds
    - set_sub_matrix() writes in place, is fluent, and checks bounds
"""

import pytest

from pymatrix import Matrix, Vector
from pymatrix.core.exceptions import (
    InconsistentShapeError,
    NegativeIndexError,
    OutOfBoundsError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# extend / copy
# ═══════════════════════════════════════════════════════════════════════


class TestExtend:

    def test_extend_columns(self, m3):
        expected = Matrix([
            [1, 3, 3, 0, 0, 0],
            [1, 4, 3, 0, 0, 0],
            [1, 3, 4, 0, 0, 0],
        ])
        assert m3.extend(0, 3).equal(expected)

    def test_extend_rows_and_columns(self):
        result = Matrix([[1, 2]]).extend(2, 1)
        assert result.equal(Matrix([[1, 2, 0], [0, 0, 0], [0, 0, 0]]))

    def test_extend_with_right_identity(self, m3):
        expected = Matrix([
            [1, 3, 3, 1, 0, 0],
            [1, 4, 3, 0, 1, 0],
            [1, 3, 4, 0, 0, 1],
        ])
        ext = m3.extend(0, 3)
        right = ext.sub_matrix(0, 3, 3, 3)
        ext = ext.set_sub_matrix(right.identity(), 0, 3)
        assert ext.equal(expected)

    def test_extend_uninitialized(self):
        result = Matrix().extend(2, 3)
        assert not result.is_uninitialized
        assert result.equal(Matrix.zeros(2, 3))

    def test_extend_negative(self):
        with pytest.raises(ValidationError):
            Matrix.zeros(1, 1).extend(-1, 0)

    def test_extend_ragged(self):
        with pytest.raises(InconsistentShapeError):
            Matrix([[1, 2], [3]]).extend(1, 1)


class TestCopy:

    def test_copy_equal(self, m4):
        assert m4.copy().equal(m4)

    def test_copy_independent(self, m4):
        dup = m4.copy()
        dup[0, 0] = -1.0
        dup.set_sub_matrix(Matrix([[7, 7]]), 3, 2)
        assert m4[0, 0] == 1.0
        assert m4.row(3).tolist() == [4.0, 23.0, 12.0, 1.0]

    def test_copy_of_view_is_not_a_view(self, m4):
        dup = m4.sub_matrix(1, 1, 2, 2).copy()
        assert not dup.is_view
        dup[0, 0] = 0.0
        assert m4[1, 1] == 52.0


# ═══════════════════════════════════════════════════════════════════════
# sub_matrix
# ═══════════════════════════════════════════════════════════════════════


class TestSubMatrix:

    @pytest.mark.parametrize("args,expected", [
        ((0, 0, 1, 1), [[1]]),
        ((0, 0, 2, 2), [[1, 2], [12, 52]]),
        ((0, 1, 2, 2), [[2, 42], [52, 32]]),
        ((1, 0, 3, 2), [[12, 52], [3, 22], [4, 23]]),
        ((1, 1, 3, 3), [[52, 32, 21], [22, 22, 1], [23, 12, 1]]),
    ])
    def test_window(self, m4, args, expected):
        assert m4.sub_matrix(*args).equal(Matrix(expected))

    def test_is_view(self, m4):
        assert m4.sub_matrix(0, 0, 1, 1).is_view
        assert not m4.is_view

    def test_write_through_view(self, m4):
        view = m4.sub_matrix(1, 1, 3, 3)
        view.set_sub_matrix(Matrix([[0, 0], [0, 0]]), 1, 1)
        assert m4.row(2).tolist() == [3.0, 22.0, 0.0, 0.0]
        assert m4.row(3).tolist() == [4.0, 23.0, 0.0, 0.0]
        assert m4.row(1).tolist() == [12.0, 52.0, 32.0, 21.0]

    def test_item_write_through_view(self, m4):
        view = m4.sub_matrix(2, 1, 2, 2)
        view[1, 1] = 99.0
        assert m4[3, 2] == 99.0

    def test_parent_write_visible_in_view(self, m4):
        view = m4.sub_matrix(0, 2, 2, 2)
        m4[1, 3] = -5.0
        assert view[1, 1] == -5.0

    def test_nested_view(self, m4):
        inner = m4.sub_matrix(1, 1, 3, 3).sub_matrix(1, 1, 2, 2)
        assert inner.equal(Matrix([[22, 1], [12, 1]]))
        inner[0, 0] = 0.5
        assert m4[2, 2] == 0.5

    def test_zero_sized_window(self, m4):
        assert m4.sub_matrix(4, 0, 0, 0).dim() == (0, 0)

    @pytest.mark.parametrize("args", [
        (-1, 0, 1, 1),
        (0, -1, 1, 1),
        (0, 0, -1, 1),
        (0, 0, 1, -1),
    ])
    def test_negative(self, m4, args):
        with pytest.raises(NegativeIndexError):
            m4.sub_matrix(*args)

    def test_negative_is_out_of_bounds(self, m4):
        with pytest.raises(OutOfBoundsError):
            m4.sub_matrix(-1, 0, 1, 1)

    @pytest.mark.parametrize("args", [
        (5, 0, 0, 1),
        (0, 2, 1, 3),
        (0, 4, 1, 1),
        (2, 0, 3, 1),
    ])
    def test_overflow(self, m4, args):
        with pytest.raises(OutOfBoundsError):
            m4.sub_matrix(*args)

    def test_empty_parent(self):
        with pytest.raises(OutOfBoundsError):
            Matrix([]).sub_matrix(0, 0, 1, 1)

    def test_short_ragged_row(self):
        with pytest.raises(OutOfBoundsError, match="row 1"):
            Matrix([[1, 2, 3], [4]]).sub_matrix(0, 1, 2, 2)


# ═══════════════════════════════════════════════════════════════════════
# set_sub_matrix
# ═══════════════════════════════════════════════════════════════════════


class TestSetSubMatrix:

    def test_fluent_and_in_place(self):
        m = Matrix.zeros(3, 3)
        result = m.set_sub_matrix(Matrix([[1, 2], [3, 4]]), 1, 1)
        assert result is m
        assert m.equal(Matrix([[0, 0, 0], [0, 1, 2], [0, 3, 4]]))

    def test_block_is_copied(self):
        m = Matrix.zeros(1, 2)
        block = Matrix([[5, 6]])
        m.set_sub_matrix(block, 0, 0)
        block[0, 0] = 0.0
        assert m[0, 0] == 5.0

    def test_accepts_vector(self):
        m = Matrix.zeros(3, 2)
        m.set_sub_matrix(Vector.from_values([1, 2, 3]), 0, 1)
        assert m.to_list() == [[0.0, 1.0], [0.0, 2.0], [0.0, 3.0]]

    @pytest.mark.parametrize("offset", [(-1, 0), (0, -1)])
    def test_negative(self, offset):
        with pytest.raises(NegativeIndexError):
            Matrix.zeros(2, 2).set_sub_matrix(Matrix([[1]]), *offset)

    @pytest.mark.parametrize("offset", [(2, 0), (0, 2), (1, 1)])
    def test_overflow(self, offset):
        with pytest.raises(OutOfBoundsError):
            Matrix.zeros(2, 2).set_sub_matrix(Matrix([[1, 1], [1, 1]]), *offset)

    def test_overflow_leaves_target_untouched(self):
        m = Matrix.zeros(2, 2)
        with pytest.raises(OutOfBoundsError):
            m.set_sub_matrix(Matrix([[1, 1, 1]]), 0, 0)
        assert m.equal(Matrix.zeros(2, 2))

    def test_target_row_too_short(self):
        with pytest.raises(OutOfBoundsError):
            Matrix([[]]).set_sub_matrix(Matrix([[5]]), 0, 0)

    def test_short_target_row_leaves_earlier_rows_untouched(self):
        m = Matrix([[0, 0], []])
        with pytest.raises(OutOfBoundsError, match="row 1"):
            m.set_sub_matrix(Matrix([[5, 5], [6, 6]]), 0, 0)
        assert m.row(0).tolist() == [0.0, 0.0]

    def test_empty_block(self):
        m = Matrix([[1]])
        assert m.set_sub_matrix(Matrix([]), 0, 0).equal(Matrix([[1]]))
