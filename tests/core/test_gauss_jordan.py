"""
Tests for the Gauss–Jordan row-reduction kernel.

Covers the three steps (pivot search, normalization, elimination), both
pivot rules, tolerance handling and the rejected inputs. The two pivot
rules disagree on matrices whose diagonal is zero where the column is
not; those cases are pinned explicitly.
"""

import numpy as np
import pytest

from matrixmath.core.compute.linalg.gauss_jordan import (
    PIVOT_RULES,
    resolve_tolerance,
    row_reduce,
)
from matrixmath.core.exceptions import (
    DegenerateMatrixError,
    DimensionError,
    ValidationError,
)
from matrixmath.matrix import Matrix, SquareMatrix, horizontal_concat


class TestReducedForm:

    def test_invertible_square_becomes_identity(self):
        m = Matrix([[7, 2, 1], [0, 3, -1], [-3, 4, -2]])
        row_reduce(m)
        np.testing.assert_allclose(m.to_numpy(), np.eye(3), atol=1e-12)

    def test_wide_matrix(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        row_reduce(m)
        np.testing.assert_allclose(m.to_numpy(), [[1, 0, -1], [0, 1, 2]], atol=1e-12)

    def test_pivots_are_exactly_one(self):
        m = Matrix([[3, 1], [1, 3]])
        row_reduce(m)
        assert m[0, 0] == 1.0
        assert m[1, 1] == 1.0

    def test_eliminated_entries_are_exactly_zero(self):
        m = Matrix([[3, 1], [1, 3]])
        row_reduce(m)
        assert m[0, 1] == 0.0
        assert m[1, 0] == 0.0

    def test_augmented_right_half_is_inverse(self):
        m = SquareMatrix([[2, 7], [4, 6]])
        augmented = horizontal_concat(m, m.identity_matrix())
        row_reduce(augmented)
        # All intermediate values are dyadic, so this is exact
        np.testing.assert_array_equal(
            augmented.right_half().to_numpy(),
            [[-0.375, 0.4375], [0.25, -0.125]],
        )

    def test_complex_dtype(self):
        m = Matrix([[1j, 0], [0, 2]], dtype=np.complex128)
        row_reduce(m)
        np.testing.assert_allclose(m.to_numpy(), np.eye(2), atol=1e-12)

    def test_method_delegates_to_kernel(self):
        m = Matrix([[0, 2], [3, 0]])
        m.row_reduce()
        np.testing.assert_array_equal(m.to_numpy(), np.eye(2))


class TestPivotSearch:

    def test_zero_diagonal_swaps_in_later_row(self):
        m = Matrix([[0, 1, 1, 0], [1, 2, 0, 1]])
        row_reduce(m)
        np.testing.assert_allclose(m.to_numpy(), [[1, 0, -2, 1], [0, 1, 1, 0]], atol=1e-12)

    def test_zero_column_is_degenerate(self):
        m = Matrix([[0, 1, 0], [0, 0, 1], [0, 1, 0]])
        with pytest.raises(DegenerateMatrixError) as exc_info:
            row_reduce(m)
        assert exc_info.value.column == 0

    def test_degenerate_reports_failing_column(self):
        m = Matrix([[1, 0, 0], [-2, 0, 0], [4, 6, 1]])
        with pytest.raises(DegenerateMatrixError) as exc_info:
            row_reduce(m)
        assert exc_info.value.column == 2

    def test_degenerate_carries_name_and_tolerance(self):
        m = Matrix([[10, 10], [10, 10]])
        with pytest.raises(DegenerateMatrixError) as exc_info:
            row_reduce(m, matrix_name='A')
        assert exc_info.value.matrix_name == 'A'
        assert exc_info.value.tolerance == 1e-11

    def test_near_zero_pivot_within_tolerance_is_degenerate(self):
        # Second row becomes ~1e-19 after elimination: zero at 1e-11
        m = Matrix([[0.001, 0.002], [0.003, 0.006]])
        with pytest.raises(DegenerateMatrixError):
            row_reduce(m)

    def test_explicit_tolerance_overrides_default(self):
        m = Matrix([[1e-12, 0], [0, 1]])
        with pytest.raises(DegenerateMatrixError):
            row_reduce(m.copy())
        row_reduce(m, tolerance=0.0)
        np.testing.assert_array_equal(m.to_numpy(), np.eye(2))


class TestPivotRules:
    """'column' tests [s][r]; 'diagonal' tests [s][s] (legacy search)."""

    def test_rules(self):
        assert PIVOT_RULES == ('column', 'diagonal')

    def test_anti_diagonal_column_rule_inverts(self):
        m = SquareMatrix([[0, 1], [1, 0]])
        augmented = horizontal_concat(m, m.identity_matrix())
        row_reduce(augmented, pivot='column')
        np.testing.assert_array_equal(augmented.right_half().to_numpy(), [[0, 1], [1, 0]])

    def test_anti_diagonal_diagonal_rule_is_degenerate(self):
        m = SquareMatrix([[0, 1], [1, 0]])
        augmented = horizontal_concat(m, m.identity_matrix())
        with pytest.raises(DegenerateMatrixError) as exc_info:
            row_reduce(augmented, pivot='diagonal')
        assert exc_info.value.column == 0

    def test_diagonal_rule_swapped_row_with_zero_pivot(self):
        # Row 2 has a nonzero diagonal but a zero in column 0
        m = Matrix([[0, 1, 0], [1, 0, 0], [0, 0, 1]])
        with pytest.raises(DegenerateMatrixError, match="swapped into position 0"):
            row_reduce(m.copy(), pivot='diagonal')
        row_reduce(m, pivot='column')
        np.testing.assert_array_equal(m.to_numpy(), np.eye(3))

    def test_rules_agree_when_diagonal_candidate_is_valid(self):
        a = Matrix([[0, 1, 1, 0], [1, 2, 0, 1]])
        b = a.copy()
        row_reduce(a, pivot='column')
        row_reduce(b, pivot='diagonal')
        assert a.equals(b)

    def test_unknown_rule(self):
        with pytest.raises(ValidationError, match="pivot"):
            row_reduce(Matrix([[1.0]]), pivot='largest')


class TestRejectedInputs:

    def test_integer_dtype(self):
        m = Matrix([[1, 2], [3, 4]], dtype=np.int64)
        with pytest.raises(ValidationError, match="floating or complex"):
            row_reduce(m)

    def test_tall_matrix(self):
        with pytest.raises(DimensionError, match="width"):
            row_reduce(Matrix([[1], [2]]))

    def test_negative_tolerance(self):
        with pytest.raises(ValidationError, match="non-negative"):
            row_reduce(Matrix([[1.0]]), tolerance=-1.0)


class TestResolveTolerance:

    def test_default_by_dtype(self):
        assert resolve_tolerance(np.dtype(np.float64), None) == 1e-11
        assert resolve_tolerance(np.dtype(np.float32), None) == 1e-5

    def test_explicit(self):
        assert resolve_tolerance(np.dtype(np.float64), 1e-6) == 1e-6
