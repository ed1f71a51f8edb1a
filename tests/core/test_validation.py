"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_count / check_dimension: non-negative integer dimensions
    - check_rectangular: nested sequence shape detection
    - check_element: arithmetic capability check
    - check_index / check_axis_index: bounds checks without wrap-around
    - check_same_shape / check_inner_dimensions: operand compatibility
"""

from fractions import Fraction

import numpy as np
import pytest

from genmatrix.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    ShapeError,
    ValidationError,
)
from genmatrix.core.validation import (
    check_axis_index,
    check_count,
    check_dimension,
    check_element,
    check_index,
    check_inner_dimensions,
    check_rectangular,
    check_same_shape,
)


# ═══════════════════════════════════════════════════════════════════════
# Dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_valid_pair(self):
        assert check_dimension((2, 3)) == (2, 3)

    def test_zero_allowed(self):
        assert check_dimension((0, 4)) == (0, 4)
        assert check_dimension((0, 0)) == (0, 0)

    @pytest.mark.parametrize("bad", [
        (-1, 2),
        (2, -1),
        (2.0, 3),
        (True, 3),
        ("2", 3),
    ])
    def test_rejects_bad_components(self, bad):
        with pytest.raises(InvalidDimensionError) as exc_info:
            check_dimension(bad)
        assert exc_info.value.dimension == bad

    @pytest.mark.parametrize("bad", [[2, 3], (2,), (1, 2, 3), 4, None])
    def test_rejects_non_pairs(self, bad):
        with pytest.raises(InvalidDimensionError):
            check_dimension(bad)

    def test_name_in_message(self):
        with pytest.raises(InvalidDimensionError, match="shape_arg"):
            check_dimension((-1, 1), "shape_arg")


class TestCheckCount:

    def test_valid(self):
        assert check_count(0, "rows") == 0
        assert check_count(7, "rows") == 7

    @pytest.mark.parametrize("bad", [-3, 1.5, False, None])
    def test_invalid(self, bad):
        with pytest.raises(InvalidDimensionError, match="rows"):
            check_count(bad, "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_rectangular
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:

    def test_rectangular(self):
        assert check_rectangular([[1, 2, 3], [4, 5, 6]]) == (2, 3)

    def test_tuples_accepted(self):
        assert check_rectangular(((1,), (2,))) == (2, 1)

    def test_empty_outer(self):
        assert check_rectangular([]) == (0, 0)

    def test_rows_of_empty(self):
        assert check_rectangular([[], []]) == (2, 0)

    def test_ragged_raises_with_diagnostics(self):
        with pytest.raises(ShapeError) as exc_info:
            check_rectangular([[1, 2], [3, 4], [5]])
        err = exc_info.value
        assert err.row == 2
        assert err.expected_columns == 2
        assert err.actual_columns == 1

    def test_not_a_sequence(self):
        with pytest.raises(ValidationError, match="sequence of rows"):
            check_rectangular(42)

    def test_string_rejected(self):
        with pytest.raises(ValidationError):
            check_rectangular("ab")

    def test_row_not_a_sequence(self):
        with pytest.raises(ValidationError, match="row 1"):
            check_rectangular([[1], 2])


# ═══════════════════════════════════════════════════════════════════════
# check_element
# ═══════════════════════════════════════════════════════════════════════


class TestCheckElement:

    @pytest.mark.parametrize("value", [1, 1.5, 2j, Fraction(1, 3), True])
    def test_numeric_values_accepted(self, value):
        check_element(value, "x")

    def test_string_rejected_names_missing_operation(self):
        with pytest.raises(ValidationError, match="__sub__"):
            check_element("abc", "data[0][0]")

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="NoneType"):
            check_element(None, "x")


# ═══════════════════════════════════════════════════════════════════════
# Index checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_bounds(self):
        assert check_index((2, 0), (3, 3)) == (2, 0)

    def test_row_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_index((5, 0), (3, 3))
        assert exc_info.value.index == (5, 0)
        assert exc_info.value.shape == (3, 3)

    def test_column_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index((0, 3), (3, 3))

    def test_negative_is_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index((-1, 0), (3, 3))

    def test_empty_matrix_has_no_valid_index(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index((0, 0), (0, 0))

    @pytest.mark.parametrize("bad", [0, (1,), (1.0, 0), (0, "1"), [0, 0]])
    def test_malformed_index(self, bad):
        with pytest.raises(ValidationError):
            check_index(bad, (3, 3))

    def test_numpy_integers_normalized(self):
        i, j = check_index((np.int64(2), np.intp(1)), (3, 3))
        assert (i, j) == (2, 1)
        assert type(i) is int and type(j) is int

    @pytest.mark.parametrize("bad", [(True, 0), (0, np.bool_(False))])
    def test_bool_rejected(self, bad):
        with pytest.raises(ValidationError):
            check_index(bad, (3, 3))


class TestCheckAxisIndex:

    def test_valid(self):
        assert check_axis_index(1, 2, "row", (2, 5)) == 1

    def test_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError, match="row 2"):
            check_axis_index(2, 2, "row", (2, 5))

    def test_not_int(self):
        with pytest.raises(ValidationError, match="column"):
            check_axis_index(0.5, 2, "column", (2, 2))

    def test_numpy_integer_normalized(self):
        value = check_axis_index(np.int32(1), 2, "row", (2, 2))
        assert value == 1
        assert type(value) is int


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestOperandShapes:

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_same_shape_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            check_same_shape((2, 3), (3, 2), "add")
        err = exc_info.value
        assert err.operation == "add"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (3, 2)
        assert "2x3" in str(err) and "3x2" in str(err)

    def test_inner_dimensions_pass(self):
        check_inner_dimensions((2, 3), (3, 5))

    def test_inner_dimensions_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            check_inner_dimensions((2, 3), (4, 2))
        assert exc_info.value.operation == "multiply"
