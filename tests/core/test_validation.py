"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import pytest

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import (
    check_index,
    check_multipliable,
    check_non_empty,
    check_same_length,
    check_same_shape,
    check_square,
)


class TestCheckIndex:

    def test_valid_index_returned(self):
        assert check_index(2, 5, "v") == 2

    def test_negative_index_counts_from_end(self):
        assert check_index(-1, 5, "v") == 4

    def test_out_of_range(self):
        with pytest.raises(DimensionError) as info:
            check_index(5, 5, "v")
        assert info.value.actual == 5
        assert info.value.expected == 5

    def test_too_negative(self):
        with pytest.raises(DimensionError):
            check_index(-6, 5, "v")

    def test_non_int_rejected(self):
        with pytest.raises(ValidationError):
            check_index(1.0, 5, "v")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_index(True, 5, "v")


class TestShapeChecks:

    def test_non_empty(self):
        check_non_empty(1, "v")
        with pytest.raises(DimensionError):
            check_non_empty(0, "v")

    def test_same_length(self):
        check_same_length(3, 3, "add")
        with pytest.raises(DimensionError, match="3 vs 4"):
            check_same_length(3, 4, "add")

    def test_same_shape(self):
        check_same_shape((2, 3), (2, 3), "add")
        with pytest.raises(DimensionError) as info:
            check_same_shape((2, 3), (3, 2), "add")
        assert info.value.actual == (3, 2)
        assert info.value.expected == (2, 3)

    def test_square(self):
        check_square((3, 3), "det")
        with pytest.raises(DimensionError, match="2x3"):
            check_square((2, 3), "det")

    def test_multipliable(self):
        check_multipliable((2, 3), (3, 4))
        with pytest.raises(DimensionError):
            check_multipliable((2, 3), (2, 3))
