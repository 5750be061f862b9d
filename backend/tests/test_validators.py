"""Tests for argument validation."""

import pytest

from backend.photofix.enums import Alignment
from backend.photofix.exceptions import ValidationError
from backend.photofix.validators import (
    coerce_alignment,
    validate_dimensions,
    validate_tolerance,
)


class TestValidateDimensions:
    def test_valid_dimensions(self):
        validate_dimensions(900, 1200)  # No exception

    def test_zero_width_rejected(self):
        with pytest.raises(ValidationError, match="positive"):
            validate_dimensions(0, 100)

    def test_negative_height_rejected(self):
        with pytest.raises(ValidationError, match="positive"):
            validate_dimensions(100, -50)

    def test_oversized_width_rejected(self):
        with pytest.raises(ValidationError, match="exceed maximum"):
            validate_dimensions(10000, 100)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="must be numbers"):
            validate_dimensions("400", 400)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            validate_dimensions(True, 400)

    def test_boundary_min(self):
        validate_dimensions(1, 1)  # Should pass (equals min)


class TestValidateTolerance:
    @pytest.mark.parametrize("value", [0, 15, 255])
    def test_valid(self, value):
        validate_tolerance(value)

    @pytest.mark.parametrize("value", [-1, 256])
    def test_out_of_range(self, value):
        with pytest.raises(ValidationError, match="within 0..255"):
            validate_tolerance(value)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            validate_tolerance(1.5)


class TestCoerceAlignment:
    def test_enum_passthrough(self):
        assert coerce_alignment(Alignment.CENTER) is Alignment.CENTER

    def test_string_values(self):
        assert coerce_alignment("bottom") is Alignment.BOTTOM
        assert coerce_alignment("TOP") is Alignment.TOP

    def test_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Allowed: top, center, bottom"):
            coerce_alignment("left")
