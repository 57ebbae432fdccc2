"""
Tests for element-type checks and value coercion.
"""

import numpy as np
import pytest

from pylean.core.dtypes import (
    coerce_values,
    is_float,
    is_unsigned,
    require_signed,
    resolve_dtype,
)
from pylean.core.exceptions import (
    InvalidTypeInitialization,
    OperationNotSupported,
    ValidationError,
)
from pylean.core.tolerances import EXACT, FLOAT16, FLOAT32, FLOAT64, select_tolerance


class TestResolveDtype:

    @pytest.mark.parametrize("dtype", [
        np.int8, np.int16, np.int32, np.int64,
        np.uint8, np.uint16, np.uint32, np.uint64,
        np.float16, np.float32, np.float64, "int32", "float64",
    ])
    def test_numeric_types_accepted(self, dtype):
        assert resolve_dtype(dtype) == np.dtype(dtype)

    @pytest.mark.parametrize("dtype", [bool, np.bool_, complex, np.complex128, str, object, "datetime64[s]"])
    def test_other_types_rejected(self, dtype):
        with pytest.raises(InvalidTypeInitialization):
            resolve_dtype(dtype)

    def test_uninterpretable(self):
        with pytest.raises(InvalidTypeInitialization, match="cannot interpret"):
            resolve_dtype("not-a-type")

    def test_predicates(self):
        assert is_float(np.dtype(np.float32))
        assert not is_float(np.dtype(np.int32))
        assert is_unsigned(np.dtype(np.uint16))
        assert not is_unsigned(np.dtype(np.int16))

    def test_require_signed(self):
        require_signed(np.dtype(np.int8), "determinant")
        require_signed(np.dtype(np.float64), "determinant")
        with pytest.raises(OperationNotSupported, match="determinant"):
            require_signed(np.dtype(np.uint8), "determinant")


class TestCoerceValues:

    def test_returns_copy(self):
        source = np.array([1, 2, 3], dtype=np.int32)
        result = coerce_values(source, np.dtype(np.int32), "x")
        result[0] = 99
        assert source[0] == 1

    def test_converts_type(self):
        result = coerce_values([1, 2], np.dtype(np.float32), "x")
        assert result.dtype == np.float32

    def test_out_of_range_int(self):
        with pytest.raises(ValidationError, match="do not fit int8"):
            coerce_values([1, 300], np.dtype(np.int8), "x")

    def test_negative_into_unsigned(self):
        with pytest.raises(ValidationError, match="uint8"):
            coerce_values(-1, np.dtype(np.uint8), "x")

    def test_non_finite_into_int(self):
        with pytest.raises(ValidationError, match="non-finite"):
            coerce_values([np.nan], np.dtype(np.int32), "x")

    def test_float_overflow(self):
        with pytest.raises(ValidationError, match="overflow"):
            coerce_values([1e10], np.dtype(np.float16), "x")

    def test_non_numeric(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            coerce_values(["a"], np.dtype(np.int32), "x")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            coerce_values([True, False], np.dtype(np.int32), "x")

    def test_fractional_into_int(self):
        with pytest.raises(ValidationError, match="fractional"):
            coerce_values([1.0, 2.5], np.dtype(np.int32), "x")

    def test_integral_float_into_int(self):
        result = coerce_values([3.0, -4.0], np.dtype(np.int16), "x")
        np.testing.assert_array_equal(result, [3, -4])
        assert result.dtype == np.int16

    def test_empty(self):
        assert coerce_values([], np.dtype(np.int8), "x").size == 0


class TestTolerances:

    def test_integer_is_exact(self):
        assert select_tolerance(np.int32) is EXACT

    @pytest.mark.parametrize("dtype,tier", [
        (np.float64, FLOAT64),
        (np.float32, FLOAT32),
        (np.float16, FLOAT16),
    ])
    def test_float_tiers(self, dtype, tier):
        assert select_tolerance(dtype) is tier
