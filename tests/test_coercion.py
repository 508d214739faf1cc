"""Unit tests for scalar coercion."""

from __future__ import annotations

import numpy as np
import pytest

from config_registry.core.errors import ValueConversionError
from config_registry.tree import coerce_value, is_element_kind, is_scalar_kind


class TestIntegerCoercion:
    """整数型への変換テスト"""

    @pytest.mark.parametrize(("raw", "expected"), [(7, 7), ("7", 7), (" -3 ", -3), (np.int16(5), 5)])
    def test_valid_values(self, raw, expected):
        assert coerce_value(raw, int) == expected

    @pytest.mark.parametrize("raw", [True, 1.5, 2.0, "1.5", "abc", ""])
    def test_invalid_values(self, raw):
        with pytest.raises(ValueConversionError):
            coerce_value(raw, int)

    def test_int32_bounds(self):
        assert coerce_value(2**31 - 1, np.int32) == 2**31 - 1
        with pytest.raises(ValueConversionError, match="int32"):
            coerce_value(2**31, np.int32)

    def test_int64_bounds(self):
        with pytest.raises(ValueConversionError, match="int64"):
            coerce_value(2**63, np.int64)


class TestFloatCoercion:
    """浮動小数点数型への変換テスト"""

    @pytest.mark.parametrize(("raw", "expected"), [(1, 1.0), (2.5, 2.5), ("1e-3", 0.001), (" 4.25", 4.25)])
    def test_valid_values(self, raw, expected):
        assert coerce_value(raw, float) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", [False, "fast", [1.0]])
    def test_invalid_values(self, raw):
        with pytest.raises(ValueConversionError):
            coerce_value(raw, float)

    def test_float32_overflow(self):
        with pytest.raises(ValueConversionError, match="float32"):
            coerce_value(1e300, np.float32)

    def test_float32_infinity_is_allowed(self):
        assert np.isinf(coerce_value("inf", np.float32))


class TestBoolCoercion:
    """ブール型への変換テスト"""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(True, True), (False, False), (1, True), (0, False), ("true", True), ("FALSE", False), ("1", True)],
    )
    def test_valid_values(self, raw, expected):
        assert coerce_value(raw, bool) is expected

    @pytest.mark.parametrize("raw", [2, "yes", "", 1.0])
    def test_invalid_values(self, raw):
        with pytest.raises(ValueConversionError):
            coerce_value(raw, bool)


class TestStringCoercion:
    """文字列型への変換テスト"""

    @pytest.mark.parametrize(("raw", "expected"), [("x", "x"), (3, "3"), (2.5, "2.5"), (True, "true")])
    def test_valid_values(self, raw, expected):
        assert coerce_value(raw, str) == expected

    def test_list_is_not_a_string(self):
        with pytest.raises(ValueConversionError):
            coerce_value(["x"], str)


class TestKinds:
    """型判定とエラー処理のテスト"""

    def test_none_value_fails_for_every_kind(self):
        for kind in (int, float, bool, str, np.int32):
            with pytest.raises(ValueConversionError):
                coerce_value(None, kind)

    def test_unsupported_kind(self):
        with pytest.raises(TypeError):
            coerce_value(1, dict)

    def test_kind_predicates(self):
        assert is_scalar_kind(np.float32) is True
        assert is_scalar_kind(str) is False
        assert is_element_kind(str) is True
        assert is_element_kind(list) is False
