"""スカラー値の型変換モジュール。

ツリーのリーフに保持された生の値(YAML/JSON 由来の型付き値、または CLI や
環境変数由来の文字列)を、要求されたスカラー型へ変換する。
"""

from __future__ import annotations

import math
from typing import Any, TypeVar

import numpy as np

from config_registry.core.errors import ValueConversionError

T = TypeVar("T")

# 取得可能なスカラー型
SCALAR_KINDS: tuple[type, ...] = (np.int32, np.int64, int, np.float32, float, np.float64, bool)

INTEGER_KINDS: tuple[type, ...] = (np.int32, np.int64, int)
FLOAT_KINDS: tuple[type, ...] = (np.float32, float, np.float64)

_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0"}

_FLOAT32_MAX = float(np.finfo(np.float32).max)


def is_scalar_kind(kind: Any) -> bool:
    """kind がスカラー型かどうかを返す。"""
    return any(kind is k for k in SCALAR_KINDS)


def is_element_kind(kind: Any) -> bool:
    """シーケンス/行列の要素として取得できる型かどうかを返す。"""
    return kind is str or is_scalar_kind(kind)


def _to_int(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueConversionError(f"ブール値 {raw!r} は整数に変換できません")
    if isinstance(raw, (int, np.integer)):
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 10)
        except ValueError:
            raise ValueConversionError(f"'{raw}' は整数として解釈できません") from None
    raise ValueConversionError(f"{type(raw).__name__} 型の値 {raw!r} は整数に変換できません")


def _to_float(raw: Any) -> float:
    if isinstance(raw, bool):
        raise ValueConversionError(f"ブール値 {raw!r} は浮動小数点数に変換できません")
    if isinstance(raw, (int, float, np.integer, np.floating)):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw.strip())
        except ValueError:
            raise ValueConversionError(f"'{raw}' は浮動小数点数として解釈できません") from None
    raise ValueConversionError(f"{type(raw).__name__} 型の値 {raw!r} は浮動小数点数に変換できません")


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, (bool, np.bool_)):
        return bool(raw)
    if isinstance(raw, (int, np.integer)) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueConversionError(f"{raw!r} はブール値として解釈できません")


def _to_str(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bool, np.bool_)):
        return "true" if raw else "false"
    if isinstance(raw, (int, float, np.integer, np.floating)):
        return str(raw)
    raise ValueConversionError(f"{type(raw).__name__} 型の値 {raw!r} は文字列に変換できません")


def coerce_value(raw: Any, kind: type[T]) -> T:
    """生の値を指定されたスカラー型へ変換する

    Args:
        raw: リーフに保持された値
        kind: 変換先の型（SCALAR_KINDS または str）

    Returns:
        変換後の値

    Raises:
        ValueConversionError: 値が無い、または変換できない場合
        TypeError: kind がサポート対象外の場合
    """
    if not is_element_kind(kind):
        raise TypeError(f"サポートされていない型です: {kind!r}")
    if raw is None:
        raise ValueConversionError("値が設定されていません")

    if kind is str:
        return _to_str(raw)
    if kind is bool:
        return _to_bool(raw)

    if kind in INTEGER_KINDS:
        value = _to_int(raw)
        if kind is not int:
            info = np.iinfo(kind)
            if not info.min <= value <= info.max:
                raise ValueConversionError(f"{value} は {kind.__name__} の範囲外です")
        return kind(value)

    value = _to_float(raw)
    if kind is np.float32 and math.isfinite(value) and abs(value) > _FLOAT32_MAX:
        raise ValueConversionError(f"{value} は float32 の範囲外です")
    return kind(value)
