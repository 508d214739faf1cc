"""2次元配列コンテナ。"""

from __future__ import annotations

from typing import Generic, TypeVar

import numpy as np

T = TypeVar("T")


class Array2D(Generic[T]):
    """行優先のフラットバッファと行数・列数からなる2次元配列

    列数は最初の行から決まり、各行の長さは検証しない。
    そのため len(data) が rows * cols と一致しない場合がある。

    Attributes:
        data: 行優先のフラットバッファ
        rows: 行数
        cols: 列数（最初の行の要素数）
    """

    __slots__ = ("data", "rows", "cols")

    def __init__(self, data: np.ndarray, rows: int, cols: int):
        self.data = data
        self.rows = rows
        self.cols = cols

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def is_rectangular(self) -> bool:
        """バッファ長が rows * cols と一致するかどうか"""
        return len(self.data) == self.rows * self.cols

    def __getitem__(self, index: tuple[int, int]) -> T:
        row, col = index
        flat = row * self.cols + col
        if not (0 <= row < self.rows and 0 <= col < self.cols and flat < len(self.data)):
            raise IndexError(f"インデックス ({row}, {col}) は範囲外です: shape={self.shape}")
        return self.data[flat]

    def to_ndarray(self) -> np.ndarray:
        """(rows, cols) 形状の ndarray を返す

        Raises:
            ValueError: バッファ長が rows * cols と一致しない場合
        """
        if not self.is_rectangular():
            raise ValueError(
                f"バッファ長 {len(self.data)} は {self.rows}x{self.cols} 行列に変形できません"
            )
        return self.data.reshape(self.rows, self.cols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array2D):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.data, other.data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Array2D(rows={self.rows}, cols={self.cols}, data={self.data.tolist()!r})"
