"""Unit tests for sequence/matrix extractors and Array2D."""

from __future__ import annotations

import numpy as np
import pytest

from config_registry.core.errors import ValueConversionError
from config_registry.registry import Array2D, extract_matrix, extract_vector
from config_registry.tree import ConfigTree


class TestExtractVector:
    """シーケンス抽出のテスト"""

    def test_length_and_order(self):
        tree = ConfigTree.from_data([3, 1, 2])

        assert extract_vector(tree, int) == [3, 1, 2]

    def test_textual_elements(self):
        tree = ConfigTree.from_data(["1.5", "2"])

        assert extract_vector(tree, float) == [1.5, 2.0]

    def test_named_children_are_included(self):
        """名前付きの子も文書順に要素となる"""
        tree = ConfigTree.from_data({"x": 1, "y": 2})

        assert extract_vector(tree, int) == [1, 2]

    def test_empty(self):
        assert extract_vector(ConfigTree.from_data([]), int) == []

    def test_failure_is_all_or_nothing(self):
        with pytest.raises(ValueConversionError):
            extract_vector(ConfigTree.from_data([1, "two", 3]), int)


class TestExtractMatrix:
    """行列抽出のテスト"""

    def test_shape_and_row_major_buffer(self):
        matrix = extract_matrix(ConfigTree.from_data([[1, 2, 3], [4, 5, 6]]), int)

        assert matrix.shape == (2, 3)
        assert matrix.data.tolist() == [1, 2, 3, 4, 5, 6]
        assert matrix.data.dtype == np.int64

    def test_columns_from_first_row_only(self):
        """列数は最初の行から決まり、後続の行は検証しない"""
        matrix = extract_matrix(ConfigTree.from_data([[1], [2, 3, 4]]), int)

        assert matrix.rows == 2
        assert matrix.cols == 1
        assert matrix.data.tolist() == [1, 2, 3, 4]

    def test_empty(self):
        matrix = extract_matrix(ConfigTree.from_data([]), float)

        assert matrix.shape == (0, 0)
        assert len(matrix.data) == 0

    def test_bool_and_str_elements(self):
        flags = extract_matrix(ConfigTree.from_data([[True, False]]), bool)
        names = extract_matrix(ConfigTree.from_data([["a", "b"], ["c", "d"]]), str)

        assert flags.data.dtype == np.bool_
        assert names.to_ndarray().tolist() == [["a", "b"], ["c", "d"]]

    def test_failure_aborts(self):
        with pytest.raises(ValueConversionError):
            extract_matrix(ConfigTree.from_data([[1, 2], [3, "x"]]), int)


class TestArray2D:
    """Array2D のテスト"""

    def test_indexing(self):
        matrix = Array2D(np.array([1, 2, 3, 4]), 2, 2)

        assert matrix[0, 1] == 2
        assert matrix[1, 1] == 4

    def test_index_out_of_range(self):
        matrix = Array2D(np.array([1, 2, 3, 4]), 2, 2)

        with pytest.raises(IndexError):
            matrix[2, 0]

    def test_to_ndarray_requires_rectangular_buffer(self):
        matrix = Array2D(np.array([1, 2, 3]), 2, 2)

        with pytest.raises(ValueError, match="2x2"):
            matrix.to_ndarray()

    def test_equality(self):
        a = Array2D(np.array([1.0, 2.0]), 1, 2)
        b = Array2D(np.array([1.0, 2.0]), 1, 2)
        c = Array2D(np.array([1.0, 2.0]), 2, 1)

        assert a == b
        assert a != c

    def test_index_past_ragged_buffer(self):
        """宣言された形状内でもバッファ外の位置は範囲外エラー"""
        matrix = Array2D(np.array([1, 2, 3]), 2, 2)

        assert matrix[1, 0] == 3
        with pytest.raises(IndexError, match="範囲外"):
            matrix[1, 1]
