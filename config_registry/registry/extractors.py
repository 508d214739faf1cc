"""部分木からシーケンス/行列を取り出す抽出関数。"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import numpy as np

from config_registry.registry.array2d import Array2D

if TYPE_CHECKING:
    from config_registry.tree.config_tree import ConfigTree

T = TypeVar("T")

# 要素型に対応するバッファの dtype（未登録の型は object）
_DTYPES: dict[type, type] = {
    int: np.int64,
    np.int32: np.int32,
    np.int64: np.int64,
    float: np.float64,
    np.float32: np.float32,
    np.float64: np.float64,
    bool: np.bool_,
}


def extract_vector(tree: ConfigTree, kind: type[T]) -> list[T]:
    """直下の子ノードの値を文書順のリストとして返す

    1つでも変換に失敗した場合は全体が失敗する。

    Args:
        tree: リストを表す部分木
        kind: 要素の型

    Returns:
        長さが子ノード数と等しいリスト
    """
    return [child.get_value(kind) for _, child in tree]


def extract_matrix(tree: ConfigTree, kind: type[T]) -> Array2D[T]:
    """行リストの部分木を2次元配列に変換する

    行数は直下の子ノード数、列数は最初の行の子ノード数。
    各行の要素は長さを検証せずにそのまま行優先で連結する。

    Args:
        tree: 行（リスト）のリストを表す部分木
        kind: 要素の型

    Returns:
        2次元配列
    """
    cache: list[T] = []
    nrows = len(tree)
    ncols = 0
    for irow, (_, row) in enumerate(tree):
        if irow == 0:
            ncols = len(row)
        cache.extend(entry.get_value(kind) for _, entry in row)
    data = np.array(cache, dtype=_DTYPES.get(kind, object))
    return Array2D(data, nrows, ncols)
