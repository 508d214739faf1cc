"""階層設定ツリーモジュール。

各ノードは任意のスカラー値と、名前付きの子ノードの順序付きリストを持つ。
リスト要素は空文字列の名前を持つ子ノードとして表現する。
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeVar

from config_registry.core.errors import TreePathError
from config_registry.tree.coercion import coerce_value

T = TypeVar("T")

PATH_SEPARATOR = "."


class ConfigTree:
    """順序付きの階層設定ノード

    Attributes:
        value: ノードのスカラー値（内部ノードでは通常 None）
    """

    __slots__ = ("value", "_children")

    def __init__(self, value: Any = None, children: Iterable[tuple[str, ConfigTree]] = ()):
        self.value = value
        self._children: list[tuple[str, ConfigTree]] = list(children)

    @classmethod
    def from_data(cls, data: Any) -> ConfigTree:
        """辞書/リスト/スカラーのネスト構造からツリーを作成する

        Args:
            data: yaml.safe_load / json.load で得られるようなデータ

        Returns:
            作成されたツリー
        """
        if isinstance(data, ConfigTree):
            return data.copy()
        if isinstance(data, Mapping):
            return cls(children=[(str(k), cls.from_data(v)) for k, v in data.items()])
        if isinstance(data, (list, tuple)):
            return cls(children=[("", cls.from_data(v)) for v in data])
        return cls(value=data)

    def to_data(self) -> Any:
        """ツリーを辞書/リスト/スカラーのネスト構造に戻す"""
        if not self._children:
            return self.value
        if all(name == "" for name, _ in self._children):
            return [child.to_data() for _, child in self._children]
        return {name: child.to_data() for name, child in self._children}

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[tuple[str, ConfigTree]]:
        return iter(self._children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigTree):
            return NotImplemented
        return self.value == other.value and self._children == other._children

    def __repr__(self) -> str:
        return f"ConfigTree({self.to_data()!r})"

    def is_leaf(self) -> bool:
        return not self._children

    def is_sequence(self) -> bool:
        """子ノードがすべて無名（リスト表現）かどうか"""
        return bool(self._children) and all(name == "" for name, _ in self._children)

    def keys(self) -> list[str]:
        return [name for name, _ in self._children]

    def copy(self) -> ConfigTree:
        """ツリー全体のディープコピーを返す"""
        return copy.deepcopy(self)

    def _child(self, name: str) -> ConfigTree | None:
        for child_name, child in self._children:
            if child_name == name:
                return child
        return None

    def find(self, path: str) -> ConfigTree | None:
        """ドット区切りのパスでノードを検索する

        同名の子が複数ある場合は最初のものを返す。

        Args:
            path: ドット記法のパス（例: 'detection.threshold'）

        Returns:
            見つかったノード、存在しない場合は None
        """
        node: ConfigTree | None = self
        for name in path.split(PATH_SEPARATOR):
            node = node._child(name)
            if node is None:
                return None
        return node

    def get_child(self, path: str) -> ConfigTree:
        """パスのノードを返す

        Raises:
            TreePathError: ノードが存在しない場合
        """
        node = self.find(path)
        if node is None:
            raise TreePathError(path)
        return node

    def get_value(self, kind: type[T]) -> T:
        """ノード自身の値を指定型で返す

        Raises:
            ValueConversionError: 値が無い、または変換できない場合
        """
        return coerce_value(self.value, kind)

    def get(self, path: str, kind: type[T]) -> T:
        return self.get_child(path).get_value(kind)

    def put_child(self, path: str, tree: ConfigTree) -> ConfigTree:
        """パスにノードを配置する（既存ノードは置き換える）

        途中のノードが存在しない場合は作成する。
        """
        *parents, leaf = path.split(PATH_SEPARATOR)
        node = self
        for name in parents:
            child = node._child(name)
            if child is None:
                child = ConfigTree()
                node._children.append((name, child))
            node = child

        for i, (name, _) in enumerate(node._children):
            if name == leaf:
                node._children[i] = (leaf, tree)
                return tree
        node._children.append((leaf, tree))
        return tree

    def put(self, path: str, value: Any) -> ConfigTree:
        """パスにデータを配置する"""
        return self.put_child(path, ConfigTree.from_data(value))

    def merge(self, path: str, data: Any) -> list[str]:
        """データをパス以下に再帰的にマージする

        辞書は既存ノードへ再帰的にマージし、リストやスカラーは置き換える。

        Args:
            path: マージ先のパス（空文字列はルート）
            data: マージするデータ

        Returns:
            書き込まれたキーの一覧（辞書ノード自身を含む）
        """
        if not path:
            if not isinstance(data, Mapping):
                raise TypeError("ルートにマージできるのは辞書のみです")
            written: list[str] = []
            for key, value in data.items():
                written.extend(self.merge(str(key), value))
            return written

        if isinstance(data, Mapping):
            existing = self.find(path)
            if existing is None or existing.is_sequence():
                self.put_child(path, ConfigTree())
            else:
                existing.value = None
            written = [path]
            for key, value in data.items():
                written.extend(self.merge(f"{path}{PATH_SEPARATOR}{key}", value))
            return written

        self.put(path, data)
        return [path]
