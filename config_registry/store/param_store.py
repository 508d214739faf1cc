"""Configuration parameter store with per-key provenance."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from config_registry.core.errors import UnknownKeyError
from config_registry.core.interfaces import DEFAULT_PROVENANCE
from config_registry.store.retrievers import record_provenance
from config_registry.tree.config_tree import PATH_SEPARATOR, ConfigTree

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from config_registry.core.interfaces import ParamRetrieverPort
    from config_registry.store.param_spec import ConfigParamSpec

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigParamStore:
    """解決済み設定値の保持クラス

    デフォルト値と各取得元の値を一つのツリーへ統合し、キーごとの出自を記録する。
    `preload()` でステージングツリーを構築し、`activate()` で有効化する。

    Attributes:
        specs: パラメータ宣言
        retrievers: 適用順に並んだ取得元
    """

    def __init__(
        self,
        specs: Sequence[ConfigParamSpec] = (),
        retrievers: Sequence[ParamRetrieverPort] = (),
    ):
        self.specs = tuple(specs)
        self.retrievers = tuple(retrievers)
        self._tree = ConfigTree()
        self._provenance: dict[str, str] = {}
        self._staged: tuple[ConfigTree, dict[str, str]] | None = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any], provenance: str = DEFAULT_PROVENANCE) -> ConfigParamStore:
        """辞書データから有効化済みのストアを作成する

        Args:
            data: ネストした設定データ
            provenance: すべてのキーに記録する出自

        Returns:
            有効化済みのストア
        """
        store = cls()
        tree = ConfigTree()
        record_provenance(tree, store._provenance, tree.merge("", data), provenance)
        store._tree = tree
        return store

    def preload(self) -> None:
        """デフォルト値と取得元からステージングツリーを構築する

        デフォルト値の出自は 'default'。取得元は登録順に適用され、後の値が優先される。
        """
        tree = ConfigTree()
        provenance: dict[str, str] = {}

        for spec in self.specs:
            if spec.default is None:
                continue
            record_provenance(tree, provenance, tree.merge(spec.name, spec.default), DEFAULT_PROVENANCE)

        for retriever in self.retrievers:
            retriever.update(self.specs, tree, provenance)

        self._staged = (tree, provenance)
        logger.info(f"設定値を読み込みました: {len(provenance)} 件のキー")

    def activate(self) -> None:
        """ステージングツリーを有効化する

        Raises:
            RuntimeError: preload() が呼ばれていない場合
        """
        if self._staged is None:
            raise RuntimeError("preload() の前に activate() は呼び出せません")
        self._tree, self._provenance = self._staged
        self._staged = None
        logger.debug("ステージングツリーを有効化しました")

    @property
    def tree(self) -> ConfigTree:
        return self._tree

    def keys(self) -> list[str]:
        """出自が記録されているキーの一覧"""
        return list(self._provenance)

    def contains(self, key: str) -> bool:
        return self._tree.find(key) is not None

    def provenance(self, key: str) -> str:
        """キーの出自を返す

        キー自身に記録がない場合は最も近い祖先の出自を返す。

        Raises:
            UnknownKeyError: キーにも祖先にも記録がない場合
        """
        parts = key.split(PATH_SEPARATOR)
        while parts:
            tag = self._provenance.get(PATH_SEPARATOR.join(parts))
            if tag is not None:
                return tag
            parts.pop()
        raise UnknownKeyError(key)

    def get_scalar(self, key: str, kind: type[T]) -> T:
        return self._tree.get(key, kind)

    def get_string(self, key: str) -> str:
        return self._tree.get(key, str)

    def get_subtree(self, key: str) -> ConfigTree:
        return self._tree.get_child(key)
