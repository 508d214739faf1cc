"""ポートインターフェース定義。

レジストリはここで定義される Protocol にのみ依存し、ストアの具体実装は
store パッケージへ分離する。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Self

    from config_registry.store.param_spec import ConfigParamSpec
    from config_registry.tree.config_tree import ConfigTree

T = TypeVar("T")

# 宣言デフォルト値に記録される出自タグ
DEFAULT_PROVENANCE = "default"


class ParamStorePort(Protocol):
    """解決済みの設定値と出自を保持するストアのポート。"""

    def contains(self, key: str) -> bool:
        """キーが存在するかを返す。"""

    def provenance(self, key: str) -> str:
        """キーの出自タグを返す。"""

    def get_scalar(self, key: str, kind: type[T]) -> T:
        """スカラー値を指定型に変換して返す。"""

    def get_string(self, key: str) -> str:
        """文字列値を返す。"""

    def get_subtree(self, key: str) -> ConfigTree:
        """部分木を返す。"""


class ParamRetrieverPort(Protocol):
    """ストアのステージングツリーへ値を書き込む取得元のポート。"""

    provenance_tag: str

    def update(
        self,
        specs: Sequence[ConfigParamSpec],
        tree: ConfigTree,
        provenance: dict[str, str],
    ) -> None:
        """ツリーと出自表を更新する。"""


@runtime_checkable
class TreeConstructible(Protocol):
    """部分木から自身を構築できる型。"""

    @classmethod
    def from_tree(cls, tree: ConfigTree) -> Self:
        """部分木からインスタンスを作成する。"""
