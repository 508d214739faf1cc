"""型付き設定パラメータアクセスモジュール。

ConfigParamRegistry はストアに対する唯一の公開窓口であり、要求された型に応じて
ストアのスカラー取得・シーケンス/行列の抽出・部分木からの構築へ処理を振り分ける。
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_args, get_origin, overload

import numpy as np

from config_registry.core.errors import ConfigError, InvalidOptionError
from config_registry.core.interfaces import DEFAULT_PROVENANCE, TreeConstructible
from config_registry.registry.array2d import Array2D
from config_registry.registry.extractors import extract_matrix, extract_vector
from config_registry.tree.coercion import is_element_kind, is_scalar_kind
from config_registry.tree.config_tree import ConfigTree

if TYPE_CHECKING:
    from collections.abc import Callable

    from config_registry.core.interfaces import ParamStorePort

logger = logging.getLogger(__name__)

T = TypeVar("T")
TC = TypeVar("TC", bound=TreeConstructible)


@dataclass(frozen=True, slots=True)
class _Accessor:
    """解決済みの取得方法"""

    description: str
    fetch: Callable[[ParamStorePort, str], Any]


def _accepts_single_argument(kind: type) -> bool:
    try:
        signature = inspect.signature(kind)
    except (TypeError, ValueError):
        return False
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


def _sequence_accessor(kind: Any) -> _Accessor | None:
    origin = get_origin(kind)
    if origin not in (list, tuple):
        return None
    args = get_args(kind)
    if origin is list and len(args) == 1:
        element = args[0]
    elif origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        element = args[0]
    else:
        return None
    if not is_element_kind(element):
        raise TypeError(f"シーケンスの要素型がサポートされていません: {element!r}")
    if origin is list:
        return _Accessor(f"list[{element.__name__}]", lambda s, k: extract_vector(s.get_subtree(k), element))
    return _Accessor(
        f"tuple[{element.__name__}, ...]",
        lambda s, k: tuple(extract_vector(s.get_subtree(k), element)),
    )


def _matrix_accessor(kind: Any) -> _Accessor | None:
    if kind is Array2D:
        raise TypeError("Array2D には要素型の指定が必要です（例: Array2D[float]）")
    if get_origin(kind) is not Array2D:
        return None
    (element,) = get_args(kind)
    if not is_element_kind(element):
        raise TypeError(f"行列の要素型がサポートされていません: {element!r}")
    return _Accessor(f"Array2D[{element.__name__}]", lambda s, k: extract_matrix(s.get_subtree(k), element))


def resolve_accessor(kind: Any) -> _Accessor:
    """要求された型に対応する取得方法を決定する

    ストアへのアクセス前に実行され、どの取得方法にも該当しない型は
    プログラミングエラーとして TypeError を送出する。

    Args:
        kind: 要求された型

    Returns:
        取得方法

    Raises:
        TypeError: サポートされていない型の場合
    """
    if is_scalar_kind(kind):
        return _Accessor(kind.__name__, lambda s, k: s.get_scalar(k, kind))
    if kind is str:
        # str は不変なのでストアが保持するオブジェクトをそのまま返す
        return _Accessor("str", lambda s, k: s.get_string(k))

    accessor = _sequence_accessor(kind) or _matrix_accessor(kind)
    if accessor is not None:
        return accessor

    if kind is ConfigTree:
        return _Accessor("ConfigTree", lambda s, k: s.get_subtree(k).copy())
    if kind in (list, tuple):
        raise TypeError(f"{kind.__name__} には要素型の指定が必要です（例: {kind.__name__}[int]）")
    if isinstance(kind, type) and kind.__module__ != "builtins":
        if callable(getattr(kind, "from_tree", None)):
            return _Accessor(kind.__name__, lambda s, k: kind.from_tree(s.get_subtree(k).copy()))
        if not issubclass(kind, np.generic) and _accepts_single_argument(kind):
            return _Accessor(kind.__name__, lambda s, k: kind(s.get_subtree(k).copy()))

    raise TypeError(f"基本型ではなく、部分木からのコンストラクタも提供されていない型です: {kind!r}")


class ConfigParamRegistry:
    """設定パラメータへの型付き読み取り専用アクセス

    ストアは構築時に受け取り、レジストリの生存期間中そのまま保持する。
    更新操作は提供しないため、ストアの読み取りが並行安全であれば
    レジストリも並行読み取りに対して安全である。

    Attributes:
        store: 値の取得元となるストア
    """

    __slots__ = ("_store",)

    def __init__(self, store: ParamStorePort):
        self._store = store

    @property
    def store(self) -> ParamStorePort:
        return self._store

    def is_set(self, key: str) -> bool:
        """キーがストアに存在するかを返す"""
        return self._store.contains(key)

    def is_default(self, key: str) -> bool:
        """キーが存在し、かつ出自が 'default' 以外かを返す

        キーが存在しない場合、または出自を判定できない場合は False。
        """
        if not self._store.contains(key):
            return False
        try:
            return self._store.provenance(key) != DEFAULT_PROVENANCE
        except ConfigError:
            return False

    @overload
    def get(self, key: str, kind: type[bool]) -> bool: ...

    @overload
    def get(self, key: str, kind: type[int]) -> int: ...

    @overload
    def get(self, key: str, kind: type[float]) -> float: ...

    @overload
    def get(self, key: str, kind: type[np.int32]) -> np.int32: ...

    @overload
    def get(self, key: str, kind: type[np.int64]) -> np.int64: ...

    @overload
    def get(self, key: str, kind: type[np.float32]) -> np.float32: ...

    @overload
    def get(self, key: str, kind: type[str]) -> str: ...

    @overload
    def get(self, key: str, kind: type[list[T]]) -> list[T]: ...

    @overload
    def get(self, key: str, kind: type[tuple[T, ...]]) -> tuple[T, ...]: ...

    @overload
    def get(self, key: str, kind: type[Array2D[T]]) -> Array2D[T]: ...

    @overload
    def get(self, key: str, kind: type[ConfigTree]) -> ConfigTree: ...

    @overload
    def get(self, key: str, kind: type[TC]) -> TC: ...

    def get(self, key: str, kind: Any) -> Any:
        """設定値を指定された型で取得する

        Args:
            key: ドット記法の設定キー
            kind: 取得する型（スカラー型、str、list[E]、tuple[E, ...]、Array2D[E]、
                ConfigTree、または部分木から構築できる型）

        Returns:
            指定された型の設定値

        Raises:
            InvalidOptionError: キーが存在しない、または値を変換できない場合
            TypeError: 取得できない型が指定された場合
        """
        accessor = resolve_accessor(kind)
        try:
            value = accessor.fetch(self._store, key)
        except Exception as e:
            # 説明を持たない例外のみ汎用メッセージにする
            cause = str(e) or None
            logger.warning(f"オプション '{key}' を {accessor.description} として取得できません: {e!r}")
            raise InvalidOptionError(key, cause) from e

        logger.debug(f"オプション '{key}' を {accessor.description} として取得しました")
        return value
