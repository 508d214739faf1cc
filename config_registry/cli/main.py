"""
設定パラメータレジストリ - コマンドラインエントリーポイント

設定ファイルと環境変数からストアを構築し、指定されたキーの値を
要求された型で取得して表示します。
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import numpy as np
import yaml

from config_registry.cli.arguments import build_parser
from config_registry.core.errors import InvalidOptionError
from config_registry.registry import Array2D, ConfigParamRegistry
from config_registry.store import ConfigParamStore, EnvRetriever, FileRetriever
from config_registry.tree import ConfigTree
from config_registry.utils import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

SCALAR_TYPE_NAMES: dict[str, type] = {
    "int": int,
    "int32": np.int32,
    "int64": np.int64,
    "float": float,
    "float32": np.float32,
    "float64": np.float64,
    "bool": bool,
    "str": str,
}


def parse_kind(name: str) -> Any:
    """型名を get() に渡す型へ変換する

    Args:
        name: 'int', 'list:float', 'matrix:int', 'tree' などの型名

    Returns:
        対応する型

    Raises:
        ValueError: 不明な型名の場合
    """
    if name == "tree":
        return ConfigTree
    container, sep, element_name = name.partition(":")
    if not sep:
        if name in SCALAR_TYPE_NAMES:
            return SCALAR_TYPE_NAMES[name]
        raise ValueError(f"不明な型名です: {name}")

    element = SCALAR_TYPE_NAMES.get(element_name)
    if element is None:
        raise ValueError(f"不明な要素型です: {element_name}")
    if container == "list":
        return list[element]
    if container == "matrix":
        return Array2D[element]
    raise ValueError(f"不明なコンテナ型です: {container}")


def _plain(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def format_value(value: Any) -> str:
    """取得した値を表示用の文字列に変換する"""
    if isinstance(value, ConfigTree):
        return yaml.safe_dump(value.to_data(), allow_unicode=True, default_flow_style=False).rstrip()
    if isinstance(value, Array2D):
        data = {"rows": value.rows, "cols": value.cols, "data": value.data.tolist()}
        return yaml.safe_dump(data, allow_unicode=True, default_flow_style=None).rstrip()
    if isinstance(value, (list, tuple)):
        return yaml.safe_dump(_plain(value), allow_unicode=True, default_flow_style=True).rstrip()
    value = _plain(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_registry(config_path: str | None, env_prefix: str | None) -> ConfigParamRegistry:
    """取得元からストアを構築し、レジストリを作成する"""
    retrievers: list = []
    if config_path:
        retrievers.append(FileRetriever(config_path))
    if env_prefix:
        retrievers.append(EnvRetriever(env_prefix))

    store = ConfigParamStore(retrievers=retrievers)
    store.preload()
    store.activate()
    return ConfigParamRegistry(store)


def main(argv: Sequence[str] | None = None) -> int:
    """メイン処理"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # 標準出力は取得した値のみ
    setup_logging(args.debug, stream=sys.stderr)

    try:
        kind = parse_kind(args.kind)
    except ValueError as e:
        parser.error(str(e))

    try:
        registry = build_registry(args.config, args.env_prefix)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"設定の読み込みに失敗しました: {e}")
        return 1

    if args.list:
        store = registry.store
        for key in store.keys():
            print(f"{key}\t{store.provenance(key)}")
        return 0

    try:
        value = registry.get(args.get, kind)
    except InvalidOptionError as e:
        logger.error(str(e))
        return 1

    print(format_value(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
