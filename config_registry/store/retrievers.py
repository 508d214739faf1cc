"""ストアへ値を供給する取得元（ファイル/環境変数/CLI）。

各取得元はストアのステージングツリーへ値を書き込み、書き込んだキーの出自を
記録する。後から適用された取得元が先の値を上書きする。
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from config_registry.store.loader import load_config_file
from config_registry.tree.config_tree import PATH_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from config_registry.store.param_spec import ConfigParamSpec
    from config_registry.tree.config_tree import ConfigTree

logger = logging.getLogger(__name__)

FILE_PROVENANCE = "file"
ENV_PROVENANCE = "env"
CLI_PROVENANCE = "cli"


def record_provenance(tree: ConfigTree, provenance: dict[str, str], keys: Sequence[str], tag: str) -> None:
    """書き込んだキーの出自を記録する

    書き込みで暗黙に作成された親ノードにも同じ出自を記録し、
    置き換えでツリーから消えたキーの記録は削除する。

    Args:
        tree: 書き込み後のツリー
        provenance: キーから出自への辞書（その場で更新される）
        keys: 書き込まれたキー
        tag: 記録する出自
    """
    for key in keys:
        provenance[key] = tag
        parts = key.split(PATH_SEPARATOR)
        for depth in range(1, len(parts)):
            provenance.setdefault(PATH_SEPARATOR.join(parts[:depth]), tag)

    stale = [key for key in provenance if tree.find(key) is None]
    for key in stale:
        del provenance[key]


class FileRetriever:
    """YAML/JSON 設定ファイルからの取得元"""

    provenance_tag = FILE_PROVENANCE

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def update(
        self,
        specs: Sequence[ConfigParamSpec],
        tree: ConfigTree,
        provenance: dict[str, str],
    ) -> None:
        _ = specs  # ファイル内の全キーを取り込む
        data = load_config_file(self.path)
        written = tree.merge("", data)
        record_provenance(tree, provenance, written, self.provenance_tag)
        logger.debug(f"{self.path} から {len(written)} 件のキーを登録しました")


class EnvRetriever:
    """環境変数による上書き

    `PREFIX_A__B=value` はキー `a.b` に文字列 `value` を設定する。
    """

    provenance_tag = ENV_PROVENANCE

    def __init__(self, prefix: str = "CONFIG_REGISTRY_", environ: Mapping[str, str] | None = None):
        self.prefix = prefix
        self.environ = environ

    def overrides(self) -> dict[str, str]:
        """接頭辞に一致する環境変数をキーと値の辞書で返す"""
        environ = os.environ if self.environ is None else self.environ
        result: dict[str, str] = {}
        for env_key, env_val in environ.items():
            if not env_key.startswith(self.prefix):
                continue
            key = env_key[len(self.prefix) :].lower().replace("__", ".")
            if key:
                result[key] = env_val
        return result

    def update(
        self,
        specs: Sequence[ConfigParamSpec],
        tree: ConfigTree,
        provenance: dict[str, str],
    ) -> None:
        _ = specs
        overrides = self.overrides()
        for key, value in sorted(overrides.items()):
            written = tree.merge(key, value)
            record_provenance(tree, provenance, written, self.provenance_tag)
        if overrides:
            logger.debug(f"環境変数から {len(overrides)} 件のキーを上書きしました")


class ArgsRetriever:
    """argparse でパースしたコマンドライン引数からの取得元

    宣言されたパラメータのうち、値が指定された（None でない）ものだけを書き込む。
    """

    provenance_tag = CLI_PROVENANCE

    def __init__(self, namespace: argparse.Namespace | Mapping[str, Any]):
        self.values = dict(vars(namespace)) if isinstance(namespace, argparse.Namespace) else dict(namespace)

    def update(
        self,
        specs: Sequence[ConfigParamSpec],
        tree: ConfigTree,
        provenance: dict[str, str],
    ) -> None:
        count = 0
        for spec in specs:
            value = self.values.get(spec.dest)
            if value is None:
                continue
            written = tree.merge(spec.name, value)
            record_provenance(tree, provenance, written, self.provenance_tag)
            count += 1
        if count:
            logger.debug(f"コマンドライン引数から {count} 件のキーを上書きしました")


def add_param_arguments(parser: argparse.ArgumentParser, specs: Sequence[ConfigParamSpec]) -> None:
    """宣言されたパラメータを `--<name>` オプションとして登録する

    値は文字列のまま受け取り、型変換はストアからの取得時に行う。
    未指定のオプションはデフォルト値を上書きしないよう None を既定とする。

    Args:
        parser: 引数パーサー
        specs: パラメータ宣言
    """
    for spec in specs:
        help_text = spec.help or spec.name
        if spec.default is not None:
            help_text = f"{help_text}（デフォルト: {spec.default}）"
        if spec.kind is bool:
            parser.add_argument(
                spec.option,
                dest=spec.dest,
                nargs="?",
                const="true",
                default=None,
                metavar="BOOL",
                help=help_text,
            )
        else:
            parser.add_argument(
                spec.option,
                dest=spec.dest,
                type=str,
                default=None,
                metavar=getattr(spec.kind, "__name__", "VALUE").upper(),
                help=help_text,
            )
