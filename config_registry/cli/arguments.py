"""Command-line argument parsing."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

TYPE_CHOICES_HELP = "int, int32, int64, float, float32, float64, bool, str, list:<型>, matrix:<型>, tree"


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成する"""
    parser = argparse.ArgumentParser(
        prog="config-registry",
        description="設定パラメータレジストリ - 階層設定から型付きで値を取得",
    )

    parser.add_argument("--config", type=str, help="設定ファイルのパス（YAML/JSON）")

    parser.add_argument(
        "--env-prefix",
        type=str,
        default=None,
        help="環境変数による上書きの接頭辞（例: APP_）。指定しない場合は環境変数を使用しない",
    )

    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--get", metavar="KEY", help="取得する設定キー（ドット記法）")
    action.add_argument("--list", action="store_true", help="登録済みキーと出自を一覧表示")

    parser.add_argument("--type", dest="kind", default="str", help=f"取得する型（{TYPE_CHOICES_HELP}）")

    parser.add_argument("--debug", action="store_true", help="デバッグモードで実行（詳細ログ）")

    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """コマンドライン引数をパースする

    Args:
        argv: 引数リスト（None の場合は sys.argv を使用）

    Returns:
        パース済み引数
    """
    return build_parser().parse_args(argv)
