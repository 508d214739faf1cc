"""設定ファイルの読み込み専用モジュール。"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def load_config_file(path: str | Path) -> dict[str, Any]:
    """YAML/JSON設定を辞書として読み込む

    Args:
        path: 設定ファイルのパス

    Returns:
        読み込まれた設定データ（空の YAML は空辞書）

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 形式が不正、またはトップレベルが辞書でない場合
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"設定ファイルが見つかりません: {config_path}")

    suffix = config_path.suffix.lower()
    with config_path.open(encoding="utf-8") as f:
        if suffix in {".yaml", ".yml"}:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"YAML解析エラー: {e}") from e
            if data is None:
                logger.warning(f"設定ファイルが空です: {config_path}")
                return {}
            if not isinstance(data, dict):
                raise ValueError("YAML設定は辞書形式である必要があります")
        elif suffix == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"JSON解析エラー: {e}") from e
            if not isinstance(data, dict):
                raise ValueError("JSON設定は辞書形式である必要があります")
        else:
            raise ValueError(f"サポートされない設定形式です: {suffix}")

    logger.info(f"設定ファイル '{config_path}' を読み込みました。")
    return data
