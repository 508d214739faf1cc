"""設定パラメータアクセスで使用する例外定義。"""

from __future__ import annotations


class ConfigError(Exception):
    """設定関連の例外の基底クラス。"""


class TreePathError(ConfigError):
    """ツリー上に指定パスのノードが存在しない。"""

    def __init__(self, path: str):
        super().__init__(f"パスが見つかりません: '{path}'")
        self.path = path


class ValueConversionError(ConfigError):
    """ノードの値を要求された型に変換できない。"""


class UnknownKeyError(ConfigError):
    """出自(provenance)が記録されていないキー。"""

    def __init__(self, key: str):
        super().__init__(f"未登録のキーです: '{key}'")
        self.key = key


class InvalidOptionError(ConfigError, ValueError):
    """型付き取得で発生する唯一の例外。

    Attributes:
        key: 要求されたキー
        cause: 元の失敗内容の説明
    """

    def __init__(self, key: str, cause: str | None = None):
        if cause is None:
            message = f"オプションの解析エラー: {key}"
        else:
            message = f"オプションを取得できません: {key} ({cause})"
        super().__init__(message)
        self.key = key
        self.cause = cause
