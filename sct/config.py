"""
ツール設定 — 環境変数・CLI オプションからの設定読み込み

CLI オプション > 環境変数 > デフォルト値 の優先順位で適用される。

環境変数一覧:
  SCT_OUTPUT_DIR  : 生成スクリプトの出力先（デフォルト: generated-tests）
  SCT_LANGUAGE    : 生成言語（python/javascript, デフォルト: python）
  SCT_BASE_URL    : 生成スクリプトの初期遷移先（デフォルト: なし）
  SCT_SCREENSHOTS : ステップごとのスクリーンショット取得（true/false, デフォルト: false）
  SCT_LOG_LEVEL   : ログレベル（DEBUG/INFO/WARNING/ERROR, デフォルト: なし）
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Literal, Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 環境変数キー定数
# ---------------------------------------------------------------------------

_ENV_OUTPUT_DIR = "SCT_OUTPUT_DIR"
_ENV_LANGUAGE = "SCT_LANGUAGE"
_ENV_BASE_URL = "SCT_BASE_URL"
_ENV_SCREENSHOTS = "SCT_SCREENSHOTS"
_ENV_LOG_LEVEL = "SCT_LOG_LEVEL"

LANGUAGES = ("python", "javascript")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ---------------------------------------------------------------------------
# 設定データクラス
# ---------------------------------------------------------------------------

@dataclass
class ToolConfig:
    """sct の実行時設定。

    Attributes:
        output_dir: 生成スクリプトの出力先ディレクトリ
        language: 生成言語
        base_url: 生成スクリプトの初期遷移先
        screenshots: ステップごとにスクリーンショットを取得するか
        log_level: ログレベル（None の場合は CLI の --verbose に従う）
    """

    output_dir: str = "generated-tests"
    language: Literal["python", "javascript"] = "python"
    base_url: Optional[str] = None
    screenshots: bool = False
    log_level: Optional[str] = None


@dataclass(frozen=True)
class MarkupConventions:
    """記録 HTML の要素を特定するクラス名。"""

    title_class: str = "scribe-title"
    step_class: str = "scribe-step"
    step_text_class: str = "scribe-step-text"
    screenshot_container_class: str = "scribe-screenshot-container"
    screenshot_class: str = "scribe-screenshot"


# ---------------------------------------------------------------------------
# 環境変数からの読み込み
# ---------------------------------------------------------------------------

def _parse_bool(value: str) -> bool:
    """"true", "1", "yes" → True、それ以外 → False"""
    return value.strip().lower() in ("true", "1", "yes")


def load_config_from_env() -> ToolConfig:
    """環境変数から ToolConfig を生成する。

    未設定・不正な値の環境変数はデフォルト値を使用する。
    """
    config = ToolConfig()

    if os.environ.get(_ENV_OUTPUT_DIR):
        config.output_dir = os.environ[_ENV_OUTPUT_DIR]

    if _ENV_LANGUAGE in os.environ:
        val = os.environ[_ENV_LANGUAGE].strip().lower()
        if val in LANGUAGES:
            config.language = val  # type: ignore[assignment]
        else:
            logger.warning("SCT_LANGUAGE の値が不正です: %s", os.environ[_ENV_LANGUAGE])

    if os.environ.get(_ENV_BASE_URL):
        config.base_url = os.environ[_ENV_BASE_URL]

    if _ENV_SCREENSHOTS in os.environ:
        config.screenshots = _parse_bool(os.environ[_ENV_SCREENSHOTS])

    if _ENV_LOG_LEVEL in os.environ:
        val = os.environ[_ENV_LOG_LEVEL].strip().upper()
        if val in _LOG_LEVELS:
            config.log_level = val
        else:
            logger.warning("SCT_LOG_LEVEL の値が不正です: %s", os.environ[_ENV_LOG_LEVEL])

    logger.debug("設定を読み込みました: %s", config)
    return config


def apply_overrides(config: ToolConfig, **overrides: Any) -> ToolConfig:
    """CLI オプションを ToolConfig に適用する。

    None のオプションは未指定として扱い、上書きしない。

    Returns:
        オプション適用後の新しい設定
    """
    changes = {key: value for key, value in overrides.items() if value is not None}

    language = changes.get("language")
    if language is not None and language not in LANGUAGES:
        raise ValueError(f"language は {' / '.join(LANGUAGES)} のいずれかを指定してください: {language}")

    return replace(config, **changes)
