"""
SelectorBuilder — 対象フレーズから Playwright ロケータを生成

アクション種別と説明文中の対象フレーズ（"Log in", "email field" 等）から
Playwright のセレクタエンジンで解決できるロケータ文字列を組み立てる。
既存ロケータを安定化させる optimize も提供する。

click のロケータ判定順:
  1. "text/password/email/number field" → input[type="..."]
  2. ボタンらしい（"button" を含む、または確定系の動詞） → button:has-text("...")
  3. URL または "link" を含む → a:has-text("...")
  4. 汎用の "field" → 直前の語を type とする input、なければ input/textarea/select
  5. それ以外 → text="..."
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# パターン定義
# ---------------------------------------------------------------------------

# 種別付きフィールド → input type
_TYPED_FIELDS: tuple[tuple[str, str], ...] = (
    ("text field", "text"),
    ("password field", "password"),
    ("email field", "email"),
    ("number field", "number"),
)

# fill 対象ラベルのキーワード → input type
_FILL_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("password", "password"),
    ("email", "email"),
    ("number", "number"),
)

_BUTTON_VERBS = re.compile(r"\b(?:confirm|submit|save|cancel|ok|yes|no|log\s*in)\b", re.IGNORECASE)
_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
_FIELD_TYPE_PATTERN = re.compile(r"(\w+)\s+field\b", re.IGNORECASE)

# 既にロケータとして解釈できる文字列
_LOCATOR_PATTERN = re.compile(
    r"""^(?:
        (?:input|button|a|textarea|select)[\[:,]          # 小文字タグ + 属性/疑似クラス/列挙
        | text=                                           # テキストエンジン
        | [#.]-?[A-Za-z_][\w-]*(?:[.#\[:]\S*)?$          # 空白を含まない id / class
        | \[                                              # 属性
    )""",
    re.VERBOSE,
)

GENERIC_INPUT_SELECTOR = "input, textarea, select"
FILE_INPUT_SELECTOR = 'input[type="file"]'


def _clean(text: str) -> str:
    """前後の空白と引用符を除去する。"""
    return re.sub(r"[\"']", "", (text or "").strip())


# ---------------------------------------------------------------------------
# SelectorBuilder 本体
# ---------------------------------------------------------------------------

class SelectorBuilder:
    """対象フレーズからロケータを生成・最適化する。"""

    def build(self, action_type: str, target_text: str) -> str:
        """アクション種別と対象フレーズからロケータを生成する。

        Args:
            action_type: アクション種別（click / fill / upload 等）
            target_text: 説明文中の対象フレーズ

        Returns:
            ロケータ文字列。対象が空の場合は空文字列
        """
        text = _clean(target_text)
        if not text:
            return ""

        if action_type == "click":
            return self._build_click(text)
        if action_type == "fill":
            return self._build_fill(text)
        if action_type == "upload":
            return FILE_INPUT_SELECTOR
        return f'text="{text}"'

    def optimize(self, selector: str, action_type: str) -> str:
        """ロケータを安定化させる。

        - 末尾のピリオド・空白を除去
        - click の button ロケータは内側にボタンを持つ要素も対象に含める
        - input を参照するロケータはそのまま
        - 上記以外も破棄せずそのまま返す

        Args:
            selector: 元のロケータ
            action_type: アクション種別

        Returns:
            最適化後のロケータ
        """
        if not selector:
            return ""

        selector = selector.strip().rstrip(".").rstrip()

        if action_type == "click" and selector.startswith("button"):
            return f"{selector}, button:has({selector})"

        return selector

    def is_locator(self, selector: str) -> bool:
        """文字列がロケータ化済みかどうかを判定する。

        ロケータ化前の対象フレーズ（"Log in" 等）は False。
        """
        return bool(selector) and bool(_LOCATOR_PATTERN.match(selector.strip()))

    # -------------------------------------------------------------------
    # 内部処理
    # -------------------------------------------------------------------

    def _build_click(self, text: str) -> str:
        lower = text.lower()

        for keyword, input_type in _TYPED_FIELDS:
            if keyword in lower:
                return f'input[type="{input_type}"]'

        if "button" in lower or _BUTTON_VERBS.search(text):
            return f'button:has-text("{text}")'

        if _URL_PATTERN.match(text) or "link" in lower:
            return f'a:has-text("{text}")'

        if "field" in lower:
            field_type = _FIELD_TYPE_PATTERN.search(lower)
            if field_type:
                return f'input[type="{field_type.group(1)}"]'
            return GENERIC_INPUT_SELECTOR

        return f'text="{text}"'

    def _build_fill(self, label: str) -> str:
        lower = label.lower()

        for keyword, input_type in _FILL_KEYWORDS:
            if keyword in lower:
                return f'input[type="{input_type}"]'

        # aria-label → placeholder → 汎用テキスト入力の順で候補を並べる
        return (
            f'[aria-label="{label}"], '
            f'input[placeholder="{label}"], '
            f'textarea[placeholder="{label}"], '
            'input[type="text"]'
        )
