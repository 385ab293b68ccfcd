"""
ActionClassifier — ステップ説明文からアクション種別を判定

Scribe が生成する短い英語の説明文（"Click this text field." 等）を
パターンテーブルで照合し、アクション種別と selector / value のヒントを返す。

判定は上から順に評価し、最初に一致したルールを採用する。
説明文の語彙は曖昧なため（フィールドのクリックと入力が語を共有する等）、
ルールの順序がそのまま判定結果を決める:

  1. navigate: "Navigate to <url>"        → goto
  2. type:     "Type \"<text>\""          → fill（selector は後続処理で補完）
  3. click:    "Click [the|this] <target>" → click
  4. upload:   "Upload [the] <name> [file]" → upload
  5. confirm:  "Confirm [the] <target>"   → click
  6. view:     "View <target>"            → view
  どれにも一致しない場合は unknown
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence


# ---------------------------------------------------------------------------
# 判定結果
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassifiedAction:
    """1 ステップ分の判定結果。StepExtractor が即座に消費する。

    Attributes:
        type: アクション種別
        selector: 要素ロケータ、またはロケータ化前の対象フレーズ
        value: URL・入力文字列・確認対象テキスト
    """

    type: str = "unknown"
    selector: str = ""
    value: str = ""


UNKNOWN_ACTION = ClassifiedAction()


# ---------------------------------------------------------------------------
# パターン定義
# ---------------------------------------------------------------------------

NAVIGATE_PATTERN = re.compile(r"\bNavigate\s+to\s+[\"']?([^\"'\s]+)[\"']?", re.IGNORECASE)
TYPE_PATTERN = re.compile(r"\bType\s+([\"'])(.+?)\1", re.IGNORECASE)
CLICK_PATTERN = re.compile(r"\bClick\s+(?:the\s+|this\s+)?(.+?)\s*\.?\s*$", re.IGNORECASE)
UPLOAD_PATTERN = re.compile(
    r"\bUpload\s+(?:the\s+)?[\"']?(.+?)[\"']?(?:\s+(?:file|spreadsheet))?\s*\.?\s*$",
    re.IGNORECASE,
)
CONFIRM_PATTERN = re.compile(r"\bConfirm\s+(?:the\s+)?[\"']?(.+?)[\"']?\s*\.?\s*$", re.IGNORECASE)
VIEW_PATTERN = re.compile(r"\bView\s+[\"']?(.+?)[\"']?\s*\.?\s*$", re.IGNORECASE)

# クリック対象が種別付きの入力フィールドかどうか
FIELD_PATTERN = re.compile(r"\b(text|password|email|number)\s+field\b", re.IGNORECASE)

_QUOTES = "\"'"


def _strip_quotes(text: str) -> str:
    """前後の引用符を 1 つずつ除去する。"""
    text = text.strip()
    if text[:1] in _QUOTES:
        text = text[1:]
    if text[-1:] in _QUOTES:
        text = text[:-1]
    return text.strip()


# ---------------------------------------------------------------------------
# ルールごとのハンドラ
# ---------------------------------------------------------------------------

def _on_navigate(match: re.Match) -> ClassifiedAction:
    url = match.group(1)
    # 文末のピリオドは URL の一部とみなさない
    if url.endswith("."):
        url = url[:-1]
    return ClassifiedAction(type="goto", value=url)


def _on_type(match: re.Match) -> ClassifiedAction:
    # selector は直前のフィールドクリックから引き継ぐため空のまま
    return ClassifiedAction(type="fill", value=match.group(2))


def _on_click(match: re.Match) -> ClassifiedAction:
    target = match.group(1).strip()
    field = FIELD_PATTERN.search(target)
    if field:
        return ClassifiedAction(type="click", selector=f'input[type="{field.group(1).lower()}"]')
    return ClassifiedAction(type="click", selector=_strip_quotes(target))


def _on_upload(match: re.Match) -> ClassifiedAction:
    return ClassifiedAction(
        type="upload",
        selector='input[type="file"]',
        value=_strip_quotes(match.group(1)),
    )


def _on_confirm(match: re.Match) -> ClassifiedAction:
    # 確認ダイアログの操作はクリックとして扱う
    return ClassifiedAction(type="click", selector=_strip_quotes(match.group(1)))


def _on_view(match: re.Match) -> ClassifiedAction:
    return ClassifiedAction(type="view", value=_strip_quotes(match.group(1)))


# ---------------------------------------------------------------------------
# ルールテーブル
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ActionRule:
    """判定ルール（パターンと、一致時に結果を組み立てるハンドラの組）。"""

    name: str
    pattern: re.Pattern
    handler: Callable[[re.Match], ClassifiedAction]


# 評価順 = 優先順位。type を click より先に評価しないと
# フィールドへの入力とフィールドのクリックを区別できない。
DEFAULT_RULES: tuple[ActionRule, ...] = (
    ActionRule("navigate", NAVIGATE_PATTERN, _on_navigate),
    ActionRule("type", TYPE_PATTERN, _on_type),
    ActionRule("click", CLICK_PATTERN, _on_click),
    ActionRule("upload", UPLOAD_PATTERN, _on_upload),
    ActionRule("confirm", CONFIRM_PATTERN, _on_confirm),
    ActionRule("view", VIEW_PATTERN, _on_view),
)


# ---------------------------------------------------------------------------
# ActionClassifier 本体
# ---------------------------------------------------------------------------

class ActionClassifier:
    """ルールテーブルを上から評価してアクション種別を判定する。

    使用例::

        classifier = ActionClassifier()
        classifier.classify('Type "testuser"')
        # ClassifiedAction(type='fill', selector='', value='testuser')
    """

    def __init__(self, rules: Sequence[ActionRule] = DEFAULT_RULES) -> None:
        """
        Args:
            rules: 判定ルール（先頭ほど優先）
        """
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[ActionRule, ...]:
        """評価順のルール一覧。"""
        return self._rules

    def classify(self, text: str) -> ClassifiedAction:
        """説明文を判定する。どのルールにも一致しなければ unknown を返す。

        Args:
            text: 番号プレフィックス除去済みの説明文

        Returns:
            判定結果
        """
        text = (text or "").strip()
        if not text:
            return UNKNOWN_ACTION

        for rule in self._rules:
            match = rule.pattern.search(text)
            if match:
                return rule.handler(match)

        return UNKNOWN_ACTION

    def match_rule(self, text: str) -> str | None:
        """説明文に最初に一致するルール名を返す（デバッグ・一覧表示用）。"""
        text = (text or "").strip()
        for rule in self._rules:
            if rule.pattern.search(text):
                return rule.name
        return None
