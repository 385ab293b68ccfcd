"""
StepExtractor — 記録ブロック列からステップ列を抽出

DocumentParser が切り出した StepBlock を文書順に走査し、
ActionClassifier / SelectorBuilder を適用して Step を組み立てる。

ステップ間で引き継ぐ状態は「直近のフィールドクリックの selector」だけで、
selector を持たない fill（"Type \"...\""）はこれを引き継ぐ。
状態は走査ごとのアキュムレータとして畳み込むため、
同じ入力列からは常に同じ結果が得られる。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import reduce
from typing import NamedTuple, Optional, Sequence

from ..dsl.schema import Step
from .classifier import ActionClassifier
from .selectors import SelectorBuilder

logger = logging.getLogger(__name__)

# 先頭の "3. " 形式の番号
_ORDINAL_PREFIX = re.compile(r"^\d+\.\s*")


# ---------------------------------------------------------------------------
# 入力ブロック
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StepBlock:
    """記録 HTML から切り出した 1 操作分の生データ。

    Attributes:
        text: ステップ説明文（番号プレフィックスを含みうる）
        screenshot_url: 直後のスクリーンショット画像 URL
    """

    text: str
    screenshot_url: Optional[str] = None


def strip_ordinal(text: str) -> str:
    """説明文先頭の番号プレフィックス（"3. "）を除去する。"""
    return _ORDINAL_PREFIX.sub("", (text or "").strip())


# ---------------------------------------------------------------------------
# 畳み込み状態
# ---------------------------------------------------------------------------

class _ExtractState(NamedTuple):
    steps: tuple[Step, ...] = ()
    last_field_selector: str = ""


# ---------------------------------------------------------------------------
# StepExtractor 本体
# ---------------------------------------------------------------------------

class StepExtractor:
    """StepBlock 列を Step 列に変換する。"""

    def __init__(
        self,
        classifier: Optional[ActionClassifier] = None,
        selector_builder: Optional[SelectorBuilder] = None,
    ) -> None:
        self._classifier = classifier or ActionClassifier()
        self._selectors = selector_builder or SelectorBuilder()

    def extract(self, blocks: Sequence[StepBlock]) -> list[Step]:
        """ブロック列を文書順にステップ化する。

        Args:
            blocks: DocumentParser が切り出したブロック列

        Returns:
            入力と同じ長さ・同じ順序のステップ列（number は 1 始まり）
        """
        state = reduce(self._fold, enumerate(blocks, start=1), _ExtractState())
        return list(state.steps)

    # -------------------------------------------------------------------
    # 1 ブロック分の処理
    # -------------------------------------------------------------------

    def _fold(self, state: _ExtractState, item: tuple[int, StepBlock]) -> _ExtractState:
        number, block = item
        description = strip_ordinal(block.text)
        result = self._classifier.classify(description)

        action = result.type
        selector = self._resolve_selector(action, result.selector)
        last_field_selector = state.last_field_selector

        if action == "click" and selector and (
            "field" in selector.lower() or "field" in description.lower()
        ):
            last_field_selector = selector

        if action == "fill" and not selector:
            selector = last_field_selector

        step = Step(
            number=number,
            description=description,
            action=action,
            selector=selector,
            value=result.value,
            screenshotUrl=block.screenshot_url,
        )
        logger.debug("ステップ %d: %s → %s %r", number, description, action, selector)

        return _ExtractState(state.steps + (step,), last_field_selector)

    def _resolve_selector(self, action: str, selector: str) -> str:
        """判定結果の selector をロケータ化し、最適化する。"""
        if not selector:
            return ""
        if action == "click" and not self._selectors.is_locator(selector):
            selector = self._selectors.build(action, selector)
        return self._selectors.optimize(selector, action)
