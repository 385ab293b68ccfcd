"""
DocumentParser — Scribe 記録 HTML からテストケースを組み立てる

記録 HTML からタイトル要素とステップ要素を文書順に取り出し、
StepExtractor に渡して TestCase を生成する。

期待する HTML 構造（クラス名は MarkupConventions で変更可能）::

    <h1 class="scribe-title">How To Log In</h1>
    <div class="scribe-step">
      <span class="scribe-step-text">1. Navigate to https://example.com/</span>
    </div>
    <div class="scribe-screenshot-container">
      <img class="scribe-screenshot" src="https://.../step1.jpeg">
    </div>

検証は行わない。崩れた HTML でも例外は送出せず、
空または部分的な TestCase に縮退する。
"""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..config import MarkupConventions
from ..dsl.schema import UNTITLED_TEST, TestCase
from .extractor import StepBlock, StepExtractor

logger = logging.getLogger(__name__)


class DocumentParser:
    """Scribe 記録 HTML を TestCase に変換するパーサー。

    使用例::

        parser = DocumentParser()
        test_case = parser.parse(html)
    """

    def __init__(
        self,
        conventions: Optional[MarkupConventions] = None,
        extractor: Optional[StepExtractor] = None,
    ) -> None:
        self._conventions = conventions or MarkupConventions()
        self._extractor = extractor or StepExtractor()

    def parse(self, markup: Optional[str]) -> TestCase:
        """記録 HTML をパースする。

        Args:
            markup: 記録 HTML 文字列

        Returns:
            タイトルとステップ列を持つ TestCase
        """
        if not markup or not markup.strip():
            logger.info("記録 HTML が空です")
            return TestCase(title=UNTITLED_TEST, steps=[])

        soup = BeautifulSoup(markup, "html.parser")
        title = self.extract_title(soup)
        blocks = self.extract_blocks(soup)
        steps = self._extractor.extract(blocks)

        logger.info("記録をパースしました: '%s' (%d ステップ)", title, len(steps))
        return TestCase(title=title, steps=steps)

    # -------------------------------------------------------------------
    # タイトル
    # -------------------------------------------------------------------

    def extract_title(self, soup: BeautifulSoup) -> str:
        """タイトル要素のテキストを返す。見つからない・空の場合は既定値。"""
        element = soup.select_one(f".{self._conventions.title_class}")
        if element is None:
            return UNTITLED_TEST
        title = element.get_text().strip()
        return title or UNTITLED_TEST

    # -------------------------------------------------------------------
    # ステップブロック
    # -------------------------------------------------------------------

    def extract_blocks(self, soup: BeautifulSoup) -> list[StepBlock]:
        """ステップ要素を文書順に StepBlock へ切り出す。"""
        return [
            StepBlock(
                text=self._step_text(element),
                screenshot_url=self._screenshot_url(element),
            )
            for element in soup.select(f".{self._conventions.step_class}")
        ]

    def _step_text(self, element: Tag) -> str:
        text_el = element.select_one(f".{self._conventions.step_text_class}")
        if text_el is None:
            return ""
        return text_el.get_text().strip()

    def _screenshot_url(self, element: Tag) -> Optional[str]:
        """直後の兄弟要素がスクリーンショットコンテナなら画像 URL を返す。"""
        sibling = element.find_next_sibling()
        if sibling is None:
            return None

        classes = sibling.get("class") or []
        if self._conventions.screenshot_container_class not in classes:
            return None

        image = sibling.select_one(f".{self._conventions.screenshot_class}")
        if image is None:
            return None

        src = image.get("src")
        return src or None
