"""
ScriptGenerator — ステップ列から Playwright スクリプトを生成

TestCase（または同等のステップ列）を 1 ステップ 1 文で
実行可能なスクリプトテキストに変換する。各文の直前には
ステップ番号と説明文を記したコメントを置く。

未対応・不完全なステップは、そのステップだけ説明コメントに置き換えて
生成を継続する。ファイル書き出しは ScriptWriter が担当し、ここでは
副作用を持たない。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from ..dsl.schema import Step, TestCase
from .templates import ScriptTemplate, get_template

logger = logging.getLogger(__name__)

DEFAULT_WAIT_MS = 1000
FILENAME_SUFFIX = ".spec"
_UNSAFE_CHARS = re.compile(r"[^a-z0-9]+")
_LEADING_INT = re.compile(r"^\s*(\d+)")


# ---------------------------------------------------------------------------
# 生成オプション
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratorOptions:
    """スクリプト生成オプション。

    Attributes:
        language: 生成言語（python / javascript）
        base_url: 指定時はステップの前に初期遷移を挿入
        include_screenshots: 各ステップの後にスクリーンショット取得を挿入
        screenshot_dir: スクリーンショットの保存先
    """

    language: str = "python"
    base_url: Optional[str] = None
    include_screenshots: bool = False
    screenshot_dir: str = "screenshots"


# ---------------------------------------------------------------------------
# ファイル名
# ---------------------------------------------------------------------------

def slugify(title: str) -> str:
    """タイトルを小文字英数字とハイフンだけの文字列にする。

    使える文字が残らない場合は "untitled" を返す。
    """
    slug = _UNSAFE_CHARS.sub("-", (title or "").lower()).strip("-")
    return slug or "untitled"


def safe_filename(title: str, language: str = "python") -> str:
    """タイトルからファイルシステム安全なスクリプトファイル名を生成する。

    例: "Login Test!" → "login-test.spec.py"
    """
    return f"{slugify(title)}{FILENAME_SUFFIX}{get_template(language).extension}"


def parse_timeout(value: str) -> int:
    """wait ステップの value を待機ミリ秒に変換する。

    先頭の整数をそのまま使う（"0" は待機なし）。数値でなければ既定値。
    """
    match = _LEADING_INT.match(value or "")
    if match is None:
        return DEFAULT_WAIT_MS
    return int(match.group(1))


# ---------------------------------------------------------------------------
# ScriptGenerator 本体
# ---------------------------------------------------------------------------

class ScriptGenerator:
    """TestCase を Playwright スクリプトテキストに変換する。

    使用例::

        generator = ScriptGenerator()
        source = generator.generate(test_case, GeneratorOptions(language="javascript"))
    """

    def generate(self, test_case: TestCase, options: Optional[GeneratorOptions] = None) -> str:
        """スクリプト全体を生成する。

        Args:
            test_case: 生成対象のテストケース（変更しない）
            options: 生成オプション

        Returns:
            スクリプトのソーステキスト
        """
        options = options or GeneratorOptions()
        template = get_template(options.language)
        base_url = options.base_url or test_case.baseUrl

        lines: list[str] = list(template.header(test_case.title))

        if base_url:
            lines.append(template.indent + template.comment("Test setup"))
            lines.append(template.indent + template.goto(base_url))

        for step in test_case.steps:
            lines.append("")
            lines.extend(template.indent + line for line in self.render_step(step, template, options))

        lines.extend(template.footer())
        return "\n".join(lines)

    def safe_filename(self, title: str, language: str = "python") -> str:
        return safe_filename(title, language)

    # -------------------------------------------------------------------
    # ステップ単位
    # -------------------------------------------------------------------

    def render_step(
        self,
        step: Step,
        template: ScriptTemplate,
        options: Optional[GeneratorOptions] = None,
    ) -> list[str]:
        """1 ステップ分のコメントと文を返す（インデントなし）。"""
        options = options or GeneratorOptions()
        lines = [template.comment(f"Step {step.number}: {step.description}")]

        try:
            lines.append(self._render_action(step, template))
        except Exception as exc:
            logger.error("ステップ %d の生成に失敗しました: %s", step.number, exc)
            lines.append(template.comment(f"Error generating step {step.number}: {exc}"))
            return lines

        if options.include_screenshots:
            path = f"{options.screenshot_dir.rstrip('/')}/step-{step.number}.png"
            lines.append(template.screenshot(path))

        return lines

    def _render_action(self, step: Step, template: ScriptTemplate) -> str:
        renderer = self._renderers().get(step.action)
        if renderer is None:
            logger.warning("未対応のアクションです: step %d (%s)", step.number, step.action)
            return template.comment(f"Unsupported action: {step.action} - {step.description}")
        return renderer(step, template)

    def _renderers(self) -> dict[str, Callable[[Step, ScriptTemplate], str]]:
        return {
            "goto": self._render_goto,
            "click": self._render_click,
            "fill": self._render_fill,
            "wait": self._render_wait,
            "assert": self._render_assert,
            "view": self._render_view,
        }

    # -------------------------------------------------------------------
    # アクション別
    # -------------------------------------------------------------------

    def _render_goto(self, step: Step, template: ScriptTemplate) -> str:
        if not step.value:
            return template.comment(f"Missing URL for navigation: {step.description}")
        return template.goto(step.value)

    def _render_click(self, step: Step, template: ScriptTemplate) -> str:
        if not step.selector:
            return template.comment(f"Missing selector for click: {step.description}")
        return template.click(step.selector)

    def _render_fill(self, step: Step, template: ScriptTemplate) -> str:
        if not step.selector:
            return template.comment(f"Missing selector for fill: {step.description}")
        return template.fill(step.selector, step.value)

    def _render_wait(self, step: Step, template: ScriptTemplate) -> str:
        return template.wait(parse_timeout(step.value))

    def _render_assert(self, step: Step, template: ScriptTemplate) -> str:
        if not step.selector:
            return template.comment(f"Missing selector for assertion: {step.description}")
        if step.value:
            return template.expect_text(step.selector, step.value)
        return template.expect_visible(step.selector)

    def _render_view(self, step: Step, template: ScriptTemplate) -> str:
        if step.selector and step.value:
            return template.expect_text(step.selector, step.value)
        if step.selector:
            return template.expect_visible(step.selector)
        if step.value:
            return template.expect_text_visible(step.value)
        return template.comment(f"Nothing to check for view: {step.description}")
