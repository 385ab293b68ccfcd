"""
スクリプトテンプレート — 生成言語ごとの文の組み立て

ScriptGenerator が使う言語別テンプレートを定義する。
文字列リテラルはすべてシングルクォートで出力し、埋め込む文字列は
escape_string() だけを通してエスケープする（コメントも同じ関数を通す）。

  - PythonTemplate: Playwright codegen 互換の sync API スクリプト
  - JavaScriptTemplate: @playwright/test のテストファイル
"""

from __future__ import annotations


def escape_string(text: object) -> str:
    """シングルクォート文字列リテラル用にエスケープする。

    バックスラッシュ・シングルクォート・改行を、Python / JavaScript の
    どちらでも同じ意味になる形に置き換える。

    Args:
        text: エスケープ対象（None は空文字列扱い）

    Returns:
        エスケープ済み文字列
    """
    if text is None:
        return ""
    return (
        str(text)
        .replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )


# ---------------------------------------------------------------------------
# テンプレート基底
# ---------------------------------------------------------------------------

class ScriptTemplate:
    """言語別テンプレートの共通インターフェース。

    各メソッドはインデントなしの 1 文を返す。
    """

    language = ""
    extension = ""
    indent = "    "
    comment_prefix = "#"

    def header(self, title: str) -> list[str]:
        raise NotImplementedError

    def footer(self) -> list[str]:
        raise NotImplementedError

    def comment(self, text: str) -> str:
        return f"{self.comment_prefix} {escape_string(text)}"

    def goto(self, url: str) -> str:
        raise NotImplementedError

    def click(self, selector: str) -> str:
        raise NotImplementedError

    def fill(self, selector: str, value: str) -> str:
        raise NotImplementedError

    def wait(self, timeout_ms: int) -> str:
        raise NotImplementedError

    def expect_text(self, selector: str, text: str) -> str:
        raise NotImplementedError

    def expect_visible(self, selector: str) -> str:
        raise NotImplementedError

    def expect_text_visible(self, text: str) -> str:
        raise NotImplementedError

    def screenshot(self, path: str) -> str:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Python（Playwright sync API）
# ---------------------------------------------------------------------------

class PythonTemplate(ScriptTemplate):
    """codegen 互換の Python スクリプト。python <file> でそのまま実行できる。"""

    language = "python"
    extension = ".py"
    indent = "    "
    comment_prefix = "#"

    def header(self, title: str) -> list[str]:
        return [
            self.comment(title),
            "from playwright.sync_api import Playwright, sync_playwright, expect",
            "",
            "",
            "def run(playwright: Playwright) -> None:",
            f"{self.indent}browser = playwright.chromium.launch(headless=False)",
            f"{self.indent}context = browser.new_context()",
            f"{self.indent}page = context.new_page()",
        ]

    def footer(self) -> list[str]:
        return [
            f"{self.indent}page.close()",
            "",
            f"{self.indent}# ---------------------",
            f"{self.indent}context.close()",
            f"{self.indent}browser.close()",
            "",
            "",
            "with sync_playwright() as playwright:",
            f"{self.indent}run(playwright)",
            "",
        ]

    def goto(self, url: str) -> str:
        return f"page.goto('{escape_string(url)}')"

    def click(self, selector: str) -> str:
        return f"page.click('{escape_string(selector)}')"

    def fill(self, selector: str, value: str) -> str:
        return f"page.fill('{escape_string(selector)}', '{escape_string(value)}')"

    def wait(self, timeout_ms: int) -> str:
        return f"page.wait_for_timeout({timeout_ms})"

    def expect_text(self, selector: str, text: str) -> str:
        return f"expect(page.locator('{escape_string(selector)}')).to_have_text('{escape_string(text)}')"

    def expect_visible(self, selector: str) -> str:
        return f"expect(page.locator('{escape_string(selector)}')).to_be_visible()"

    def expect_text_visible(self, text: str) -> str:
        return f"expect(page.get_by_text('{escape_string(text)}')).to_be_visible()"

    def screenshot(self, path: str) -> str:
        return f"page.screenshot(path='{escape_string(path)}')"


# ---------------------------------------------------------------------------
# JavaScript（@playwright/test）
# ---------------------------------------------------------------------------

class JavaScriptTemplate(ScriptTemplate):
    """@playwright/test 形式のテストファイル。"""

    language = "javascript"
    extension = ".js"
    indent = "  "
    comment_prefix = "//"

    def header(self, title: str) -> list[str]:
        return [
            "const { test, expect } = require('@playwright/test');",
            "",
            f"test('{escape_string(title)}', async ({{ page }}) => {{",
        ]

    def footer(self) -> list[str]:
        return ["});", ""]

    def goto(self, url: str) -> str:
        return f"await page.goto('{escape_string(url)}');"

    def click(self, selector: str) -> str:
        return f"await page.click('{escape_string(selector)}');"

    def fill(self, selector: str, value: str) -> str:
        return f"await page.fill('{escape_string(selector)}', '{escape_string(value)}');"

    def wait(self, timeout_ms: int) -> str:
        return f"await page.waitForTimeout({timeout_ms});"

    def expect_text(self, selector: str, text: str) -> str:
        return f"await expect(page.locator('{escape_string(selector)}')).toHaveText('{escape_string(text)}');"

    def expect_visible(self, selector: str) -> str:
        return f"await expect(page.locator('{escape_string(selector)}')).toBeVisible();"

    def expect_text_visible(self, text: str) -> str:
        return f"await expect(page.getByText('{escape_string(text)}')).toBeVisible();"

    def screenshot(self, path: str) -> str:
        return f"await page.screenshot({{ path: '{escape_string(path)}' }});"


_TEMPLATES: dict[str, type[ScriptTemplate]] = {
    "python": PythonTemplate,
    "javascript": JavaScriptTemplate,
}


def get_template(language: str) -> ScriptTemplate:
    """言語名からテンプレートを取得する。

    Raises:
        ValueError: 未対応の言語の場合
    """
    try:
        return _TEMPLATES[language]()
    except KeyError:
        raise ValueError(
            f"未対応の生成言語です: {language}（{' / '.join(_TEMPLATES)} のいずれか）"
        ) from None
