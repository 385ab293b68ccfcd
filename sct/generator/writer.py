"""
ScriptWriter — 生成スクリプトのファイル書き出し

ScriptGenerator が生成したテキストを出力ディレクトリに書き出す。
出力ディレクトリは存在しなければ作成し、既に存在していてもエラーにしない。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..dsl.schema import TestCase
from .script_generator import GeneratorOptions, ScriptGenerator, safe_filename
from .templates import escape_string

logger = logging.getLogger(__name__)

PLAYWRIGHT_CONFIG_NAME = "playwright.config.js"


class ScriptWriter:
    """生成スクリプトを出力ディレクトリに書き出すライター。

    使用例::

        writer = ScriptWriter(Path("generated-tests"))
        path = writer.write(test_case)
    """

    def __init__(
        self,
        output_dir: Path,
        generator: Optional[ScriptGenerator] = None,
    ) -> None:
        self._output_dir = Path(output_dir)
        self._generator = generator or ScriptGenerator()

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def write(self, test_case: TestCase, options: Optional[GeneratorOptions] = None) -> Path:
        """1 件のテストケースをスクリプトとして書き出す。

        Args:
            test_case: 生成対象のテストケース
            options: 生成オプション

        Returns:
            書き出したファイルのパス
        """
        options = options or GeneratorOptions()
        source = self._generator.generate(test_case, options)

        self._output_dir.mkdir(parents=True, exist_ok=True)
        if options.language == "javascript":
            self._ensure_playwright_config(options.base_url or test_case.baseUrl)

        output_path = self._output_dir / safe_filename(test_case.title, options.language)
        output_path.write_text(source, encoding="utf-8")
        logger.info("Playwright script written: %s", output_path)
        return output_path

    def write_many(
        self,
        test_cases: Iterable[TestCase],
        options: Optional[GeneratorOptions] = None,
    ) -> list[Path]:
        """複数のテストケースを順に書き出す。"""
        return [self.write(test_case, options) for test_case in test_cases]

    def _ensure_playwright_config(self, base_url: Optional[str]) -> None:
        """@playwright/test 用の設定ファイルが無ければ作成する。"""
        config_path = self._output_dir / PLAYWRIGHT_CONFIG_NAME
        if config_path.exists():
            return

        base = escape_string(base_url or "http://localhost:3000")
        config_path.write_text(
            "// @ts-check\n"
            "const config = {\n"
            "  testDir: '.',\n"
            "  testMatch: '**/*.spec.js',\n"
            "  use: {\n"
            f"    baseURL: '{base}',\n"
            "    screenshot: 'only-on-failure',\n"
            "  },\n"
            "};\n"
            "\n"
            "module.exports = config;\n",
            encoding="utf-8",
        )
        logger.info("Playwright config written: %s", config_path)
