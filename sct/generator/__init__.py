"""
generator パッケージ — Playwright スクリプト生成

主な機能:
  - ScriptGenerator: TestCase → スクリプトテキスト（副作用なし）
  - ScriptWriter: 生成スクリプトのファイル書き出し
  - escape_string: 生成コードに埋め込む文字列の共通エスケープ
  - safe_filename: タイトルからのファイル名生成
"""

from __future__ import annotations

from .script_generator import GeneratorOptions, ScriptGenerator, safe_filename, slugify
from .templates import escape_string
from .writer import ScriptWriter

__all__ = [
    "GeneratorOptions",
    "ScriptGenerator",
    "ScriptWriter",
    "escape_string",
    "safe_filename",
    "slugify",
]
