"""
sct — Scribe 記録 → Playwright テスト変換ツール

Scribe が出力した記録 HTML を解析して型付きテストステップ列に正規化し、
そのまま実行可能な Playwright スクリプトを生成する。

基本の流れ:
  記録 HTML → DocumentParser → TestCase → TestCaseValidator → ScriptGenerator
"""

__version__ = "0.1.0"
