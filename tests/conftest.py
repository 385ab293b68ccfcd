"""
テスト共通フィクスチャ・Hypothesis ストラテジー定義

全テストモジュールで共有する記録 HTML サンプルとデータ生成器を提供する。
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import strategies as st

from sct.dsl.schema import Step, TestCase


# ---------------------------------------------------------------------------
# 記録 HTML 組み立てヘルパー
# ---------------------------------------------------------------------------

def build_recording(title: str | None, step_texts: list[str], screenshots: bool = True) -> str:
    """Scribe 形式の記録 HTML を組み立てる。

    Args:
        title: タイトル（None の場合はタイトル要素を出力しない）
        step_texts: 番号なしのステップ説明文
        screenshots: 各ステップの直後にスクリーンショットコンテナを置くか
    """
    parts = ["<html><body>"]
    if title is not None:
        parts.append(f'<h1 class="scribe-title">{title}</h1>')
    for number, text in enumerate(step_texts, start=1):
        parts.append(
            '<div class="scribe-step">'
            f'<span class="scribe-step-text">{number}. {text}</span>'
            "</div>"
        )
        if screenshots:
            parts.append(
                '<div class="scribe-screenshot-container">'
                f'<img class="scribe-screenshot" src="https://img.example.com/step{number}.jpeg">'
                "</div>"
            )
    parts.append("</body></html>")
    return "\n".join(parts)


LOGIN_STEP_TEXTS = [
    "Navigate to https://example.com/login",
    "Click &quot;Log in&quot;",
    "Click this text field.",
    "Type &quot;testuser&quot;",
    "Click this password field.",
    "Type &quot;password123&quot;",
    "Click &quot;Log In&quot;",
    "View dashboard",
]


# ---------------------------------------------------------------------------
# pytest フィクスチャ
# ---------------------------------------------------------------------------

@pytest.fixture
def login_recording_html() -> str:
    """ログインフロー 8 ステップの記録 HTML。"""
    return build_recording("How To Log In To Example", LOGIN_STEP_TEXTS)


@pytest.fixture
def login_recording_file(tmp_path: Path, login_recording_html: str) -> Path:
    """ログインフローの記録 HTML を書き出したファイル。"""
    path = tmp_path / "login.html"
    path.write_text(login_recording_html, encoding="utf-8")
    return path


@pytest.fixture
def sample_test_case() -> TestCase:
    """生成テスト用のテストケース。"""
    return TestCase(
        title="Login Test",
        steps=[
            Step(number=1, description="Navigate to login page", action="goto",
                 value="https://example.com/login"),
            Step(number=2, description="Enter username", action="fill",
                 selector='input[name="username"]', value="testuser"),
            Step(number=3, description="Enter password", action="fill",
                 selector='input[type="password"]', value="password123"),
            Step(number=4, description="Click login button", action="click",
                 selector='button[type="submit"]'),
            Step(number=5, description="Verify dashboard is visible", action="view",
                 value="Dashboard"),
        ],
    )


# ---------------------------------------------------------------------------
# Hypothesis ストラテジー
# ---------------------------------------------------------------------------

def make_step_text_strategy():
    """記録ツールが出力しうる説明文を生成するストラテジー。"""
    word = st.from_regex(r"[A-Za-z]{1,10}", fullmatch=True)
    return st.one_of(
        st.builds(lambda w: f"Navigate to https://{w.lower()}.example.com/", word),
        st.builds(lambda w: f'Type "{w}"', word),
        st.builds(lambda w: f"Click the {w} button", word),
        st.sampled_from([
            "Click this text field.",
            "Click this password field.",
            "Click this email field.",
            "View dashboard",
            "Upload the report spreadsheet",
            "Confirm the order",
        ]),
        st.text(alphabet=st.characters(whitelist_categories=("L", "N", "Zs")), max_size=30),
    )
