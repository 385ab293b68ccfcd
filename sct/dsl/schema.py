"""
テストケーススキーマ定義 — ステップ・テストケース・検証結果モデル

Scribe 記録から抽出したテストケースを表現する Pydantic v2 モデルを定義する。
フィールド名は永続化層・API 層とやり取りするワイヤ形式
（screenshotUrl / isValid 等のキャメルケース）をそのまま使う。
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# アクション種別
# ---------------------------------------------------------------------------

ActionName = Literal[
    "goto",
    "click",
    "fill",
    "upload",
    "wait",
    "assert",
    "view",
    "unknown",
]

# 定義順は list-actions の表示順を兼ねる
ACTION_TYPES: tuple[str, ...] = (
    "goto",
    "click",
    "fill",
    "upload",
    "wait",
    "assert",
    "view",
    "unknown",
)

UNTITLED_TEST = "Untitled Test"


# ---------------------------------------------------------------------------
# ステップ
# ---------------------------------------------------------------------------

class Step(BaseModel):
    """記録された 1 操作を表すステップ。

    selector / value は不要なアクション（goto の selector、click の value 等）
    では空文字列のまま保持する。
    """

    number: int = Field(..., ge=1, description="1 始まりのステップ番号")
    description: str = Field(default="", description="番号を除去した元の説明文")
    action: ActionName = Field(default="unknown", description="分類済みアクション種別")
    selector: str = Field(default="", description="要素ロケータ")
    value: str = Field(default="", description="URL・入力文字列・確認対象テキスト")
    screenshotUrl: Optional[str] = Field(default=None, description="直後のスクリーンショット画像 URL")

    @field_validator("selector", "value", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> object:
        """外部から渡された null は空文字列として扱う。"""
        return "" if v is None else v


# ---------------------------------------------------------------------------
# テストケース
# ---------------------------------------------------------------------------

class TestCase(BaseModel):
    """パース済みテストケース。

    DocumentParser が 1 回のパースごとに生成し、以降このパッケージ内では変更しない。
    """

    __test__ = False  # pytest の収集対象外

    title: str = Field(default=UNTITLED_TEST, description="テストタイトル")
    steps: list[Step] = Field(default_factory=list, description="抽出順のステップ列")
    description: Optional[str] = Field(default=None, description="テストの補足説明")
    baseUrl: Optional[str] = Field(default=None, description="生成スクリプトの初期遷移先")


# ---------------------------------------------------------------------------
# 検証結果
# ---------------------------------------------------------------------------

class ValidationResult(BaseModel):
    """TestCaseValidator の検証結果。"""

    isValid: bool
    errors: list[str] = Field(default_factory=list)
