"""
テストケース検証 — パース結果の構造的な完全性チェック

TestCase の構造的な欠陥を検出し、エラーメッセージのリストとして返す。
例外は送出せず、受け入れ可否の判断は呼び出し側に委ねる。

検出ルール（全ルールを適用し、途中で打ち切らない）:
  - タイトルが空
  - ステップが 0 件
  - 説明文が空のステップ
  - unknown アクションのステップ（説明文に "view" を含むものは許容）
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .schema import Step, TestCase, ValidationResult

logger = logging.getLogger(__name__)

ERROR_MISSING_TITLE = "Test case must have a title"
ERROR_NO_STEPS = "Test case must have at least one step"


# ---------------------------------------------------------------------------
# ステップ単位のルール
# ---------------------------------------------------------------------------

def _check_description(step: Step, position: int) -> Optional[str]:
    """説明文が空のステップを検出する。"""
    if not step.description:
        return f"Step {position} must have a description"
    return None


def _check_unknown_action(step: Step, position: int) -> Optional[str]:
    """分類できなかったステップを検出する。

    "View ..." 系の文言は分類漏れでも許容する。
    """
    if step.action == "unknown" and "view" not in step.description.lower():
        return f"Step {position} has an unknown action type"
    return None


_STEP_RULES: tuple[Callable[[Step, int], Optional[str]], ...] = (
    _check_description,
    _check_unknown_action,
)


# ---------------------------------------------------------------------------
# TestCaseValidator 本体
# ---------------------------------------------------------------------------

class TestCaseValidator:
    """パース済み TestCase の構造検証を行う。"""

    __test__ = False  # pytest の収集対象外

    def validate(self, test_case: TestCase) -> ValidationResult:
        """全ルールを適用し、検出したエラーをまとめて返す。

        Args:
            test_case: 検証対象のテストケース

        Returns:
            isValid とエラーメッセージのリスト
        """
        errors: list[str] = []

        if not test_case.title:
            errors.append(ERROR_MISSING_TITLE)

        if not test_case.steps:
            errors.append(ERROR_NO_STEPS)

        # 番号はステップ列内の位置（1 始まり）で報告する
        for position, step in enumerate(test_case.steps, start=1):
            for rule in _STEP_RULES:
                message = rule(step, position)
                if message is not None:
                    errors.append(message)

        if errors:
            logger.info("テストケース '%s' に %d 件の問題があります", test_case.title, len(errors))

        return ValidationResult(isValid=not errors, errors=errors)


def validate_test_case(test_case: TestCase) -> ValidationResult:
    """TestCaseValidator の簡易呼び出し。"""
    return TestCaseValidator().validate(test_case)
