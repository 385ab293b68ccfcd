"""
テストケースシリアライザ — TestCase の YAML 読み込み・書き出し

ruamel.yaml を使用して、パース済み TestCase を永続化層・配布層へ渡す
YAML ファイルとの相互変換を行う。
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .schema import TestCase


class TestCaseSerializer:
    """TestCase の YAML 読み書きを担当する。"""

    __test__ = False  # pytest の収集対象外

    def __init__(self) -> None:
        """ruamel.yaml インスタンスを初期化する。"""
        self._yaml = YAML()
        self._yaml.preserve_quotes = True
        self._yaml.default_flow_style = False
        # 長い説明文やロケータを折り返さない
        self._yaml.width = 4096

    # ----- load -----

    def load(self, path: Path) -> TestCase:
        """YAML ファイルを読み込み、TestCase モデルに変換する。

        Args:
            path: 読み込む YAML ファイルのパス

        Returns:
            読み込んだ TestCase

        Raises:
            FileNotFoundError: ファイルが存在しない場合
            ValueError: YAML 構文エラーまたはスキーマ検証エラーの場合
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"YAML ファイルが見つかりません: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = self._yaml.load(f)
        except YAMLError as e:
            line_info = ""
            if hasattr(e, "problem_mark") and e.problem_mark is not None:
                mark = e.problem_mark
                line_info = f" (行 {mark.line + 1}, 列 {mark.column + 1})"
            raise ValueError(f"YAML 構文エラー{line_info}: {e}") from e

        if data is None:
            raise ValueError("YAML ファイルが空です")

        try:
            return TestCase.model_validate(self._to_plain(data))
        except PydanticValidationError as e:
            raise ValueError(f"スキーマ検証エラー: {e}") from e

    # ----- dump -----

    def dump(self, test_case: TestCase, path: Path) -> None:
        """TestCase を YAML ファイルに書き出す。

        Args:
            test_case: 書き出す TestCase
            path: 出力先の YAML ファイルパス
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = test_case.model_dump(mode="json", exclude_none=True)

        with open(path, "w", encoding="utf-8") as f:
            self._yaml.dump(data, f)

    # ----- ユーティリティ -----

    def _to_plain(self, data: object) -> object:
        """CommentedMap/CommentedSeq を通常の dict/list に再帰変換する。"""
        if isinstance(data, dict):
            return {key: self._to_plain(value) for key, value in data.items()}
        if isinstance(data, list):
            return [self._to_plain(item) for item in data]
        return data
