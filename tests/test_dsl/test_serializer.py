"""
TestCaseSerializer のユニットテスト
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from sct.dsl.schema import Step, TestCase
from sct.dsl.serializer import TestCaseSerializer


@pytest.fixture
def serializer() -> TestCaseSerializer:
    return TestCaseSerializer()


class TestDumpLoad:
    """YAML 書き出し・読み込みのテスト。"""

    def test_dump_then_load(self, serializer: TestCaseSerializer, tmp_path: Path,
                            sample_test_case: TestCase) -> None:
        path = tmp_path / "nested" / "login.yaml"
        serializer.dump(sample_test_case, path)
        assert path.exists()
        assert serializer.load(path) == sample_test_case

    def test_dump_uses_wire_field_names(self, serializer: TestCaseSerializer, tmp_path: Path) -> None:
        test_case = TestCase(title="Shot", steps=[
            Step(number=1, description="View a", action="view", value="a",
                 screenshotUrl="https://img.example.com/a.jpeg"),
        ])
        path = tmp_path / "shot.yaml"
        serializer.dump(test_case, path)
        content = path.read_text(encoding="utf-8")
        assert "screenshotUrl: https://img.example.com/a.jpeg" in content
        assert "title: Shot" in content

    def test_load_minimal_yaml(self, serializer: TestCaseSerializer, tmp_path: Path) -> None:
        path = tmp_path / "min.yaml"
        path.write_text(
            "title: Minimal\n"
            "steps:\n"
            "  - number: 1\n"
            "    description: Navigate to https://example.com\n"
            "    action: goto\n"
            "    value: https://example.com\n",
            encoding="utf-8",
        )
        test_case = serializer.load(path)
        assert test_case.title == "Minimal"
        assert test_case.steps[0].selector == ""
        assert test_case.steps[0].screenshotUrl is None


    def test_load_null_selector_and_value(self, serializer: TestCaseSerializer, tmp_path: Path) -> None:
        """null の selector / value は空文字列として読み込む。"""
        path = tmp_path / "nulls.yaml"
        path.write_text(
            "title: Nulls\n"
            "steps:\n"
            "  - number: 1\n"
            "    description: Navigate to https://x\n"
            "    action: goto\n"
            "    selector: null\n"
            "    value: https://x\n"
            "  - number: 2\n"
            "    description: Click\n"
            "    action: click\n"
            "    selector: null\n"
            "    value: null\n",
            encoding="utf-8",
        )
        test_case = serializer.load(path)
        assert test_case.steps[0].selector == ""
        assert test_case.steps[0].value == "https://x"
        assert test_case.steps[1].selector == ""
        assert test_case.steps[1].value == ""


class TestLoadErrors:
    """読み込みエラーのテスト。"""

    def test_missing_file(self, serializer: TestCaseSerializer, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            serializer.load(tmp_path / "missing.yaml")

    def test_empty_file(self, serializer: TestCaseSerializer, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="空"):
            serializer.load(path)

    def test_syntax_error(self, serializer: TestCaseSerializer, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("title: x\n  bad: [\n", encoding="utf-8")
        with pytest.raises(ValueError, match="YAML 構文エラー"):
            serializer.load(path)

    def test_schema_error(self, serializer: TestCaseSerializer, tmp_path: Path) -> None:
        path = tmp_path / "schema.yaml"
        path.write_text("title: x\nsteps:\n  - number: 1\n    action: hover\n", encoding="utf-8")
        with pytest.raises(ValueError, match="スキーマ検証エラー") as exc_info:
            serializer.load(path)
        assert isinstance(exc_info.value.__cause__, ValidationError)
