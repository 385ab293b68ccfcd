"""
ツール設定のユニットテスト
"""

from __future__ import annotations

import pytest

from sct.config import ToolConfig, apply_overrides, load_config_from_env

_ALL_KEYS = ("SCT_OUTPUT_DIR", "SCT_LANGUAGE", "SCT_BASE_URL", "SCT_SCREENSHOTS", "SCT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ALL_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestLoadConfigFromEnv:
    """環境変数からの読み込みテスト。"""

    def test_defaults(self) -> None:
        assert load_config_from_env() == ToolConfig()

    def test_all_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCT_OUTPUT_DIR", "out")
        monkeypatch.setenv("SCT_LANGUAGE", "JavaScript")
        monkeypatch.setenv("SCT_BASE_URL", "https://example.com")
        monkeypatch.setenv("SCT_SCREENSHOTS", "yes")
        monkeypatch.setenv("SCT_LOG_LEVEL", "debug")

        config = load_config_from_env()
        assert config.output_dir == "out"
        assert config.language == "javascript"
        assert config.base_url == "https://example.com"
        assert config.screenshots is True
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["false", "0", "no", "whatever"])
    def test_screenshots_false(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("SCT_SCREENSHOTS", value)
        assert load_config_from_env().screenshots is False

    def test_invalid_values_fall_back(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setenv("SCT_LANGUAGE", "ruby")
        monkeypatch.setenv("SCT_LOG_LEVEL", "LOUD")

        with caplog.at_level("WARNING", logger="sct.config"):
            config = load_config_from_env()

        assert config.language == "python"
        assert config.log_level is None
        assert "SCT_LANGUAGE" in caplog.text
        assert "SCT_LOG_LEVEL" in caplog.text

    def test_empty_output_dir_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCT_OUTPUT_DIR", "")
        assert load_config_from_env().output_dir == "generated-tests"


class TestApplyOverrides:
    """CLI オプション適用のテスト。"""

    def test_none_is_not_applied(self) -> None:
        base = ToolConfig(output_dir="env-out", base_url="https://env.example.com")
        config = apply_overrides(base, output_dir=None, base_url=None, screenshots=None)
        assert config == base

    def test_overrides_win(self) -> None:
        base = ToolConfig(output_dir="env-out", screenshots=True)
        config = apply_overrides(base, output_dir="cli-out", language="javascript", screenshots=False)
        assert config.output_dir == "cli-out"
        assert config.language == "javascript"
        assert config.screenshots is False
        assert base.output_dir == "env-out"

    def test_invalid_language(self) -> None:
        with pytest.raises(ValueError, match="language"):
            apply_overrides(ToolConfig(), language="ruby")
