"""Unit tests for the prompts module."""
import pytest

from csvchat.prompts import (
    PROMPTS_DIR_ENV,
    clear_cache,
    get_system_prompt,
    load_prompt,
    prompt_search_path,
)


@pytest.fixture(autouse=True)
def fresh_prompts(monkeypatch, tmp_path):
    """Isolate each test from the working directory and the prompt cache."""
    monkeypatch.delenv(PROMPTS_DIR_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_cache()
    yield
    clear_cache()


class TestLoadPrompt:
    """Tests for prompt lookup."""

    def test_packaged_system_prompt(self):
        """Test that the packaged prompt describes the chart contract."""
        prompt = get_system_prompt()

        assert "```chart" in prompt
        assert "chartData" in prompt

    def test_working_directory_override(self, tmp_path):
        """Test that ./prompts wins over the packaged file."""
        (tmp_path / "prompts").mkdir()
        (tmp_path / "prompts" / "system.txt").write_text("local rules", encoding="utf-8")

        assert get_system_prompt() == "local rules"

    def test_env_directory_override(self, monkeypatch, tmp_path):
        """Test that the environment variable names the override directory."""
        custom = tmp_path / "custom"
        custom.mkdir()
        (custom / "system.txt").write_text("env rules", encoding="utf-8")
        monkeypatch.setenv(PROMPTS_DIR_ENV, str(custom))

        assert prompt_search_path()[0] == custom
        assert get_system_prompt() == "env rules"

    def test_missing_prompt(self):
        """Test that an unknown prompt name lists the searched files."""
        with pytest.raises(FileNotFoundError, match="nonexistent.txt"):
            load_prompt("nonexistent")

    def test_cached_until_cleared(self, tmp_path):
        """Test that edits are seen only after clearing the cache."""
        (tmp_path / "prompts").mkdir()
        path = tmp_path / "prompts" / "system.txt"
        path.write_text("v1", encoding="utf-8")
        assert get_system_prompt() == "v1"

        path.write_text("v2", encoding="utf-8")
        assert get_system_prompt() == "v1"

        clear_cache()
        assert get_system_prompt() == "v2"
