"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from makinilya.config import AppConfig, ConfigError, ContactInformation, load_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MAKINILYA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MAKINILYA_PEN_NAME", raising=False)


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.story.title == "Untitled"
        assert config.story.pen_name == "Unknown Author"

    def test_default_project_config(self) -> None:
        config = AppConfig()
        assert config.project.base_directory == "."
        assert config.project.draft_directory == "draft"
        assert config.project.context_path == "Context.toml"
        assert config.project.output_path == "out/manuscript.docx"

    def test_default_contacts_are_none(self) -> None:
        config = AppConfig()
        assert config.author is None
        assert config.agent is None

    def test_default_logging_level(self) -> None:
        assert AppConfig().logging.level == "INFO"


class TestContactInformation:
    def test_lines_skip_missing_fields(self) -> None:
        contact = ContactInformation(name="Brutus Ellis", email_address="brutus@email.com")
        assert contact.lines() == ["Brutus Ellis", "brutus@email.com"]

    def test_lines_keep_print_order(self) -> None:
        contact = ContactInformation(
            email_address="e",
            mobile_number="m",
            address_2="a2",
            address_1="a1",
            name="n",
        )
        assert contact.lines() == ["n", "a1", "a2", "m", "e"]


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "story": {"title": "The Typewriter", "pen_name": "Brutus Ellis"},
            "project": {"draft_directory": "chapters"},
            "agent": {"name": "Cymone Sabina", "address_1": "755 Maria Clara Street"},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.story.title == "The Typewriter"
        assert config.story.pen_name == "Brutus Ellis"
        assert config.project.draft_directory == "chapters"
        assert config.agent is not None
        assert config.agent.name == "Cymone Sabina"
        # Other fields keep defaults
        assert config.project.context_path == "Context.toml"
        assert config.author is None

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.story.title == "Untitled"

    def test_load_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_config(config_file).project.draft_directory == "draft"

    def test_env_vars_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("MAKINILYA_LOG_LEVEL", "debug")
        monkeypatch.setenv("MAKINILYA_PEN_NAME", "J. Doe")

        config = load_config(config_file)
        assert config.logging.level == "DEBUG"
        assert config.story.pen_name == "J. Doe"

    @pytest.mark.parametrize(
        "content",
        ["project: [unclosed", "- a\n- b\n", "story: [a]\n", "project:\n  draft_directory: [1]\n"],
    )
    def test_invalid_config_raises_config_error(self, tmp_path: Path, content: str) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)
        with pytest.raises(ConfigError, match="config.yaml"):
            load_config(config_file)

    def test_load_project_config_yaml(self) -> None:
        """Test loading the repository's config.yaml."""
        config = load_config(Path(__file__).parent.parent / "config.yaml")
        assert config.story.title == "Untitled"
        assert config.project.output_path == "out/manuscript.docx"
