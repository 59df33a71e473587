"""Configuration loader for Makinilya projects."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError


class ConfigError(ValueError):
    """Raised when config.yaml is malformed or holds invalid settings."""


class ProjectConfig(BaseModel):
    """Project structure paths.

    ``draft_directory``, ``context_path`` and ``output_path`` are resolved
    against ``base_directory``, which is itself relative to the project root.
    """

    base_directory: str = "."
    draft_directory: str = "draft"
    context_path: str = "Context.toml"
    output_path: str = "out/manuscript.docx"


class StoryConfig(BaseModel):
    """Title page details of the manuscript."""

    title: str = "Untitled"
    pen_name: str = "Unknown Author"


class ContactInformation(BaseModel):
    """Contact block printed on the title page."""

    name: str | None = None
    address_1: str | None = None
    address_2: str | None = None
    mobile_number: str | None = None
    email_address: str | None = None

    def lines(self) -> list[str]:
        """Return the non-empty contact lines in print order."""
        values = [
            self.name,
            self.address_1,
            self.address_2,
            self.mobile_number,
            self.email_address,
        ]
        return [value for value in values if value]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class AppConfig(BaseModel):
    """Root project configuration."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    story: StoryConfig = Field(default_factory=StoryConfig)
    author: ContactInformation | None = None
    agent: ContactInformation | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.

    Raises:
        ConfigError: If the file is not valid YAML, is not a mapping, or
            holds values the configuration models reject.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            try:
                yaml_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"{config_file} is not valid YAML: {exc}") from exc

    if not isinstance(yaml_data, dict):
        raise ConfigError(f"{config_file} must contain a mapping of settings")

    try:
        config = AppConfig(**yaml_data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {config_file}: {exc}") from exc

    # Environment overrides
    log_level = os.getenv("MAKINILYA_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()
    pen_name = os.getenv("MAKINILYA_PEN_NAME")
    if pen_name:
        config.story.pen_name = pen_name

    return config
