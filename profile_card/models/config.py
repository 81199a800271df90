"""
Configuration Models

Pydantic models for display strings and application settings.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SETTINGS_PATH = Path("config/app_settings.json")
SETTINGS_SCHEMA = "app_settings_schema.json"


class DisplayStrings(BaseModel):
    """Fixed strings for occupation labels, the preview card and its alert.

    Unknown keys are rejected so a misspelled override fails loudly.
    """

    model_config = ConfigDict(extra="forbid")

    # Occupation and education labels
    student_label: str = "學生"
    worker_label: str = "上班族"
    undergraduate_label: str = "大學"
    master_label: str = "碩士"
    phd_label: str = "博士"
    year_suffix: str = "年級"
    worker_fallback: str = "上班族"

    # Preview card
    preview_title: str = "個人介紹"
    about_title: str = "關於我"
    contacts_title: str = "聯繫方式"
    email_row_title: str = "電子郵箱"

    # Invalid link alert
    invalid_url_title: str = "無效的 URL"
    invalid_url_message: str = "平台與用戶名不可包含無效的 URL 字符"
    invalid_url_dismiss: str = "確定"


class AppSettings(BaseModel):
    """Application settings model."""

    display_strings: DisplayStrings = Field(default_factory=DisplayStrings)
    avatar_height: int = Field(default=300, gt=0)
    log_level: str = Field(default="INFO")
    log_file: str = Field(default="logs/profile-card.log")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppSettings":
        """Load settings from a JSON file.

        Args:
            config_path: Path to app_settings.json (defaults to config/app_settings.json)

        Returns:
            AppSettings: Validated settings

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the file fails schema validation
            ValueError: If model validation fails
        """
        # Deferred so importing the models does not load jsonschema
        from profile_card.utils.validator import SettingsValidator

        config_path = Path(config_path) if config_path else DEFAULT_SETTINGS_PATH

        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}. "
                f"Copy {config_path.stem}.example.json to {config_path.name}"
            )

        config_data = SettingsValidator().validate_file(config_path, SETTINGS_SCHEMA)
        return cls(**config_data)

    def dump(self, config_path: Path | str) -> None:
        """Write settings to a JSON file."""
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, ensure_ascii=False, indent=2)
