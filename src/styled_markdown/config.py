"""Configuration management for Styled Markdown."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from styled_markdown.formatting.ir import FontSpec
from styled_markdown.formatting.parser import (
    DEFAULT_HEADING1_SCALE,
    DEFAULT_HEADING2_SCALE,
    DEFAULT_MAX_BLANK_LINES,
    DEFAULT_SPACING_UNIT,
    ConversionOptions,
)


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Base font
    font_family: str = Field(
        default="Helvetica",
        alias="STYLED_MARKDOWN_FONT",
    )
    font_size: float = Field(
        default=13.0,
        gt=0,
        alias="STYLED_MARKDOWN_FONT_SIZE",
    )

    # Assembler constants
    heading1_scale: float = Field(
        default=DEFAULT_HEADING1_SCALE,
        alias="STYLED_MARKDOWN_H1_SCALE",
    )
    heading2_scale: float = Field(
        default=DEFAULT_HEADING2_SCALE,
        alias="STYLED_MARKDOWN_H2_SCALE",
    )
    spacing_unit: float = Field(
        default=DEFAULT_SPACING_UNIT,
        alias="STYLED_MARKDOWN_SPACING",
    )
    max_blank_lines: int = Field(
        default=DEFAULT_MAX_BLANK_LINES,
        alias="STYLED_MARKDOWN_MAX_BLANK_LINES",
    )

    # Folder mode output format
    output_format: str = Field(
        default=".docx",
        alias="STYLED_MARKDOWN_FORMAT",
    )

    def base_font(self) -> FontSpec:
        """Base font built from the configured family and size."""
        return FontSpec(family=self.font_family, size=self.font_size)

    def conversion_options(self) -> ConversionOptions:
        """Assembler options built from the configured constants."""
        return ConversionOptions(
            heading1_scale=self.heading1_scale,
            heading2_scale=self.heading2_scale,
            spacing_unit=self.spacing_unit,
            max_blank_lines=self.max_blank_lines,
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
