"""Pytest fixtures for Styled Markdown tests."""

import pytest
from pathlib import Path

from styled_markdown.config import Settings
from styled_markdown.formatting.ir import FontSpec
from styled_markdown.formatting.parser import ConversionOptions, MarkdownParser


@pytest.fixture
def base_font() -> FontSpec:
    """Base font used for conversions."""
    return FontSpec(family="Helvetica", size=10.0)


@pytest.fixture
def options() -> ConversionOptions:
    """Conversion options with easy-to-check constants."""
    return ConversionOptions(
        heading1_scale=2.0,
        heading2_scale=1.5,
        spacing_unit=10.0,
        max_blank_lines=2,
    )


@pytest.fixture
def parser(options: ConversionOptions) -> MarkdownParser:
    """Create a parser instance."""
    return MarkdownParser(options=options)


@pytest.fixture
def sample_markdown() -> str:
    """Sample document using every supported construct."""
    return (
        "# The Library\n"
        "\n"
        "## Chapter *1*\n"
        "Once upon a _time_ there was *7* of them.\n"
        "---\n"
        "\n"
        "\n"
        "The end.\n"
    )


@pytest.fixture
def settings() -> Settings:
    """Settings built without reading the environment or .env files."""
    return Settings(
        _env_file=None,
        font_family="Helvetica",
        font_size=10.0,
        heading1_scale=2.0,
        heading2_scale=1.5,
        spacing_unit=10.0,
        max_blank_lines=2,
    )


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Create a temporary markdown file for testing."""
    file_path = tmp_path / "book.md"
    file_path.write_text(sample_markdown, encoding="utf-8")
    return file_path
