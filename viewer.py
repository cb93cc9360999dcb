#!/usr/bin/env python3
"""
Styled Markdown - markdown subset to styled text

Simple usage:
    python viewer.py notes.md                 # Prints notes.md styled to the terminal
    python viewer.py notes.md -o notes.docx   # Writes a Word document
    python viewer.py /folder/path --to .json  # Converts all markdown files in folder
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from styled_markdown.cli import app

if __name__ == "__main__":
    app()
