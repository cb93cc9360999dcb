"""Line classifier: splits markdown into classified physical lines."""

import re
from dataclasses import dataclass
from typing import Iterator

from styled_markdown.formatting.ir import LineKind


HORIZONTAL_RULE_PATTERN = re.compile(r"-{3,}")
HEADING2_PREFIX = "## "
HEADING1_PREFIX = "# "


@dataclass(frozen=True)
class ClassifiedLine:
    """A physical source line together with its classification.

    Attributes:
        kind: The line classification
        content: Text to run through the inline tokenizer (empty for
            blank lines and horizontal rules)
    """

    kind: LineKind
    content: str = ""


def classify_line(line: str) -> ClassifiedLine:
    """Classify a single physical line (no newline characters)."""
    trimmed = line.strip()

    if HORIZONTAL_RULE_PATTERN.fullmatch(trimmed):
        return ClassifiedLine(LineKind.HORIZONTAL_RULE)

    # "## " must be tried before "# "
    if trimmed.startswith(HEADING2_PREFIX):
        return ClassifiedLine(LineKind.HEADING2, trimmed[len(HEADING2_PREFIX):])
    if trimmed.startswith(HEADING1_PREFIX):
        return ClassifiedLine(LineKind.HEADING1, trimmed[len(HEADING1_PREFIX):])

    if not trimmed:
        return ClassifiedLine(LineKind.BLANK)

    return ClassifiedLine(LineKind.PARAGRAPH, line)


def split_lines(text: str) -> list[str]:
    """Split text on newlines without a phantom line after a trailing newline."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class ClassifiedLines:
    """Lazy, restartable sequence of classified lines.

    Each call to ``iter()`` starts a fresh pass over the source text.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[ClassifiedLine]:
        for line in split_lines(self.text):
            yield classify_line(line)


def classify_lines(text: str) -> ClassifiedLines:
    """Classify every physical line of ``text``."""
    return ClassifiedLines(text)
