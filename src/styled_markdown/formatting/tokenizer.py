"""Inline emphasis tokenizer.

Single-level, non-recursive: ``_word_`` and ``*word*`` become italic,
``*7*`` (one digit between asterisks) becomes bold italic. A delimiter
of the other kind inside an open span is literal text, and an opener
that is never closed turns itself and the rest of the line into
literal text.
"""

from dataclasses import dataclass

from styled_markdown.formatting.ir import TextStyle


DELIMITERS = frozenset("_*")
NUMERIC_DELIMITER = "*"
DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class InlineFragment:
    """A piece of a line with uniform inline style."""

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def bold(self) -> bool:
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        return TextStyle.ITALIC in self.style


def span_style(delimiter: str, content: str) -> TextStyle:
    """Style for a closed span of ``content`` between two ``delimiter``s."""
    if delimiter == NUMERIC_DELIMITER and len(content) == 1 and content in DIGITS:
        return TextStyle.BOLD | TextStyle.ITALIC
    return TextStyle.ITALIC


def tokenize_inline(text: str) -> list[InlineFragment]:
    """Tokenize one line into styled fragments with delimiters consumed.

    Runs in a single pass over ``text``.
    """
    fragments: list[InlineFragment] = []
    plain: list[str] = []

    def flush_plain() -> None:
        if plain:
            fragments.append(InlineFragment("".join(plain)))
            plain.clear()

    opener = ""
    open_pos = -1
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]

        if not opener:
            if char in DELIMITERS:
                opener = char
                open_pos = pos
            else:
                plain.append(char)
        elif char == opener:
            content = text[open_pos + 1 : pos]
            if content:
                flush_plain()
                fragments.append(InlineFragment(content, span_style(opener, content)))
                opener = ""
            else:
                # Empty span: the first delimiter is literal, this one reopens
                plain.append(opener)
                open_pos = pos
        pos += 1

    if opener:
        # Unclosed: opener and everything after it stay literal
        plain.append(text[open_pos:])

    flush_plain()
    return fragments
