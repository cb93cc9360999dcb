"""Font derivation capability used by the document assembler."""

from typing import Any, Callable, Optional

from styled_markdown.formatting.ir import FontSpec


# (base_font, *, bold, italic, scale) -> derived font
FontDeriver = Callable[..., Any]


class FontDerivationError(RuntimeError):
    """The font derivation capability failed for a requested trait set."""

    pass


def default_deriver(
    base: FontSpec, *, bold: bool, italic: bool, scale: float
) -> FontSpec:
    """Derive a font using ``FontSpec.derive``."""
    return base.derive(bold=bold, italic=italic, scale=scale)


def derive_font(
    deriver: Optional[FontDeriver],
    base: Any,
    *,
    bold: bool = False,
    italic: bool = False,
    scale: float = 1.0,
) -> Any:
    """Derive a font, surfacing any collaborator failure as FontDerivationError.

    Args:
        deriver: Collaborator capability, or None for ``default_deriver``
        base: Base font handle supplied by the caller
        bold: Request the bold trait
        italic: Request the italic trait
        scale: Size multiplier relative to the base font

    Returns:
        The derived font handle
    """
    deriver = deriver or default_deriver
    try:
        return deriver(base, bold=bold, italic=italic, scale=scale)
    except FontDerivationError:
        raise
    except Exception as e:
        raise FontDerivationError(
            f"Font derivation failed for {base!r} "
            f"(bold={bold}, italic={italic}, scale={scale}): {e}"
        ) from e
