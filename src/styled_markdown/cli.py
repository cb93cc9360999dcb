"""Command-line interface for Styled Markdown."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from styled_markdown import __version__
from styled_markdown.config import get_settings
from styled_markdown.core.converter import DocumentConverter
from styled_markdown.formats import SOURCE_EXTENSIONS, SUPPORTED_EXTENSIONS
from styled_markdown.formats.console import ConsoleRenderer
from styled_markdown.formatting.ir import FontSpec

app = typer.Typer(
    name="styled-markdown",
    help="View and convert markdown documents as styled text.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Styled Markdown v{__version__}")
        raise typer.Exit()


def generate_output_path(
    input_path: Path, extension: str, output_dir: Optional[Path] = None
) -> Path:
    """Generate output path with -styled suffix and the target extension."""
    output_name = f"{input_path.stem}-styled{extension}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def view_file(input_path: Path, converter: DocumentConverter, verbose: bool) -> bool:
    """Print a single file styled to the terminal. Returns True on success."""
    try:
        document = converter.convert_text(converter.read_file(input_path))
    except Exception as e:
        console.print(f"[red]Error viewing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False

    if verbose:
        console.print(f"[blue]Runs:[/blue] {len(document)} ({len(document.plain_text)} characters)")

    renderer = ConsoleRenderer(spacing_unit=converter.settings.spacing_unit)
    console.print(renderer.render(document))
    return True


def process_file(
    input_path: Path,
    output_path: Path,
    converter: DocumentConverter,
    verbose: bool,
) -> bool:
    """Convert a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    ext = input_path.suffix.lower()
    if ext not in SOURCE_EXTENSIONS:
        console.print(
            f"[yellow]Skipping:[/yellow] {input_path.name} "
            f"(unsupported format: {ext})"
        )
        return False

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")
        console.print(
            f"[blue]Font:[/blue] {converter.base_font.family} "
            f"{converter.base_font.size:g}pt"
        )

    try:
        document = converter.convert_file(input_path, output_path)
        console.print(f"[green]Success:[/green] {output_path}")
        if verbose:
            console.print(f"[blue]Runs:[/blue] {len(document)}")
        return True
    except Exception as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False


def process_folder(
    folder_path: Path,
    extension: str,
    converter: DocumentConverter,
    verbose: bool,
    recursive: bool = True,
) -> tuple[int, int]:
    """Convert all markdown files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in SOURCE_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    # Skip our own output
    files = sorted(f for f in files if not f.stem.endswith("-styled"))

    if not files:
        console.print(
            f"[yellow]No markdown files found in {folder_path}[/yellow]\n"
            f"Supported formats: {', '.join(SOURCE_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to convert[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Converting files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Converting {file_path.name}...")
            output_path = generate_output_path(file_path, extension)
            if process_file(file_path, output_path, converter, verbose):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Markdown file to view, or folder to convert",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file instead of the terminal (single file only)",
    ),
    to: Optional[str] = typer.Option(
        None,
        "--to",
        "-t",
        help="Output format for folder mode: .docx, .txt, .md or .json",
    ),
    font: Optional[str] = typer.Option(
        None,
        "--font",
        "-f",
        help="Base font family (default: Helvetica)",
    ),
    font_size: Optional[float] = typer.Option(
        None,
        "--font-size",
        "-s",
        min=1.0,
        help="Base font size in points (default: 13)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    View or convert markdown documents as styled text.

    Examples:

        styled-markdown notes.md  # Print styled to the terminal

        styled-markdown notes.md -o notes.docx

        styled-markdown notes.md -o runs.json --font Georgia --font-size 12

        styled-markdown /path/to/folder --to .docx
    """
    try:
        settings = get_settings()
        base_font = FontSpec(
            family=font or settings.font_family,
            size=font_size or settings.font_size,
        )
        converter = DocumentConverter(settings=settings, base_font=base_font)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {e}")
        raise typer.Exit(1)

    if path.is_file():
        if to is not None:
            console.print("[yellow]Warning:[/yellow] --to is ignored for a single file")

        if output is None:
            success = view_file(path, converter, verbose)
        else:
            success = process_file(path, output, converter, verbose)
        raise typer.Exit(0 if success else 1)
    else:
        if output is not None:
            console.print(
                "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
                "Files will be saved alongside originals with -styled suffix."
            )

        extension = (to or settings.output_format).lower()
        if not extension.startswith("."):
            extension = f".{extension}"
        if extension not in SUPPORTED_EXTENSIONS:
            console.print(
                f"[red]Error:[/red] Unsupported output format: {extension}. "
                f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
            )
            raise typer.Exit(1)

        success, fail = process_folder(path, extension, converter, verbose)
        console.print(
            f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed"
        )
        raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
