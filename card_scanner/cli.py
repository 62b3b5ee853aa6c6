"""Command-line interface for Card Scanner - replay OCR frames through the parser."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .core.types import CardRecord
from .parser.algorithm import DefaultParserAlgorithm
from .scanner import CardScanner
from .utils.error_handler import CardScannerError, InputError
from .utils.log import get_logger
from .utils.validation import validate_fragments

logger = get_logger(__name__)

# Rich console
console = Console()

app = typer.Typer(
    name="card-scanner",
    help="Card Scanner - Recover card number, network and expiry from OCR text",
    add_completion=False
)


def load_frames(path: Path) -> List[List[str]]:
    """
    Read OCR frames from a JSON or JSON-lines file.

    A JSON file holds a list of frames; a JSON-lines file holds one frame
    per line. Each frame is a list of fragment strings.

    Raises:
        InputError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(
            f"Cannot read frames file: {path}",
            details={"path": str(path), "error": str(e)}
        )

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None

    if isinstance(data, list) and all(isinstance(frame, list) for frame in data):
        return [validate_fragments(frame) for frame in data]

    frames = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            frame = json.loads(line)
        except json.JSONDecodeError as e:
            raise InputError(
                f"Invalid JSON on line {line_number}",
                details={"path": str(path), "line": line_number, "error": str(e)}
            )
        frames.append(validate_fragments(frame))
    return frames


def _record_table(title: str, record: CardRecord) -> Table:
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Number", record.number_formatted() or "[red]Not found[/red]")
    table.add_row("Network", record.network.value)
    table.add_row("Expiry", record.expiry or "[yellow]Not found[/yellow]")
    table.add_row("Valid", "[green]yes[/green]" if record.is_valid() else "[red]no[/red]")
    return table


@app.command()
def parse(
    fragments: List[str] = typer.Argument(..., help="OCR text fragments of a single frame"),
):
    """Parse a single frame and show the candidate it yields."""
    algorithm = DefaultParserAlgorithm()
    record = algorithm.build_record(fragments)
    console.print(_record_table("Frame Candidate", record))
    if not record.is_valid():
        raise typer.Exit(1)


@app.command()
def scan(
    frames_file: Path = typer.Argument(..., help="JSON or JSON-lines file of OCR frames"),
    tries: Optional[int] = typer.Option(None, "--tries", "-t", help="Valid frames required per card"),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON lines"),
):
    """Replay recorded frames through a scanning session."""
    try:
        frames = load_frames(frames_file)
        scanner = CardScanner(try_count=tries)
    except CardScannerError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        logger.error("Scan setup failed", error=str(e))
        raise typer.Exit(1)

    if not as_json:
        console.print(Panel.fit(
            f"[bold blue]Card Scanner - SCAN Mode[/bold blue]\n"
            f"[dim]{len(frames)} frames, {scanner.try_count} valid frames per card[/dim]",
            border_style="blue"
        ))

    results = []
    for frame in frames:
        record = scanner.process_frame(frame)
        if record is None:
            continue
        results.append(record)
        if as_json:
            typer.echo(json.dumps(record.to_dict()))
        else:
            console.print(_record_table(f"Card {len(results)}", record))

    if not results and not as_json:
        console.print("[yellow]⚠ No card stabilized from the given frames[/yellow]")

    logger.info(
        "Scan completed",
        frames=len(frames),
        cards=len(results),
        pending=scanner.pending_samples,
    )
