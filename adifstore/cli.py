"""Command-line interface for adifstore.

Commands cover checking ADI files, searching them by call/band/mode,
re-writing them in canonical form, DXCC entity lookup, locating a file on the
search path, and awards insights.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

# Allow running this file directly by ensuring the project root is on sys.path
if __package__ is None or __package__ == "":
    sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adifstore.adif import dump_adif
from adifstore.awards import QslTally, compute_summary, filtered_records, suggest_awards
from adifstore.catalogue import dxcc_entity
from adifstore.errors import AdifError
from adifstore.models import Record
from adifstore.storage import APP_NAME, AdifFile, get_search_path

app = typer.Typer(add_completion=False, help=f"{APP_NAME} - ADIF log checker and browser")
awards_app = typer.Typer(help="Awards-related insights")
app.add_typer(awards_app, name="awards")
console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


# Utilities

def _load(src: Path, accept: Optional[List[str]] = None) -> AdifFile:
    """Load an ADI file, reporting errors and exiting on failure."""
    try:
        return AdifFile.from_file(src, accept or ())
    except AdifError as e:
        console.print(f"[red]Error reading {src}: {e}[/red]")
        raise typer.Exit(1) from e


def _record_table(title: str, records: List[Record]) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Date")
    table.add_column("UTC")
    table.add_column("Call")
    table.add_column("Band")
    table.add_column("Mode")
    table.add_column("Grid")
    table.add_column("QSL")
    for rec in records:
        table.add_row(
            rec.date,
            rec.time,
            rec.callsign,
            rec.band,
            rec.mode,
            rec.value("GRIDSQUARE"),
            "Y" if rec.confirmed else "",
        )
    return table


def _to_dict(rec: Record) -> dict:
    return {f.name: f.value for f in rec.fields()}


@app.command()
def check(
    src: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="ADI file to check"),
) -> None:
    """Validate every field of an ADI file and report how many records it holds."""
    adif_file = _load(src)
    console.print(
        f"[bold]{len(adif_file)}[/bold] valid records, "
        f"{len(adif_file.callsigns())} distinct calls in {src}"
    )


@app.command()
def search(
    src: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="ADI file to search"),
    call: str = typer.Option(..., help="Exact callsign"),
    band: Optional[str] = typer.Option(None, help="Band, e.g., 20m"),
    mode: Optional[str] = typer.Option(None, help="Mode, e.g., CW"),
    json_out: bool = typer.Option(False, help="Output as JSON"),
) -> None:
    """Show the QSOs with a station, optionally on one band and mode."""
    adif_file = _load(src)
    rows = adif_file.matching_qsos(
        call.upper(),
        band.lower() if band else None,
        mode.upper() if mode else None,
    )
    if json_out:
        console.print_json(data=[_to_dict(r) for r in rows])
        return
    if not rows:
        console.print("No QSOs found.")
        return
    console.print(_record_table(f"QSOs with {call.upper()} ({len(rows)})", rows))


@app.command()
def dump(
    src: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="ADI file to read"),
    output: Optional[Path] = typer.Option(None, dir_okay=False, writable=True, help="ADI file to write"),
    field: Optional[List[str]] = typer.Option(None, help="Only keep these fields (repeatable)"),
    sort: bool = typer.Option(False, help="Write records in chronological order"),
) -> None:
    """Re-write an ADI file in canonical form (sorted field names, normalised values)."""
    adif_file = _load(src, field)
    records = adif_file.sorted_records() if sort else adif_file.records
    txt = dump_adif(records)
    if output is None:
        sys.stdout.write(txt)
        return
    try:
        output.write_text(txt, encoding="latin-1")
    except OSError as e:
        console.print(f"[red]Error writing {output}: {e}[/red]")
        raise typer.Exit(1) from e
    console.print(f"Wrote {len(records)} records to {output}")


@app.command()
def dxcc(code: int = typer.Argument(..., help="DXCC entity code")) -> None:
    """Look up a DXCC entity code."""
    entity = dxcc_entity(code)
    if entity is None:
        console.print(f"[red]Unknown DXCC entity code: {code}[/red]")
        raise typer.Exit(1)
    status = "[yellow]deleted[/yellow]" if entity.deleted else "current"
    prefix = entity.prefix or "-"
    console.print(f"{code}: [bold]{entity.name}[/bold] ({prefix}) {status}")


@app.command()
def find(filename: str = typer.Argument(..., help="ADI file name to look for")) -> None:
    """Load a file from the first directory on the search path that has it."""
    dirs = get_search_path()
    adif_file = AdifFile.from_search_path(filename, dirs)
    if not adif_file:
        console.print(f"{filename} not found (or empty) in: {', '.join(str(d) for d in dirs)}")
        raise typer.Exit(1)
    console.print(f"Loaded {len(adif_file)} records from {filename}")


@app.command()
def worked(
    src: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Log of earlier QSOs"),
    call: str = typer.Option(..., help="Callsign"),
    band: str = typer.Option(..., help="Band, e.g., 20m"),
    mode: str = typer.Option(..., help="Mode, e.g., CW"),
) -> None:
    """Report earlier QSOs and QSLs with a station."""
    tally = QslTally.from_records(_load(src, ["CALL", "BAND", "MODE", "QSL_RCVD"]))
    c, b, m = call.upper(), band.lower(), mode.upper()
    console.print(
        f"{c}: {tally.n_qsos(c)} QSOs, {tally.n_qsls(c)} QSLs; "
        f"{tally.n_qsos(c, b, m)} on {b} {m}"
        + (" [green](confirmed)[/green]" if tally.confirmed(c, b, m) else "")
    )


@awards_app.command("summary")
def awards_summary(
    src: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="ADI file"),
    band: Optional[str] = typer.Option(None, help="Filter QSOs by band before computing"),
    mode: Optional[str] = typer.Option(None, help="Filter QSOs by mode before computing"),
    json_out: bool = typer.Option(False, help="Output JSON"),
) -> None:
    """Compute and display awards-related counts and per-band grid stats."""
    records = filtered_records(_load(src), band=band, mode=mode)
    summary = compute_summary(records)
    if json_out:
        console.print_json(data=summary)
        return
    table = Table(title="Awards summary")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Total QSOs", str(summary["total_qsos"]))
    table.add_row("Confirmed QSOs", str(summary["confirmed_qsos"]))
    table.add_row("Unique calls", str(summary["unique_calls"]))
    table.add_row("Unique bands", str(summary["unique_bands"]))
    table.add_row("Unique modes", str(summary["unique_modes"]))
    table.add_row("DXCC entities worked", str(summary["unique_entities"]))
    table.add_row("DXCC entities confirmed", str(summary["confirmed_entities"]))
    table.add_row("Deleted entities worked", str(summary["deleted_entities"]))
    table.add_row("Unique grids", str(summary["unique_grids"]))
    for b, c in sorted(summary["grids_per_band"].items()):
        table.add_row(f"Grids on {b or 'unknown'}", str(c))
    console.print(table)


@awards_app.command("suggest")
def awards_suggest(
    src: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="ADI file"),
    band: Optional[str] = typer.Option(None, help="Filter QSOs by band before computing"),
    mode: Optional[str] = typer.Option(None, help="Filter QSOs by mode before computing"),
) -> None:
    """Show simple award suggestions (e.g., DXCC close) based on thresholds."""
    summary = compute_summary(filtered_records(_load(src), band=band, mode=mode))
    suggestions = suggest_awards(summary)
    if not suggestions:
        console.print("No award suggestions yet; keep logging!")
        return
    for s in suggestions:
        console.print(f"- {s}")


def main() -> None:  # pragma: no cover - exercised via CLI
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
