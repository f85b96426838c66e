"""anicat CLI — reconcile catalog video lists captured from the API."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from anicat.analyze import DEFAULT_PRIORITIES, analyze_title, explain_title, load_priority_table
from anicat.export import export_json, text_report
from anicat.export.m3u import export_m3u

app = typer.Typer(name="anicat", help="Episode reconciliation for multi-player video catalogs")
console = Console(stderr=True)


def load_videos(path_str: str) -> list[dict]:
    """Load a video list saved from the ``/anime/{id}/videos`` endpoint.

    Accepts either the API envelope ``{"response": [...]}`` or a bare list.
    """
    p = Path(path_str)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot read {p}: {e}")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] {p} is not valid JSON: {e}")
        raise typer.Exit(1)

    if isinstance(data, dict) and "response" in data:
        data = data["response"]
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        console.print(f"[red]Error:[/red] {p} does not contain a list of video records")
        raise typer.Exit(1)
    return data


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _analyze(videos_file: str, title: str | None, priorities: str | None, verbose: bool):
    """Common helper: load videos and priority table, run analysis."""
    _setup_logging(verbose)
    videos = load_videos(videos_file)
    table = DEFAULT_PRIORITIES
    if priorities:
        try:
            table = load_priority_table(priorities)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error:[/red] bad priority table: {e}")
            raise typer.Exit(1)
    return analyze_title(videos, title, priorities=table)


_TITLE_OPT = typer.Option(None, "--title", "-t", help="Catalog title id (enables per-title overrides)")
_PRIORITIES_OPT = typer.Option(
    None, "--priorities", help="JSON file mapping player names to priorities"
)
_VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Log selection decisions to stderr")


@app.command()
def scan(
    videos_file: str = typer.Argument(..., help="JSON file with the title's video list"),
    title: str = _TITLE_OPT,
    priorities: str = _PRIORITIES_OPT,
    output: str = typer.Option(None, "-o", "--output", help="Output JSON file path"),
    pretty: bool = typer.Option(True, "--pretty/--compact"),
    stdout: bool = typer.Option(False, "--stdout", help="Print JSON to stdout"),
    verbose: bool = _VERBOSE_OPT,
):
    """Reconcile episodes and emit the structured result as JSON."""
    analysis = _analyze(videos_file, title, priorities, verbose)
    json_str = export_json(analysis, path=output, pretty=pretty)
    if stdout or output is None:
        typer.echo(json_str)
    elif output:
        console.print(f"[green]Wrote:[/green] {output}")


@app.command()
def explain(
    videos_file: str = typer.Argument(..., help="JSON file with the title's video list"),
    title: str = _TITLE_OPT,
    priorities: str = _PRIORITIES_OPT,
    verbose: bool = _VERBOSE_OPT,
):
    """Explain why a player was chosen over the others."""
    analysis = _analyze(videos_file, title, priorities, verbose)
    typer.echo(explain_title(analysis))


@app.command()
def report(
    videos_file: str = typer.Argument(..., help="JSON file with the title's video list"),
    title: str = _TITLE_OPT,
    priorities: str = _PRIORITIES_OPT,
    verbose: bool = _VERBOSE_OPT,
):
    """Print the reconciled episode list per dubbing track."""
    analysis = _analyze(videos_file, title, priorities, verbose)
    typer.echo(text_report(analysis))


@app.command(name="playlist")
def playlist_cmd(
    videos_file: str = typer.Argument(..., help="JSON file with the title's video list"),
    out: str = typer.Option("./Playlists", "--out", help="Output directory"),
    title: str = _TITLE_OPT,
    priorities: str = _PRIORITIES_OPT,
    verbose: bool = _VERBOSE_OPT,
):
    """Generate one .m3u playlist per dubbing track."""
    analysis = _analyze(videos_file, title, priorities, verbose)

    created = export_m3u(analysis, out)
    for p in created:
        console.print(f"[green]Created:[/green] {p}")
    if not created:
        console.print("[yellow]No playable episodes found — no playlists generated.[/yellow]")


if __name__ == "__main__":
    app()
