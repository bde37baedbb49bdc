from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ths.heuristics.analyze import analyze
from ths.heuristics.batch import analyze_files, write_results
from ths.ingest.load_text import collect_text_files, load_text
from ths.schemas.config import get_settings
from ths.schemas.report import Analysis

app = typer.Typer(help="Heuristic AI-vs-human text scorer")
console = Console()


def _read_input(text: str | None, file: Path | None) -> str:
    if file is not None:
        return load_text(file)
    if text is not None:
        return text
    if sys.stdin.isatty():
        raise ValueError("Provide TEXT, --file, or pipe text on stdin.")
    return sys.stdin.read()


def _features_table(analysis: Analysis) -> Table:
    table = Table(title="Features")
    table.add_column("Feature")
    table.add_column("Value", justify="right")
    for name, value in analysis.features.model_dump().items():
        table.add_row(name.replace("_", " "), f"{value:.3f}")
    return table


def _print_analysis(analysis: Analysis) -> None:
    score = analysis.score
    console.print(f"[bold blue]AI-generated:[/] {score.ai_percentage}%")
    console.print(f"[bold green]Human-written:[/] {score.human_percentage}%")
    console.print(f"Confidence: {score.confidence}")
    console.print(_features_table(analysis))
    console.print(f"Points: ai={score.ai_points} human={score.human_points}")
    for signal in score.signals:
        console.print(f"- {signal}")


@app.command()
def info() -> None:
    """Print a quick reminder of what the scorer does."""
    console.print(
        "[bold]ths[/] scores text between AI-generated and human-written.\n"
        "- Features: sentence length variance, average sentence length, vocabulary\n"
        "  diversity, repetition, conjunction rate, punctuation density, structure.\n"
        "- Fixed threshold rules award AI or human points, normalized to percentages.\n"
        "Results are heuristic and not calibrated probabilities."
    )


@app.command(name="analyze")
def analyze_cmd(
    text: str | None = typer.Argument(
        None, help="Text to analyze. Reads stdin when neither TEXT nor --file is given."
    ),
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Read the text from a UTF-8 file instead."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the analysis as JSON."
    ),
) -> None:
    """Score a single text."""
    try:
        raw = _read_input(text, file)
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Failed to read input:[/] {exc}")
        raise typer.Exit(code=1)

    analysis = analyze(raw)
    if analysis is None:
        if as_json:
            console.print_json("null")
        else:
            console.print("[yellow]Nothing to analyze:[/] input is blank.")
        return

    if as_json:
        console.print_json(data=analysis.model_dump(mode="json"))
        return

    min_chars = get_settings().min_recommended_chars
    if len(raw) < min_chars:
        console.print(
            f"[yellow]Short input ({len(raw)} chars);[/] at least {min_chars} "
            "characters give steadier results."
        )
    _print_analysis(analysis)


@app.command(name="batch")
def batch_cmd(
    input_path: Path = typer.Argument(
        ..., exists=True, help="A text file or a directory of *.txt files."
    ),
    output_json: Path = typer.Option(
        Path("results.json"), "--output", "-o", help="Where to write the JSON results."
    ),
) -> None:
    """Score every text file under a path and write the results as JSON."""
    try:
        paths = collect_text_files(input_path)
        results = analyze_files(paths)
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Batch analysis failed:[/] {exc}")
        raise typer.Exit(code=1)

    try:
        write_results(results, output_json)
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Failed to write results:[/] {exc}")
        raise typer.Exit(code=1)

    table = Table(title="Batch results")
    table.add_column("File")
    table.add_column("AI %", justify="right")
    table.add_column("Human %", justify="right")
    for result in results:
        if result.analysis is None:
            table.add_row(result.path.name, "-", "-")
        else:
            score = result.analysis.score
            table.add_row(
                result.path.name, str(score.ai_percentage), str(score.human_percentage)
            )
    console.print(table)

    scored = sum(1 for r in results if r.analysis is not None)
    console.print(f"Files analyzed: {len(results)}")
    console.print(f"Files scored: {scored}")
    console.print(f"Results written to: {output_json}")


if __name__ == "__main__":
    app()
