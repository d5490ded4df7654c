"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/cli.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .api import build_chart, load_dataset, run_job, summarize
from .config import effective_style_mapping, list_style_presets, load_job, resolve_style
from .core import BubbleChartError
from .core.logging_setup import configure_logging
from .outputs import default_output_path, write_chart
from .runtime import initialize_runtime

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help=(
        "Render a vehicle bubble chart (horsepower vs. retail price, sized by weight,\n"
        "colored by type) from a CSV file or URL.\n\n"
        "\b\n"
        "Use `bubblechart render <csv>` for ad-hoc runs,\n"
        "`bubblechart job run <job.yaml>` for configured runs."
    ),
)
console = Console()


@app.callback()
def _root(verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="More logs (repeatable).")):
    configure_logging(verbose)


def _fail(e: BubbleChartError) -> None:
    console.print(f"[red]{escape(str(e))}[/]")
    raise typer.Exit(code=2)


# ---- direct (ad-hoc) commands ------------------------------------------------


@app.command(help="Render the chart from a CSV path or URL.")
def render(
    source: str = typer.Argument(..., help="CSV path or URL."),
    out: Optional[Path] = typer.Option(
        None, "--out", "-o", help="Output file (default: <csv stem>_bubble.<fmt> beside the CSV)."
    ),
    fmt: Optional[str] = typer.Option(None, "--fmt", help="svg|png|pdf (default: from --out suffix, else svg)."),
    preset: Optional[str] = typer.Option(None, "--preset", help="Style preset name or YAML path."),
    show: bool = typer.Option(False, "--show", help="Open an interactive window with hover tooltips."),
) -> None:
    initialize_runtime(headless=not show)
    try:
        chart = build_chart(source, preset=preset)
        with chart:
            if out is not None or not show:
                target = out if out is not None else default_output_path(source, fmt or "svg")
                written = write_chart(chart, target, fmt)
                console.print(f"[green]Wrote[/] {written}")
            if show:
                chart.show()
    except BubbleChartError as e:
        _fail(e)


@app.command(help="Load and validate a CSV, then print counts, domains and type colors.")
def inspect(source: str = typer.Argument(..., help="CSV path or URL.")) -> None:
    try:
        summary = summarize(load_dataset(source))
    except BubbleChartError as e:
        _fail(e)
        return

    table = Table(title=f"bubblechart: {summary['source']}", show_header=True, header_style="bold")
    table.add_column("field")
    table.add_column("value")
    table.add_row("rows read", str(summary["rows_read"]))
    table.add_row("kept", str(summary["kept"]))
    table.add_row("dropped", str(summary["dropped"]))
    table.add_row("horsepower (nice)", "{:g} .. {:g}".format(*summary["horsepower_domain"]))
    table.add_row("retail price (nice)", "{:g} .. {:g}".format(*summary["price_domain"]))
    table.add_row("weight", "{:g} .. {:g}".format(*summary["weight_domain"]))
    console.print(table)

    types = Table(title="types", show_header=True, header_style="bold")
    types.add_column("type")
    types.add_column("color")
    for label, color in summary["types"]:
        types.add_row(label, f"[{color}]■[/] {color}")
    console.print(types)


# ---- job commands ------------------------------------------------------------

job_app = typer.Typer(no_args_is_help=True, help="Run and validate job YAML files.")
app.add_typer(job_app, name="job")


@job_app.command("run", help="Render the chart described by a job file.")
def job_run(job: Path = typer.Argument(..., help="Job YAML path.")) -> None:
    initialize_runtime(headless=True)
    try:
        written = run_job(job)
    except BubbleChartError as e:
        _fail(e)
        return
    console.print(f"[green]Wrote[/] {written}")


@job_app.command("validate", help="Validate a job file and its style (no rendering).")
def job_validate(job: Path = typer.Argument(..., help="Job YAML path.")) -> None:
    try:
        cfg = load_job(job)
        resolve_style(preset=cfg.job.style.preset, overrides=cfg.job.style.overrides)
    except BubbleChartError as e:
        _fail(e)
        return
    console.log(f"job: {cfg.job.name}")
    console.log(f"input: {cfg.input_source()}")
    console.log(f"output: {cfg.output_path()}")
    console.log(f"style.preset: {cfg.job.style.preset}")
    console.print("[green]OK[/]")


# ---- style inspection commands -----------------------------------------------

style_app = typer.Typer(no_args_is_help=True, help="Inspect style presets.")
app.add_typer(style_app, name="style")


@style_app.command("show", help="Print the effective style as YAML (default) or JSON.")
def style_show(
    preset: Optional[str] = typer.Option(None, "--preset", help="Preset name/path applied on top of default."),
    as_json: bool = typer.Option(False, "--json", help="Output JSON instead of YAML."),
) -> None:
    try:
        mapping = resolve_style(preset=preset).to_mapping()
    except BubbleChartError as e:
        _fail(e)
        return
    if as_json:
        typer.echo(json.dumps(mapping, indent=2, sort_keys=True))
    else:
        typer.echo(yaml.safe_dump(mapping, sort_keys=False))


@style_app.command("list", help="List available style presets.")
def style_list() -> None:
    presets = list_style_presets()
    if not presets:
        typer.echo("No style presets found.")
        return
    for name in presets:
        typer.echo(name)


@style_app.command("diff", help="Print only the keys a preset changes relative to default.")
def style_diff(preset: str = typer.Argument(..., help="Preset name or YAML path.")) -> None:
    try:
        base = effective_style_mapping()
        merged = effective_style_mapping(preset=preset)
    except BubbleChartError as e:
        _fail(e)
        return
    changed = {k: v for k, v in merged.items() if base.get(k) != v}
    typer.echo(yaml.safe_dump(changed, sort_keys=True) if changed else "{}")
