"""Typer CLI entrypoint for cwdsurv."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd
import typer

from .config import DEFAULT_CONFIG_FILENAME, DashboardConfig, load_config
from .dashboard import DashboardSession
from .exceptions import ConfigError, CwdError
from .logging import configure_logging
from .retrieval import RetrievalFailure, build_sources
from .views import ViewError


EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 2
EXIT_IO_ERROR = 4
EXIT_CONFIG_ERROR = 5


app = typer.Typer(help="CWD surveillance dashboard data tools")


@dataclass
class CliContext:
    config: DashboardConfig
    source_file: Optional[Path]
    offline: bool


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        help=f"Path to configuration file (defaults to ./{DEFAULT_CONFIG_FILENAME} if present)",
    ),
    source_file: Optional[Path] = typer.Option(
        None,
        "--source-file",
        "-f",
        dir_okay=False,
        help="Local ArcGIS JSON export to use as the fallback source",
    ),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Skip the API and read only the local source",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides the configuration file)",
    ),
) -> None:
    """Load configuration shared by every command."""

    if config_path is None and Path(DEFAULT_CONFIG_FILENAME).is_file():
        config_path = Path(DEFAULT_CONFIG_FILENAME)

    try:
        config = load_config(config_path) if config_path else DashboardConfig()
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(EXIT_CONFIG_ERROR) from exc

    configure_logging(log_level or config.logging.level)
    ctx.obj = CliContext(config=config, source_file=source_file, offline=offline)


def _open_session(
    ctx: typer.Context,
    year: Optional[str],
    region: Optional[str],
    result: Optional[str],
    page_size: Optional[int] = None,
) -> DashboardSession:
    options: CliContext = ctx.obj
    config = options.config
    if page_size is not None:
        config = config.model_copy(
            update={"table": config.table.model_copy(update={"page_size": page_size})}
        )
    sources = build_sources(config, offline=options.offline, source_file=options.source_file)

    try:
        session = DashboardSession.load(sources, config)
        session.filters.set("year", year)
        session.filters.set("region", region)
        session.filters.set("result", result)
        session.update_all()
    except RetrievalFailure as exc:
        typer.echo(f"Failed to load CWD data: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc
    except CwdError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_USAGE_ERROR) from exc
    return session


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


@app.command("summary")
def summary_command(
    ctx: typer.Context,
    year: Optional[str] = typer.Option(None, "--year", help="Permit year filter"),
    region: Optional[str] = typer.Option(None, "--region", help="County name filter"),
    result: Optional[str] = typer.Option(None, "--result", help="Test result filter"),
) -> None:
    """Print summary counts for the filtered samples."""

    session = _open_session(ctx, year, region, result)
    _echo_json(
        {
            "samples": session.count_label,
            "filters": dict(session.filters.predicates),
            "summary": session.summary.as_dict(),
        }
    )


@app.command("table")
def table_command(
    ctx: typer.Context,
    year: Optional[str] = typer.Option(None, "--year", help="Permit year filter"),
    region: Optional[str] = typer.Option(None, "--region", help="County name filter"),
    result: Optional[str] = typer.Option(None, "--result", help="Test result filter"),
    sort: Optional[str] = typer.Option(None, "--sort", help="Column key to sort by"),
    descending: bool = typer.Option(False, "--descending", help="Sort in descending order"),
    search: Optional[str] = typer.Option(None, "--search", help="Free-text search term"),
    page: int = typer.Option(1, "--page", min=1, help="Page number to show"),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Rows per page"),
) -> None:
    """Print one page of the samples table."""

    if descending and not sort:
        typer.echo("Error: --descending requires --sort", err=True)
        raise typer.Exit(EXIT_USAGE_ERROR)

    session = _open_session(ctx, year, region, result, page_size)
    table = session.table
    try:
        if search:
            table.search(search)
        if sort:
            table.sort_by(sort)
            if descending:
                table.sort_by(sort)
    except ViewError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_USAGE_ERROR) from exc

    for _ in range(page - 1):
        table.next_page()
    _echo_json(table.render().as_dict())


@app.command("groups")
def groups_command(
    ctx: typer.Context,
    year: Optional[str] = typer.Option(None, "--year", help="Permit year filter"),
    result: Optional[str] = typer.Option(None, "--result", help="Test result filter"),
    metric: Optional[str] = typer.Option(None, "--metric", help="Map metric to report"),
) -> None:
    """Print per-county outcome counts and the active map metric."""

    session = _open_session(ctx, year, None, result)
    if metric:
        try:
            session.set_metric(metric)
        except ViewError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(EXIT_USAGE_ERROR) from exc

    _echo_json(
        {
            "metric": session.map.metric,
            "groups": [group.as_dict() for group in session.map.groups],
            "values": session.map.region_values(),
            "max_value": session.map.max_value(),
        }
    )


@app.command("years")
def years_command(ctx: typer.Context) -> None:
    """List permit years available for filtering."""

    session = _open_session(ctx, None, None, None)
    _echo_json({"years": session.year_options})


@app.command("export")
def export_command(
    ctx: typer.Context,
    out: Path = typer.Option(..., "--out", "-o", dir_okay=False, help="CSV file to write"),
    year: Optional[str] = typer.Option(None, "--year", help="Permit year filter"),
    region: Optional[str] = typer.Option(None, "--region", help="County name filter"),
    result: Optional[str] = typer.Option(None, "--result", help="Test result filter"),
    search: Optional[str] = typer.Option(None, "--search", help="Free-text search term"),
) -> None:
    """Write the filtered table rows to CSV."""

    session = _open_session(ctx, year, region, result)
    table = session.table
    table.search(search)

    records: List[dict] = []
    for record in table.rows:
        row = {"id": record.id}
        for column in table.columns:
            row[column.label] = column.display_text(getattr(record, column.key))
        records.append(row)
    df = pd.DataFrame(records, columns=["id", *[column.label for column in table.columns]])

    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out, index=False)
    except OSError as exc:
        typer.echo(f"Failed to write {out}: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    _echo_json({"output": str(out), "rows": len(records)})
