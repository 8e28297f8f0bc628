from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict

import typer
import yaml

from .config import resolve_parameters
from .engine import NoWinnerError, first_winner, last_winner, winners
from .logging_setup import setup_logging
from .parse import InputFormatError, parse_input, read_input, read_text
from .serialize import build_report, build_run_meta, emit_report_json
from .verify import verify
from .version import __version__

app = typer.Typer(help="Bingo game simulator: first and last winning board scores")

logger = logging.getLogger(__name__)

EXIT_NO_RESULT = 1
EXIT_BAD_INPUT = 2


@app.callback(invoke_without_command=True)
def common_options(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show application version and exit", is_eager=True
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def _configure(config: str | None, cli_overrides: Dict[str, Any]) -> tuple[Dict[str, Any], str]:
    try:
        resolved, params_hash, _cfg_path_unused = resolve_parameters(
            config_path_str=config, cli_overrides=cli_overrides
        )
    except (OSError, ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Error: bad config: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT)
    setup_logging(
        level=str(resolved.get("log_level", "INFO")),
        log_file=resolved.get("log_file"),
        json_format=(str(resolved.get("log_format", "text")) == "json"),
        colors=str(resolved.get("colors", "auto")),
    )
    return resolved, params_hash


@app.command()
def solve(
    input_path: Path = typer.Argument(..., help="Path to the puzzle input file"),
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    out_report: str = typer.Option(None, "--out-report", help="report.json output path"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    colors: str = typer.Option(None, "--colors", help="auto|always|never"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARN|ERROR"),
    strict: bool = typer.Option(
        False, "--strict", help="Refuse inputs with mismatched shapes or repeated numbers"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite the report if it exists"),
) -> None:
    """Print the scores of the first and the last board to win."""

    cli_overrides: Dict[str, Any] = {}
    if out_report:
        cli_overrides["out_report"] = out_report
    if log_file:
        cli_overrides["log_file"] = log_file
    if colors:
        cli_overrides["colors"] = colors
    if log_level:
        cli_overrides["log_level"] = log_level
    if strict:
        cli_overrides["strict"] = True
    if force:
        cli_overrides["force"] = True

    resolved, params_hash = _configure(config, cli_overrides)

    typer.echo(f"Path: {input_path}")

    try:
        raw_text = read_text(input_path)
        draws, boards = parse_input(raw_text)
    except (OSError, InputFormatError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT)

    checks = verify(draws, boards)
    if bool(resolved.get("strict")) and not checks["ok"]:
        typer.echo("Error: input preconditions not met (see `check`)", err=True)
        raise typer.Exit(code=EXIT_NO_RESULT)

    try:
        task1 = first_winner(draws, boards)
        task2 = last_winner(draws, boards)
    except NoWinnerError as exc:
        logger.error("%s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_NO_RESULT)

    typer.echo(f"Task1: {task1}")
    typer.echo(f"Task2: {task2}")

    report_path = resolved.get("out_report")
    if report_path:
        report = build_report(
            run_meta=build_run_meta(
                app_version=__version__,
                params_hash=params_hash,
                input_path=str(input_path),
            ),
            raw_text=raw_text,
            draws=draws,
            boards=boards,
            checks=checks,
            wins=winners(draws, boards),
        )
        try:
            emit_report_json(
                Path(report_path),
                report=report,
                mkdirs=True,
                overwrite=bool(resolved.get("force")),
            )
        except FileExistsError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=EXIT_BAD_INPUT)
        logger.info("Report written to %s", report_path)

    raise typer.Exit(code=0)


@app.command()
def check(
    input_path: Path = typer.Argument(..., help="Path to the puzzle input file"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARN|ERROR"),
) -> None:
    """Report whether the input meets the simulation's preconditions."""
    _configure(None, {"log_level": log_level} if log_level else {})

    try:
        draws, boards = read_input(input_path)
    except (OSError, InputFormatError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT)

    checks = verify(draws, boards)
    for key in sorted(checks):
        typer.echo(f"{key}: {checks[key]}")
    raise typer.Exit(code=0 if checks["ok"] else EXIT_NO_RESULT)


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
