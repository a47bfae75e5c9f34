"""Command line interface for looking up integer sequences."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, TypeVar

import typer

from oeis_lookup import __version__
from oeis_lookup.clients.oeis import OEISClient
from oeis_lookup.config import Config
from oeis_lookup.lookup import NOT_FOUND_MESSAGE, extend_sequence, format_values, lookup_oeis
from oeis_lookup.logging_setup import configure_logging, get_logger
from oeis_lookup.models import SequenceEntry
from oeis_lookup.parsing.render import render_record
from oeis_lookup.utils.errors import ConfigError, DecodeError, TransportError

T = TypeVar("T")


class ExitCode(int):
    """Enumerated exit codes for the CLI."""

    OK = 0
    NOT_FOUND = 1
    TRANSPORT_ERROR = 2
    DECODE_ERROR = 3
    CONFIG_ERROR = 4
    USAGE_ERROR = 5


@dataclass
class CLIState:
    config: Config
    client: OEISClient


app = typer.Typer(help="Look up integer sequences in the OEIS.", no_args_is_help=True)

JSON_OPTION = typer.Option(False, "--json", help="Print the full entry as JSON.")
RAW_OPTION = typer.Option(False, "--raw", help="Print the entry in the tagged-line format.")


@app.callback()
def _configure(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the YAML configuration file.",
        dir_okay=False,
        resolve_path=True,
    ),
    overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override a configuration value, e.g. http.timeout=5 (repeatable).",
    ),
) -> None:
    """Load configuration and set up logging before any command runs."""

    if ctx.resilient_parsing or ctx.invoked_subcommand == "version":
        return
    try:
        config_model = Config.load(config, cli_overrides=Config.parse_cli_overrides(overrides))
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=ExitCode.CONFIG_ERROR) from exc

    settings = config_model.logging
    configure_logging(settings.level, settings.console_format, settings.log_file, force=True)
    ctx.obj = CLIState(config=config_model, client=OEISClient.from_config(config_model))


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state is not initialised")
    return state


def _run(action: Callable[[], T]) -> T:
    """Run ``action`` and translate library errors into exit codes."""

    logger = get_logger("oeis_lookup.cli")
    try:
        return action()
    except TransportError as exc:
        logger.error("lookup_failed", error=str(exc), status_code=exc.status_code)
        typer.echo(f"Could not reach the OEIS: {exc}", err=True)
        raise typer.Exit(code=ExitCode.TRANSPORT_ERROR) from exc
    except DecodeError as exc:
        logger.error("decode_failed", reason=exc.reason, line=exc.line)
        typer.echo(f"Could not decode the response: {exc}", err=True)
        raise typer.Exit(code=ExitCode.DECODE_ERROR) from exc


def _parse_terms(raw_terms: List[str]) -> list[int]:
    terms: list[int] = []
    for raw in raw_terms:
        for item in raw.replace(",", " ").split():
            try:
                terms.append(int(item))
            except ValueError as exc:
                typer.echo(f"Not an integer: {item}", err=True)
                raise typer.Exit(code=ExitCode.USAGE_ERROR) from exc
    return terms


def _echo_entry(entry: SequenceEntry | None, *, as_json: bool, raw: bool) -> None:
    if entry is None:
        typer.echo(NOT_FOUND_MESSAGE, err=True)
        raise typer.Exit(code=ExitCode.NOT_FOUND)
    if as_json:
        typer.echo(json.dumps(entry.to_dict(), indent=2))
    elif raw:
        typer.echo(render_record(entry), nl=False)
    else:
        typer.echo(f"{entry.catalog_id or '?'}: {entry.description}")
        typer.echo(format_values(entry.values))


@app.command("id")
def by_id(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., help="Catalog number, e.g. A000040."),
    as_json: bool = JSON_OPTION,
    raw: bool = RAW_OPTION,
) -> None:
    """Look up a sequence by its catalog number."""

    client = _state(ctx).client
    _echo_entry(_run(lambda: client.lookup_by_id(identifier)), as_json=as_json, raw=raw)


@app.command()
def search(
    ctx: typer.Context,
    text: List[str] = typer.Argument(..., help="Free-text query."),
    as_json: bool = JSON_OPTION,
    raw: bool = RAW_OPTION,
) -> None:
    """Search the database with a free-text query."""

    client = _state(ctx).client
    query = " ".join(text)
    _echo_entry(_run(lambda: client.search(query)), as_json=as_json, raw=raw)


@app.command()
def sequence(
    ctx: typer.Context,
    terms: List[str] = typer.Argument(..., help="Terms, separated by spaces or commas."),
    as_json: bool = JSON_OPTION,
    raw: bool = RAW_OPTION,
) -> None:
    """Find the first sequence containing the given terms."""

    client = _state(ctx).client
    values = _parse_terms(terms)
    _echo_entry(_run(lambda: client.lookup_by_values(values)), as_json=as_json, raw=raw)


@app.command()
def extend(
    ctx: typer.Context,
    terms: List[str] = typer.Argument(..., help="Known prefix of the sequence."),
) -> None:
    """Extend a sequence prefix with the terms of the first match."""

    client = _state(ctx).client
    values = _parse_terms(terms)
    typer.echo(format_values(_run(lambda: extend_sequence(values, client=client))))


@app.command()
def lookup(
    ctx: typer.Context,
    text: List[str] = typer.Argument(..., help="Terms or free text."),
) -> None:
    """Print the description and terms of the first match."""

    client = _state(ctx).client
    query = " ".join(text)
    for line in _run(lambda: lookup_oeis(query, client=client)):
        typer.echo(line)


@app.command()
def version() -> None:
    """Print the package version."""

    typer.echo(f"oeis-lookup {__version__}")


def main() -> None:
    """Entrypoint for ``python -m oeis_lookup.cli``."""

    app()


__all__ = ["ExitCode", "app", "main"]
