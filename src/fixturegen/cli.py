"""Typer-based command line interface for the value samplers.

Each command builds one seeded :class:`~fixturegen.sampling.ValueFactory` and
prints the sampled values as JSON on stdout.  Rules are passed inline as YAML
or JSON mappings, e.g. ``--rules '{minLength: 3, maxLength: 3}'``.

Exit codes
----------
0 success
2 usage error (reported by Typer)
4 configuration or rule error
5 sampling error (unsatisfiable bounds, exhausted unique items, unknown type)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .sampling import ValueFactory
from .utils.errors import SamplingError
from .utils.logging import configure

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="fixturegen",
    help="Seeded fixture values. Use 'fixturegen valid TYPE' to start.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _parse_rules(text: str | None, option: str) -> dict[str, Any]:
    """Parse an inline YAML/JSON mapping given to ``option``."""

    if not text:
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        _safe_exit(4, f"{option}: {str(exc).splitlines()[0]}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        _safe_exit(4, f"{option}: expected a mapping, got {type(data).__name__}")
    return data


def _session(
    config_path: Path | None, seed: int | None, verbose: bool
) -> tuple[ConfigModel, ValueFactory]:
    """Load configuration and build the factory for one invocation."""

    configure(verbose)
    try:
        cfg = load_config(config_path)
    except (ValidationError, ValueError, OSError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    factory = ValueFactory.from_config(cfg, seed=seed)
    if verbose:
        typer.echo(f"Seed {factory.seed}", err=True)
    return cfg, factory


def _emit(cfg: ConfigModel, payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=cfg.output.indent or None))


ConfigOption = typer.Option(None, "--config", help="YAML config to override defaults")
SeedOption = typer.Option(None, "--seed", help="Integer seed; random when omitted")
CountOption = typer.Option(1, "--count", "-n", min=1, help="Number of samples to draw")
RulesOption = typer.Option(None, "--rules", help="Item rules as an inline YAML/JSON mapping")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Report the seed on stderr")
TypeArgument = typer.Argument(..., metavar="TYPE", help="string, integer, number, boolean, ...")


@app.callback()
def main() -> None:
    """Entry point for the fixturegen command group."""
    pass


@app.command()
def valid(
    type_name: str = TypeArgument,
    rules: Optional[str] = RulesOption,
    count: int = CountOption,
    seed: Optional[int] = SeedOption,
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print ``count`` values of ``TYPE`` that satisfy ``--rules``."""

    item_rules = _parse_rules(rules, "--rules")
    cfg, factory = _session(config_path, seed, verbose)
    try:
        values = [factory.valid(type_name, item_rules) for _ in range(count)]
    except ValidationError as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    except SamplingError as exc:
        _safe_exit(5, str(exc))
    _emit(cfg, values)


@app.command()
def invalid(
    type_name: str = TypeArgument,
    rules: Optional[str] = RulesOption,
    seed: Optional[int] = SeedOption,
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the invalid records for ``TYPE`` under ``--rules``."""

    item_rules = _parse_rules(rules, "--rules")
    cfg, factory = _session(config_path, seed, verbose)
    try:
        records = factory.invalid(type_name, item_rules)
    except ValidationError as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    except SamplingError as exc:
        _safe_exit(5, str(exc))
    _emit(cfg, [record.to_dict() for record in records])


@app.command()
def array(
    type_name: str = typer.Argument(..., metavar="TYPE", help="Item type"),
    rules: Optional[str] = RulesOption,
    array_rules: Optional[str] = typer.Option(
        None, "--array-rules", help="minItems/maxItems/uniqueItems as an inline mapping"
    ),
    count: int = CountOption,
    seed: Optional[int] = SeedOption,
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print ``count`` arrays of ``TYPE`` items."""

    item_rules = _parse_rules(rules, "--rules")
    collection_rules = _parse_rules(array_rules, "--array-rules")
    cfg, factory = _session(config_path, seed, verbose)
    try:
        kind = factory.kind_of(type_name)
        arrays = [
            factory.valid_array(lambda: factory.valid(kind, item_rules), collection_rules)
            for _ in range(count)
        ]
    except ValidationError as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    except SamplingError as exc:
        _safe_exit(5, str(exc))
    _emit(cfg, arrays)
