"""Command-line entry point for settingstree."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml
from omegaconf.errors import OmegaConfBaseException

from settingstree import get_version
from settingstree.config import load_config
from settingstree.lexer import MalformedIndentationError
from settingstree.reporting.report import emit_report, export_json
from settingstree.settings import KEY_SEPARATOR, KeyNotFoundError, Settings
from settingstree.sources import NoFileLoadedError

app = typer.Typer(help="settingstree: parse indentation-structured settings files.")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"settingstree {get_version()}")
        raise typer.Exit()


def _split_key_path(key: str | None) -> tuple[str, ...]:
    if not key:
        return ()
    return tuple(part.strip() for part in key.split(KEY_SEPARATOR))


@app.command()
def main(
    files: list[Path] | None = typer.Argument(
        None,
        help="Settings files to try in order; the first that opens is parsed.",
    ),
    key: str | None = typer.Option(
        None,
        "--key",
        "-k",
        help="Colon-separated key path to look up (e.g. 'foo:bang:biz').",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    export: Path | None = typer.Option(None, "--export-json", help="Optional JSON export path."),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject children indented more than one level below their parent.",
    ),
    encoding: str | None = typer.Option(None, "--encoding", help="Text encoding of settings files."),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional YAML file with loader options (candidates, encoding, strict_levels).",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, ...)."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the installed version and exit.",
    ),
) -> None:
    """Load the first readable settings file and print a value or the whole tree."""
    _configure_logging(log_level)

    try:
        config = load_config(
            config_path=config_file,
            overrides={"encoding": encoding, "strict_levels": True if strict else None},
        )
    except (OSError, ValueError, yaml.YAMLError, OmegaConfBaseException) as exc:
        raise typer.BadParameter(str(exc)) from exc
    settings = Settings(config)
    keys = _split_key_path(key)

    try:
        settings.load(*(files or ()))
        value = settings.get(*keys)
    except (NoFileLoadedError, MalformedIndentationError, KeyNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except UnicodeDecodeError as exc:
        typer.secho(
            f"Settings file is not valid {config.encoding}: {exc.reason} at byte {exc.start}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1) from exc

    logging.getLogger(__name__).info("Read %s from %s", KEY_SEPARATOR.join(keys) or "all settings", settings.path)
    emit_report(value, keys, as_json=as_json)
    if export:
        export_json(value, export)


if __name__ == "__main__":  # pragma: no cover
    app()
