"""Command line interface for featname."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

import featname.plugins  # noqa: F401
from featname.config import CanonicalizeConfig
from featname.core.errors import FeatureNameError
from featname.core.extractor import option_summary
from featname.core.names import build_name_with_key
from featname.core.registry import EXTRACTORS
from featname.core.run import canonicalize_config
from featname.utils import load_yaml_mapping, save_json

LOG_LEVELS = click.Choice(["warning", "info", "debug"], case_sensitive=False)


def _configure_logging(log_level: str) -> None:
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING))


def _load_config(config_path: Path) -> CanonicalizeConfig:
    try:
        raw_config = load_yaml_mapping(config_path)
        return CanonicalizeConfig.model_validate(raw_config)
    except (ValidationError, ValueError) as exc:
        raise click.ClickException(f"Invalid configuration {config_path}:\n{exc}") from exc


@click.group()
def app() -> None:
    """Canonical names for parameterised feature extractors."""


@app.command()
@click.argument("config", type=click.Path(path_type=Path, exists=True, dir_okay=False))
@click.option(
    "--output",
    type=click.Path(path_type=Path, dir_okay=False, writable=True),
    default=None,
    help="Also write the resulting mapping to this JSON file.",
)
@click.option(
    "--log-level",
    type=LOG_LEVELS,
    default="warning",
    help="Set logging verbosity (warning/info/debug).",
)
def canonicalize(config: Path, output: Path | None, log_level: str) -> None:
    """Canonicalize the feature names described in a YAML configuration file."""
    _configure_logging(log_level)
    request = _load_config(config)
    try:
        names = canonicalize_config(request)
    except FeatureNameError as exc:
        raise click.ClickException(str(exc)) from exc
    except KeyError as exc:
        raise click.ClickException(exc.args[0]) from exc

    if output is not None:
        save_json(names, output)
        logging.info("Wrote %s", output)
    click.echo(json.dumps(names, indent=2))


@app.command("key")
@click.argument("name")
@click.argument("key")
@click.argument("value", type=float)
def key_name(name: str, key: str, value: float) -> None:
    """Qualify NAME with an aliased KEY and VALUE."""
    click.echo(build_name_with_key(name, key, value))


@app.command()
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit JSON instead of text.")
def extractors(as_json: bool) -> None:
    """List registered extractors and their options."""
    listing = {
        name: {
            "provided_features": list(cls.provided_features),
            "options": option_summary(cls.options),
        }
        for name, cls in sorted(EXTRACTORS.items())
    }
    if as_json:
        click.echo(json.dumps(listing, indent=2))
        return

    for name, entry in listing.items():
        click.echo(name)
        for option in entry["options"]:
            marker = "*" if option["feature_param"] else " "
            alias = f" ({option['alias']})" if option["alias"] else ""
            click.echo(
                f" {marker} {option['name']}{alias}: {option['kind']} = {option['default']}"
            )


@app.command()
def version() -> None:
    """Print featname version."""
    from featname import __version__

    click.echo(__version__)


if __name__ == "__main__":
    app(prog_name="featname")
