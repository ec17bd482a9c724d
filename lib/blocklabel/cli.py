"""Command line interface for blocklabel."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

import click
import yaml
from pydantic import ValidationError

from blocklabel import plugins  # noqa: F401
from blocklabel.config import GeneratorConfig
from blocklabel.core import BlockDescriptionGenerator, LabelError
from blocklabel.oracles import build_oracle
from blocklabel.utils import build_prefix, read_label_file


def _load_config(config_path: Path | None) -> GeneratorConfig:
    if config_path is None:
        return GeneratorConfig()
    try:
        return GeneratorConfig.from_yaml(config_path)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Malformed YAML in {config_path}:\n{exc}") from exc
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration in {config_path}:\n{exc}") from exc


@click.group()
def app() -> None:
    """Generate unique block content descriptions."""


@app.command()
@click.argument("text")
def prefix(text: str) -> None:
    """Print the acronym prefix derived from TEXT."""
    click.echo(build_prefix(text))


@app.command()
@click.argument("title")
@click.option("--config", "config_path", type=click.Path(path_type=Path, exists=True, dir_okay=False), default=None)
@click.option("--bundle", type=str, default=None, help="Block type machine name, resolved through the config.")
@click.option("--bundle-label", type=str, default=None, help="Block type human label; overrides --bundle.")
@click.option("--existing", "existing", multiple=True, help="Label already in use (repeatable).")
@click.option(
    "--existing-file",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help="File listing labels already in use, one per line.",
)
@click.option("--max-attempts", type=click.IntRange(min=1), default=None, help="Override the configured cap.")
@click.option(
    "--force/--no-force",
    default=False,
    help="Generate even when generate_custom_block_title is disabled in the config.",
)
@click.option(
    "--log-level",
    type=click.Choice(["warning", "info", "debug"], case_sensitive=False),
    default="warning",
    help="Set logging verbosity (warning/info/debug).",
)
def generate(
    title: str,
    config_path: Path | None,
    bundle: str | None,
    bundle_label: str | None,
    existing: Tuple[str, ...],
    existing_file: Path | None,
    max_attempts: int | None,
    force: bool,
    log_level: str,
) -> None:
    """Print a unique description for a block titled TITLE."""
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING))

    if bundle is None and bundle_label is None:
        raise click.ClickException("Provide --bundle or --bundle-label.")

    config = _load_config(config_path)
    if not (config.generate_custom_block_title or force):
        raise click.ClickException(
            "Description generation is disabled (generate_custom_block_title is false). Use --force to override."
        )
    if max_attempts is not None:
        config = config.model_copy(update={"max_attempts": max_attempts})

    extra: List[str] = list(existing)
    if existing_file is not None:
        try:
            extra.extend(read_label_file(existing_file))
        except UnicodeDecodeError as exc:
            raise click.ClickException(f"{existing_file} is not valid UTF-8: {exc}") from exc

    try:
        exists = build_oracle(config.oracle, extra_labels=extra)
    except (KeyError, ValueError, FileNotFoundError) as exc:
        raise click.ClickException(str(exc).strip("'\"")) from exc

    generator = BlockDescriptionGenerator.from_config(config, exists)
    try:
        if bundle_label is not None:
            description = generator.create_description(bundle_label, title)
        else:
            description = generator.describe_bundle(bundle, title)
    except LabelError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(description)


@app.command()
def version() -> None:
    """Print blocklabel version."""
    from blocklabel import __version__

    click.echo(__version__)


if __name__ == "__main__":
    app(prog_name="blocklabel")
