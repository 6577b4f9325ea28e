"""Message catalog commands: validate and show."""

from pathlib import Path

import click
import yaml

from shapeguard.errors import CatalogError
from shapeguard.messages import (
    DEFAULT_CATALOG,
    SCHEMA_TYPES,
    load_catalog_data,
    validate_catalog_data,
)


@click.group()
def catalog():
    """Message catalog commands."""
    pass


@catalog.command()
@click.argument("catalog_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(catalog_file: Path):
    """Validate a message catalog YAML file."""
    try:
        data = load_catalog_data(catalog_file)
    except CatalogError as exc:
        click.echo(click.style(f"[ERROR] {exc}", fg="red"))
        raise SystemExit(1)

    issues = validate_catalog_data({} if data is None else data)
    for issue in issues:
        click.echo(click.style(f"[ERROR] {catalog_file}: {issue}", fg="red"))

    if issues:
        click.echo(f"\n{len(issues)} issue(s) found.")
        raise SystemExit(1)

    click.echo(click.style(f"{catalog_file} is a valid message catalog.", fg="green"))


@catalog.command()
@click.option(
    "--type",
    "schema_type",
    type=click.Choice(SCHEMA_TYPES),
    default=None,
    help="Only show messages for one schema type.",
)
def show(schema_type: str | None):
    """Print the built-in messages as YAML."""
    data = DEFAULT_CATALOG.to_dict()
    if schema_type is not None:
        data = {schema_type: data[schema_type]}
    click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)
