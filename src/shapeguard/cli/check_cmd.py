"""The ``check`` command: parse a JSON/YAML document with a schema."""

import importlib
import json
import logging
from pathlib import Path
from typing import Any

import click
import yaml

from shapeguard.coercion import to_json_text
from shapeguard.errors import CatalogError
from shapeguard.messages import load_catalog
from shapeguard.types import Schema

logger = logging.getLogger(__name__)


def resolve_schema(reference: str, catalog_path: Path | None = None) -> Schema:
    """Import ``module:attribute`` and return the schema it names.

    The attribute may be a schema instance or a callable returning one.
    A catalog file is passed to such callables as ``catalog=``; it cannot
    be applied to an already-built instance.

    Raises:
        click.BadParameter: If the reference cannot be resolved
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(
            f"expected 'module:attribute', got '{reference}'", param_hint="--schema"
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(
            f"cannot import module '{module_name}': {exc}", param_hint="--schema"
        ) from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise click.BadParameter(
                f"'{module_name}' has no attribute '{attr_path}'", param_hint="--schema"
            ) from exc

    if isinstance(target, Schema):
        if catalog_path is not None:
            raise click.BadParameter(
                "--catalog needs a schema factory, but the reference is a built schema",
                param_hint="--catalog",
            )
        return target

    if callable(target):
        if catalog_path is not None:
            try:
                catalog = load_catalog(catalog_path)
            except CatalogError as exc:
                raise click.BadParameter(str(exc), param_hint="--catalog") from exc
            target = target(catalog=catalog)
        else:
            target = target()

    if not isinstance(target, Schema):
        raise click.BadParameter(
            f"'{reference}' is not a schema (got {type(target).__name__})",
            param_hint="--schema",
        )
    return target


def load_document(path: Path) -> Any:
    """Load a data file: ``.json`` as JSON, anything else as YAML."""
    try:
        with path.open() as fh:
            if path.suffix.lower() == ".json":
                return json.load(fh)
            return yaml.safe_load(fh)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise click.BadParameter(f"cannot parse {path}: {exc}", param_hint="DATA_FILE") from exc


@click.command()
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--schema",
    "schema_ref",
    required=True,
    help="Schema to apply, as 'module:attribute' (an instance or a factory).",
)
@click.option(
    "--catalog",
    "catalog_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Message catalog YAML passed to the schema factory.",
)
def check(data_file: Path, schema_ref: str, catalog_path: Path | None):
    """Validate DATA_FILE and print the result as JSON."""
    schema = resolve_schema(schema_ref, catalog_path)
    document = load_document(data_file)

    result = schema.parse(document)
    click.echo(to_json_text(result.to_dict(), indent=2))

    if not result.success:
        logger.debug("%s failed with %d error(s)", data_file, len(result.errors))
        raise SystemExit(1)
