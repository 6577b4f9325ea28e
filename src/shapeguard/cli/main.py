"""shapeguard CLI entry point."""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool):
    """shapeguard: validate data files against schemas."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from shapeguard.cli.catalog_cmd import catalog  # noqa: E402
from shapeguard.cli.check_cmd import check  # noqa: E402

cli.add_command(catalog)
cli.add_command(check)
