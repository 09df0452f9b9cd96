import logging
from pathlib import Path

import click

from beerstock.infrastructure.bootstrap import DATA_DIR_ENV
from beerstock.infrastructure.cli.beer_commands import (
    beer_create,
    beer_decrement,
    beer_delete,
    beer_increment,
    beer_list,
    beer_show,
)


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding beers.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Beerstock — beer inventory with bounded stock"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


@cli.group()
def beer() -> None:
    """Manage beers and their stock."""


# Register subcommands
beer.add_command(beer_create)
beer.add_command(beer_decrement)
beer.add_command(beer_delete)
beer.add_command(beer_increment)
beer.add_command(beer_list)
beer.add_command(beer_show)
