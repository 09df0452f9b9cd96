"""CLI commands for the Beer aggregate."""

from __future__ import annotations

import click

from beerstock.application.dto import BeerSpec
from beerstock.domain.exceptions import DomainException
from beerstock.domain.model.beer import Beer, BeerType
from beerstock.infrastructure.bootstrap import beer_service


def _display_beer(beer: Beer) -> None:
    click.echo(f"Beer #{beer.id}  {beer.name}")
    click.echo(f"Brand:    {beer.brand}")
    click.echo(f"Type:     {beer.type.value}")
    click.echo(f"Stock:    {beer.quantity} / {beer.max}")


@click.command("create")
@click.option("--name", required=True, help="Beer name (must be unique).")
@click.option("--brand", required=True, help="Brand name.")
@click.option(
    "--type", "beer_type", required=True,
    type=click.Choice([t.value for t in BeerType], case_sensitive=False),
    help="Beer style.",
)
@click.option("--max", "max_", required=True, type=int, help="Stock capacity (up to 500).")
@click.option("--quantity", required=True, type=int, help="Initial stock (up to 100).")
@click.pass_obj
def beer_create(data_dir, name: str, brand: str, beer_type: str, max_: int, quantity: int) -> None:
    """Register a new beer."""
    service = beer_service(data_dir)
    spec = BeerSpec(name=name, brand=brand, type=beer_type, max=max_, quantity=quantity)

    try:
        beer = service.create_beer(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{beer.id} '{beer.name}' created  (stock={beer.quantity}/{beer.max})")


@click.command("show")
@click.option("--name", required=True, help="Exact beer name.")
@click.pass_obj
def beer_show(data_dir, name: str) -> None:
    """Show details of a beer."""
    try:
        beer = beer_service(data_dir).find_by_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_beer(beer)


@click.command("list")
@click.pass_obj
def beer_list(data_dir) -> None:
    """List all registered beers."""
    beers = beer_service(data_dir).list_all()

    if not beers:
        click.echo("No beers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Brand':<16} {'Type':<9} {'Stock':>9}")
    click.echo("-" * 64)
    for b in beers:
        stock = f"{b.quantity}/{b.max}"
        click.echo(f"{b.id:<6} {b.name:<20} {b.brand:<16} {b.type.value:<9} {stock:>9}")


@click.command("delete")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID to delete.")
@click.pass_obj
def beer_delete(data_dir, beer_id: int) -> None:
    """Delete a beer."""
    try:
        beer_service(data_dir).delete_by_id(beer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{beer_id} deleted.")


@click.command("increment")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID.")
@click.option("--amount", required=True, type=int, help="Units to add (up to 100).")
@click.pass_obj
def beer_increment(data_dir, beer_id: int, amount: int) -> None:
    """Add stock to a beer, up to its capacity."""
    try:
        beer = beer_service(data_dir).increment(beer_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{beer.id} stock is now {beer.quantity}/{beer.max}")


@click.command("decrement")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID.")
@click.option("--amount", required=True, type=int, help="Units to remove (up to 100).")
@click.pass_obj
def beer_decrement(data_dir, beer_id: int, amount: int) -> None:
    """Remove stock from a beer, never below zero."""
    try:
        beer = beer_service(data_dir).decrement(beer_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{beer.id} stock is now {beer.quantity}/{beer.max}")
