"""CLI commands for the Product entity."""

from __future__ import annotations

from uuid import UUID

import click

from stockroom.application.dto import ProductInput
from stockroom.application.result import Err, Ok, Result
from stockroom.domain.model.product import Product
from stockroom.infrastructure.bootstrap import product_service
from stockroom.infrastructure.config import Settings


def unwrap(result: Result):
    """Return the value of an ``Ok`` or turn an ``Err`` into a CLI error."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise click.ClickException(str(error))


def _display_product(product: Product) -> None:
    click.echo(f"ID:       {product.id}")
    click.echo(f"Name:     {product.name}")
    click.echo(f"Price:    {product.price:.2f}")
    click.echo(f"Quantity: {product.quantity}")


@click.command("list")
def product_list() -> None:
    """List all products."""
    with product_service(Settings.from_env()) as service:
        products = unwrap(service.get_all())

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>10} {'Qty':>6}")
    click.echo("-" * 76)
    for p in products:
        click.echo(f"{str(p.id):<36}  {p.name:<20} {p.price:>10.2f} {p.quantity:>6}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_show(product_id: UUID) -> None:
    """Show a single product."""
    with product_service(Settings.from_env()) as service:
        product = unwrap(service.get(product_id))
    _display_product(product)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=float, help="Price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
def product_add(name: str, price: float, quantity: int) -> None:
    """Add a new product."""
    data = ProductInput(name=name, price=price, quantity=quantity)
    with product_service(Settings.from_env()) as service:
        product = unwrap(service.create(data))

    click.echo(f"Product {product.id} '{product.name}' added")


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, type=float, help="New price; 0 is ignored.")
@click.option("--quantity", default=None, type=int, help="New quantity; 0 is ignored.")
def product_update(
    product_id: UUID, name: str | None, price: float | None, quantity: int | None
) -> None:
    """Update some fields of a product."""
    data = ProductInput(name=name, price=price, quantity=quantity)
    with product_service(Settings.from_env()) as service:
        product = unwrap(service.update(product_id, data))

    click.echo(f"Product {product.id} updated")
    _display_product(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_delete(product_id: UUID) -> None:
    """Delete a product (no error if it does not exist)."""
    with product_service(Settings.from_env()) as service:
        unwrap(service.delete(product_id))

    click.echo(f"Product {product_id} deleted")
