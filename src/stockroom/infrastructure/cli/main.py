import click
import uvicorn

from stockroom.application.seed import seed_products
from stockroom.infrastructure.bootstrap import product_service
from stockroom.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
    unwrap,
)
from stockroom.infrastructure.config import Settings
from stockroom.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """Stockroom — product inventory service"""
    setup_logging(Settings.from_env().log_level)


@cli.command()
@click.option("--host", default=None, help="Bind address (default: STOCKROOM_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: STOCKROOM_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    from stockroom.infrastructure.web.app import create_app

    settings = Settings.from_env()
    uvicorn.run(
        create_app(settings=settings),
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


@cli.command()
@click.option("--count", default=None, type=int, help="Products to create (default: STOCKROOM_SEED_COUNT).")
def seed(count: int | None) -> None:
    """Fill the store with synthetic products."""
    settings = Settings.from_env()
    count = settings.seed_count if count is None else count
    with product_service(settings) as service:
        created = unwrap(seed_products(service, count))

    for p in created:
        click.echo(f"{p.id}  {p.name}")
    click.echo(f"Seeded {len(created)} products.")


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
