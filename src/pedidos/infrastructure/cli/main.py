import click

from pedidos.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_show,
    order_status,
)
from pedidos.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from pedidos.infrastructure.config import configure_logging, load_settings


@click.group()
def cli() -> None:
    """Sistema de Pedidos: products, orders and stock."""
    configure_logging(load_settings())


@cli.command("init-db")
def init_db_command() -> None:
    """Create the database tables."""
    from pedidos.infrastructure.bootstrap import default_session_factory

    default_session_factory()
    click.echo("Database ready.")


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8080, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    from pedidos.infrastructure.web.app import create_app

    uvicorn.run(create_app(), host=host, port=port)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
