"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pedidos.application.add_product import AddProductHandler
from pedidos.application.product_queries import ProductQueryHandler
from pedidos.application.update_product import UpdateProductHandler
from pedidos.domain.exceptions import DomainException
from pedidos.infrastructure.bootstrap import repositories


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Units in stock.")
@click.option("--description", default=None, help="Optional description.")
def product_add(name: str, price: str, stock: int, description: str | None) -> None:
    """Add a new product to the catalog."""
    try:
        with repositories() as repos:
            product = AddProductHandler(repos.products).handle(
                name=name, price=price, stock_quantity=stock, description=description
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at R$ {product.price:.2f} "
        f"({product.stock_quantity} in stock)"
    )


@click.command("list")
@click.option("--name", "fragment", default=None, help="Only products whose name contains this.")
def product_list(fragment: str | None) -> None:
    """List products in the catalog."""
    with repositories() as repos:
        handler = ProductQueryHandler(repos.products)
        products = handler.search_by_name(fragment) if fragment else handler.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>12} {'Stock':>7}")
    click.echo("-" * 52)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {'R$ ' + format(p.price, '.2f'):>12} {p.stock_quantity:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name (keeps current if omitted).")
@click.option("--price", default=None, help="New price (keeps current if omitted).")
@click.option("--stock", default=None, type=int, help="New stock quantity (keeps current if omitted).")
@click.option("--description", default=None, help="New description (keeps current if omitted).")
def product_update(
    product_id: int,
    name: str | None,
    price: str | None,
    stock: int | None,
    description: str | None,
) -> None:
    """Update a product; unspecified fields keep their current values."""
    try:
        with repositories() as repos:
            current = ProductQueryHandler(repos.products).get(product_id)
            product = UpdateProductHandler(repos.products).handle(
                product_id=product_id,
                name=name if name is not None else current.name,
                price=price if price is not None else current.price,
                stock_quantity=stock if stock is not None else current.stock_quantity,
                description=description if description is not None else current.description,
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated")
