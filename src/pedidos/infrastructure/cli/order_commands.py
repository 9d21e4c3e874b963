"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from pedidos.application.create_order import CreateOrderHandler
from pedidos.application.delete_order import DeleteOrderHandler
from pedidos.application.dto import OrderDTO, OrderItemSpec
from pedidos.application.order_queries import OrderQueryHandler
from pedidos.application.update_order_status import UpdateOrderStatusHandler
from pedidos.domain.exceptions import DomainException
from pedidos.domain.model.order import OrderStatus
from pedidos.infrastructure.bootstrap import repositories


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product ID:quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            specs.append(OrderItemSpec(product_id=int(id_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    if dto.note:
        click.echo(f"Note:     {dto.note}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*56}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} "
            f"{item.unit_price:>12.2f} {item.total:>12.2f}"
        )
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Order Total':<30} {dto.total:>25.2f}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--note", default=None, help="Optional note.")
def order_create(customer: str, items: str, note: str | None) -> None:
    """Create a new order (takes the items out of stock)."""
    specs = _parse_items(items)

    try:
        with repositories() as repos:
            dto = CreateOrderHandler(repos.orders, repos.products).handle(
                customer_name=customer, item_specs=specs, note=note
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        with repositories() as repos:
            dto = OrderQueryHandler(repos.orders).get(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.argument("new_status", type=click.Choice([s.value for s in OrderStatus], case_sensitive=False))
def order_status(order_id: int, new_status: str) -> None:
    """Move an order to NEW_STATUS."""
    try:
        with repositories() as repos:
            dto = UpdateOrderStatusHandler(repos.orders).handle(
                order_id, OrderStatus(new_status.upper())
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete a pending order (gives its items back to stock)."""
    try:
        with repositories() as repos:
            DeleteOrderHandler(repos.orders, repos.products).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
