"""CLI commands for placed orders."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.render_receipt import RenderReceiptHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import ACTIONS, UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import order_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} ({dto.customer_id})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<31} {dto.subtotal:>20}")
    if dto.discount:
        click.echo(f"  {'Discount ' + dto.discount:<31} {'-' + dto.savings:>20}")
    click.echo(f"  {'Order Total':<31} {dto.total:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--customer", "customer_id", default=None, help="Only this customer's orders.")
@click.option(
    "--status",
    default=None,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="Only orders in this status.",
)
@click.option("--search", default=None, help="Match order ID, customer or item name.")
def order_list(customer_id: str | None, status: str | None, search: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(customer_id=customer_id, status=status, search=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<8} {'Customer':<20} {'Status':<11} {'Items':>5} {'Total':>12}  Created")
    click.echo("-" * 80)
    for o in orders:
        click.echo(
            f"{o.id:<8} {o.customer_name:<20} {o.status:<11} "
            f"{len(o.items):>5} {o.total:>12}  {o.created_at}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.argument("action", type=click.Choice(list(ACTIONS), case_sensitive=False))
def order_status(order_id: str, action: str) -> None:
    """Move an order along PENDING > PROCESSING > SHIPPED > DELIVERED, or cancel it."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, action)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("receipt")
@click.option("--id", "order_id", required=True, help="Order ID.")
def order_receipt(order_id: str) -> None:
    """Print a plain-text receipt."""
    try:
        text = RenderReceiptHandler(order_repo=order_repository()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(text)
