"""CLI commands for a customer's cart and checkout.

Every command takes the shopper explicitly via ``--customer``.
"""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.apply_discount_code import ApplyDiscountCodeHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_line import LineAction, UpdateCartLineHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    customer_repository,
    discount_repository,
    order_repository,
    product_repository,
)

customer_option = click.option(
    "--customer", "customer_id", required=True, help="Customer ID shopping."
)


def _display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"Cart for {dto.customer_id}  ({dto.item_count} items)")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Subtotal':>10} {'Saving':>10}")
    click.echo(f"  {'-'*63}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<24} {line.quantity:>5} {line.unit_price:>10} "
            f"{line.line_subtotal:>10} {line.saving:>10}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Subtotal':<40} {dto.base_subtotal:>22}")
    click.echo(f"  {'Automatic savings':<40} {'-' + dto.automatic_savings:>22}")
    if dto.applied_code:
        click.echo(f"  {'Code ' + dto.applied_code:<40} {'-' + dto.manual_savings:>22}")
    click.echo(f"  {'Total':<40} {dto.total:>22}")


@click.command("add")
@customer_option
@click.argument("product_ids", nargs=-1, required=True)
def cart_add(customer_id: str, product_ids: tuple[str, ...]) -> None:
    """Add one product (or several, bulk) to the cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        customer_repo=customer_repository(),
    )

    try:
        cart = handler.handle(customer_id, list(product_ids))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart now holds {cart.item_count} items.")


def _line_command(name: str, action: LineAction, help_text: str) -> click.Command:
    @click.command(name, help=help_text)
    @customer_option
    @click.argument("product_id")
    def command(customer_id: str, product_id: str) -> None:
        handler = UpdateCartLineHandler(
            cart_repo=cart_repository(),
            customer_repo=customer_repository(),
        )
        try:
            cart = handler.handle(customer_id, product_id, action)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        click.echo(f"Cart now holds {cart.item_count} items.")

    return command


cart_increment = _line_command("inc", LineAction.INCREMENT, "Add one more of a product.")
cart_decrement = _line_command("dec", LineAction.DECREMENT, "Take one away (removes the line at zero).")
cart_remove = _line_command("remove", LineAction.REMOVE, "Remove a product from the cart.")


@click.command("clear")
@customer_option
def cart_clear(customer_id: str) -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repo=cart_repository()).handle(customer_id)
    click.echo("Cart cleared.")


@click.command("show")
@customer_option
def cart_show(customer_id: str) -> None:
    """Show the cart with live pricing."""
    handler = ShowCartHandler(
        cart_repo=cart_repository(),
        discount_repo=discount_repository(),
        customer_repo=customer_repository(),
    )

    try:
        dto = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("apply-code")
@customer_option
@click.argument("code")
def cart_apply_code(customer_id: str, code: str) -> None:
    """Apply a manual discount code (replaces any earlier code)."""
    handler = ApplyDiscountCodeHandler(
        cart_repo=cart_repository(),
        discount_repo=discount_repository(),
        customer_repo=customer_repository(),
    )

    try:
        dto = handler.handle(customer_id, code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Code {dto.applied_code} applied.")
    _display_cart(dto)


@click.command("checkout")
@customer_option
@click.option("--address", required=True, help="Full shipping address.")
def cart_checkout(customer_id: str, address: str) -> None:
    """Place the order (Cash on Delivery)."""
    handler = CheckoutHandler(
        cart_repo=cart_repository(),
        discount_repo=discount_repository(),
        customer_repo=customer_repository(),
        order_repo=order_repository(),
    )

    try:
        dto = handler.handle(customer_id, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed  (status={dto.status})")
    click.echo(f"Total: {dto.total}  ({dto.payment_method})")
