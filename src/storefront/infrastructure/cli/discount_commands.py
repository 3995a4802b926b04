"""CLI commands for the discount registry."""

from __future__ import annotations

import click

from storefront.application.create_discount import CreateDiscountHandler
from storefront.application.list_discounts import ListDiscountsHandler
from storefront.application.remove_discount import RemoveDiscountHandler
from storefront.application.toggle_discount import ToggleDiscountHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    customer_repository,
    discount_repository,
    product_repository,
)


@click.command("create")
@click.option("--percentage", required=True, type=int, help="Percent off (1-99).")
@click.option("--automatic/--manual", "is_automatic", default=False, help="Automatic markdown or manual code.")
@click.option("--code", default=None, help="Coupon code (manual only).")
@click.option("--product", "target_product_id", default=None, help="Restrict to one product ID.")
@click.option("--customer", "target_customer_id", default=None, help="Restrict a manual code to one customer ID.")
@click.option("--description", default=None, help="Description shown to shoppers.")
def discount_create(
    percentage: int,
    is_automatic: bool,
    code: str | None,
    target_product_id: str | None,
    target_customer_id: str | None,
    description: str | None,
) -> None:
    """Create a discount rule."""
    handler = CreateDiscountHandler(
        discount_repo=discount_repository(),
        product_repo=product_repository(),
        customer_repo=customer_repository(),
    )

    try:
        rule = handler.handle(
            percentage=percentage,
            is_automatic=is_automatic,
            code=code,
            target_product_id=target_product_id,
            target_customer_id=target_customer_id,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount {rule.id} created: {rule.code} ({rule.description})")


@click.command("list")
@click.option("--active-only", is_flag=True, default=False, help="Hide inactive rules.")
def discount_list(active_only: bool) -> None:
    """List discount rules in registry order."""
    rules = ListDiscountsHandler(discount_repo=discount_repository()).handle(
        active_only=active_only
    )

    if not rules:
        click.echo("No discounts found.")
        return

    click.echo(f"{'ID':<10} {'Code':<14} {'%':>3} {'Kind':<10} {'Active':<7} {'Product':<8} {'Customer':<10} Description")
    click.echo("-" * 100)
    for r in rules:
        kind = "automatic" if r.is_automatic else "manual"
        click.echo(
            f"{r.id:<10} {r.code:<14} {r.percentage:>3} {kind:<10} "
            f"{'yes' if r.is_active else 'no':<7} {r.target_product_id or '-':<8} "
            f"{r.target_customer_id or '-':<10} {r.description}"
        )


@click.command("remove")
@click.option("--id", "discount_id", required=True, help="Discount ID.")
def discount_remove(discount_id: str) -> None:
    """Delete a discount rule."""
    try:
        RemoveDiscountHandler(discount_repo=discount_repository()).handle(discount_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount {discount_id} removed.")


@click.command("toggle")
@click.option("--id", "discount_id", required=True, help="Discount ID.")
@click.option("--on/--off", "active", required=True, help="Activate or deactivate.")
def discount_toggle(discount_id: str, active: bool) -> None:
    """Activate or deactivate a discount rule."""
    try:
        ToggleDiscountHandler(discount_repo=discount_repository()).handle(discount_id, active)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount {discount_id} {'activated' if active else 'deactivated'}.")
