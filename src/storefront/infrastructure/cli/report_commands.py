"""CLI commands for the back-office dashboard and AI helpers."""

from __future__ import annotations

import click

from storefront.application.analyze_sales import AnalyzeSalesHandler
from storefront.application.dashboard import DashboardHandler
from storefront.application.generate_product_description import (
    GenerateProductDescriptionHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import order_repository, text_generator


@click.command("dashboard")
def report_dashboard() -> None:
    """Revenue, order count and orders awaiting confirmation."""
    dto = DashboardHandler(order_repo=order_repository()).handle()

    click.echo(f"Total Revenue:     {dto.total_revenue}")
    click.echo(f"Total Orders:      {dto.total_orders}")
    click.echo(f"Avg Value:         {dto.average_order_value}")
    click.echo(f"Awaiting Confirm:  {dto.pending_count}")
    for o in dto.pending_orders:
        click.echo(f"  #{o.id:<8} {o.customer_name:<20} {o.total:>12}  {o.created_at}")


@click.command("insights")
def report_insights() -> None:
    """Ask the AI for a sales-trend summary."""
    handler = AnalyzeSalesHandler(order_repo=order_repository(), generator=text_generator())
    click.echo(handler.handle())


@click.command("describe")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Product category.")
@click.option("--brand", required=True, help="Brand or manufacturer.")
def ai_describe(name: str, category: str, brand: str) -> None:
    """Generate a marketing description for a product."""
    handler = GenerateProductDescriptionHandler(generator=text_generator())

    try:
        text = handler.handle(name=name, category=category, brand=brand)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(text)
