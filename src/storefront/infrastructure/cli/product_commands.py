"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.remove_product import RemoveProductHandler
from storefront.application.set_product_markdown import SetProductMarkdownHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    customer_repository,
    discount_repository,
    product_repository,
)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--code", required=True, help="Catalog code (e.g. CAM-Q-101).")
@click.option("--brand", required=True, help="Brand or manufacturer.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", default="", help="Category.")
@click.option("--description", default="", help="Description.")
@click.option("--stock", default=0, type=int, help="Units in stock.")
def product_add(
    name: str,
    code: str,
    brand: str,
    price: str,
    category: str,
    description: str,
    stock: int,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            code=code,
            brand=brand,
            price=price,
            category=category,
            description=description,
            stock=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--customer", "customer_id", default=None, help="Show prices as this customer sees them.")
@click.option("--category", default=None, help="Only this category.")
@click.option("--brand", default=None, help="Only this brand.")
@click.option("--search", default=None, help="Match name, code or brand.")
def product_list(
    customer_id: str | None,
    category: str | None,
    brand: str | None,
    search: str | None,
) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(
        product_repo=product_repository(),
        discount_repo=discount_repository(),
        customer_repo=customer_repository(),
    )

    try:
        products = handler.handle(
            customer_id=customer_id, category=category, brand=brand, search=search
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<12} {'Name':<24} {'Brand':<16} {'Price':>10} {'Sale':>10} {'Stock':>6}")
    click.echo("-" * 90)
    for p in products:
        sale = f"{p.sale_price} (-{p.markdown_percentage}%)" if p.sale_price else ""
        click.echo(
            f"{p.id:<6} {p.code:<12} {p.name:<24} {p.brand:<16} "
            f"{p.price:>10} {sale:>10} {p.stock:>6}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--name", default=None, help="New name.")
@click.option("--brand", default=None, help="New brand.")
@click.option("--category", default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@click.option("--stock", default=None, type=int, help="New stock level.")
def product_update(
    product_id: str,
    price: str | None,
    name: str | None,
    brand: str | None,
    category: str | None,
    description: str | None,
    stock: int | None,
) -> None:
    """Update a product's price or details."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id,
            new_price=price,
            name=name,
            brand=brand,
            category=category,
            description=description,
            stock=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated ({product.name}, {product.price})")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product and any discounts that target it."""
    handler = RemoveProductHandler(
        product_repo=product_repository(),
        discount_repo=discount_repository(),
    )

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed.")


@click.command("markdown")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--percentage", required=True, type=click.IntRange(0, 99), help="Markdown percent (0 clears).")
def product_markdown(product_id: str, percentage: int) -> None:
    """Set a quick automatic markdown on a product."""
    handler = SetProductMarkdownHandler(
        product_repo=product_repository(),
        discount_repo=discount_repository(),
    )

    try:
        rule = handler.handle(product_id, percentage)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if rule is None:
        click.echo(f"Markdowns cleared on product #{product_id}.")
    else:
        click.echo(f"{rule.description} ({rule.code})")
