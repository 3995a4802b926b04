import logging

import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_apply_code,
    cart_checkout,
    cart_clear,
    cart_decrement,
    cart_increment,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.customer_commands import (
    customer_list,
    customer_register,
    customer_remove,
    customer_set_type,
)
from storefront.infrastructure.cli.discount_commands import (
    discount_create,
    discount_list,
    discount_remove,
    discount_toggle,
)
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_receipt,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_markdown,
    product_remove,
    product_update,
)
from storefront.infrastructure.cli.report_commands import (
    ai_describe,
    report_dashboard,
    report_insights,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """Storefront: catalog, carts, discounts and orders"""
    level = logging.DEBUG if verbose else settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def discount() -> None:
    """Manage discount rules."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def cart() -> None:
    """Shop: cart, discount codes and checkout."""


@cli.group()
def order() -> None:
    """Track and manage orders."""


@cli.group()
def report() -> None:
    """Dashboard and sales insights."""


@cli.group()
def ai() -> None:
    """AI copywriting helpers."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_markdown)
product.add_command(product_remove)
product.add_command(product_update)
discount.add_command(discount_create)
discount.add_command(discount_list)
discount.add_command(discount_remove)
discount.add_command(discount_toggle)
customer.add_command(customer_list)
customer.add_command(customer_register)
customer.add_command(customer_remove)
customer.add_command(customer_set_type)
cart.add_command(cart_add)
cart.add_command(cart_apply_code)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_decrement)
cart.add_command(cart_increment)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_list)
order.add_command(order_receipt)
order.add_command(order_show)
order.add_command(order_status)
report.add_command(report_dashboard)
report.add_command(report_insights)
ai.add_command(ai_describe)
