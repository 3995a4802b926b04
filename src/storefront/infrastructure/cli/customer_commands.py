"""CLI commands for customer accounts."""

from __future__ import annotations

import click

from storefront.application.change_customer_type import ChangeCustomerTypeHandler
from storefront.application.register_customer import RegisterCustomerHandler
from storefront.application.remove_customer import RemoveCustomerHandler
from storefront.application.search_customers import SearchCustomersHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.customer import CustomerType
from storefront.infrastructure.bootstrap import customer_repository


@click.command("register")
@click.option("--name", required=True, help="Full name.")
@click.option("--email", required=True, help="Email address.")
@click.option("--phone", required=True, help="Phone number.")
def customer_register(name: str, email: str, phone: str) -> None:
    """Register a new REGULAR customer."""
    try:
        customer = RegisterCustomerHandler(customer_repo=customer_repository()).handle(
            name=name, email=email, phone=phone
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome, {customer.name}! Your customer ID is {customer.id}.")


@click.command("list")
@click.option("--search", default=None, help="Match name, email or phone.")
def customer_list(search: str | None) -> None:
    """List customers."""
    customers = SearchCustomersHandler(customer_repo=customer_repository()).handle(search)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Email':<26} {'Phone':<14} Type")
    click.echo("-" * 80)
    for c in customers:
        click.echo(f"{c.id:<10} {c.name:<20} {c.email:<26} {c.phone:<14} {c.type.value}")


@click.command("set-type")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option(
    "--type",
    "new_type",
    required=True,
    type=click.Choice([t.value for t in CustomerType], case_sensitive=False),
    help="New tier.",
)
def customer_set_type(customer_id: str, new_type: str) -> None:
    """Change a customer's tier."""
    try:
        customer = ChangeCustomerTypeHandler(customer_repo=customer_repository()).handle(
            customer_id, new_type
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} is now {customer.type.value}.")


@click.command("remove")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.confirmation_option(prompt="Remove this customer account?")
def customer_remove(customer_id: str) -> None:
    """Remove a customer account."""
    try:
        RemoveCustomerHandler(customer_repo=customer_repository()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} removed.")
