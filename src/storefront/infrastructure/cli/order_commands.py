"""CLI commands for checkout and the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus, PaymentMethod, ShippingAddress
from storefront.infrastructure.bootstrap import (
    cart_repository,
    order_repository,
    user_repository,
)
from storefront.infrastructure.cli.user_commands import resolve_user


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Placed:   {dto.order_date}")
    if dto.shipping_address:
        click.echo(f"Ship to:  {dto.shipping_address}")
    if dto.payment_method:
        click.echo(f"Payment:  {dto.payment_method}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Lens':<22} {'Qty':>4} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*78}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.lens_name or '-':<22} {item.quantity:>4} "
            f"{item.price_at_purchase:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*78}")
    click.echo(f"  {'Order Total':<52} {dto.total:>26}")


@click.command("checkout")
@click.option("--user", "user_ref", required=True, help="User ID or email.")
@click.option("--address", required=True)
@click.option("--city", required=True)
@click.option("--zip", "zip_code", required=True)
@click.option("--country", required=True)
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CARD.value,
    show_default=True,
)
def order_checkout(
    user_ref: str,
    address: str,
    city: str,
    zip_code: str,
    country: str,
    payment: str,
) -> None:
    """Place an order for everything in the user's cart."""
    user = resolve_user(user_ref)
    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        cart_repo=cart_repository(),
        user_repo=user_repository(),
    )

    try:
        shipping = ShippingAddress(
            address=address, city=city, zip_code=zip_code, country=country
        )
        dto = handler.handle(user.id, shipping, payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Purchase successful!")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--user", "user_ref", default=None, help="Restrict to this user's orders.")
def order_show(order_id: int, user_ref: str | None) -> None:
    """Show details of an existing order."""
    user_id = resolve_user(user_ref).id if user_ref else None
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_ref", default=None, help="Only this user's orders.")
def order_list(user_ref: str | None) -> None:
    """List orders, newest first."""
    user_id = resolve_user(user_ref).id if user_ref else None
    orders = ListOrdersHandler(order_repo=order_repository()).handle(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<8} {'Date':<22} {'Status':<10} {'Items':>5} {'Total':>14}")
    click.echo("-" * 63)
    for o in orders:
        click.echo(
            f"#{o.id:<7} {o.order_date:<22} {o.status:<10} {len(o.items):>5} {o.total:>14}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--set",
    "status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
)
def order_status(order_id: int, status: str) -> None:
    """Change an order's status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        previous = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} status changed from {previous.value} to {status.lower()}.")
