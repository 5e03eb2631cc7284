"""CLI commands for the admin overview."""

from __future__ import annotations

import click

from storefront.application.show_dashboard import ShowDashboardHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    user_repository,
)
from storefront.infrastructure.config import get_settings


@click.command("dashboard")
def admin_dashboard() -> None:
    """Show revenue, sales and catalog totals plus recent orders."""
    settings = get_settings()
    handler = ShowDashboardHandler(
        order_repo=order_repository(),
        product_repo=product_repository(with_fallback=False),
        user_repo=user_repository(),
        currency=settings.currency,
    )

    try:
        stats = handler.handle(recent_limit=settings.recent_orders_limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total revenue:  {stats.total_revenue}")
    click.echo(f"Sales:          {stats.total_sales}")
    click.echo(f"Products:       {stats.total_products}")
    click.echo(f"Users:          {stats.total_users}")
    click.echo()
    if not stats.recent_orders:
        click.echo("No orders yet.")
        return
    click.echo("Recent orders:")
    for o in stats.recent_orders:
        click.echo(f"  #{o.id:<6} {o.user_id:<22} {o.status:<10} {o.total:>14}")
