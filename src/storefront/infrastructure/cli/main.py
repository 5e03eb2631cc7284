import logging

import click

from storefront.infrastructure.cli.admin_commands import admin_dashboard
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.order_commands import (
    order_checkout,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_seed,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.review_commands import review_add, review_list
from storefront.infrastructure.cli.user_commands import (
    user_list,
    user_make_admin,
    user_register,
)
from storefront.infrastructure.config import get_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Storefront: eyewear catalog, cart and orders."""
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage the catalog."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Check out and manage orders."""


@cli.group()
def user() -> None:
    """Manage user accounts."""


@cli.group()
def review() -> None:
    """Product reviews."""


@cli.group()
def admin() -> None:
    """Admin overview."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_seed)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_checkout)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
user.add_command(user_list)
user.add_command(user_make_admin)
user.add_command(user_register)
review.add_command(review_add)
review.add_command(review_list)
admin.add_command(admin_dashboard)
