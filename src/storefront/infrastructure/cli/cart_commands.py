"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_quantity import UpdateCartQuantityHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Prescription
from storefront.infrastructure.bootstrap import cart_repository, product_repository
from storefront.infrastructure.cli.user_commands import resolve_user

user_option = click.option("--user", "user_ref", required=True, help="User ID or email.")
lens_option = click.option("--lens", "lens_id", default=None, help="Lens product ID.")


def _display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<24} {'Lens':<22} {'Qty':>4} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*78}")
    for line in dto.lines:
        lens = line.lens_name or "-"
        marker = " Rx" if line.has_prescription else ""
        click.echo(
            f"  {line.product_name:<24} {lens:<22} {line.quantity:>4} "
            f"{line.unit_price:>12} {line.line_total:>12}{marker}"
        )
    click.echo(f"  {'-'*78}")
    click.echo(f"  {'Cart Total (' + str(dto.count) + ' items)':<52} {dto.total:>26}")


@click.command("add")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@lens_option
@click.option("--quantity", default=1, type=int, show_default=True)
@click.option("--prescription-file", default=None, help="Uploaded prescription reference.")
@click.option("--left-dv", default=None, help="Left eye distance vision.")
@click.option("--right-dv", default=None, help="Right eye distance vision.")
@click.option("--left-nv", default=None, help="Left eye near vision.")
@click.option("--right-nv", default=None, help="Right eye near vision.")
def cart_add(
    user_ref: str,
    product_id: str,
    lens_id: str | None,
    quantity: int,
    prescription_file: str | None,
    left_dv: str | None,
    right_dv: str | None,
    left_nv: str | None,
    right_nv: str | None,
) -> None:
    """Add a product, optionally with a lens and prescription."""
    user = resolve_user(user_ref)
    products = product_repository()
    handler = AddToCartHandler(
        cart_repo=cart_repository(products), product_repo=products
    )
    prescription = Prescription(
        file=prescription_file,
        left_dv=left_dv,
        right_dv=right_dv,
        left_nv=left_nv,
        right_nv=right_nv,
    )

    try:
        dto = handler.handle(
            user_id=user.id,
            product_id=product_id,
            quantity=quantity,
            lens_id=lens_id,
            prescription=prescription,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@lens_option
def cart_remove(user_ref: str, product_id: str, lens_id: str | None) -> None:
    """Remove a line from the cart."""
    user = resolve_user(user_ref)
    handler = RemoveFromCartHandler(cart_repo=cart_repository())

    try:
        removed, dto = handler.handle(user.id, product_id, lens_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not removed:
        click.echo("That item was not in the cart.")
    _display_cart(dto)


@click.command("update")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@lens_option
@click.option("--quantity", required=True, type=int, help="New quantity; 0 removes.")
def cart_update(user_ref: str, product_id: str, lens_id: str | None, quantity: int) -> None:
    """Change the quantity of a cart line."""
    user = resolve_user(user_ref)
    handler = UpdateCartQuantityHandler(cart_repo=cart_repository())

    try:
        changed, dto = handler.handle(user.id, product_id, quantity, lens_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not changed:
        click.echo("That item was not in the cart.")
    _display_cart(dto)


@click.command("show")
@user_option
def cart_show(user_ref: str) -> None:
    """Show the cart and its total."""
    user = resolve_user(user_ref)
    handler = ShowCartHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(user.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
@user_option
def cart_clear(user_ref: str) -> None:
    """Empty the cart."""
    user = resolve_user(user_ref)
    handler = ClearCartHandler(cart_repo=cart_repository())

    try:
        count = handler.handle(user.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed {count} item(s) from the cart.")
