"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.seed_catalog import SeedCatalogHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.service.catalog_search import (
    DEFAULT_MAX_PRICE,
    DEFAULT_MIN_PRICE,
    ProductFilter,
)
from storefront.infrastructure.bootstrap import product_repository, review_repository
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.seed_data import SEED_PRODUCTS


def _parse_attributes(raw: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated 'key=value' options into a dict."""
    result: dict[str, str] = {}
    for pair in raw:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid attribute '{pair}'. Expected 'key=value'."
            )
        key, value = pair.split("=", 1)
        result[key.strip()] = value.strip()
    return result


def _parse_price(raw: str | None, default: Decimal) -> Decimal:
    if raw is None:
        return default
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{raw}'.")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Short description.")
@click.option("--price", required=True, help="Price (e.g. 2499.00).")
@click.option("--brand", required=True, help="Brand name.")
@click.option("--type", "product_type", required=True,
              help="Frames, Lenses, Sunglasses or Contact Lenses.")
@click.option("--image-id", required=True, help="Placeholder image ID.")
@click.option("--image-url", default=None, help="Main image URL.")
@click.option("--material", default=None)
@click.option("--color", default=None)
@click.option("--gender", default=None)
@click.option("--sku", default=None)
@click.option("--attr", "attrs", multiple=True, help="Extra detail as key=value.")
def product_add(
    name: str,
    description: str,
    price: str,
    brand: str,
    product_type: str,
    image_id: str,
    image_url: str | None,
    material: str | None,
    color: str | None,
    gender: str | None,
    sku: str | None,
    attrs: tuple[str, ...],
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(with_fallback=False),
        currency=get_settings().currency,
    )

    try:
        product = handler.handle(
            name=name,
            description=description,
            price=price,
            brand=brand,
            product_type=product_type,
            image_id=image_id,
            image_url=image_url,
            material=material,
            color=color,
            gender=gender,
            sku=sku,
            attributes=_parse_attributes(attrs),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--q", "query", default=None, help="Search name or brand.")
@click.option("--brand", "brands", multiple=True, help="Only these brands.")
@click.option("--category", default=None, help="Type slug, e.g. 'contact-lenses'.")
@click.option("--gender", default=None)
@click.option("--min-price", default=None)
@click.option("--max-price", default=None)
def product_list(
    query: str | None,
    brands: tuple[str, ...],
    category: str | None,
    gender: str | None,
    min_price: str | None,
    max_price: str | None,
) -> None:
    """List catalog products, optionally filtered."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        product_filter = ProductFilter(
            query=query,
            brands=tuple(brands),
            category=category,
            gender=gender,
            min_price=_parse_price(min_price, DEFAULT_MIN_PRICE),
            max_price=_parse_price(max_price, DEFAULT_MAX_PRICE),
        )
        products = handler.handle(product_filter)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Brand':<16} {'Type':<15} {'Price':>12}")
    click.echo("-" * 77)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.brand:<16} {p.type:<15} {p.price:>12}")
    click.echo(f"{len(products)} products found.")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a product with its rating and lens options."""
    handler = ShowProductHandler(
        product_repo=product_repository(),
        review_repo=review_repository(),
        offered_lenses=get_settings().offered_lenses,
    )

    try:
        detail = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    p = detail.product
    click.echo(f"#{p.id} {p.name}  ({p.brand}, {p.type})")
    click.echo(f"Price:   {p.price}")
    click.echo(f"About:   {p.description}")
    for key, value in sorted(p.attributes.items()):
        click.echo(f"  {key}: {value}")
    if detail.average_rating is None:
        click.echo("Rating:  no reviews yet")
    else:
        click.echo(f"Rating:  {detail.average_rating}/5 from {detail.review_count} review(s)")
    if detail.lens_options:
        click.echo("Lens options:")
        for lens in detail.lens_options:
            click.echo(f"  {lens.id:<6} {lens.name:<24} +{lens.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 2999.00).")
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("--brand", default=None)
@click.option("--type", "product_type", default=None)
@click.option("--image-id", default=None)
@click.option("--image-url", default=None)
@click.option("--gender", default=None)
def product_update(
    product_id: str,
    price: str | None,
    name: str | None,
    description: str | None,
    brand: str | None,
    product_type: str | None,
    image_id: str | None,
    image_url: str | None,
    gender: str | None,
) -> None:
    """Edit a product; only the options given are changed."""
    handler = UpdateProductHandler(product_repo=product_repository(with_fallback=False))

    try:
        product = handler.handle(
            product_id=product_id,
            new_price=price,
            name=name,
            description=description,
            brand=brand,
            type=product_type,
            image_id=image_id,
            image_url=image_url,
            gender=gender,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated ({product.price})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository(with_fallback=False))

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("seed")
def product_seed() -> None:
    """Load the starter catalog into an empty store."""
    handler = SeedCatalogHandler(
        product_repo=product_repository(with_fallback=False),
        currency=get_settings().currency,
    )

    try:
        inserted = handler.handle(SEED_PRODUCTS)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if inserted:
        click.echo(f"Seeded {inserted} products.")
    else:
        click.echo("Catalog already has products; nothing seeded.")
