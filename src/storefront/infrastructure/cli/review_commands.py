"""CLI commands for product reviews."""

from __future__ import annotations

import click

from storefront.application.list_reviews import ListReviewsHandler
from storefront.application.submit_review import SubmitReviewHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    product_repository,
    review_repository,
    user_repository,
)
from storefront.infrastructure.cli.user_commands import resolve_user


@click.command("add")
@click.option("--user", "user_ref", required=True, help="User ID or email.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--rating", required=True, type=click.IntRange(1, 5), help="1 to 5 stars.")
@click.option("--comment", required=True, help="At least 10 characters.")
@click.option("--image-url", default=None, help="Photo attached to the review.")
def review_add(
    user_ref: str, product_id: str, rating: int, comment: str, image_url: str | None
) -> None:
    """Write a review for a product."""
    user = resolve_user(user_ref)
    handler = SubmitReviewHandler(
        review_repo=review_repository(),
        product_repo=product_repository(),
        user_repo=user_repository(),
    )

    try:
        handler.handle(user.id, product_id, rating, comment, image_url=image_url)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Review submitted. Thank you for your feedback.")


@click.command("list")
@click.option("--product", "product_id", required=True, help="Product ID.")
def review_list(product_id: str) -> None:
    """List a product's reviews, newest first."""
    reviews = ListReviewsHandler(review_repo=review_repository()).handle(product_id)

    if not reviews:
        click.echo("No reviews yet.")
        return

    for r in reviews:
        stars = "*" * r.rating + "." * (5 - r.rating)
        click.echo(f"{stars}  {r.user_name}  ({r.created_at})")
        click.echo(f"    {r.comment}")
