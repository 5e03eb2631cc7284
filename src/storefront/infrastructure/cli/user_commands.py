"""CLI commands for user accounts."""

from __future__ import annotations

import click

from storefront.application.register_user import RegisterUserHandler
from storefront.application.set_admin import SetAdminHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.user import User
from storefront.infrastructure.bootstrap import user_repository


def resolve_user(identifier: str) -> User:
    """Look a user up by ID first, then by email."""
    repo = user_repository()
    user = repo.get_by_id(identifier) or repo.get_by_email(identifier)
    if user is None:
        raise click.ClickException(f"Unknown user '{identifier}'")
    return user


@click.command("register")
@click.option("--email", required=True, help="Account email.")
@click.option("--first-name", default=None)
@click.option("--last-name", default=None)
@click.option("--address", default=None)
@click.option("--phone", default=None)
def user_register(
    email: str,
    first_name: str | None,
    last_name: str | None,
    address: str | None,
    phone: str | None,
) -> None:
    """Create a user profile."""
    handler = RegisterUserHandler(user_repo=user_repository())

    try:
        user = handler.handle(
            email=email,
            first_name=first_name,
            last_name=last_name,
            address=address,
            phone=phone,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.id} registered ({user.email})")


@click.command("list")
def user_list() -> None:
    """List registered users."""
    users = user_repository().list_all()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<22} {'Email':<30} {'Name':<24} {'Admin':>5}")
    click.echo("-" * 84)
    for u in users:
        click.echo(
            f"{u.id:<22} {u.email:<30} {u.display_name:<24} {'yes' if u.is_admin else '':>5}"
        )


@click.command("make-admin")
@click.option("--email", required=True, help="Email of the account to promote.")
def user_make_admin(email: str) -> None:
    """Grant admin rights to a user."""
    handler = SetAdminHandler(user_repo=user_repository())

    try:
        changed = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if changed:
        click.echo(f"{email} is now an admin.")
    else:
        click.echo(f"{email} was already an admin.")
