"""CLI commands for accounts and tokens."""

from __future__ import annotations

import click

from storefront.application.register_user import RegisterUserHandler
from storefront.application.sign_in import SignInHandler
from storefront.application.who_am_i import WhoAmIHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    password_hasher,
    token_service,
    user_repository,
)
from storefront.infrastructure.cli.errors import fail
from storefront.infrastructure.config import Settings

TOKEN_OPTION = click.option(
    "--token",
    envvar="STOREFRONT_TOKEN",
    default=None,
    help="Bearer token (or set STOREFRONT_TOKEN).",
)


@click.command("signup")
@click.option("--email", required=True, help="Account email.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
@click.option("--name", default="", help="Display name.")
@click.pass_obj
def auth_signup(config: Settings, email: str, password: str, name: str) -> None:
    """Register an account and print a bearer token."""
    handler = RegisterUserHandler(
        user_repo=user_repository(config),
        hasher=password_hasher(config),
        issuer=token_service(config),
    )
    try:
        result = handler.handle(email=email, password=password, name=name)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Registered {result.user.email} (id={result.user.id})", err=True)
    click.echo(result.token)


@click.command("signin")
@click.option("--email", required=True, help="Account email.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
@click.pass_obj
def auth_signin(config: Settings, email: str, password: str) -> None:
    """Sign in and print a bearer token."""
    handler = SignInHandler(
        user_repo=user_repository(config),
        hasher=password_hasher(config),
        issuer=token_service(config),
    )
    try:
        result = handler.handle(email=email, password=password)
    except DomainException as exc:
        raise fail(exc)

    click.echo(result.token)


@click.command("whoami")
@TOKEN_OPTION
@click.pass_obj
def auth_whoami(config: Settings, token: str | None) -> None:
    """Show the account behind a token."""
    handler = WhoAmIHandler(user_repository(config), token_service(config))
    try:
        user = handler.handle(token)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"{user.email}  {user.name}  (id={user.id})")
