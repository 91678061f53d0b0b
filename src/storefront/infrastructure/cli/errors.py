"""Translate domain failures into click errors with a stable kind prefix."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException


def fail(exc: DomainException) -> click.ClickException:
    return click.ClickException(f"{exc.kind}: {exc}")
