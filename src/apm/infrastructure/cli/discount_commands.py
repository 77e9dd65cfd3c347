"""CLI commands for the discounts of an article."""

from __future__ import annotations

from datetime import datetime

import click

from apm.application.add_discount import AddDiscountHandler
from apm.application.remove_discount import RemoveDiscountHandler
from apm.domain.exceptions import DomainException
from apm.domain.model.discount import Discount
from apm.infrastructure.bootstrap import article_repository

_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.command("add")
@click.option("--article-id", required=True, type=int, help="Article to discount.")
@click.option("--description", default=None, help="Label, e.g. 'Summer Sale'.")
@click.option("--percentage", required=True, help="Percentage between 0 and 100.")
@click.option("--start", required=True, type=_DATE, help="First valid day (YYYY-MM-DD).")
@click.option("--end", required=True, type=_DATE, help="Last valid day (YYYY-MM-DD).")
def discount_add(
    article_id: int,
    description: str | None,
    percentage: str,
    start: datetime,
    end: datetime,
) -> None:
    """Add a discount to an article."""
    handler = AddDiscountHandler(article_repo=article_repository())

    try:
        discount = Discount.of(description, percentage, start.date(), end.date())
        updated = handler.handle(article_id, discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if updated is None:
        raise click.ClickException(f"Article #{article_id} not found")
    added = updated.discounts[-1]
    click.echo(f"Discount #{added.id} added to article #{article_id}: {added}")


@click.command("remove")
@click.option("--article-id", required=True, type=int, help="Article owning the discount.")
@click.option("--discount-id", required=True, type=int, help="Discount to remove.")
def discount_remove(article_id: int, discount_id: int) -> None:
    """Remove a discount from an article."""
    handler = RemoveDiscountHandler(article_repo=article_repository())

    try:
        updated = handler.handle(article_id, discount_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if updated is None:
        raise click.ClickException(f"Article #{article_id} not found")
    click.echo(f"Discount #{discount_id} removed from article #{article_id}.")
