"""CLI commands for the Article aggregate."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import click

from apm.application.create_article import CreateArticleHandler
from apm.application.delete_article import DeleteArticleHandler
from apm.application.dto import ArticlePatch
from apm.application.list_articles import ListArticlesHandler
from apm.application.show_article import ShowArticleHandler
from apm.application.update_article import UpdateArticleHandler
from apm.domain.exceptions import DomainException
from apm.domain.model.article import Article
from apm.domain.model.article_view import ArticleProjection, PricedArticle
from apm.domain.model.discount import Discount
from apm.domain.model.pricing import to_decimal
from apm.infrastructure.bootstrap import article_repository


def _parse_discount(raw: str) -> Discount:
    """Parse 'Summer Sale:15:2026-06-01:2026-08-31' into a Discount."""
    parts = raw.rsplit(":", 3)
    if len(parts) != 4:
        raise click.BadParameter(
            f"Invalid discount format '{raw}'. "
            "Expected 'Description:Percentage:YYYY-MM-DD:YYYY-MM-DD'."
        )
    description, percentage, start, end = parts
    try:
        return Discount.of(description.strip() or None, percentage, start, end)
    except DomainException as exc:
        raise click.BadParameter(str(exc))


def _parse_discounts(raw: tuple[str, ...]) -> list[Discount]:
    return [_parse_discount(item) for item in raw]


def _parse_amount(raw: str | None) -> Decimal | None:
    try:
        return to_decimal(raw)
    except DomainException as exc:
        raise click.BadParameter(str(exc))


def _fmt(amount: Decimal | None) -> str:
    return "-" if amount is None else f"{amount:.2f}"


def _display_article(article: Article) -> None:
    """Shared formatting for displaying one article with its discounts."""
    click.echo(f"Article #{article.id}  {article.name or ''}")
    if article.slogan:
        click.echo(f"Slogan:      {article.slogan}")
    click.echo(f"Net price:   {_fmt(article.net_price)}")
    click.echo(f"Sales price: {_fmt(article.sales_price)}")
    click.echo(f"VAT ratio:   {article.vat_ratio if article.vat_ratio is not None else '-'}")
    click.echo()

    if not article.discounts:
        click.echo("  No discounts.")
        return

    click.echo(f"  {'ID':<4} {'Description':<24} {'Percent':>8} {'From':>12} {'Until':>12}")
    click.echo(f"  {'-'*64}")
    for d in article.discounts:
        pct = "-" if d.discount_percentage is None else f"{d.discount_percentage}%"
        start = d.start_date.isoformat() if d.start_date else "-"
        end = d.end_date.isoformat() if d.end_date else "-"
        click.echo(
            f"  {str(d.id or '-'):<4} {(d.description or '')[:24]:<24} {pct:>8} {start:>12} {end:>12}"
        )


def _display_views(views: list[ArticleProjection]) -> None:
    if not views:
        click.echo("No articles found.")
        return

    priced = isinstance(views[0], PricedArticle)
    if priced:
        click.echo(f"{'ID':<6} {'Name':<24} {'Sales':>10} {'Final':>10}  Discount")
        click.echo("-" * 70)
    else:
        click.echo(f"{'ID':<6} {'Name':<24} {'Net':>10} {'Sales':>10} {'Discounts':>10}")
        click.echo("-" * 64)

    for view in views:
        name = (view.name or "")[:24]
        if isinstance(view, PricedArticle):
            applied = view.applied_discount.description if view.applied_discount else "-"
            click.echo(
                f"{view.id!s:<6} {name:<24} {_fmt(view.sales_price):>10} "
                f"{_fmt(view.final_price):>10}  {applied or '(unnamed)'}"
            )
        else:
            click.echo(
                f"{view.id!s:<6} {name:<24} {_fmt(view.net_price):>10} "
                f"{_fmt(view.sales_price):>10} {len(view.discounts):>10}"
            )


@click.command("create")
@click.option("--name", required=True, help="Article name.")
@click.option("--slogan", default=None, help="Marketing slogan.")
@click.option("--net-price", required=True, help="Net (floor) price, e.g. 500.00.")
@click.option("--sales-price", required=True, help="Regular sales price, e.g. 800.00.")
@click.option("--vat-ratio", required=True, help="VAT ratio, e.g. 0.19.")
@click.option(
    "--discount", "discounts", multiple=True,
    help="Discount as 'Description:Percentage:YYYY-MM-DD:YYYY-MM-DD' (repeatable).",
)
def article_create(
    name: str,
    slogan: str | None,
    net_price: str,
    sales_price: str,
    vat_ratio: str,
    discounts: tuple[str, ...],
) -> None:
    """Create a new article."""
    article = Article(
        name=name,
        slogan=slogan,
        net_price=_parse_amount(net_price),
        sales_price=_parse_amount(sales_price),
        vat_ratio=_parse_amount(vat_ratio),
        discounts=_parse_discounts(discounts),
    )
    handler = CreateArticleHandler(article_repo=article_repository())

    try:
        saved = handler.handle(article)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Article #{saved.id} '{saved.name}' created.")


@click.command("show")
@click.option("--id", "article_id", required=True, type=int, help="Article ID to display.")
def article_show(article_id: int) -> None:
    """Show details of an article."""
    handler = ShowArticleHandler(article_repo=article_repository())
    found = handler.handle(article_id)
    if found is None:
        raise click.ClickException(f"Article #{article_id} not found")
    _display_article(found)


@click.command("list")
@click.option(
    "--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
    help="Day to price for (required with --with-prices or --discount-only).",
)
@click.option("--with-prices", is_flag=True, default=False, help="Show the final price on --date.")
@click.option(
    "--discount-only", is_flag=True, default=False,
    help="Only articles with a discount on --date.",
)
def article_list(day: datetime | None, with_prices: bool, discount_only: bool) -> None:
    """List articles, optionally priced for a day."""
    handler = ListArticlesHandler(article_repo=article_repository())

    try:
        views = handler.handle(
            day=day.date() if day is not None else None,
            with_prices=with_prices,
            discount_only=discount_only,
        )
    except (DomainException, ValueError) as exc:
        raise click.ClickException(str(exc))

    _display_views(views)


@click.command("update")
@click.option("--id", "article_id", required=True, type=int, help="Article ID to update.")
@click.option("--name", required=True, help="Article name.")
@click.option("--slogan", default=None, help="Marketing slogan (cleared if omitted).")
@click.option("--net-price", required=True, help="Net (floor) price.")
@click.option("--sales-price", required=True, help="Regular sales price.")
@click.option("--vat-ratio", required=True, help="VAT ratio.")
@click.option(
    "--discount", "discounts", multiple=True,
    help="Replace all discounts (repeatable). Omit to keep the current ones.",
)
@click.option("--clear-discounts", is_flag=True, default=False, help="Remove every discount.")
def article_update(
    article_id: int,
    name: str,
    slogan: str | None,
    net_price: str,
    sales_price: str,
    vat_ratio: str,
    discounts: tuple[str, ...],
    clear_discounts: bool,
) -> None:
    """Replace an article's data, keeping its discounts unless given."""
    if discounts and clear_discounts:
        raise click.UsageError("--discount and --clear-discounts are mutually exclusive")

    new_discounts: list[Discount] | None = None
    if clear_discounts:
        new_discounts = []
    elif discounts:
        new_discounts = _parse_discounts(discounts)

    patch = ArticlePatch(
        name=name,
        slogan=slogan,
        net_price=_parse_amount(net_price),
        sales_price=_parse_amount(sales_price),
        vat_ratio=_parse_amount(vat_ratio),
        discounts=new_discounts,
    )
    handler = UpdateArticleHandler(article_repo=article_repository())

    try:
        updated = handler.handle(article_id, patch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if updated is None:
        raise click.ClickException(f"Article #{article_id} not found")
    click.echo(f"Article #{article_id} updated.")


@click.command("delete")
@click.option("--id", "article_id", required=True, type=int, help="Article ID to delete.")
def article_delete(article_id: int) -> None:
    """Delete an article and its discounts."""
    handler = DeleteArticleHandler(article_repo=article_repository())
    if not handler.handle(article_id):
        raise click.ClickException(f"Article #{article_id} not found")
    click.echo(f"Article #{article_id} deleted.")


@click.command("exists")
@click.option("--id", "article_id", required=True, type=int, help="Article ID to check.")
def article_exists(article_id: int) -> None:
    """Exit with status 0 if the article exists, 1 otherwise."""
    handler = DeleteArticleHandler(article_repo=article_repository())
    if not handler.exists(article_id):
        raise click.ClickException(f"Article #{article_id} does not exist")
    click.echo(f"Article #{article_id} exists.")
