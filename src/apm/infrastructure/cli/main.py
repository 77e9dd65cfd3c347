from pathlib import Path

import click

from apm.infrastructure import bootstrap
from apm.infrastructure.cli.article_commands import (
    article_create,
    article_delete,
    article_exists,
    article_list,
    article_show,
    article_update,
)
from apm.infrastructure.cli.discount_commands import discount_add, discount_remove
from apm.infrastructure.logging_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=bootstrap.DATA_DIR_ENV,
    default=None,
    help="Directory holding articles.json.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar="APM_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    help="Log verbosity (written to stderr).",
)
def cli(data_dir: Path | None, log_level: str) -> None:
    """APM: Article Pricing Manager"""
    configure_logging(log_level)
    bootstrap.configure(data_dir)


@cli.group()
def article() -> None:
    """Manage articles."""


@cli.group()
def discount() -> None:
    """Manage the discounts of an article."""


# Register subcommands
article.add_command(article_create)
article.add_command(article_delete)
article.add_command(article_exists)
article.add_command(article_list)
article.add_command(article_show)
article.add_command(article_update)
discount.add_command(discount_add)
discount.add_command(discount_remove)
