"""Domain service: the article validation gate.

Create and update both run ``validate_article`` on the final state of the
article before handing it to the repository, so an article that breaks a
discount invariant is never saved through a use case.  Articles written to
storage by other means are not re-checked on read.

The checks run in a fixed order and stop at the first failure:
  1. every discount passes ``Discount.check`` (percentage and date range);
  2. no two discounts may share a calendar day;
  3. no discount may take the sales price below the net price.
"""

from __future__ import annotations

import logging

from apm.domain.exceptions import ValidationError
from apm.domain.model.article import Article

logger = logging.getLogger(__name__)

OVERLAP_MESSAGE = (
    "Multiple discounts have overlapping date ranges. "
    "Only one discount can be applicable at a time."
)
BELOW_NET_PRICE_MESSAGE = (
    "Discounts would cause the article price to go below net price, "
    "resulting in a loss"
)


def validate_article(article: Article) -> None:
    """Raise ValidationError if *article* breaks a discount invariant."""
    for discount in article.discounts:
        try:
            discount.check()
        except ValidationError:
            logger.info("Rejected article %r: invalid discount %s", article.name, discount)
            raise

    if not article.validate_no_overlapping_discounts():
        logger.info("Rejected article %r: overlapping discounts", article.name)
        raise ValidationError(OVERLAP_MESSAGE)

    offending = article.discounts_below_net_price()
    if offending:
        logger.info(
            "Rejected article %r: %d discount(s) below net price %s",
            article.name,
            len(offending),
            article.net_price,
        )
        raise ValidationError(
            f"{BELOW_NET_PRICE_MESSAGE} "
            f"(first offending discount: {offending[0]})"
        )
