"""Integration tests for the AddDiscount and RemoveDiscount use cases."""

from decimal import Decimal

import pytest

from apm.application.add_discount import AddDiscountHandler
from apm.application.remove_discount import RemoveDiscountHandler
from apm.domain.exceptions import EntityNotFoundError, ValidationError
from apm.domain.model.article import Article
from apm.domain.model.discount import Discount
from tests.fakes import FakeArticleRepository

JAN = Discount.of("January", "10", "2026-01-01", "2026-01-31").with_id(1)


def _repo() -> FakeArticleRepository:
    return FakeArticleRepository([
        Article(
            name="Widget",
            net_price=Decimal("100.00"),
            sales_price=Decimal("200.00"),
            vat_ratio=Decimal("0.19"),
            discounts=[JAN],
        )
    ])


class TestAddDiscount:

    def test_appends_discount(self):
        repo = _repo()
        feb = Discount.of("February", "20", "2026-02-01", "2026-02-28")
        updated = AddDiscountHandler(repo).handle(1, feb)
        assert [d.description for d in updated.discounts] == ["January", "February"]
        assert len(repo.get_by_id(1).discounts) == 2

    def test_overlap_rejected(self):
        repo = _repo()
        touching = Discount.of("Touch", "5", "2026-01-31", "2026-02-10")
        with pytest.raises(ValidationError, match="overlapping"):
            AddDiscountHandler(repo).handle(1, touching)
        assert repo.get_by_id(1).discounts == [JAN]

    def test_below_net_price_rejected(self):
        repo = _repo()
        deep = Discount.of("Deep", "60", "2026-03-01", "2026-03-31")
        with pytest.raises(ValidationError, match="below net price"):
            AddDiscountHandler(repo).handle(1, deep)
        assert repo.save_calls == 0

    def test_missing_article_returns_none(self):
        feb = Discount.of("February", "20", "2026-02-01", "2026-02-28")
        assert AddDiscountHandler(_repo()).handle(9, feb) is None

    def test_incoming_discount_id_dropped(self):
        repo = _repo()
        feb = Discount.of("February", "20", "2026-02-01", "2026-02-28").with_id(1)
        updated = AddDiscountHandler(repo).handle(1, feb)
        assert updated.discounts[-1].id is None


class TestRemoveDiscount:

    def test_removes_discount_by_id(self):
        repo = _repo()
        updated = RemoveDiscountHandler(repo).handle(1, 1)
        assert updated.discounts == []
        assert repo.get_by_id(1).discounts == []

    def test_unknown_discount_id_raises(self):
        with pytest.raises(EntityNotFoundError, match="Discount #5 not found"):
            RemoveDiscountHandler(_repo()).handle(1, 5)

    def test_missing_article_returns_none(self):
        assert RemoveDiscountHandler(_repo()).handle(3, 1) is None
