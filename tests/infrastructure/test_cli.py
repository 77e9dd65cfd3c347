"""End-to-end tests for the click command line, backed by a temp data dir."""

import json

import pytest
from click.testing import CliRunner

from apm.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


def _create(run, *extra: str):
    return run(
        "article", "create",
        "--name", "Laptop Pro 15",
        "--slogan", "Best laptop ever!",
        "--net-price", "100.00",
        "--sales-price", "200.00",
        "--vat-ratio", "0.19",
        *extra,
    )


class TestArticleCreate:

    def test_creates_article(self, run, tmp_path):
        result = _create(run, "--discount", "Half:50:2026-01-01:2026-01-31")
        assert result.exit_code == 0, result.output
        assert "Article #1 'Laptop Pro 15' created." in result.output
        stored = json.loads((tmp_path / "articles.json").read_text(encoding="utf-8"))
        assert stored[0]["discounts"][0]["discount_percentage"] == "50"

    def test_floor_price_violation_reported(self, run):
        result = _create(run, "--discount", "Deep:60:2026-01-01:2026-01-31")
        assert result.exit_code == 1
        assert "below net price" in result.output

    def test_overlap_reported(self, run):
        result = _create(
            run,
            "--discount", "A:10:2026-01-01:2026-01-31",
            "--discount", "B:10:2026-01-15:2026-02-15",
        )
        assert result.exit_code == 1
        assert "overlapping date ranges" in result.output

    def test_malformed_discount_is_usage_error(self, run):
        result = _create(run, "--discount", "Half:50")
        assert result.exit_code == 2
        assert "Invalid discount format" in result.output

    def test_malformed_price_is_usage_error(self, run):
        result = run(
            "article", "create", "--name", "X",
            "--net-price", "cheap", "--sales-price", "2", "--vat-ratio", "0.19",
        )
        assert result.exit_code == 2
        assert "Invalid decimal amount" in result.output


class TestArticleShowAndList:

    def test_show(self, run):
        _create(run, "--discount", "Summer Sale:15:2026-06-01:2026-08-31")
        result = run("article", "show", "--id", "1")
        assert result.exit_code == 0, result.output
        assert "Laptop Pro 15" in result.output
        assert "Summer Sale" in result.output
        assert "15%" in result.output

    def test_show_missing(self, run):
        result = run("article", "show", "--id", "5")
        assert result.exit_code == 1
        assert "Article #5 not found" in result.output

    def test_list_plain(self, run):
        _create(run)
        result = run("article", "list")
        assert result.exit_code == 0, result.output
        assert "Laptop Pro 15" in result.output

    def test_list_empty(self, run):
        result = run("article", "list")
        assert "No articles found." in result.output

    def test_list_with_prices(self, run):
        _create(run, "--discount", "Quarter:25:2026-01-01:2026-01-31")
        result = run("article", "list", "--date", "2026-01-10", "--with-prices")
        assert result.exit_code == 0, result.output
        assert "150.00" in result.output
        assert "Quarter" in result.output

    def test_list_discount_only_filters(self, run):
        _create(run, "--discount", "Quarter:25:2026-01-01:2026-01-31")
        result = run("article", "list", "--date", "2026-02-15", "--discount-only")
        assert "No articles found." in result.output

    def test_list_requires_date_for_prices(self, run):
        result = run("article", "list", "--with-prices")
        assert result.exit_code == 1
        assert "Date is required" in result.output

    def test_list_with_undated_stored_discount_reports_error(self, run, tmp_path):
        record = {
            "id": 1,
            "name": "Legacy",
            "slogan": None,
            "net_price": "100.00",
            "sales_price": "200.00",
            "vat_ratio": "0.19",
            "discounts": [{
                "id": 1,
                "description": "Open",
                "discount_percentage": "10",
                "start_date": "2026-01-01",
                "end_date": None,
            }],
        }
        (tmp_path / "articles.json").write_text(json.dumps([record]), encoding="utf-8")
        result = run("article", "list", "--date", "2026-01-10", "--discount-only")
        assert result.exit_code == 1
        assert "no complete validity period" in result.output


class TestArticleUpdate:

    def _update(self, run, *extra: str):
        return run(
            "article", "update", "--id", "1",
            "--name", "Laptop Pro 16",
            "--net-price", "100.00",
            "--sales-price", "210.00",
            "--vat-ratio", "0.19",
            *extra,
        )

    def test_update_keeps_discounts_when_omitted(self, run, tmp_path):
        _create(run, "--discount", "Quarter:25:2026-01-01:2026-01-31")
        result = self._update(run)
        assert result.exit_code == 0, result.output
        stored = json.loads((tmp_path / "articles.json").read_text(encoding="utf-8"))[0]
        assert stored["name"] == "Laptop Pro 16"
        assert stored["slogan"] is None
        assert len(stored["discounts"]) == 1

    def test_update_clears_discounts(self, run, tmp_path):
        _create(run, "--discount", "Quarter:25:2026-01-01:2026-01-31")
        result = self._update(run, "--clear-discounts")
        assert result.exit_code == 0, result.output
        stored = json.loads((tmp_path / "articles.json").read_text(encoding="utf-8"))[0]
        assert stored["discounts"] == []

    def test_update_conflicting_discount_options(self, run):
        _create(run)
        result = self._update(run, "--clear-discounts", "--discount", "A:5:2026-01-01:2026-01-02")
        assert result.exit_code == 2

    def test_update_missing_article(self, run):
        result = self._update(run)
        assert result.exit_code == 1
        assert "Article #1 not found" in result.output


class TestArticleDeleteAndExists:

    def test_delete_then_exists(self, run):
        _create(run)
        assert run("article", "exists", "--id", "1").exit_code == 0
        result = run("article", "delete", "--id", "1")
        assert result.exit_code == 0
        assert "Article #1 deleted." in result.output
        assert run("article", "exists", "--id", "1").exit_code == 1

    def test_delete_missing(self, run):
        result = run("article", "delete", "--id", "3")
        assert result.exit_code == 1


class TestDiscountCommands:

    def test_add_and_remove_discount(self, run):
        _create(run, "--discount", "January:10:2026-01-01:2026-01-31")
        added = run(
            "discount", "add", "--article-id", "1", "--description", "February",
            "--percentage", "20", "--start", "2026-02-01", "--end", "2026-02-28",
        )
        assert added.exit_code == 0, added.output
        assert "Discount #2 added to article #1" in added.output

        removed = run("discount", "remove", "--article-id", "1", "--discount-id", "1")
        assert removed.exit_code == 0, removed.output
        shown = run("article", "show", "--id", "1")
        assert "January" not in shown.output
        assert "February" in shown.output

    def test_add_overlapping_discount_rejected(self, run):
        _create(run, "--discount", "January:10:2026-01-01:2026-01-31")
        result = run(
            "discount", "add", "--article-id", "1", "--percentage", "5",
            "--start", "2026-01-31", "--end", "2026-02-05",
        )
        assert result.exit_code == 1
        assert "overlapping" in result.output

    def test_remove_unknown_discount(self, run):
        _create(run)
        result = run("discount", "remove", "--article-id", "1", "--discount-id", "9")
        assert result.exit_code == 1
        assert "Discount #9 not found" in result.output
