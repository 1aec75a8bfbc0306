"""End-to-end tests of the click CLI against a temporary store folder."""

import pytest
from click.testing import CliRunner

from shelfpos.infrastructure.cli.main import cli

CATALOG = (
    "ID,Name,Category,Quantity,Price\n"
    "P1,Rice 1kg,Grocery,10,55.00\n"
    "S1,Bath Soap,Toiletries,20,25.50\n"
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("SHELFPOS_HOME", str(tmp_path))
    monkeypatch.setenv("SHELFPOS_MANAGER_PASSWORD", "s3cret")
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "inventory.csv").write_text(CATALOG, encoding="utf-8")
    return tmp_path


def _run(*args, input=None):
    return CliRunner().invoke(cli, list(args), input=input)


def _ledger_files(home):
    return sorted(p.name for p in (home / "reports").glob("Monthly_Sales_Report_*.txt"))


class TestItemCommands:

    def test_list(self, home):
        result = _run("item", "list")
        assert result.exit_code == 0, result.output
        assert "Rice 1kg" in result.output and "25.50" in result.output

    def test_list_unknown_category(self, home):
        result = _run("item", "list", "--category", "Frozen")
        assert result.exit_code != 0
        assert "Category 'Frozen' not found" in result.output

    def test_undecodable_catalog_fails_cleanly(self, home):
        (home / "data" / "inventory.csv").write_bytes(
            b"ID,Name,Category,Quantity,Price\nC1,Caf\xe9,Drinks,4,30.00\n"
        )
        result = _run("item", "list")
        assert result.exit_code == 1
        assert "Error loading inventory file" in result.output
        assert "Traceback" not in result.output

    def test_search_and_categories(self, home):
        assert "Bath Soap" in _run("item", "search", "soap").output
        assert _run("item", "categories").output.split() == ["Grocery", "Toiletries"]

    def test_add_requires_password(self, home):
        result = _run(
            "item", "add", "--id", "E1", "--name", "Eggs", "--category", "Grocery",
            "--quantity", "30", "--price", "8.00", "--password", "wrong",
        )
        assert result.exit_code != 0
        assert "Authentication failed" in result.output
        assert "E1" not in (home / "data" / "inventory.csv").read_text(encoding="utf-8")

    def test_add_update_delete(self, home):
        result = _run(
            "item", "add", "--id", "E1", "--name", "Eggs", "--category", "Grocery",
            "--quantity", "30", "--price", "8.00", "--password", "s3cret",
        )
        assert result.exit_code == 0, result.output

        result = _run("item", "update", "--id", "E1", "--price", "8.50", input="s3cret\n")
        assert result.exit_code == 0, result.output
        assert "E1,Eggs,Grocery,30,8.50" in (home / "data" / "inventory.csv").read_text(encoding="utf-8")

        result = _run("item", "delete", "--id", "E1", "--password", "s3cret")
        assert result.exit_code == 0, result.output
        assert "E1" not in (home / "data" / "inventory.csv").read_text(encoding="utf-8")


class TestSaleCommand:

    def test_sale_with_tender(self, home):
        result = _run("sale", "--items", "P1:3", "--tender", "200.00")
        assert result.exit_code == 0, result.output
        assert "Change: 35.00 PHP" in result.output
        assert "P1,Rice 1kg,Grocery,7,55.00" in (home / "data" / "inventory.csv").read_text(encoding="utf-8")
        [ledger] = _ledger_files(home)
        assert (home / "reports" / ledger).read_text(encoding="utf-8") == "Rice 1kg|3|165.00\n"

    def test_prompted_tender_retries_until_enough(self, home):
        result = _run("sale", "--items", "S1:4", "--receipt", "none", input="50\nlots\n110\n")
        assert result.exit_code == 0, result.output
        assert "Insufficient cash" in result.output
        assert "Invalid amount" in result.output
        assert "Change: 8.00 PHP" in result.output

    def test_cancel_leaves_files_untouched(self, home):
        result = _run("sale", "--items", "P1:2", input="cancel\n")
        assert result.exit_code == 0, result.output
        assert "Checkout canceled." in result.output
        assert (home / "data" / "inventory.csv").read_text(encoding="utf-8") == CATALOG
        assert _ledger_files(home) == []

    def test_short_tender_flag_fails_cleanly(self, home):
        result = _run("sale", "--items", "P1:2", "--tender", "10")
        assert result.exit_code != 0
        assert "Insufficient cash" in result.output
        assert (home / "data" / "inventory.csv").read_text(encoding="utf-8") == CATALOG

    def test_over_stock_rejected(self, home):
        result = _run("sale", "--items", "P1:15", "--tender", "1000")
        assert result.exit_code != 0
        assert "available: 10" in result.output

    def test_bad_item_format(self, home):
        result = _run("sale", "--items", "P1-3", "--tender", "1000")
        assert result.exit_code != 0
        assert "Invalid item format" in result.output

    def test_two_sales_accumulate_in_report(self, home):
        for _ in range(2):
            assert _run("sale", "--items", "Rice 1kg:2", "--tender", "110").exit_code == 0
        [ledger] = _ledger_files(home)
        assert (home / "reports" / ledger).read_text(encoding="utf-8") == "Rice 1kg|4|220.00\n"

        period = ledger.removeprefix("Monthly_Sales_Report_").removesuffix(".txt").replace("_", "-")
        result = _run("report", "show", "--period", period)
        assert result.exit_code == 0, result.output
        assert "Rice 1kg" in result.output and "220.00" in result.output
        assert _run("report", "periods").output.split() == [period]
