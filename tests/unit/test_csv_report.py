import csv
import re
import pytest
from stockquotes.report.csv_report import write_report, ReportError
from stockquotes.schemas import Stock, RunResult

def _result():
    stocks = [
        Stock(company="Apple Inc.", price="189.98", change="(+0.52%)", currency="USD",
              timestamp="2025-10-27 12:00:00"),
        Stock(company="S&P 500", price="5,021.84", change="+0.41%", currency="",
              timestamp="2025-10-27 12:00:05"),
    ]
    return RunResult(stocks=stocks, tickers_processed=2, succeeded=["AAPL", "^GSPC"])

class TestWriteReport:
    """Unit tests for the CSV report"""

    def test_rows_and_metadata(self, tmp_path):
        path = tmp_path / "stocks.csv"
        assert write_report(_result(), str(path)) is True

        with open(path, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))

        assert rows[0] == ["company", "price", "change", "currency"]
        assert rows[1] == ["Apple Inc.", "189.98", "(+0.52%)", "USD"]
        assert rows[2] == ["S&P 500", "5,021.84", "+0.41%", ""]
        assert rows[3] == []
        assert rows[4] == ["METADATA", "", "", ""]

        meta = {row[0]: row[1] for row in rows[5:]}
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", meta["Last Updated"])
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", meta["Last Updated (UTC)"])
        assert meta["Total Stocks Scraped"] == "2"
        assert meta["Total Tickers Processed"] == "2"
        assert meta["Success Rate"] == "100.0%"

    def test_non_ascii_display_strings(self, tmp_path):
        """Test currency glyphs survive the UTF-8 round trip"""
        path = tmp_path / "stocks.csv"
        result = RunResult(
            stocks=[Stock(company="Reliance Industries", price="₹1,234.50", change="−0.25%",
                          currency="INR", timestamp="2025-10-27 12:00:00")],
            tickers_processed=1,
        )
        write_report(result, str(path))

        with open(path, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert rows[1] == ["Reliance Industries", "₹1,234.50", "−0.25%", "INR"]

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "stocks.csv"
        path.write_text("stale content\n", encoding="utf-8")
        write_report(_result(), str(path))
        assert "stale content" not in path.read_text(encoding="utf-8")

    def test_no_records_writes_nothing(self, tmp_path):
        path = tmp_path / "stocks.csv"
        assert write_report(RunResult(tickers_processed=3), str(path)) is False
        assert not path.exists()

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(ReportError):
            write_report(_result(), str(tmp_path / "missing-dir" / "stocks.csv"))
