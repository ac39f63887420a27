import pytest
from pydantic import ValidationError
from stockquotes.schemas import Stock, RunResult

def _stock(**overrides):
    data = {
        "company": "Apple Inc.",
        "price": "189.98",
        "change": "(+0.52%)",
        "currency": "USD",
        "timestamp": "2025-10-27 12:00:00",
    }
    data.update(overrides)
    return Stock(**data)

class TestStock:
    """Unit tests for the Stock record"""

    def test_display_strings_kept_verbatim(self):
        stock = _stock(price="₹1,234.50", change="-0.25%")
        assert stock.price == "₹1,234.50"
        assert stock.change == "-0.25%"

    def test_defaults(self):
        stock = Stock(price="12.50", timestamp="2025-10-27 12:00:00")
        assert stock.company == ""
        assert stock.change == ""
        assert stock.currency == ""

    def test_price_required(self):
        with pytest.raises(ValidationError):
            Stock(company="Apple Inc.", timestamp="2025-10-27 12:00:00")

    def test_immutable(self):
        stock = _stock()
        with pytest.raises(ValidationError):
            stock.price = "1.00"

class TestRunResult:
    """Unit tests for run statistics"""

    def test_empty(self):
        result = RunResult()
        assert result.records_collected == 0
        assert result.success_rate == 0.0

    def test_success_rate(self):
        result = RunResult(stocks=[_stock(), _stock()], tickers_processed=3)
        assert result.records_collected == 2
        assert f"{result.success_rate:.1f}%" == "66.7%"
