"""
Quote page field extraction.

A quote page can arrive in several layouts. Each layout is handled by an
ExtractionStrategy; QuoteExtractor tries them in priority order against the
same parsed document and stops at the first one that produces a Stock.
"""

from bs4 import BeautifulSoup, Tag
from typing import Iterable, List, Optional, Union

from stockquotes.fetch.utils import extract_ticker_from_url, infer_currency, now_local_str
from stockquotes.schemas import Stock

QUOTE_HEADER = "div[data-testid='quote-header']"
PRICE = "[data-testid='qsp-price']"
CHANGE_PERCENT = "[data-testid='qsp-price-change-percent']"
STREAMER_PRICE = "fin-streamer[data-field='regularMarketPrice']"
STREAMER_CHANGE_PERCENT = "fin-streamer[data-field='regularMarketChangePercent']"
HEADING = "h1"

DIAGNOSTIC_ATTRS = ("data-testid", "data-field")

def _child_text(scope: Tag, selector: str) -> str:
    """Concatenated text of every match of selector under scope, trimmed."""
    return "".join(el.get_text() for el in scope.select(selector)).strip()

def _element_text(el: Tag, fallback_attr: Optional[str] = None) -> str:
    text = el.get_text().strip()
    if not text and fallback_attr:
        text = (el.get(fallback_attr) or "").strip()
    return text

def _nearest_match(el: Tag, selector: str) -> Optional[Tag]:
    """
    Walk up from el towards <body> and return the first element matching
    selector inside the nearest ancestor that contains one.
    """
    for ancestor in el.parents:
        if ancestor.name in ("body", "[document]"):
            break
        match = ancestor.select_one(selector)
        if match is not None:
            return match
    return None

def _nearest_text(el: Tag, selector: str, fallback_attr: Optional[str] = None) -> str:
    """
    Walk up from el towards <body>; in each ancestor check the matches of
    selector in document order and return the first non-empty text.
    """
    for ancestor in el.parents:
        if ancestor.name in ("body", "[document]"):
            break
        for match in ancestor.select(selector):
            text = _element_text(match, fallback_attr)
            if text:
                return text
    return ""

def _print_stock(stock: Stock, source: Optional[str] = None):
    if source:
        print(f"Found via {source}:")
    print(f"Company: {stock.company}")
    if stock.currency:
        print(f"Price: {stock.price} {stock.currency}")
    else:
        print(f"Price: {stock.price}")
    print(f"Change: {stock.change}")
    print("---")

def make_stock(company: str, price: str, change: str, ticker: str) -> Stock:
    """Build a record, inferring currency from the ticker and stamping the current time."""
    return Stock(
        company=company,
        price=price,
        change=change,
        currency=infer_currency(ticker),
        timestamp=now_local_str(),
    )

class ExtractionStrategy:
    """One way of locating the quote fields in a particular page layout."""

    name = "base"

    def attempt(self, document: BeautifulSoup, ticker: str) -> Optional[Stock]:
        raise NotImplementedError

class QuoteHeaderStrategy(ExtractionStrategy):
    """Current layout: everything sits inside the quote-header block."""

    name = "quote-header"

    def attempt(self, document: BeautifulSoup, ticker: str) -> Optional[Stock]:
        for header in document.select(QUOTE_HEADER):
            company = _child_text(header, HEADING)
            price = _child_text(header, PRICE) or _child_text(header, STREAMER_PRICE)
            change = _child_text(header, CHANGE_PERCENT) or _child_text(header, STREAMER_CHANGE_PERCENT)

            if company and price:
                stock = make_stock(company, price, change, ticker)
                _print_stock(stock)
                return stock
        return None

class PriceAnchorStrategy(ExtractionStrategy):
    """Price element present without the header wrapper."""

    name = "qsp-price"

    def attempt(self, document: BeautifulSoup, ticker: str) -> Optional[Stock]:
        for el in document.select(PRICE):
            price = _element_text(el)
            if not price:
                continue

            heading = _nearest_match(el, HEADING)
            change_el = _nearest_match(el, CHANGE_PERCENT)
            stock = make_stock(
                heading.get_text().strip() if heading is not None else "",
                price,
                change_el.get_text().strip() if change_el is not None else "",
                ticker,
            )
            _print_stock(stock, self.name)
            return stock
        return None

class StreamerAnchorStrategy(ExtractionStrategy):
    """Older layout built from fin-streamer live price widgets."""

    name = "fin-streamer"

    def attempt(self, document: BeautifulSoup, ticker: str) -> Optional[Stock]:
        for el in document.select(STREAMER_PRICE):
            price = _element_text(el, "value")
            if not price:
                continue

            heading = _nearest_match(el, HEADING)
            stock = make_stock(
                heading.get_text().strip() if heading is not None else "",
                price,
                _nearest_text(el, STREAMER_CHANGE_PERCENT, "value"),
                ticker,
            )
            _print_stock(stock, self.name)
            return stock
        return None

class DiagnosticStrategy(ExtractionStrategy):
    """
    Never extracts anything. Dumps every element carrying a data-testid or
    data-field attribute so layout changes can be spotted in the run output.
    """

    name = "diagnostic"

    def attempt(self, document: BeautifulSoup, ticker: str) -> Optional[Stock]:
        for el in document.find_all(lambda tag: any(tag.get(attr) for attr in DIAGNOSTIC_ATTRS)):
            print(
                f"Found element: {el.name} with data-testid='{el.get('data-testid', '')}' "
                f"data-field='{el.get('data-field', '')}' text='{el.get_text()}'"
            )
        return None

DEFAULT_STRATEGIES: List[ExtractionStrategy] = [
    QuoteHeaderStrategy(),
    PriceAnchorStrategy(),
    StreamerAnchorStrategy(),
    DiagnosticStrategy(),
]

class QuoteExtractor:
    def __init__(self, strategies: Optional[Iterable[ExtractionStrategy]] = None):
        self.strategies = list(strategies) if strategies is not None else list(DEFAULT_STRATEGIES)

    def extract(self, document: Union[BeautifulSoup, str], request_url: str) -> Optional[Stock]:
        """
        Return the first record any strategy recovers from document, or None.

        request_url is the URL the page was requested with; the ticker (and so
        the currency) is taken from it.
        """
        if isinstance(document, str):
            document = BeautifulSoup(document, "html.parser")

        ticker = extract_ticker_from_url(request_url)
        for strategy in self.strategies:
            stock = strategy.attempt(document, ticker)
            if stock is not None:
                return stock
        return None

def extract_stock(document: Union[BeautifulSoup, str], request_url: str) -> Optional[Stock]:
    """Run the default strategy chain over a parsed page (or raw HTML)."""
    return QuoteExtractor().extract(document, request_url)
