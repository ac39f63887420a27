import time
from typing import Callable, Iterable, List, Optional

from stockquotes.core.config import settings
from stockquotes.fetch.base import BaseFetcher
from stockquotes.fetch.quote_extractor import QuoteExtractor
from stockquotes.fetch.utils import build_quote_url
from stockquotes.schemas import RunResult, Stock

def default_fetcher() -> BaseFetcher:
    if settings.USE_MOCK:
        from stockquotes.fetch.mock_fetcher import MockFetcher
        return MockFetcher()
    from stockquotes.fetch.requests_fetcher import RequestsFetcher
    return RequestsFetcher()

def scrape_ticker(ticker: str, fetcher: BaseFetcher, extractor: QuoteExtractor) -> List[Stock]:
    """Fetch one quote page and return the records found on it (at most one)."""
    stocks: List[Stock] = []

    result = fetcher.fetch(build_quote_url(ticker))
    if not result.ok:
        return stocks

    stock = extractor.extract(result.document, result.url)
    if stock is not None:
        stocks.append(stock)
    return stocks

def run_scrape(
    tickers: Iterable[str],
    fetcher: Optional[BaseFetcher] = None,
    extractor: Optional[QuoteExtractor] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RunResult:
    """
    Scrape tickers one at a time, in order.

    For each ticker:
    1. Wait PRE_FETCH_DELAY seconds
    2. Fetch the quote page and run the extractor on it
    3. Wait POST_FETCH_DELAY seconds
    4. Keep the ticker's record, or note that no data was found

    Fetch failures are reported by the fetcher and count as no data.
    """
    fetcher = fetcher or default_fetcher()
    extractor = extractor or QuoteExtractor()
    result = RunResult()

    for ticker in tickers:
        sleep(settings.PRE_FETCH_DELAY)

        print(f"\n=== Scraping {ticker} ===")
        stocks = scrape_ticker(ticker, fetcher, extractor)

        sleep(settings.POST_FETCH_DELAY)

        result.tickers_processed += 1
        if stocks:
            print(f"Successfully scraped {ticker}")
            result.stocks.extend(stocks)
            result.succeeded.append(ticker)
        else:
            print(f"No data found for {ticker}")
            result.failed.append(ticker)

    print(f"\nTotal stocks scraped: {result.records_collected}")
    return result
