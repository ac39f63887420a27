from bs4 import BeautifulSoup

from stockquotes.fetch.utils import extract_ticker_from_url
from .base import BaseFetcher, FetchResult

def _mock_quote_html(ticker: str) -> str:
    """Mock quote page for testing without network requests"""

    # Generate a different layout depending on the ticker
    if ticker.startswith("^") or "=" in ticker:
        return f"""
        <html>
        <body>
            <section>
                <h1>{ticker} Index</h1>
                <fin-streamer data-field="regularMarketPrice" value="5,021.84"></fin-streamer>
                <fin-streamer data-field="regularMarketChangePercent" value="+0.41%"></fin-streamer>
            </section>
        </body>
        </html>
        """

    elif ticker.endswith(".BO") or ticker.endswith(".NS"):
        return f"""
        <html>
        <body>
            <main>
                <div class="price-panel">
                    <h1>{ticker} Limited</h1>
                    <span data-testid="qsp-price">482.35</span>
                    <span data-testid="qsp-price-change-percent">(-1.12%)</span>
                </div>
            </main>
        </body>
        </html>
        """

    else:
        return f"""
        <html>
        <body>
            <div data-testid="quote-header">
                <h1>{ticker} Inc. ({ticker})</h1>
                <span data-testid="qsp-price">189.98</span>
                <span data-testid="qsp-price-change-percent">(+0.52%)</span>
            </div>
        </body>
        </html>
        """

class MockFetcher(BaseFetcher):
    def fetch(self, url: str) -> FetchResult:
        print("Visiting", url, "(mock)")
        html = _mock_quote_html(extract_ticker_from_url(url))
        return FetchResult(url=url, status_code=200, document=BeautifulSoup(html, "html.parser"))
