import os

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

class Settings:
    # Input / output
    TICKERS_FILE: str = os.getenv("TICKERS_FILE", "tickers.txt")
    OUTPUT_FILE: str = os.getenv("OUTPUT_FILE", "stocks.csv")

    # Quote pages
    QUOTE_URL_TEMPLATE: str = os.getenv("QUOTE_URL_TEMPLATE", "https://finance.yahoo.com/quote/{ticker}/")
    SANITY_CHECK_TICKER: str = os.getenv("SANITY_CHECK_TICKER", "WIPRO.BO")

    # Politeness delays in seconds
    PRE_FETCH_DELAY: float = float(os.getenv("PRE_FETCH_DELAY", "3"))
    POST_FETCH_DELAY: float = float(os.getenv("POST_FETCH_DELAY", "2"))

    # Scraping
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

settings = Settings()

DEFAULT_HEADERS = {
    "User-Agent": settings.USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}
