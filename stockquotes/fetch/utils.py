from datetime import datetime, timezone
from typing import Optional
from urllib.parse import unquote_plus

from stockquotes.core.config import settings

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Exchange suffix -> trading currency, checked in order
EXCHANGE_CURRENCIES = [
    ((".BO", ".NS"), "INR"),
    ((".L",), "GBP"),
    ((".TO",), "CAD"),
]
DEFAULT_CURRENCY = "USD"

def now_local_str() -> str:
    """Current local time with second precision"""
    return datetime.now().strftime(TIMESTAMP_FORMAT)

def now_utc_str() -> str:
    """Current UTC time with second precision"""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)

def decode_ticker(ticker: str) -> str:
    """URL-decode a ticker, falling back to the raw text if it is not valid escaping."""
    try:
        return unquote_plus(ticker, errors="strict")
    except UnicodeDecodeError:
        return ticker

def infer_currency(ticker: str) -> str:
    """
    Infer the trading currency from ticker syntax.

    Indices, futures and other derivatives ('%', '=' or '^' in the symbol)
    have no currency and yield ''. Otherwise the exchange suffix decides,
    defaulting to USD for symbols without a recognised suffix.
    Examples: 'WIPRO.BO' -> 'INR', 'VOD.L' -> 'GBP', '^GSPC' -> ''
    """
    decoded = decode_ticker(ticker)
    print(f"DEBUG: Original ticker: '{ticker}', Decoded: '{decoded}'")

    if "%" in ticker or "=" in decoded or "^" in decoded:
        print("DEBUG: Found index pattern, returning empty currency")
        return ""

    for suffixes, currency in EXCHANGE_CURRENCIES:
        if any(suffix in ticker for suffix in suffixes):
            print(f"DEBUG: Found exchange suffix, returning {currency}")
            return currency

    print(f"DEBUG: No special case found, returning {DEFAULT_CURRENCY}")
    return DEFAULT_CURRENCY

def extract_ticker_from_url(url: str) -> str:
    """
    Recover the ticker from a quote page URL: the last path segment,
    or the one before it when the URL ends with '/'.
    """
    if not url:
        return ""
    parts = url.split("/")
    ticker = parts[-1]
    if ticker == "" and len(parts) > 1:
        ticker = parts[-2]
    return ticker

def build_quote_url(ticker: str, template: Optional[str] = None) -> str:
    """Quote page URL for a ticker; extract_ticker_from_url() reverses it."""
    return (template or settings.QUOTE_URL_TEMPLATE).format(ticker=ticker)
