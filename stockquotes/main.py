import argparse
import sys
from typing import List, Optional

from stockquotes.core.config import settings
from stockquotes.fetch.utils import build_quote_url
from stockquotes.report.csv_report import ReportError, write_report
from stockquotes.services.scrape import run_scrape
from stockquotes.sources.ticker_file import TickerFileError, read_tickers

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scrape stock quote pages into a CSV report")
    parser.add_argument("--tickers", default=settings.TICKERS_FILE, help="Ticker list, one per line")
    parser.add_argument("--output", default=settings.OUTPUT_FILE, help="CSV file to write")
    parser.add_argument("--mock", action="store_true", help="Use canned pages instead of the network")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.mock:
        settings.USE_MOCK = True

    try:
        tickers = read_tickers(args.tickers)
    except TickerFileError as e:
        print(e)
        return 1

    print(f"Loaded {len(tickers)} tickers from file")

    result = run_scrape(tickers)

    if not result.stocks:
        print("No stock data was scraped.")
        print(f"Try manually visiting {build_quote_url(settings.SANITY_CHECK_TICKER)} to check if the page loads correctly.")
        print("The page structure might have changed or the site might be blocking requests.")
        return 0

    try:
        write_report(result, args.output)
    except ReportError as e:
        print(e)
        return 1

    print(f"Data saved to {args.output} with metadata")
    return 0

if __name__ == "__main__":
    sys.exit(main())
