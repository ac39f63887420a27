import csv

from stockquotes.fetch.utils import now_local_str, now_utc_str
from stockquotes.schemas import RunResult

HEADER = ["company", "price", "change", "currency"]

class ReportError(Exception):
    pass

def _meta_row(label: str, value: str) -> list:
    return [label, value, "", ""]

def write_report(result: RunResult, path: str) -> bool:
    """
    Write records and run metadata to a CSV file, overwriting it.
    Returns False without touching the file when there are no records.
    """
    if not result.stocks:
        return False

    try:
        f = open(path, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise ReportError(f"Failed to create output CSV file {path}: {e}") from e

    with f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(HEADER)
        for stock in result.stocks:
            writer.writerow([stock.company, stock.price, stock.change, stock.currency])

        writer.writerow([])
        writer.writerow(_meta_row("METADATA", ""))
        writer.writerow(_meta_row("Last Updated", now_local_str()))
        writer.writerow(_meta_row("Last Updated (UTC)", now_utc_str()))
        writer.writerow(_meta_row("Total Stocks Scraped", str(result.records_collected)))
        writer.writerow(_meta_row("Total Tickers Processed", str(result.tickers_processed)))
        writer.writerow(_meta_row("Success Rate", f"{result.success_rate:.1f}%"))

    return True
