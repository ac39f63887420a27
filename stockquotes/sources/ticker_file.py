from typing import List

class TickerFileError(Exception):
    pass

def read_tickers(path: str) -> List[str]:
    """
    Read tickers from a plain text file, one per line.
    Blank lines and lines starting with '#' are skipped.
    """
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        raise TickerFileError(f"Error reading tickers from {path}: {e}") from e

    tickers = []
    for line in lines:
        ticker = line.strip()
        if ticker and not ticker.startswith("#"):
            tickers.append(ticker)
    return tickers
