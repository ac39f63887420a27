from bs4 import BeautifulSoup
from dataclasses import dataclass
from typing import Callable, Optional

ErrorHook = Callable[[str, Exception], None]

@dataclass
class FetchResult:
    url: str
    status_code: int
    document: Optional[BeautifulSoup]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.document is not None

def print_fetch_error(url: str, error: Exception):
    print(f"Something went wrong: {url}: {error}")

class BaseFetcher:
    def __init__(self, on_error: Optional[ErrorHook] = None):
        self.on_error = on_error or print_fetch_error

    def fetch(self, url: str) -> FetchResult:
        raise NotImplementedError
