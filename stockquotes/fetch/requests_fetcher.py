from typing import Dict, Optional
import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from stockquotes.core.config import DEFAULT_HEADERS, settings
from .base import BaseFetcher, ErrorHook, FetchResult

class FetchError(Exception):
    pass

class RequestsFetcher(BaseFetcher):
    """
    Fetch a page with browser-like headers and parse it.

    Transport and parse failures are reported through on_error and come back
    as a FetchResult without a document; fetch() never raises them.
    """

    def __init__(
        self,
        headers: Optional[Dict[str, str]] = None,
        timeout_sec: Optional[int] = None,
        on_error: Optional[ErrorHook] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(on_error)
        self.headers = dict(headers if headers is not None else DEFAULT_HEADERS)
        self.timeout_sec = timeout_sec or settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()

    def fetch(self, url: str) -> FetchResult:
        print("Visiting", url)
        status = 0
        try:
            resp = self.session.get(url, headers=self.headers, timeout=self.timeout_sec)
            status = int(resp.status_code)
            resp.raise_for_status()
            if status != 200:
                raise FetchError(f"Unexpected status {status} for {url}")
            document = BeautifulSoup(resp.text, "html.parser")
        except requests.Timeout as e:
            return self._failed(url, status, FetchError(f"Timeout while fetching {url}: {e}"))
        except requests.HTTPError:
            return self._failed(url, status, FetchError(f"HTTP error {status} for {url}"))
        except requests.RequestException as e:
            return self._failed(url, status, FetchError(f"Failed to fetch {url}: {str(e)}"))
        except ParserRejectedMarkup as e:
            return self._failed(url, status, FetchError(f"Could not parse {url}: {e}"))
        except FetchError as e:
            return self._failed(url, status, e)

        return FetchResult(url=url, status_code=status, document=document)

    def _failed(self, url: str, status: int, error: Exception) -> FetchResult:
        self.on_error(url, error)
        return FetchResult(url=url, status_code=status, document=None, error=str(error))
