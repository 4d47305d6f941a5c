# arz/scrapers/base_scraper.py

"""Abstract base class for the three price-table scrapers."""

import logging
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, Tag
from curl_cffi import requests as curl_requests

from arz.config.settings import Settings
from arz.models.price_record import PriceRecord
from arz.parsing.names import NameLookupTable
from arz.parsing.numbers import try_parse_number


class SourceFetchError(Exception):
    """A source page could not be fetched or is not a usable document."""


class BaseScraper(ABC):
    """Fetches one alanchand.com page and maps its table rows to records.

    Subclasses set ``PAGE_PATH`` and ``ROW_SELECTOR`` and implement
    :meth:`parse_row`. Row-level problems never propagate: a row that
    yields no code is dropped, and a row that blows up is logged and
    dropped without touching its neighbours.
    """

    PAGE_PATH: str = ""
    ROW_SELECTOR: str = "table tbody tr"

    def __init__(
        self,
        source_name: str,
        lookup: NameLookupTable | None = None,
    ) -> None:
        self.source_name = source_name
        self.logger = logging.getLogger(f"arz.{source_name}")
        self.settings = Settings()
        self.lookup = lookup if lookup is not None else NameLookupTable()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    @property
    def page_url(self) -> str:
        """Absolute URL of the source page."""
        return f"{self.settings.ORIGIN}{self.PAGE_PATH}"

    # Cloudflare challenge page markers
    _CF_CHALLENGE_MARKERS: list[str] = [
        "challenges.cloudflare.com",
        "cdn-cgi/challenge-platform",
        "cf-turnstile",
        "cf_chl_opt",
    ]

    def _validate_response(
        self, resp: curl_requests.Response,
    ) -> bool:
        """Reject Cloudflare challenge pages served with HTTP 200.

        Only consulted when the page has no table rows: proxied pages
        routinely embed the challenge-platform script next to real data.
        """
        lower = resp.text.lower()
        for marker in self._CF_CHALLENGE_MARKERS:
            if marker in lower:
                self.logger.warning(
                    "[%s] Cloudflare challenge detected "
                    "(marker: '%s')",
                    self.source_name,
                    marker,
                )
                return False
        return True

    def fetch_document(self) -> BeautifulSoup:
        """GET the source page once and parse it.

        Raises:
            SourceFetchError: on transport errors, non-200 status or a
                challenge page instead of the price table.
        """
        headers: dict[str, str] = {
            **self.settings.DEFAULT_HEADERS,
            "Referer": self.settings.ORIGIN,
        }
        try:
            resp = self.session.get(
                self.page_url,
                headers=headers,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            raise SourceFetchError(
                f"[{self.source_name}] Request to {self.page_url} "
                f"failed: {exc}"
            ) from exc

        if resp.status_code != 200:
            raise SourceFetchError(
                f"[{self.source_name}] HTTP {resp.status_code} "
                f"from {self.page_url}"
            )
        soup = BeautifulSoup(resp.text, "lxml")
        has_rows = soup.select_one(self.ROW_SELECTOR) is not None
        if not has_rows and not self._validate_response(resp):
            raise SourceFetchError(
                f"[{self.source_name}] Challenge page served "
                f"instead of {self.page_url}"
            )
        self.logger.debug(
            "[%s] Fetched %s (%d bytes)",
            self.source_name,
            self.page_url,
            len(resp.text),
        )
        return soup

    def extract(self, soup: BeautifulSoup) -> list[PriceRecord]:
        """Map every table row of a parsed page to a record."""
        records: list[PriceRecord] = []
        rows = soup.select(self.ROW_SELECTOR)
        for idx, row in enumerate(rows):
            try:
                record = self.parse_row(row)
            except Exception as exc:
                self.logger.warning(
                    "[%s] Skipping row %d: %s",
                    self.source_name,
                    idx,
                    exc,
                    exc_info=True,
                )
                continue
            if record is not None:
                records.append(record)

        self.logger.info(
            "[%s] Extracted %d records from %d rows",
            self.source_name,
            len(records),
            len(rows),
        )
        return records

    def scrape(self) -> list[PriceRecord]:
        """Fetch the source page and extract its records."""
        return self.extract(self.fetch_document())

    def _price(self, text: str, code: str) -> float:
        """Normalize a price cell, logging text that is not a number."""
        value = try_parse_number(text)
        if value is None:
            if text.strip():
                self.logger.warning(
                    "[%s] Unparseable price %r for '%s', using 0",
                    self.source_name,
                    text,
                    code,
                )
            return 0.0
        return value

    @staticmethod
    def first_text(cell: Tag | None) -> str:
        """Return the stripped text of a cell's first child node.

        Price cells carry the number as their first node followed by
        change markers or unit labels that must be ignored.
        """
        if cell is None or not cell.contents:
            return ""
        node = cell.contents[0]
        if isinstance(node, Tag):
            return node.get_text().strip()
        return str(node).strip()

    @staticmethod
    def cell_text(cell: Tag | None) -> str:
        """Return the full stripped text of a cell, or ``""``."""
        return cell.get_text().strip() if cell is not None else ""

    @staticmethod
    def code_from_onclick(row: Tag, path_prefix: str) -> str:
        """Recover a row's code from ``window.location='<prefix><code>'``."""
        raw = row.get("onclick")
        onclick = raw.strip() if isinstance(raw, str) else ""
        onclick = onclick.removesuffix(";").removesuffix("'")
        return onclick.removeprefix(
            f"window.location='{path_prefix}"
        )

    @abstractmethod
    def parse_row(self, row: Tag) -> PriceRecord | None:
        """Build a record from one table row, or ``None`` to drop it."""
        ...
