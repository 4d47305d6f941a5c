# arz/scrapers/currency_scraper.py

"""Scraper for the alanchand.com foreign-currency price table."""

from bs4 import Tag

from arz.models.price_record import PriceRecord
from arz.parsing.names import NameLookupTable
from arz.scrapers.base_scraper import BaseScraper


class CurrencyScraper(BaseScraper):
    """Scraper for alanchand.com/currencies-price.

    Each row links to ``/currencies-price/<code>`` through an
    ``onclick`` handler and shows the country flag as an
    ``<i class="flag flag-xx">`` inside the name cell. The flag code
    drives both the icon and the English name lookup.
    """

    PAGE_PATH = "/currencies-price"
    ROW_SELECTOR = "table tbody tr"
    CODE_PREFIX = "/currencies-price/"

    def __init__(self, lookup: NameLookupTable | None = None) -> None:
        super().__init__("currency", lookup)

    @staticmethod
    def _flag_code(row: Tag) -> str:
        """Return the ``xx`` of the first ``flag-xx`` class, or ``""``."""
        icon = row.select_one("td.currName .flag")
        if icon is None:
            return ""
        classes = icon.get("class") or []
        if isinstance(classes, str):
            classes = classes.split()
        for cls in classes:
            if cls.startswith("flag-"):
                return cls.removeprefix("flag-")
        return ""

    def _flag_key(self, flag: str) -> str:
        """Map a page flag code to its icon and lookup key."""
        return self.settings.FLAG_ALIASES.get(flag, flag)

    def _icon_url(self, flag_key: str) -> str:
        """Build the hosted circle-flag URL for a flag key."""
        if not flag_key:
            return ""
        return self.settings.FLAG_ICON_URL.format(flag=flag_key)

    def parse_row(self, row: Tag) -> PriceRecord | None:
        code = self.code_from_onclick(row, self.CODE_PREFIX)
        if not code:
            return None

        flag_key = self._flag_key(self._flag_code(row))
        price_text = self.first_text(row.select_one("td.sellPrice"))
        return PriceRecord(
            code=code,
            local_name=self.cell_text(row.select_one("td.currName")),
            price=self._price(price_text, code),
            icon_url=self._icon_url(flag_key),
            display_name=self.lookup.resolve(flag_key, fallback=code),
        )
