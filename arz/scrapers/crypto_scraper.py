# arz/scrapers/crypto_scraper.py

"""Scraper for the alanchand.com cryptocurrency price table."""

from bs4 import Tag

from arz.models.price_record import PriceRecord
from arz.parsing.names import NameLookupTable, title_case
from arz.scrapers.base_scraper import BaseScraper


class CryptoScraper(BaseScraper):
    """Scraper for alanchand.com/crypto-price.

    Every row lists a toman price (``.tmn``) and a dollar price
    (``.dlr``). Coins are published in dollars, except stable coins,
    whose dollar price is always ~1 and so are published in toman.
    """

    PAGE_PATH = "/crypto-price"
    ROW_SELECTOR = "table.cryptoTbl tbody tr"

    def __init__(self, lookup: NameLookupTable | None = None) -> None:
        super().__init__("crypto", lookup)

    def _icon_url(self, row: Tag) -> str:
        """Return the coin icon as an absolute URL, or ``""``."""
        img = row.select_one(".CurrIco")
        src = img.get("src") if img is not None else None
        if not isinstance(src, str) or not src.strip():
            return ""
        src = src.strip()
        if src.startswith("http"):
            return src
        if src.startswith("//"):
            return f"https:{src}"
        if not src.startswith("/"):
            src = f"/{src}"
        return f"{self.settings.ORIGIN}{src}"

    def price_column(self, code: str) -> str:
        """Selector of the cell holding a coin's published price."""
        return ".tmn" if code in self.settings.STABLECOINS else ".dlr"

    def round_price(self, code: str, price: float) -> float:
        """Apply per-coin rounding to the published price."""
        if code in self.settings.WHOLE_PRICE_CODES:
            price = float(f"{price:.0f}")
        return price

    def parse_row(self, row: Tag) -> PriceRecord | None:
        code = self.cell_text(row.select_one(".symbolCurr")).lower()
        if not code:
            return None

        # Only the published column is parsed
        cell = row.select_one(self.price_column(code))
        price = self._price(self.cell_text(cell), code)
        english = self.cell_text(row.select_one(".enCurr"))
        return PriceRecord(
            code=code,
            local_name=self.cell_text(row.select_one(".faCurr")),
            price=self.round_price(code, price),
            icon_url=self._icon_url(row),
            display_name=title_case(english or code),
        )
