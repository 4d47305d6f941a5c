# arz/scrapers/gold_scraper.py

"""Scraper for the alanchand.com gold, coin and metals price table."""

from bs4 import Tag

from arz.models.price_record import PriceRecord
from arz.parsing.names import NameLookupTable, title_case
from arz.scrapers.base_scraper import BaseScraper


class GoldScraper(BaseScraper):
    """Scraper for alanchand.com/gold-price.

    Rows link to ``/gold-price/<code>``. Icons come from a fixed map of
    hosted images; codes without an entry get no icon.
    """

    PAGE_PATH = "/gold-price"
    ROW_SELECTOR = "table tbody tr"
    CODE_PREFIX = "/gold-price/"

    def __init__(self, lookup: NameLookupTable | None = None) -> None:
        super().__init__("gold", lookup)

    def parse_row(self, row: Tag) -> PriceRecord | None:
        code = self.code_from_onclick(row, self.CODE_PREFIX)
        if not code:
            return None

        price_text = self.first_text(row.select_one("td.priceTd"))
        return PriceRecord(
            # The page's "sek" row is the per-gram price.
            code=self.settings.GOLD_CODE_RENAMES.get(code, code),
            local_name=self.cell_text(row.select_one("td")),
            price=self._price(price_text, code),
            icon_url=self.settings.GOLD_ICONS.get(code, ""),
            display_name=title_case(code),
        )
