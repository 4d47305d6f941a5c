# arz/services/snapshot_orchestrator.py

"""Runs the three source scrapers concurrently and joins their results."""

import asyncio
import importlib
import logging
from dataclasses import dataclass, field
from typing import Any

from arz.config.settings import Settings
from arz.models.price_record import PriceRecord
from arz.parsing.names import NameLookupTable

logger = logging.getLogger("arz.orchestrator")


@dataclass
class CollectionResult:
    """Per-source records and errors from one collection run."""

    records: dict[str, list[PriceRecord]] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        """Number of records collected across all sources."""
        return sum(len(r) for r in self.records.values())


def _load_scraper_class(dotted_path: str) -> type[Any]:
    """Dynamically import a scraper class from its dotted module path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls: type[Any] = getattr(module, class_name)
    return cls


class SnapshotOrchestrator:
    """Fans out one scraper per source and waits for all of them.

    A source that fails contributes an empty list; the others are
    unaffected. The lookup table is handed to every scraper as a shared
    read-only reference.
    """

    def __init__(
        self,
        lookup: NameLookupTable,
        sources: list[dict[str, str]] | None = None,
    ) -> None:
        self.lookup = lookup
        self.sources = (
            sources if sources is not None else Settings.SOURCES
        )

    async def _run_one(self, source: dict[str, str]) -> list[PriceRecord]:
        scraper_cls = _load_scraper_class(source["scraper"])
        scraper = scraper_cls(lookup=self.lookup)
        records: list[PriceRecord] = await asyncio.to_thread(
            scraper.scrape
        )
        return records

    async def collect(self) -> CollectionResult:
        """Scrape every source concurrently and gather the results."""
        batches = await asyncio.gather(
            *(self._run_one(src) for src in self.sources),
            return_exceptions=True,
        )

        result = CollectionResult()
        for source, batch in zip(self.sources, batches):
            source_id = source["id"]
            if isinstance(batch, BaseException):
                result.records[source_id] = []
                result.errors[source_id] = str(batch)
                logger.error(
                    "Source '%s' failed: %s",
                    source_id,
                    batch,
                    exc_info=batch,
                )
            else:
                result.records[source_id] = batch
                logger.info(
                    "Source '%s' returned %d records",
                    source_id,
                    len(batch),
                )
        return result
