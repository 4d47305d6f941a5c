# arz/parsing/names.py

"""Display-name resolution and the static country lookup table."""

import json
import logging
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

logger = logging.getLogger("arz.names")

_TOKEN_START = re.compile(r"(^|\s)(\S)")


class LookupTableError(Exception):
    """The country lookup file is missing or malformed."""


def title_case(text: str) -> str:
    """Lowercase *text*, then capitalise each whitespace-separated token.

    >>> title_case("united states")
    'United States'
    >>> title_case("eURo")
    'Euro'
    """
    return _TOKEN_START.sub(
        lambda m: m.group(1) + m.group(2).upper(),
        text.strip().lower(),
    )


class NameLookupTable(Mapping[str, str]):
    """Read-only map from a lowercase flag/country code to an English name.

    Built once before any fetch starts and shared by every scraper
    thread. There is no mutator, so concurrent reads need no lock.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(
            {k.lower(): v for k, v in (entries or {}).items()}
        )

    @classmethod
    def from_file(cls, path: Path) -> "NameLookupTable":
        """Load a JSON array of ``{"country": ..., "en": ...}`` objects.

        Raises:
            LookupTableError: the file cannot be read, is not valid
                JSON, or an entry lacks a non-empty ``country``.
        """
        try:
            with open(path, encoding="utf-8") as f:
                raw: Any = json.load(f)
        except OSError as exc:
            raise LookupTableError(
                f"Cannot read lookup file {path}: {exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise LookupTableError(
                f"Malformed JSON in lookup file {path}: {exc}"
            ) from exc

        if not isinstance(raw, list):
            raise LookupTableError(
                f"Lookup file {path} must contain a JSON array"
            )

        entries: dict[str, str] = {}
        for idx, item in enumerate(raw):
            if not isinstance(item, dict):
                raise LookupTableError(
                    f"Entry {idx} in {path} is not an object"
                )
            country = str(item.get("country") or "").strip()
            if not country:
                raise LookupTableError(
                    f"Entry {idx} in {path} has an empty 'country'"
                )
            entries[country] = str(item.get("en") or "")

        logger.info(
            "Loaded %d lookup entries from %s", len(entries), path
        )
        return cls(entries)

    def resolve(self, key: str, fallback: str) -> str:
        """Return the English name for *key*, else Title-Case *fallback*."""
        name = self._entries.get(key.lower(), "") if key else ""
        return name or title_case(fallback)

    def __getitem__(self, key: str) -> str:
        return self._entries[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
