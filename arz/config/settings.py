# arz/config/settings.py

"""Central configuration for the arz price snapshot."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the arz price snapshot."""

    # --- Scraping ---
    REQUEST_TIMEOUT: int = int(
        os.getenv("ARZ_REQUEST_TIMEOUT", "20")
    )                                   # Seconds before a fetch is abandoned
    ORIGIN: str = "https://alanchand.com"

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": (
            "text/html,application/xhtml+xml,"
            "application/xml;q=0.9,image/avif,"
            "image/webp,image/apng,*/*;q=0.8"
        ),
        "Accept-Language": "fa-IR,fa;q=0.9,en-US;q=0.8,en;q=0.7",
        "sec-fetch-dest": "document",
        "sec-fetch-mode": "navigate",
        "sec-fetch-site": "none",
        "Upgrade-Insecure-Requests": "1",
    }

    # --- Snapshot ---
    TIMEZONE: str = "Asia/Tehran"
    FLAG_ICON_URL: str = (
        "https://raw.githubusercontent.com/HatScripts/circle-flags/"
        "refs/heads/gh-pages/flags/{flag}.svg"
    )
    FLAG_ALIASES: dict[str, str] = {"eu": "european_union"}
    STABLECOINS: frozenset[str] = frozenset({"usdt", "dai"})
    WHOLE_PRICE_CODES: frozenset[str] = frozenset({"btc"})
    GOLD_CODE_RENAMES: dict[str, str] = {"sek": "gram"}
    GOLD_ICONS: dict[str, str] = {
        "abshodeh": "https://platform.tgju.org/files/images/gold-bar-1622253729.png",
        "18ayar": "https://platform.tgju.org/files/images/gold-bar-1-1622253841.png",
        "sekkeh": "https://platform.tgju.org/files/images/gold-1697963730.png",
        "bahar": "https://platform.tgju.org/files/images/gold-1-1697963918.png",
        "nim": "https://platform.tgju.org/files/images/money-1697964123.png",
        "rob": "https://platform.tgju.org/files/images/revenue-1697964369.png",
        "sek": "https://platform.tgju.org/files/images/parsian-coin-1697964860.png",
        "usd_xau": "https://platform.tgju.org/files/images/gold-1-1622253769.png",
        "xag": "https://platform.tgju.org/files/images/silver-1624079710.png",
    }

    # --- Paths ---
    # Run artefacts land in the working directory, bundled data beside
    # this module.
    BASE_DIR: Path = Path.cwd()
    CONFIG_DIR: Path = Path(__file__).resolve().parent
    LOOKUP_PATH: Path = Path(
        os.getenv("ARZ_LOOKUP_PATH", str(CONFIG_DIR / "currencies.json"))
    )
    OUTPUT_PATH: Path = Path(
        os.getenv("ARZ_OUTPUT_PATH", str(BASE_DIR / "arz.json"))
    )
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Sources (snapshot order is the registry order) ---
    SOURCES: list[dict[str, str]] = [
        {
            "id": "currency",
            "label": "Currencies",
            "scraper": "arz.scrapers.currency_scraper.CurrencyScraper",
        },
        {
            "id": "gold",
            "label": "Gold & Coins",
            "scraper": "arz.scrapers.gold_scraper.GoldScraper",
        },
        {
            "id": "crypto",
            "label": "Crypto",
            "scraper": "arz.scrapers.crypto_scraper.CryptoScraper",
        },
    ]
    SOURCE_ORDER: tuple[str, ...] = tuple(s["id"] for s in SOURCES)
