# arz/services/snapshot_assembler.py

"""Merges per-source records into a timestamped snapshot."""

import json
import logging
from datetime import datetime
from zoneinfo import ZoneInfo

import jdatetime

from arz.config.settings import Settings
from arz.models.price_record import PriceRecord, Snapshot
from arz.services.snapshot_orchestrator import CollectionResult

logger = logging.getLogger("arz.assembler")


def format_jalali_timestamp(now: datetime | None = None) -> str:
    """Format *now* as a Solar Hijri ``YYYY/MM/DD, HH:MM`` string.

    Aware datetimes are converted to ``Settings.TIMEZONE`` first; naive
    ones are assumed to already be local wall-clock time.
    """
    tz = ZoneInfo(Settings.TIMEZONE)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)

    jalali = jdatetime.date.fromgregorian(date=now.date())
    return (
        f"{jalali.year:04d}/{jalali.month:02d}/{jalali.day:02d}, "
        f"{now.hour:02d}:{now.minute:02d}"
    )


def assemble_snapshot(
    result: CollectionResult,
    generated_at: str | None = None,
) -> Snapshot:
    """Concatenate records in source order and stamp the time.

    Currency records come first, then gold, then crypto. Sources that
    are missing from *result* contribute nothing.
    """
    records: list[PriceRecord] = []
    for source_id in Settings.SOURCE_ORDER:
        records.extend(result.records.get(source_id, []))

    snapshot = Snapshot(
        generated_at=generated_at or format_jalali_timestamp(),
        records=tuple(records),
    )
    logger.info(
        "Assembled snapshot %s with %d records",
        snapshot.generated_at,
        len(snapshot.records),
    )
    return snapshot


def serialize_snapshot(snapshot: Snapshot) -> str:
    """Render a snapshot as pretty-printed JSON."""
    return json.dumps(
        snapshot.to_dict(),
        ensure_ascii=False,
        indent=2,
        allow_nan=False,
    )
