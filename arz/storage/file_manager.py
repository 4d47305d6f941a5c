# arz/storage/file_manager.py

"""Handles writing the snapshot document to disk."""

import logging
import os
import tempfile
from pathlib import Path

from arz.config.settings import Settings
from arz.models.price_record import Snapshot
from arz.services.snapshot_assembler import serialize_snapshot

logger = logging.getLogger("arz.storage")


class SnapshotWriteError(Exception):
    """The snapshot could not be serialized or written."""


class FileManager:
    """Writes the snapshot file, replacing any previous one atomically."""

    def __init__(self, output_path: Path | None = None) -> None:
        self.output_path: Path = (
            output_path if output_path is not None else Settings.OUTPUT_PATH
        )
        logger.debug(
            "FileManager initialised, output_path=%s", self.output_path
        )

    def save_snapshot(self, snapshot: Snapshot) -> Path:
        """Serialize *snapshot* and write it to :attr:`output_path`.

        The document goes to a temporary sibling file first and is then
        renamed over the target, so a failed run never leaves a
        truncated file behind.

        Raises:
            SnapshotWriteError: serialization or the write failed.
        """
        try:
            payload = serialize_snapshot(snapshot)
        except (TypeError, ValueError) as exc:
            raise SnapshotWriteError(
                f"Cannot serialize snapshot: {exc}"
            ) from exc

        target = self.output_path
        tmp_name: str | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(payload)
                f.write("\n")
            os.replace(tmp_name, target)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SnapshotWriteError(
                f"Cannot write snapshot to {target}: {exc}"
            ) from exc

        logger.info(
            "Saved %d records (%s) to %s",
            len(snapshot.records),
            snapshot.generated_at,
            target,
        )
        return target
