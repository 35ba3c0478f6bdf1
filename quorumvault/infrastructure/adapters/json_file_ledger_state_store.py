"""JSON file implementation of LedgerStateStoreProtocol.

State is written to a sibling temporary file and moved into place with
os.replace, so a crash mid-write leaves the previous snapshot intact.
File I/O runs in a worker thread to keep the event loop free.
"""

from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from structlog import get_logger

from quorumvault.domain.errors import CorruptSnapshotError
from quorumvault.domain.models.ledger_snapshot import LedgerSnapshot

logger = get_logger(__name__)


class JsonFileLedgerStateStore:
    """Persist engine snapshots as a single JSON document.

    Attributes:
        path: Location of the state file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._write_lock = asyncio.Lock()

    async def load_state(self) -> LedgerSnapshot | None:
        """Load the snapshot from disk.

        Returns:
            The decoded snapshot, or None if the file does not exist.

        Raises:
            CorruptSnapshotError: If the file cannot be decoded.
        """
        raw = await asyncio.to_thread(self._read)
        if raw is None:
            logger.info("state_file_missing", path=str(self.path))
            return None

        try:
            data: Any = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value must be an object")
            snapshot = LedgerSnapshot.from_dict(data)
        except (ValueError, KeyError, TypeError) as e:
            logger.error("state_file_corrupt", path=str(self.path), error=str(e))
            raise CorruptSnapshotError(f"{self.path}: {e}") from e

        logger.info(
            "state_loaded",
            path=str(self.path),
            proposal_count=len(snapshot.proposals),
        )
        return snapshot

    async def save_state(self, snapshot: LedgerSnapshot) -> None:
        """Atomically replace the state file with ``snapshot``."""
        payload = json.dumps(snapshot.to_dict(), indent=2, sort_keys=True)
        async with self._write_lock:
            await asyncio.to_thread(self._write, payload)
        logger.debug(
            "state_saved",
            path=str(self.path),
            proposal_count=len(snapshot.proposals),
        )

    def _read(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def _write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
