"""JSON-file metadata store.

The whole store is one pretty-printed JSON array of file records. Writes are
read-modify-write of the full document, so every mutation goes through a
single asyncio lock. Only one process may write to a given store file.
"""
import asyncio
import json
import logging
import os
from pathlib import Path

import aiofiles

logger = logging.getLogger(__name__)


class MetadataStoreError(Exception):
    """The store file exists but does not hold a JSON array."""


class MetadataStore:
    """Append-only list of file records persisted to one JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._write_lock = asyncio.Lock()

    async def load(self) -> list[dict]:
        """Read every record. Empty list when the file does not exist yet."""
        if not self.path.exists():
            return []
        async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
            raw = await f.read()
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MetadataStoreError(f"Corrupt metadata store {self.path}: {e}") from e
        if not isinstance(records, list):
            raise MetadataStoreError(
                f"Metadata store {self.path} must hold a JSON array, got {type(records).__name__}"
            )
        return records

    async def append(self, record: dict) -> None:
        """Append one record and rewrite the whole file."""
        async with self._write_lock:
            records = await self.load()
            records.append(record)
            await self._write(records)
        logger.debug("Metadata store now holds %d record(s)", len(records))

    async def by_section(self, section: str) -> list[dict]:
        """Records whose section equals `section` exactly, in insertion order."""
        records = await self.load()
        return [r for r in records if isinstance(r, dict) and r.get("section") == section]

    async def _write(self, records: list[dict]) -> None:
        # Readers never see a partial document: write aside, then swap in.
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(records, indent=2, ensure_ascii=False))
        os.replace(tmp_path, self.path)
