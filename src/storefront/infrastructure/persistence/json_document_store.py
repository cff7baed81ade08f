"""A single JSON file holding every collection of the store.

Keeping products and inquiries in one document is what makes a
multi-collection commit atomic: a commit is one ``os.replace`` of a
fully written temporary file, so readers see either the old state or
the new one, never a mix.
"""

from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path

from filelock import FileLock, Timeout

from storefront.domain.exceptions import TransactionAbortedError

COLLECTIONS = ("products", "inquiries")
LOCK_TIMEOUT = 30.0


class JsonDocumentStore:

    def __init__(self, file_path: Path, lock_timeout: float = LOCK_TIMEOUT) -> None:
        self._file_path = file_path
        self._lock_timeout = lock_timeout
        self._ensure_file()
        # Both are held by a unit of work for its whole lifetime: the
        # asyncio lock orders coroutines in this process, the file lock
        # orders processes sharing the file (server and CLI).
        self.lock = asyncio.Lock()
        self._file_lock = FileLock(f"{file_path}.lock", thread_local=False)

    @property
    def file_path(self) -> Path:
        return self._file_path

    async def acquire(self) -> None:
        """Take exclusive access to the file, waiting for other processes."""
        await self.lock.acquire()
        try:
            await asyncio.to_thread(self._file_lock.acquire, timeout=self._lock_timeout)
        except Timeout as exc:
            self.lock.release()
            raise TransactionAbortedError(
                f"Timed out waiting for {self._file_lock.lock_file}"
            ) from exc
        except BaseException:
            self.lock.release()
            raise

    def release(self) -> None:
        try:
            self._file_lock.release()
        finally:
            self.lock.release()

    async def read(self) -> dict[str, dict[str, dict]]:
        """Load every collection as ``{name: {id: raw_document}}``."""
        raw = await asyncio.to_thread(self._read_raw)
        return {
            name: {doc["id"]: doc for doc in raw.get(name, [])}
            for name in COLLECTIONS
        }

    async def write(self, collections: dict[str, dict[str, dict]]) -> None:
        """Replace the stored state with ``collections`` in one step."""
        raw = {name: list(collections.get(name, {}).values()) for name in COLLECTIONS}
        await asyncio.to_thread(self._write_raw, raw)

    # --- File helpers ---------------------------------------------------------

    def _read_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _write_raw(self, raw: dict) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(raw, indent=2) + "\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps({name: [] for name in COLLECTIONS}, indent=2) + "\n",
                encoding="utf-8",
            )
