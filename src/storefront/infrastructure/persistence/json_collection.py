"""A JSON array file shared by every repository that persists to disk.

Writers are serialized per file: a process-wide lock for threads plus an
advisory ``flock`` on a sidecar ``.lock`` file for other processes.  Each
write goes to a temp file in the same directory and is swapped in with
``os.replace``, so readers (which take no lock) always see a complete
snapshot.  POSIX only.
"""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TypeVar

import structlog

from storefront.domain.exceptions import StorageError

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_locks: dict[Path, threading.Lock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    with _locks_guard:
        return _locks.setdefault(path, threading.Lock())


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self._lock_path = self._file_path.with_name(self._file_path.name + ".lock")
        self._lock = _lock_for(self._file_path)
        self._ensure_file()

    def load(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self._file_path.name}: {exc}") from exc

    def update(self, mutate: Callable[[list[dict]], T]) -> T:
        """Read-modify-write under exclusive access.

        If *mutate* raises, nothing is written.
        """
        with self._exclusive():
            records = self.load()
            result = mutate(records)
            self._persist(records)
            return result

    # --- File helpers ---------------------------------------------------------

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        with self._lock:
            try:
                handle = open(self._lock_path, "a")
            except OSError as exc:
                raise StorageError(f"Cannot lock {self._file_path.name}: {exc}") from exc
            with handle:
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
                try:
                    yield
                finally:
                    fcntl.flock(handle.fileno(), fcntl.LOCK_UN)

    def _persist(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        replaced = False
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
            replaced = True
        except OSError as exc:
            logger.error("storage.write_failed", path=str(self._file_path), error=str(exc))
            raise StorageError(f"Cannot write {self._file_path.name}: {exc}") from exc
        finally:
            if not replaced and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create {self._file_path.parent}: {exc}") from exc
        with self._exclusive():
            if not self._file_path.exists():
                self._persist([])
