"""JSON-file-backed implementation of RecordStore.

Each collection lives in ``<data_dir>/<collection>.json`` as a JSON
array of objects.  Writes go to a temp file in the same directory and
are renamed over the target, so a reader only ever sees a complete
document.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

import structlog

from storefront.domain.exceptions import StoreCorruptError
from storefront.domain.repository.record_store import RecordStore, check_collection_name

log = structlog.get_logger(__name__)


class JsonRecordStore(RecordStore):

    def __init__(self, data_dir: Path) -> None:
        super().__init__()
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    # --- RecordStore interface ------------------------------------------------

    def ensure(self, collection: str) -> None:
        path = self._path(collection)
        if not path.exists():
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with self.lock(collection):
                if not path.exists():
                    self._write(path, [])
                    log.info("collection_created", collection=collection)

    def load_all(self, collection: str) -> list[dict]:
        self.ensure(collection)
        raw = self._path(collection).read_bytes()
        try:
            records = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise self._corrupt(collection, "not valid UTF-8") from exc
        except json.JSONDecodeError as exc:
            raise self._corrupt(collection, f"invalid JSON ({exc.msg})") from exc
        if not isinstance(records, list):
            raise self._corrupt(collection, "expected a JSON array")
        if not all(isinstance(r, dict) for r in records):
            raise self._corrupt(collection, "every record must be a JSON object")
        return records

    def replace_all(self, collection: str, documents: list[dict]) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        with self.lock(collection):
            self._write(self._path(collection), documents)

    # --- File helpers ---------------------------------------------------------

    def _path(self, collection: str) -> Path:
        return self._data_dir / f"{check_collection_name(collection)}.json"

    def _write(self, path: Path, documents: list[dict]) -> None:
        payload = json.dumps(documents, indent=2) + "\n"
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=str(path.parent),
            prefix=f".{path.stem}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            except BaseException:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise
        try:
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        _fsync_directory(path.parent)

    @staticmethod
    def _corrupt(collection: str, reason: str) -> StoreCorruptError:
        log.error("collection_corrupt", collection=collection, reason=reason)
        return StoreCorruptError(collection, reason)


def _fsync_directory(directory: Path) -> None:
    """Make a completed rename survive power loss."""
    if not hasattr(os, "O_DIRECTORY"):
        return
    fd = os.open(directory, os.O_RDONLY | os.O_DIRECTORY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
