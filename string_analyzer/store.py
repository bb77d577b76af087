import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List

from string_analyzer.analyzer import analyze
from string_analyzer.errors import ConflictError, NotFoundError
from string_analyzer.schemas import StringRecord

logger = logging.getLogger("string_analyzer.store")


class StringStore:
    """In-memory mapping from a raw string value to its analyzed record.

    Lookups use exact string equality, so "Hello" and "hello" are two
    different records. A single lock serialises every access: FastAPI runs
    sync endpoints in a thread pool, and the check-then-write steps of
    ``insert`` and ``delete`` must not interleave.
    """

    def __init__(self) -> None:
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.Lock()

    def insert(self, value: str) -> StringRecord:
        with self._lock:
            if value in self._records:
                raise ConflictError("String already exists in the system")

            props = analyze(value)
            record = StringRecord(
                id=props.sha256_hash,
                value=value,
                properties=props,
                created_at=datetime.now(timezone.utc),
            )
            self._records[value] = record

        logger.info("Stored string %s (length=%d)", record.id[:12], props.length)
        return record

    def get(self, value: str) -> StringRecord:
        with self._lock:
            record = self._records.get(value)
        if record is None:
            raise NotFoundError("String does not exist in the system")
        return record

    def delete(self, value: str) -> None:
        with self._lock:
            record = self._records.pop(value, None)
        if record is None:
            raise NotFoundError("String does not exist in the system")
        logger.info("Deleted string %s", record.id[:12])

    def all(self) -> List[StringRecord]:
        with self._lock:
            return list(self._records.values())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return value in self._records
