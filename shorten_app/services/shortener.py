import logging
import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Dict, Optional

from shorten_app.config import settings
from shorten_app.exceptions import LockFailureError, ShortUrlNotFoundError
from shorten_app.models.url import UrlRecord
from shorten_app.services.short_id_factory import ShortIdFactory
from shorten_app.services.short_id_strategies import ShortIdStrategy
from shorten_app.services.validators import validate_url

logger = logging.getLogger(__name__)


class Shortener:
    """
    In-memory store mapping short ids to URL records.

    One instance is shared by every request handler (see
    `shorten_app.dependencies.get_shortener`). Every access to the record
    collection, including the visit counter increment, happens under a single
    lock held for the whole `store`/`read` call, so operations are strictly
    serialized and a record is never observed half-updated.

    Records are kept in an insertion-ordered dict keyed by short id.
    """

    def __init__(
        self,
        domain: str,
        strategy: Optional[ShortIdStrategy] = None,
        lock_timeout: Optional[float] = None
    ):
        """
        Initialize an empty store.

        Args:
            domain: Base used for short links, e.g. "http://localhost:8080"
            strategy: Short id strategy (defaults to the one from settings)
            lock_timeout: Seconds to wait for the lock, -1 waits forever
                          (defaults to settings.lock_timeout)

        Raises:
            ValueError: If lock_timeout is neither -1 nor >= 0
        """
        self._domain = domain
        self._strategy = strategy or ShortIdFactory.create_strategy()
        self._lock_timeout = settings.lock_timeout if lock_timeout is None else lock_timeout
        if self._lock_timeout != -1 and self._lock_timeout < 0:
            raise ValueError(f"lock_timeout must be -1 or >= 0 (given value: {self._lock_timeout})")
        self._lock = threading.Lock()
        self._records: Dict[str, UrlRecord] = {}

    @property
    def domain(self) -> str:
        return self._domain

    def __len__(self) -> int:
        with self._locked():
            return len(self._records)

    @contextmanager
    def _locked(self):
        """Hold the store lock, raising LockFailureError if it can't be taken."""
        if not self._lock.acquire(timeout=self._lock_timeout):
            raise LockFailureError("Failed to acquire lock")
        try:
            yield
        finally:
            self._lock.release()

    def store(self, original_url: str) -> UrlRecord:
        """
        Register a URL and return a copy of the new record.

        Validation runs before the lock is taken, so invalid input never
        consumes an id or touches the collection.

        Raises:
            InvalidUrlError: If original_url is not a valid absolute URL
            LockFailureError: If the lock could not be acquired
            ShortIdGenerationError: If no unused short id could be generated
        """
        original_url = validate_url(original_url)

        with self._locked():
            short_id = self._strategy.generate(exists=self._records.__contains__)
            record = UrlRecord(
                short_id=short_id,
                original_url=original_url,
                short_url=f"{self._domain}/{short_id}",
            )
            self._records[short_id] = record
            logger.debug("Stored %s -> %s (%d records)", short_id, original_url, len(self._records))
            return replace(record)

    def read(self, short_id: str) -> UrlRecord:
        """
        Resolve a short id and count the visit.

        Returns a copy of the record after its visit_count was incremented.

        Raises:
            ShortUrlNotFoundError: If no record has this short id
            LockFailureError: If the lock could not be acquired
        """
        with self._locked():
            record = self._records.get(short_id)
            if record is None:
                logger.debug("Short id %r not found", short_id)
                raise ShortUrlNotFoundError(f"Url not found: {short_id}")

            record.visit_count += 1
            logger.debug("Resolved %s (visits=%d)", short_id, record.visit_count)
            return replace(record)
