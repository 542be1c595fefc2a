import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from chargehub.exceptions.custom import SubmissionInProgressError

logger = logging.getLogger(__name__)


class SubmissionTracker:
    """Refuses a second submission of the same form while one is in flight."""

    def __init__(self) -> None:
        self._in_flight: dict[str, datetime] = {}

    def is_in_flight(self, key: str) -> bool:
        return key in self._in_flight

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        """Mark *key* in flight for the duration of the block.

        The key is released however the block exits, so a failed submission
        can be retried straight away.
        """
        if key in self._in_flight:
            raise SubmissionInProgressError(key)
        self._in_flight[key] = datetime.now(timezone.utc)
        try:
            yield
        finally:
            started = self._in_flight.pop(key)
            logger.debug(
                "Released %s after %.3fs",
                key, (datetime.now(timezone.utc) - started).total_seconds(),
            )
