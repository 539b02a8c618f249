"""Per-request timing marks.

``RequestTimer`` is the collaborator the router calls when timing is
enabled: ``time(label)`` starts a mark, ``time_end(label)`` stops it
and logs the elapsed time on the ``tern.timing`` logger.
"""

import logging
import time

logger = logging.getLogger("tern.timing")


class RequestTimer:
    """Named stopwatch marks, scoped to one request.

    Usage::

        timer = RequestTimer(prefix="GET /users")
        timer.time("middleware")
        ...
        elapsed_ms = timer.time_end("middleware")
    """

    __slots__ = ("_clock", "_marks", "prefix")

    def __init__(self, prefix: str = "", *, clock=time.perf_counter) -> None:
        self.prefix = prefix
        self._clock = clock
        self._marks: dict[str, float] = {}

    def time(self, label: str) -> None:
        """Start the mark *label*. A mark already running keeps its start."""
        if label in self._marks:
            logger.warning("Timer %r already exists", label)
            return
        self._marks[label] = self._clock()

    def time_end(self, label: str) -> float | None:
        """Stop the mark *label* and return the elapsed milliseconds.

        Returns ``None`` (and logs a warning) for a label that was never
        started or has already ended.
        """
        started = self._marks.pop(label, None)
        if started is None:
            logger.warning("Timer %r does not exist", label)
            return None
        elapsed_ms = (self._clock() - started) * 1000
        if self.prefix:
            logger.info("%s %s: %.3fms", self.prefix, label, elapsed_ms)
        else:
            logger.info("%s: %.3fms", label, elapsed_ms)
        return elapsed_ms

    @property
    def running(self) -> tuple[str, ...]:
        """Labels started but not yet ended."""
        return tuple(self._marks)
