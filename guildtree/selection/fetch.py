"""Background channel-list fetches whose results are drained on the UI thread.

Workers only call directory lookups and enqueue results; tree mutation
happens when the owner drains the queue. At most one request per key is in
flight. Requests that outlive ``timeout_seconds`` are expired so the key can
be fetched again; a late result is still delivered.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass
from queue import Empty, Queue

from ..directory.types import Channel

DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class ChannelFetchRequest:
    """One channel-list fetch for a tree node."""

    request_id: int
    key: Hashable
    fetch: Callable[[], Sequence[Channel]]
    submitted_at: float


@dataclass(frozen=True)
class ChannelFetchResult:
    """Completed fetch: ``channels`` on success, ``error`` on failure."""

    request: ChannelFetchRequest
    channels: tuple[Channel, ...] = ()
    error: Exception | None = None


class ChannelFetchScheduler:
    """Per-key de-duplicating fetch runner backed by daemon threads."""

    def __init__(
        self,
        *,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._pending: dict[Hashable, ChannelFetchRequest] = {}
        self._next_request_id = 1
        self._results: Queue[ChannelFetchResult] = Queue()

    def _worker(self, request: ChannelFetchRequest) -> None:
        try:
            channels = tuple(request.fetch())
        except Exception as exc:
            result = ChannelFetchResult(request=request, error=exc)
        else:
            result = ChannelFetchResult(request=request, channels=channels)
        self._results.put(result)

    def is_pending(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._pending

    def schedule(self, key: Hashable, fetch: Callable[[], Sequence[Channel]]) -> int | None:
        """Start a fetch for ``key``; return its id, or ``None`` when one is in flight."""
        with self._lock:
            if key in self._pending:
                return None
            request = ChannelFetchRequest(
                request_id=self._next_request_id,
                key=key,
                fetch=fetch,
                submitted_at=self._clock(),
            )
            self._next_request_id += 1
            self._pending[key] = request

        worker = threading.Thread(
            target=self._worker,
            args=(request,),
            name="guildtree-channel-fetch",
            daemon=True,
        )
        worker.start()
        return request.request_id

    def expire_stale(self) -> list[ChannelFetchRequest]:
        """Forget requests older than the timeout and return them."""
        now = self._clock()
        expired: list[ChannelFetchRequest] = []
        with self._lock:
            for key, request in list(self._pending.items()):
                if now - request.submitted_at >= self.timeout_seconds:
                    expired.append(self._pending.pop(key))
        return expired

    def drain_results(self) -> list[ChannelFetchResult]:
        """Drain completed results, releasing their keys for new fetches."""
        out: list[ChannelFetchResult] = []
        while True:
            try:
                result = self._results.get_nowait()
            except Empty:
                break
            with self._lock:
                current = self._pending.get(result.request.key)
                if current is not None and current.request_id == result.request.request_id:
                    del self._pending[result.request.key]
            out.append(result)
        return out


__all__ = [
    "DEFAULT_FETCH_TIMEOUT_SECONDS",
    "ChannelFetchRequest",
    "ChannelFetchResult",
    "ChannelFetchScheduler",
]
