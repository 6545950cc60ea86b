# twml/scheduler.py

import asyncio
from typing import Callable, List, Optional

from twml.document import AttributeChange
from twml.utils.logger import get_logger

logger = get_logger(__name__)

_STOP = object()


class RegenerationScheduler:
    """Coalesces bursts of change messages into single generation passes."""

    def __init__(self, callback: Callable[[], object], debounce_seconds: float = 0.05):
        self.callback = callback
        self.debounce_seconds = debounce_seconds
        self.passes = 0
        self.shutdown_event = asyncio.Event()
        self._queue: asyncio.Queue = asyncio.Queue()

    def notify(self, change: Optional[AttributeChange] = None) -> None:
        self._queue.put_nowait(change or AttributeChange())

    def stop(self) -> None:
        """Finish the current burst and leave ``run``."""
        self.shutdown_event.set()
        self._queue.put_nowait(_STOP)

    def _drain(self, burst: List[AttributeChange]) -> bool:
        while not self._queue.empty():
            item = self._queue.get_nowait()
            if item is _STOP:
                return True
            burst.append(item)
        return False

    def _run_pass(self, burst_size: int) -> None:
        logger.debug(f"Regenerating after {burst_size} change message(s)")
        try:
            self.callback()
        except Exception as e:
            logger.error(f"Regeneration failed: {e}")
            return
        self.passes += 1

    async def run(self) -> None:
        while not self.shutdown_event.is_set():
            message = await self._queue.get()
            if message is _STOP:
                break

            burst = [message]
            if self.debounce_seconds:
                await asyncio.sleep(self.debounce_seconds)
            stopping = self._drain(burst)

            if any(change.has_styled_attributes for change in burst):
                self._run_pass(len(burst))
            else:
                logger.debug(f"Skipping burst of {len(burst)} change(s) without styled attributes")

            if stopping:
                break
