"""Background timer that drives a session's passive tick."""

from __future__ import annotations
import logging
import threading
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from wildcraft.systems.session import GameSession


logger = logging.getLogger(__name__)


class Ticker:
    """Calls session.tick() every *interval* real seconds until stopped.

    The session never starts one of these itself; whoever owns the screen
    decides when time flows.
    """

    def __init__(self, session: "GameSession", interval: float = 3.0, minutes: int = 1):
        if interval <= 0:
            raise ValueError(f"interval must be > 0, got {interval}")
        self.session = session
        self.interval = interval
        self.minutes = minutes
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.failures = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="wildcraft-ticker", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            if self.session.is_dead:
                continue
            try:
                self.session.tick(self.minutes)
            except Exception:
                # Time keeps flowing; the next tick retries
                self.failures += 1
                logger.exception("Tick failed")

    def __enter__(self) -> "Ticker":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
