"""Application state: identity, the single current result and the in-flight flag.

Every analysis is tagged with a request token. Only the latest live token may
publish; reset() invalidates whatever is still running.
"""

import logging
import threading

from errors import AnalysisInFlight, ResultPending
from models import AnalysisData, Identity

logger = logging.getLogger(__name__)

SCREEN_LOADING = "loading"
SCREEN_INPUT = "input"
SCREEN_REPORT = "report"


class AppState:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._identity: Identity | None = None
        self._current: AnalysisData | None = None
        self._analyzing = False
        self._last_token = 0
        self._live_token: int | None = None

    @property
    def identity(self) -> Identity | None:
        return self._identity

    @property
    def current(self) -> AnalysisData | None:
        return self._current

    @property
    def analyzing(self) -> bool:
        return self._analyzing

    @property
    def ready(self) -> bool:
        return self._identity is not None

    @property
    def screen(self) -> str:
        if self._identity is None:
            return SCREEN_LOADING
        if self._current is None:
            return SCREEN_INPUT
        return SCREEN_REPORT

    def mark_ready(self, identity: Identity) -> None:
        """Loading -> Ready. Only the first identity is kept."""
        with self._lock:
            if self._identity is None:
                self._identity = identity

    def begin_analysis(self) -> int:
        """
        Issue a new request token.

        Raises AnalysisInFlight while one is running and ResultPending while a
        report is stored; reset() must come first.
        """
        with self._lock:
            if self._analyzing:
                raise AnalysisInFlight("An analysis is already in progress.")
            if self._current is not None:
                raise ResultPending("Start a new analysis before submitting another URL.")
            self._last_token += 1
            self._live_token = self._last_token
            self._analyzing = True
            return self._last_token

    def publish(self, token: int, data: AnalysisData) -> bool:
        """Store `data` if `token` is the latest live request. Returns whether it was stored."""
        with self._lock:
            if token != self._live_token:
                logger.info("Discarding stale analysis result for %s (token=%d)", data.get("url"), token)
                return False
            self._current = data
            self._analyzing = False
            self._live_token = None
            return True

    def finish(self, token: int) -> None:
        """Clear the in-flight flag after a failed request, if it is still the live one."""
        with self._lock:
            if token == self._live_token:
                self._analyzing = False
                self._live_token = None

    def reset(self) -> None:
        with self._lock:
            self._current = None
            self._analyzing = False
            self._live_token = None
