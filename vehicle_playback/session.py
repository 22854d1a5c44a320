"""Loading lifecycle that wraps route loading and playback."""

import asyncio
import logging
from typing import Optional

from .config import DEFAULT_INTERVAL_MS
from .data_loader import RouteDataLoader
from .exceptions import DataLoadError
from .playback import PlaybackController
from .presentation import PresentationAdapter

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load route data. Please check that the route source exists."

class SessionStatus:
    """Constants for session states."""
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"

class PlaybackSession:
    """Loads a route once and hands it to a fresh playback controller.

    A failed load leaves the session in the error state with a user-facing
    message. Nothing is retried until ``retry`` is called.
    """

    def __init__(self, loader: RouteDataLoader = None, source: str = None,
                 loop: Optional[asyncio.AbstractEventLoop] = None,
                 interval_ms: int = DEFAULT_INTERVAL_MS):
        self.loader = loader or RouteDataLoader()
        self.source = source
        self.loop = loop
        self.interval_ms = interval_ms
        self.status = SessionStatus.LOADING
        self.error: Optional[str] = None
        self.controller: Optional[PlaybackController] = None
        self.presenter: Optional[PresentationAdapter] = None

    @property
    def is_ready(self) -> bool:
        return self.status == SessionStatus.READY

    @property
    def is_empty(self) -> bool:
        return self.is_ready and not self.controller.route

    def load(self) -> bool:
        """Run the loader and build a fresh controller, closing any previous one.

        Returns:
            True if the route was loaded
        """
        self.close()
        self.status = SessionStatus.LOADING
        self.error = None

        try:
            route = self.loader.load_data(self.source)
        except DataLoadError as e:
            logger.error(f"Error loading route data: {str(e)}")
            self.status = SessionStatus.ERROR
            self.error = LOAD_ERROR_MESSAGE
            return False

        self.controller = PlaybackController(route, loop=self.loop, interval_ms=self.interval_ms)
        self.presenter = PresentationAdapter(self.controller)
        self.status = SessionStatus.READY
        if not route:
            logger.warning("No route data available")
        return True

    def retry(self) -> bool:
        """Load the route again after a failure or on user request."""
        logger.info("Retrying route data load")
        return self.load()

    def close(self) -> None:
        if self.controller is not None:
            self.controller.close()
        self.controller = None
        self.presenter = None
