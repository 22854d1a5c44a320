"""Playback state machine for animating a recorded route."""

import asyncio
import logging
from typing import Callable, List, Optional, Sequence

from .config import DEFAULT_INTERVAL_MS, MIN_INTERVAL_MS, MAX_INTERVAL_MS
from .interfaces import PlaybackState, Route, RoutePoint, SpeedResult, EtaResult
from .geo_utils import speed_kmh, eta

logger = logging.getLogger(__name__)

def clamp_interval(interval_ms: int) -> int:
    """Clamp a tick interval into the supported range."""
    return int(max(MIN_INTERVAL_MS, min(MAX_INTERVAL_MS, interval_ms)))

class PlaybackController:
    """Drives a cursor along a route at a fixed tick interval.

    The controller is Idle or Running. While Running exactly one timer is
    pending on the event loop; every transition to Idle cancels it. Ticks are
    scheduled with ``loop.call_later`` so they run serially on one thread.
    """

    def __init__(self, route: Sequence[RoutePoint], loop: Optional[asyncio.AbstractEventLoop] = None,
                 interval_ms: int = DEFAULT_INTERVAL_MS):
        """Initialize the controller in the Idle state at the first point.

        Args:
            route: Ordered route points, copied into an immutable tuple
            loop: Event loop used to schedule ticks. If None, the running loop
                is looked up when playback starts.
            interval_ms: Initial delay between ticks in milliseconds
        """
        self._route: Route = tuple(route)
        self._loop = loop
        self._state = PlaybackState(cursor=0, is_playing=False,
                                    interval_ms=clamp_interval(interval_ms))
        self._timer: Optional[asyncio.TimerHandle] = None
        self._listeners: List[Callable[['PlaybackController'], None]] = []
        logger.debug(f"Playback controller created for {len(self._route)} points")

    @property
    def route(self) -> Route:
        return self._route

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def interval_ms(self) -> int:
        return self._state.interval_ms

    @property
    def state(self) -> PlaybackState:
        return PlaybackState(self._state.cursor, self._state.is_playing, self._state.interval_ms)

    @property
    def last_index(self) -> int:
        return len(self._route) - 1

    @property
    def has_pending_tick(self) -> bool:
        return self._timer is not None

    def subscribe(self, callback: Callable[['PlaybackController'], None]) -> Callable[[], None]:
        """Register a callback invoked after every cursor move or play/pause change.

        Returns:
            A callable that removes the callback again
        """
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def play(self) -> None:
        """Start playback, restarting from the first point if already at the end."""
        if self._state.cursor == self.last_index:
            logger.debug("Cursor at final point, restarting from the beginning")
            self._state.cursor = 0
        self._state.is_playing = True
        logger.info(f"Playback started at point {self._state.cursor} "
                    f"with {self._state.interval_ms}ms interval")
        self._arm_timer()
        self._notify()

    def pause(self) -> None:
        """Stop playback and keep the cursor where it is."""
        self._cancel_timer()
        if not self._state.is_playing:
            return
        self._state.is_playing = False
        logger.info(f"Playback paused at point {self._state.cursor}")
        self._notify()

    def reset(self) -> None:
        """Stop playback and move the cursor back to the first point."""
        self._cancel_timer()
        self._state.is_playing = False
        self._state.cursor = 0
        logger.info("Playback reset")
        self._notify()

    def set_speed(self, interval_ms: int) -> None:
        """Change the delay between ticks.

        Values outside MIN_INTERVAL_MS..MAX_INTERVAL_MS are clamped. While
        running, the pending tick is rescheduled so the next one fires after
        the new interval.
        """
        clamped = clamp_interval(interval_ms)
        if clamped != interval_ms:
            logger.debug(f"Interval {interval_ms}ms clamped to {clamped}ms")
        self._state.interval_ms = clamped

        if self._state.is_playing:
            self._cancel_timer()
            self._arm_timer()

    def tick(self) -> None:
        """Advance the cursor by one point, pausing automatically at the end."""
        if not self._state.is_playing or not self._can_advance():
            return

        self._state.cursor += 1
        logger.debug(f"Advanced to point {self._state.cursor}/{self.last_index}")

        if self._state.cursor >= self.last_index:
            self._state.is_playing = False
            self._cancel_timer()
            logger.info("Reached final point, playback paused")

        self._notify()

    def close(self) -> None:
        """Cancel any pending tick and drop all listeners."""
        self._cancel_timer()
        self._state.is_playing = False
        self._listeners.clear()
        logger.debug("Playback controller closed")

    def current_point(self) -> Optional[RoutePoint]:
        if not self._route:
            return None
        return self._route[self._state.cursor]

    def speed(self) -> SpeedResult:
        return speed_kmh(self._route, self._state.cursor)

    def eta(self) -> EtaResult:
        return eta(self._route, self._state.cursor)

    def _can_advance(self) -> bool:
        return len(self._route) >= 2 and self._state.cursor < self.last_index

    def _arm_timer(self) -> None:
        if self._timer is not None or not self._can_advance():
            return

        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                logger.warning("No running event loop, ticks must be driven manually")
                return

        self._timer = loop.call_later(self._state.interval_ms / 1000, self._on_timer)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self) -> None:
        self._timer = None
        self.tick()
        if self._state.is_playing:
            self._arm_timer()

    def _notify(self) -> None:
        for callback in list(self._listeners):
            try:
                callback(self)
            except Exception as e:
                # A failing listener must not leave Running without a pending tick
                logger.error(f"Playback listener failed: {str(e)}", exc_info=True)
