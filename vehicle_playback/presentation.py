"""Read-only view-model over a playback controller."""

import datetime
from typing import Dict, List, Optional, Tuple

from .config import DEFAULT_INTERVAL_MS
from .interfaces import DerivedMetrics, RoutePoint
from .geo_utils import format_eta, format_speed
from .playback import PlaybackController

class PresentationAdapter:
    """Exposes display fields for rendering collaborators.

    Nothing here mutates the controller; commands go to the controller itself.
    """

    def __init__(self, controller: PlaybackController):
        self.controller = controller

    def current_point(self) -> Optional[RoutePoint]:
        return self.controller.current_point()

    def progress_percent(self) -> float:
        """Percentage of the route covered, rounded to one decimal."""
        route_length = len(self.controller.route)
        if route_length <= 1:
            return 0.0
        return round(self.controller.cursor / (route_length - 1) * 100, 1)

    def formatted_speed(self) -> str:
        result = self.controller.speed()
        if not result.is_available:
            return format_speed(result)
        return f"{format_speed(result)} km/h"

    def formatted_eta(self) -> str:
        return format_eta(self.controller.eta())

    def formatted_progress(self) -> str:
        return f"{self.progress_percent():.1f}%"

    def formatted_coordinates(self) -> str:
        point = self.current_point()
        if point is None:
            return ""
        return f"{point.lat:.6f}, {point.lng:.6f}"

    def formatted_timestamp(self) -> str:
        point = self.current_point()
        if point is None:
            return 'N/A'
        moment = datetime.datetime.fromtimestamp(point.timestamp_ms / 1000, tz=datetime.timezone.utc)
        return moment.strftime('%H:%M:%S')

    def simulation_multiplier(self) -> str:
        """Playback rate relative to the default interval, e.g. "2.0x"."""
        return f"{DEFAULT_INTERVAL_MS / self.controller.interval_ms:.1f}x"

    def total_points(self) -> int:
        return len(self.controller.route)

    def current_point_number(self) -> int:
        """1-based position of the cursor, or 0 when there is no route."""
        if not self.controller.route:
            return 0
        return self.controller.cursor + 1

    def can_play(self) -> bool:
        # Play is offered only while there is somewhere left to go
        return self.controller.cursor < len(self.controller.route) - 1

    def full_path(self) -> List[Tuple[float, float]]:
        return [point.coords for point in self.controller.route]

    def traveled_path(self) -> List[Tuple[float, float]]:
        return [point.coords for point in self.controller.route[:self.controller.cursor + 1]]

    def derived_metrics(self) -> DerivedMetrics:
        return DerivedMetrics(
            speed=self.formatted_speed(),
            eta=self.formatted_eta(),
            progress=self.progress_percent()
        )

    def view_model(self) -> Dict:
        """Snapshot consumed by rendering collaborators."""
        metrics = self.derived_metrics()
        return {
            'route': self.controller.route,
            'current_index': self.controller.cursor,
            'current_point': self.current_point(),
            'is_playing': self.controller.is_playing,
            'derived_metrics': {
                'speed': metrics.speed,
                'eta': metrics.eta,
                'progress': metrics.progress,
            },
        }

    def status_line(self) -> str:
        """One-line summary of the current position for logs and consoles."""
        return (f"[{self.current_point_number()}/{self.total_points()}] "
                f"{self.formatted_coordinates()} @ {self.formatted_timestamp()} | "
                f"speed {self.formatted_speed()} | ETA {self.formatted_eta()} | "
                f"progress {self.formatted_progress()}")
