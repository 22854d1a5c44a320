"""Type definitions and interfaces for vehicle route playback."""

from typing import Optional, Tuple
from dataclasses import dataclass

from .config import DEFAULT_INTERVAL_MS
from .metric_kinds import SpeedKind, EtaKind

@dataclass(frozen=True)
class RoutePoint:
    """A single recorded vehicle position."""
    lat: float
    lng: float
    timestamp_ms: int

    @property
    def coords(self) -> Tuple[float, float]:
        return (self.lat, self.lng)

Route = Tuple[RoutePoint, ...]

@dataclass
class PlaybackState:
    """Snapshot of the playback cursor and timer settings."""
    cursor: int = 0
    is_playing: bool = False
    interval_ms: int = DEFAULT_INTERVAL_MS

@dataclass(frozen=True)
class SpeedResult:
    """Instantaneous speed at a cursor position."""
    kind: str
    value: Optional[float] = None

    @classmethod
    def of(cls, value: float) -> 'SpeedResult':
        return cls(SpeedKind.VALUE, value)

    @classmethod
    def unavailable(cls) -> 'SpeedResult':
        return cls(SpeedKind.UNAVAILABLE)

    @property
    def is_available(self) -> bool:
        return self.kind == SpeedKind.VALUE

@dataclass(frozen=True)
class EtaResult:
    """Remaining travel time from a cursor position to the final point."""
    kind: str
    hours: Optional[int] = None
    minutes: Optional[int] = None

    @classmethod
    def arrived(cls) -> 'EtaResult':
        return cls(EtaKind.ARRIVED)

    @classmethod
    def less_than_one_minute(cls) -> 'EtaResult':
        return cls(EtaKind.LESS_THAN_ONE_MINUTE)

    @classmethod
    def of_minutes(cls, minutes: int) -> 'EtaResult':
        return cls(EtaKind.MINUTES, minutes=minutes)

    @classmethod
    def of_hours(cls, hours: int, minutes: int) -> 'EtaResult':
        return cls(EtaKind.HOURS_MINUTES, hours=hours, minutes=minutes)

@dataclass(frozen=True)
class DerivedMetrics:
    """Display-ready telemetry for the current cursor."""
    speed: str
    eta: str
    progress: float
