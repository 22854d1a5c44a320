"""Vehicle route playback package."""

from .interfaces import RoutePoint, PlaybackState, SpeedResult, EtaResult, DerivedMetrics
from .metric_kinds import SpeedKind, EtaKind
from .exceptions import DataLoadError
from .geo_utils import distance_km, speed_kmh, eta, format_speed, format_eta
from .playback import PlaybackController
from .presentation import PresentationAdapter
from .data_loader import RouteDataLoader
from .session import PlaybackSession, SessionStatus
from .visualization import create_playback_map

__all__ = [
    'RoutePoint', 'PlaybackState', 'SpeedResult', 'EtaResult', 'DerivedMetrics',
    'SpeedKind', 'EtaKind', 'DataLoadError',
    'distance_km', 'speed_kmh', 'eta', 'format_speed', 'format_eta',
    'PlaybackController', 'PresentationAdapter', 'RouteDataLoader',
    'PlaybackSession', 'SessionStatus', 'create_playback_map'
]
