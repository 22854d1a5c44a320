"""Geographic utility functions for vehicle route playback."""

import math
from typing import Sequence, Tuple, Union

from .config import EARTH_RADIUS_KM, MS_PER_HOUR, MS_PER_MINUTE
from .interfaces import RoutePoint, SpeedResult, EtaResult
from .metric_kinds import SpeedKind, EtaKind

Coordinate = Union[Tuple[float, float], RoutePoint]

def _lat_lng(coord: Coordinate) -> Tuple[float, float]:
    if isinstance(coord, RoutePoint):
        return coord.lat, coord.lng
    return coord[0], coord[1]

def distance_km(start_coord: Coordinate, end_coord: Coordinate) -> float:
    """Calculate the great circle distance between two coordinates.

    Args:
        start_coord: Starting coordinate (lat, lon) or RoutePoint
        end_coord: Ending coordinate (lat, lon) or RoutePoint

    Returns:
        Distance in kilometers. Malformed input yields NaN rather than an error.
    """
    start_lat, start_lon = _lat_lng(start_coord)
    end_lat, end_lon = _lat_lng(end_coord)

    lat1 = math.radians(start_lat)
    lat2 = math.radians(end_lat)
    diff_lat = math.radians(end_lat - start_lat)
    diff_lon = math.radians(end_lon - start_lon)

    a = (math.sin(diff_lat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(diff_lon / 2) ** 2)
    # Rounding can push a just past 1 for antipodal points
    if a > 1:
        a = 1.0
    c = 2 * math.asin(math.sqrt(a))

    return EARTH_RADIUS_KM * c

def speed_kmh(route: Sequence[RoutePoint], cursor: int) -> SpeedResult:
    """Calculate the speed over the segment ending at the cursor.

    Args:
        route: Ordered route points
        cursor: Index of the current point

    Returns:
        SpeedResult with the speed in km/h rounded to two decimals, or an
        unavailable result when the segment has no positive duration.
    """
    if cursor == 0 or len(route) <= 1:
        return SpeedResult.of(0.0)
    if not 0 < cursor < len(route):
        return SpeedResult.of(0.0)

    prev_point = route[cursor - 1]
    curr_point = route[cursor]

    distance = distance_km(prev_point, curr_point)
    elapsed_hours = (curr_point.timestamp_ms - prev_point.timestamp_ms) / MS_PER_HOUR

    if elapsed_hours <= 0:
        return SpeedResult.unavailable()

    return SpeedResult.of(round(distance / elapsed_hours, 2))

def eta(route: Sequence[RoutePoint], cursor: int) -> EtaResult:
    """Calculate the remaining time until the final point of the route.

    Out-of-order timestamps are not corrected: a negative remainder is floored
    like any other value.
    """
    if not route or cursor >= len(route) - 1:
        return EtaResult.arrived()

    current_point = route[cursor]
    last_point = route[-1]

    remaining_ms = last_point.timestamp_ms - current_point.timestamp_ms
    remaining_minutes = math.floor(remaining_ms / MS_PER_MINUTE)

    if remaining_minutes < 1:
        return EtaResult.less_than_one_minute()
    if remaining_minutes < 60:
        return EtaResult.of_minutes(remaining_minutes)

    return EtaResult.of_hours(remaining_minutes // 60, remaining_minutes % 60)

def format_speed(result: SpeedResult) -> str:
    """Render a speed result as "12.34" or "N/A"."""
    if result.kind == SpeedKind.UNAVAILABLE:
        return 'N/A'
    return f"{result.value:.2f}"

def format_eta(result: EtaResult) -> str:
    """Render an ETA result as a short duration string."""
    if result.kind == EtaKind.ARRIVED:
        return 'Arrived'
    if result.kind == EtaKind.LESS_THAN_ONE_MINUTE:
        return 'Less than 1 min'
    if result.kind == EtaKind.MINUTES:
        return f"{result.minutes} min"
    return f"{result.hours}h {result.minutes}m"
