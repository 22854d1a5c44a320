"""Visualization utilities for vehicle route playback."""

import datetime
import os
import logging
import folium
from typing import List, Optional, Tuple
from shapely.geometry import MultiPoint

from .config import (INITIAL_CENTER, INITIAL_ZOOM, FIT_BOUNDS_PADDING,
                     FULL_ROUTE_STYLE, TRAVELED_ROUTE_STYLE)
from .interfaces import RoutePoint
from .presentation import PresentationAdapter

logger = logging.getLogger(__name__)

def _div_icon(symbol: str, size: int) -> folium.DivIcon:
    return folium.DivIcon(
        html=f'<div style="font-size: {size}px; text-align: center; line-height: 1;">{symbol}</div>',
        icon_size=(size, size),
        icon_anchor=(size // 2, size // 2)
    )

def _format_datetime(point: RoutePoint) -> str:
    moment = datetime.datetime.fromtimestamp(point.timestamp_ms / 1000, tz=datetime.timezone.utc)
    return moment.strftime('%Y-%m-%d %H:%M:%S UTC')

def route_bounds(path: List[Tuple[float, float]]) -> Optional[List[List[float]]]:
    """Get the south-west and north-east corners enclosing a path.

    Args:
        path: List of (lat, lng) coordinates

    Returns:
        [[south, west], [north, east]] or None for an empty path
    """
    if not path:
        return None
    # shapely works in (x, y) = (lng, lat)
    min_lng, min_lat, max_lng, max_lat = MultiPoint([(lng, lat) for lat, lng in path]).bounds
    return [[min_lat, min_lng], [max_lat, max_lng]]

def create_playback_map(presenter: PresentationAdapter, filename: str = "playback_map.html") -> str:
    """Create an interactive map of the route at the current playback position.

    Args:
        presenter: PresentationAdapter over the playback controller
        filename: Name of the output HTML file

    Returns:
        Path to the generated HTML file
    """
    m = folium.Map(location=list(INITIAL_CENTER), zoom_start=INITIAL_ZOOM)
    route = presenter.controller.route

    full_path = presenter.full_path()
    traveled_path = presenter.traveled_path()

    bounds = route_bounds(full_path)
    if bounds:
        m.fit_bounds(bounds, padding=FIT_BOUNDS_PADDING)

    # Complete route (gray dashed)
    if len(full_path) > 1:
        folium.PolyLine(full_path, **FULL_ROUTE_STYLE).add_to(m)

    # Traveled route (red solid)
    if len(traveled_path) > 1:
        folium.PolyLine(traveled_path, **TRAVELED_ROUTE_STYLE).add_to(m)

    if route:
        start = route[0]
        folium.Marker(
            list(start.coords),
            popup=folium.Popup(f"<strong>Start Point</strong><br>{_format_datetime(start)}"),
            icon=_div_icon('🔵', 28)
        ).add_to(m)

    if len(route) > 1:
        end = route[-1]
        folium.Marker(
            list(end.coords),
            popup=folium.Popup(f"<strong>End Point</strong><br>{_format_datetime(end)}"),
            icon=_div_icon('📍', 28)
        ).add_to(m)

    current = presenter.current_point()
    if current is not None:
        popup_html = (
            f"<strong>Current Position</strong><br>"
            f"Lat: {current.lat:.6f}<br>"
            f"Lng: {current.lng:.6f}<br>"
            f"Time: {presenter.formatted_timestamp()}<br>"
            f"Speed: {presenter.formatted_speed()}<br>"
            f"ETA: {presenter.formatted_eta()}<br>"
            f"Progress: {presenter.formatted_progress()}"
        )
        folium.Marker(
            list(current.coords),
            popup=folium.Popup(popup_html, max_width=300),
            tooltip=f"Point {presenter.current_point_number()} of {presenter.total_points()}",
            icon=_div_icon('🚗', 32),
            z_index_offset=1000
        ).add_to(m)
    else:
        logger.debug("No current position to draw")

    output_path = os.path.abspath(filename)
    m.save(output_path)
    logger.debug(f"Saved playback map to {output_path}")
    return output_path
