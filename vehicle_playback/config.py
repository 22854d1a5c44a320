"""Configuration constants for vehicle route playback."""

import os

# Data source: bundled sample route in the source checkout
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_ROUTE_SOURCE = os.path.join(PROJECT_ROOT, 'public', 'dummy-route.json')
REQUEST_TIMEOUT_SECONDS = 10

# Geometry
EARTH_RADIUS_KM = 6371
MS_PER_MINUTE = 1000 * 60
MS_PER_HOUR = 1000 * 60 * 60

# Playback timing (milliseconds between ticks)
DEFAULT_INTERVAL_MS = 2000
MIN_INTERVAL_MS = 500
MAX_INTERVAL_MS = 3000
INTERVAL_STEP_MS = 100  # UI slider step, not enforced by the controller

# Map styling
INITIAL_CENTER = (17.385544, 78.487471)  # Hyderabad, India
INITIAL_ZOOM = 16
FIT_BOUNDS_PADDING = (50, 50)
FULL_ROUTE_STYLE = {'color': '#9ca3af', 'weight': 4, 'opacity': 0.6, 'dash_array': '10, 10'}
TRAVELED_ROUTE_STYLE = {'color': '#ef4444', 'weight': 6, 'opacity': 0.9}
