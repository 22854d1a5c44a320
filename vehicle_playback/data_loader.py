"""Data loading functionality for vehicle route playback."""

import datetime
import json
import logging
from typing import Dict, List, Union
import requests
from .config import DEFAULT_ROUTE_SOURCE, REQUEST_TIMEOUT_SECONDS
from .exceptions import DataLoadError
from .interfaces import Route, RoutePoint

logger = logging.getLogger(__name__)

def parse_timestamp(value: Union[str, int, float]) -> int:
    """Convert a record timestamp into milliseconds since the epoch.

    Args:
        value: ISO-8601 string (naive values are read as UTC) or epoch milliseconds

    Returns:
        Milliseconds since the Unix epoch
    """
    if isinstance(value, bool):
        raise TypeError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return int(value)

    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    moment = datetime.datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.timezone.utc)
    return int(round(moment.timestamp() * 1000))

class RouteDataLoader:
    """Class to load recorded vehicle routes."""

    def __init__(self, timeout: float = REQUEST_TIMEOUT_SECONDS):
        """Initialize the route data loader."""
        self.timeout = timeout
        self.points: Route = ()

    def load_data(self, source: str = None) -> Route:
        """Load route points from a JSON URL or file.

        Args:
            source: http(s) URL or local path. If None, uses the default source.

        Returns:
            Tuple of RoutePoint in file order

        Raises:
            DataLoadError: If the data cannot be fetched or parsed
        """
        if not source:
            source = DEFAULT_ROUTE_SOURCE
            logger.debug(f"No source provided, using default: {source}")

        logger.info(f"Loading route data from {source}")

        try:
            data = self._fetch(source)
            logger.debug(f"Retrieved {len(data)} records")
            self.points = self._process_records(data)
        except (requests.RequestException, json.JSONDecodeError, OSError,
                KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Failed to load route data: {str(e)}")
            raise DataLoadError(f"Failed to load route data from {source}: {e}", source) from e

        logger.info(f"Successfully loaded route with {len(self.points)} points")
        return self.points

    def _fetch(self, source: str) -> List[Dict]:
        if source.startswith(('http://', 'https://')):
            response = requests.get(source, timeout=self.timeout)
            response.raise_for_status()
            data = json.loads(response.content)
        else:
            with open(source, 'r', encoding='utf-8') as handle:
                data = json.load(handle)

        if not isinstance(data, list):
            raise TypeError(f"Expected a list of route records, got {type(data).__name__}")
        return data

    def _process_records(self, records: List[Dict]) -> Route:
        """Map raw records into route points.

        Args:
            records: Dicts with latitude, longitude and timestamp keys
        """
        points = tuple(
            RoutePoint(
                lat=float(record['latitude']),
                lng=float(record['longitude']),
                timestamp_ms=parse_timestamp(record['timestamp'])
            )
            for record in records
        )

        for previous, current in zip(points, points[1:]):
            if current.timestamp_ms < previous.timestamp_ms:
                logger.warning("Route timestamps are not in chronological order")
                break

        return points
