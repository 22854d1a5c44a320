"""Sentinel kinds for derived playback metrics."""

class SpeedKind:
    """Constants for speed results."""
    VALUE = "Value"
    UNAVAILABLE = "Unavailable"

class EtaKind:
    """Constants for ETA results."""
    ARRIVED = "Arrived"
    LESS_THAN_ONE_MINUTE = "LessThanOneMinute"
    MINUTES = "Minutes"
    HOURS_MINUTES = "HoursMinutes"
