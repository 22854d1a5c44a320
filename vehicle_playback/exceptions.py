"""Exceptions raised by vehicle route playback."""


class DataLoadError(Exception):
    """Route data could not be fetched or parsed."""

    def __init__(self, message: str, source: str = None):
        super().__init__(message)
        self.source = source
