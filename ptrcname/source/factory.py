"""
Build a source from a location string
"""

from .base import Source
from .file import FileSource
from .http import HTTPSource


def build_source(location: str, timeout: float = 5.0) -> Source:
    """
    Pick a source for location.

    Args:
        location: http(s) URL or path to a JSON file
        timeout: HTTP timeout in seconds
    """
    if location.startswith(('http://', 'https://')):
        return HTTPSource(location, timeout=timeout)
    return FileSource(location)
