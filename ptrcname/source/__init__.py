"""
Endpoint sources for ptrcname
"""

from .base import EventHandler, Source
from .factory import build_source
from .file import FileSource, parse_endpoints
from .http import HTTPSource
from .service_cname import ServiceCnameSource, new_service_cname_source

__all__ = [
    'EventHandler', 'Source', 'build_source', 'FileSource', 'parse_endpoints',
    'HTTPSource', 'ServiceCnameSource', 'new_service_cname_source',
]
