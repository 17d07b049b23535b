"""
Source decorator that publishes PTR names as CNAME records
"""

import logging
from typing import Any, Optional

from ..context import Context
from ..enrichment import AddressResolver, PTRResolver
from ..errors import PTRLookupError
from ..models import Endpoint, RecordType
from .base import EventHandler, Source


log = logging.getLogger(__name__)


class ServiceCnameSource(Source):
    """
    Wraps another source and rewrites address targets to CNAME records.

    For every endpoint produced by the wrapped source, the first target is
    reverse-resolved. When a name is found the endpoint becomes a CNAME to
    that name; otherwise the endpoint is passed through unchanged.

    The client and namespace are kept so this source can be built with the
    same arguments as the other cluster sources. They are not used.
    """

    def __init__(self, ctx: Context, client: Any, namespace: str, source: Source, *,
                 resolver: Optional[AddressResolver] = None,
                 logger: Optional[logging.Logger] = None):
        self.client = client
        self.namespace = namespace
        self.source = source
        self.resolver = resolver if resolver is not None else PTRResolver()
        self.log = logger or log

    def endpoints(self, ctx: Context) -> list[Endpoint]:
        """
        Endpoints of the wrapped source, with resolvable targets rewritten.

        Errors from the wrapped source propagate unchanged. Lookup failures
        are logged and leave the endpoint as it was.
        """
        endpoints = self.source.endpoints(ctx)

        for ep in endpoints:
            target = ep.targets[0]
            try:
                names = self.resolver.lookup_addr(target)
            except PTRLookupError as e:
                self.log.warning("Error retrieving PTR record, leaving as-is: %s", target)
                self.log.debug("PTR lookup error: %s", e)
                continue

            cname = names[0]
            self.log.debug("Resolved PTR %s -> %s", ep.dns_name, cname)
            # Registries trim the trailing dot; keeping it makes every sync see a change
            if cname.endswith('.'):
                cname = cname[:-1]
            ep.targets[0] = cname
            ep.record_type = RecordType.CNAME

        return endpoints

    def add_event_handler(self, ctx: Context, handler: EventHandler):
        """Forward the handler to the wrapped source"""
        self.log.debug("Adding event handler for service CNAME source")
        self.source.add_event_handler(ctx, handler)


def new_service_cname_source(ctx: Context, client: Any, namespace: str,
                             source: Source, **kwargs) -> ServiceCnameSource:
    """Wrap source in a ServiceCnameSource"""
    return ServiceCnameSource(ctx, client, namespace, source, **kwargs)
