"""
Exception types for ptrcname
"""


class PtrCnameError(Exception):
    """Base class for all ptrcname errors"""


class SourceError(PtrCnameError):
    """An endpoint source failed to produce endpoints"""


class EndpointFormatError(SourceError):
    """Endpoint document does not have the expected shape"""


class ContextCancelled(PtrCnameError):
    """Raised by Context.check() once cancelled or past its deadline"""


class PTRLookupError(PtrCnameError):
    """Reverse lookup of an address failed"""

    def __init__(self, address: str, reason: str):
        super().__init__(f"PTR lookup for {address} failed: {reason}")
        self.address = address
        self.reason = reason
