"""
Runtime configuration for ptrcname
"""

from dataclasses import dataclass, field
from typing import Optional


RESOLVER_BACKENDS = ('dns', 'system')


@dataclass
class Config:
    """Settings collected from the command line and PTRCNAME_* variables"""
    source: str
    namespace: str = ""
    resolver: str = 'dns'
    nameservers: list[str] = field(default_factory=list)
    lookup_timeout: Optional[float] = None  # None keeps the resolver's default
    source_timeout: float = 5.0
    json_path: Optional[str] = None
    verbosity: int = 0
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.resolver not in RESOLVER_BACKENDS:
            raise ValueError(f"resolver must be one of {', '.join(RESOLVER_BACKENDS)}")
        if self.lookup_timeout is not None and self.lookup_timeout <= 0:
            raise ValueError("lookup timeout must be positive")
        if self.source_timeout <= 0:
            raise ValueError("source timeout must be positive")
        if self.nameservers and self.resolver != 'dns':
            raise ValueError("nameservers can only be used with the dns resolver")

    @property
    def log_level(self) -> str:
        if self.verbosity >= 2:
            return "debug"
        if self.verbosity == 1:
            return "info"
        return "warning"
