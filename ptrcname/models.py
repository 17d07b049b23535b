"""
Data models for ptrcname
"""

from dataclasses import dataclass, field
from typing import Any

from .errors import EndpointFormatError


class RecordType:
    """DNS record type tags"""
    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    TXT = "TXT"
    SRV = "SRV"
    NS = "NS"
    PTR = "PTR"
    MX = "MX"


@dataclass
class Endpoint:
    """A single DNS record to be published"""
    dns_name: str
    targets: list[str] = field(default_factory=list)
    record_type: str = RecordType.A
    record_ttl: int = 0
    labels: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> 'Endpoint':
        """
        Build an endpoint from its JSON representation.

        Args:
            data: Dict with dnsName, targets, recordType, recordTTL, labels

        Returns:
            Endpoint

        Raises:
            EndpointFormatError: If required fields are missing or malformed
        """
        if not isinstance(data, dict):
            raise EndpointFormatError(f"endpoint must be an object, got {type(data).__name__}")

        dns_name = data.get('dnsName')
        if not dns_name or not isinstance(dns_name, str):
            raise EndpointFormatError("endpoint is missing dnsName")

        targets = data.get('targets', [])
        if not isinstance(targets, list):
            raise EndpointFormatError(f"targets of {dns_name} must be a list")

        try:
            ttl = int(data.get('recordTTL', 0) or 0)
        except (TypeError, ValueError):
            raise EndpointFormatError(f"recordTTL of {dns_name} is not an integer")

        labels = data.get('labels') or {}
        if not isinstance(labels, dict):
            raise EndpointFormatError(f"labels of {dns_name} must be an object")

        return cls(
            dns_name=dns_name,
            targets=[str(t) for t in targets],
            record_type=str(data.get('recordType') or RecordType.A),
            record_ttl=ttl,
            labels={str(k): str(v) for k, v in labels.items()},
        )

    def to_dict(self) -> dict:
        """Serialize to the JSON representation"""
        data = {
            "dnsName": self.dns_name,
            "targets": list(self.targets),
            "recordType": self.record_type,
        }
        if self.record_ttl:
            data["recordTTL"] = self.record_ttl
        if self.labels:
            data["labels"] = dict(self.labels)
        return data

    def __str__(self) -> str:
        return f"{self.dns_name} {self.record_ttl} IN {self.record_type} {' '.join(self.targets)}"
