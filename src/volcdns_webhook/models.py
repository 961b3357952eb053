"""Data classes for challenges and provider resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Zone:
    """A DNS zone hosted by Volcengine Public DNS."""

    id: int
    name: str

    @classmethod
    def from_sdk(cls, zone: Any) -> Zone:
        return cls(id=int(zone.zid or 0), name=zone.zone_name or "")


@dataclass(frozen=True)
class Record:
    """A resource record inside a zone; ``host`` is relative to the zone."""

    id: str
    host: str
    type: str
    value: str
    ttl: int = 0

    @classmethod
    def from_sdk(cls, record: Any) -> Record:
        return cls(
            id=str(record.record_id or ""),
            host=record.host or "",
            type=record.type or "",
            value=record.value or "",
            ttl=int(record.ttl or 0),
        )


@dataclass(frozen=True)
class ZoneInfo:
    """The zone that owns a challenge FQDN."""

    id: int
    name: str


@dataclass(frozen=True)
class ChallengeRequest:
    """One DNS-01 challenge as handed over by the cert-manager webhook harness."""

    resolved_fqdn: str
    key: str
    resource_namespace: str = ""
    uid: str = ""
    action: str = ""
    type: str = "dns-01"
    dns_name: str = ""
    resolved_zone: str = ""
    allow_ambient_credentials: bool = False
    config: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeRequest:
        return cls(
            uid=data.get("uid", ""),
            action=data.get("action", ""),
            type=data.get("type", "dns-01"),
            dns_name=data.get("dnsName", ""),
            key=data["key"],
            resource_namespace=data.get("resourceNamespace", ""),
            resolved_fqdn=data["resolvedFQDN"],
            resolved_zone=data.get("resolvedZone", ""),
            allow_ambient_credentials=bool(data.get("allowAmbientCredentials", False)),
            config=data.get("config"),
        )
