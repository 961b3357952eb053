"""Abstract interface for the DNS provider operations the solver needs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from volcdns_webhook.models import Record, Zone


class DnsApi(ABC):
    """Zone and record operations of a hosted DNS service.

    Implementations raise :class:`~volcdns_webhook.errors.ProviderError` for
    every failure, whether the call itself failed or the provider reported an
    error inside its response.
    """

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @abstractmethod
    def list_zones(self) -> list[Zone]:
        """Return every zone visible to the credential."""

    @abstractmethod
    def list_records(self, zone_id: int, host: str | None = None) -> list[Record]:
        """Return the records of a zone.

        Args:
            zone_id: Numeric zone identifier.
            host: Optional host filter passed to the provider. The provider may
                ignore it, so callers must filter the result themselves.
        """

    @abstractmethod
    def create_record(self, zone_id: int, host: str, record_type: str, value: str, ttl: int) -> None:
        """Create a record in a zone.

        Args:
            zone_id: Numeric zone identifier.
            host: Record host relative to the zone (``"@"`` for the apex).
            record_type: Record type, e.g. ``"TXT"``.
            value: Record value, already escaped for the provider.
            ttl: Time to live in seconds.
        """

    @abstractmethod
    def delete_record(self, zone_id: int, record_id: str) -> None:
        """Delete a record by its identifier."""
