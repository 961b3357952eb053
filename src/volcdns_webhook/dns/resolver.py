"""Zone resolution: map a challenge FQDN to the hosted zone that owns it."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from volcdns_webhook.dns.base import DnsApi
from volcdns_webhook.errors import InvalidArgumentError, ZoneNotFoundError
from volcdns_webhook.models import Zone, ZoneInfo

logger = logging.getLogger(__name__)

APEX = "@"


def _normalize(name: str) -> str:
    return name.removesuffix(".").lower()


def parse_zone_id(zone_id: str) -> int:
    """Parse a configured zone ID, which must be an integer."""
    try:
        return int(zone_id)
    except ValueError:
        raise InvalidArgumentError(f"invalid zoneID format: {zone_id!r}") from None


def find_zone(zones: Iterable[Zone], fqdn: str) -> ZoneInfo:
    """Pick the most specific zone that owns ``fqdn``.

    A zone owns the name when the two are equal or the name ends with
    ``"." + zone``, ignoring case and one trailing dot. The longest zone name
    wins; between equally long names the first one listed is kept.
    """
    name = _normalize(fqdn)
    match: Zone | None = None
    longest = 0

    for zone in zones:
        zone_name = _normalize(zone.name)
        if not zone_name:
            continue
        if (name == zone_name or name.endswith(f".{zone_name}")) and len(zone_name) > longest:
            match = zone
            longest = len(zone_name)

    if match is None:
        raise ZoneNotFoundError(f"no matching zone found for {fqdn.removesuffix('.')}")
    return ZoneInfo(id=match.id, name=match.name)


def resolve_zone(client: DnsApi, fqdn: str, pinned_zone_id: str | None = None) -> ZoneInfo:
    """Return the zone for ``fqdn``, honouring a configured zone ID when given.

    A pinned ID is validated before any API call; its name still comes from
    the zone listing since host extraction needs it.
    """
    if pinned_zone_id:
        zid = parse_zone_id(pinned_zone_id)
        for zone in client.list_zones():
            if zone.id == zid:
                logger.debug("Using configured zone %s (%s)", zid, zone.name)
                return ZoneInfo(id=zid, name=zone.name)
        raise ZoneNotFoundError(f"configured zoneID {pinned_zone_id} not found")

    info = find_zone(client.list_zones(), fqdn)
    logger.debug("Resolved %s to zone %s (%s)", fqdn, info.id, info.name)
    return info


def extract_host(fqdn: str, zone_name: str) -> str:
    """Return the record host of ``fqdn`` relative to ``zone_name``.

    The apex is ``"@"``. A name outside the zone is returned unchanged.
    """
    fqdn = fqdn.removesuffix(".")
    zone_name = zone_name.removesuffix(".")

    if fqdn.lower() == zone_name.lower():
        return APEX
    suffix = f".{zone_name}"
    if fqdn.lower().endswith(suffix.lower()):
        return fqdn[: -len(suffix)]
    return fqdn
