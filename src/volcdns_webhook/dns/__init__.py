"""DNS client factory: turn a resolved credential into a ready client."""

from __future__ import annotations

from volcdns_webhook.auth import Credential, OidcCredential
from volcdns_webhook.config import Settings
from volcdns_webhook.dns.base import DnsApi
from volcdns_webhook.dns.client import VolcengineDnsClient

DEFAULT_REGION = "cn-beijing"


def get_dns_client(region: str, credential: Credential, settings: Settings) -> DnsApi:
    """Instantiate a Volcengine DNS client.

    Args:
        region: Region from the solver config; empty selects ``cn-beijing``.
        credential: Static keys, or an OIDC descriptor that is exchanged for
            temporary keys here.
        settings: Process settings (page size, remark, endpoint, timeout).

    Returns:
        A configured DnsApi instance. Use it as a context manager.
    """
    if isinstance(credential, OidcCredential):
        credential = credential.exchange(timeout=settings.http_timeout)
    return VolcengineDnsClient(region or DEFAULT_REGION, credential, settings)
