"""DNS-01 challenge solver: the Present/CleanUp contract of the cert-manager webhook."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from kubernetes import client as k8s_client

from volcdns_webhook.auth import Credential, resolve_credential
from volcdns_webhook.config import Settings, SolverConfig, load_settings
from volcdns_webhook.dns import get_dns_client
from volcdns_webhook.dns.base import DnsApi
from volcdns_webhook.dns.resolver import extract_host, parse_zone_id, resolve_zone
from volcdns_webhook.dns.util import escape_txt_value, unescape_txt_value
from volcdns_webhook.kube_secrets import KubernetesSecretStore
from volcdns_webhook.models import ChallengeRequest, ZoneInfo

logger = logging.getLogger(__name__)

_TXT = "TXT"

DnsClientFactory = Callable[[str, Credential, Settings], DnsApi]


class VolcDnsSolver:
    """Create and remove DNS-01 TXT records in Volcengine Public DNS.

    Every call is self-contained: the solver config is decoded, credentials
    are resolved and a DNS client is opened for that call only. Errors
    propagate to the caller, whose reconciliation loop retries.

    Args:
        settings: Process settings; loaded from the environment when omitted.
        secret_store: Secret lookup for static credentials. Normally built by
            :meth:`initialize`.
        dns_client_factory: Builds the DNS client from region, credential and
            settings.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        secret_store: KubernetesSecretStore | None = None,
        dns_client_factory: DnsClientFactory = get_dns_client,
    ) -> None:
        self._settings = settings or load_settings()
        self._secret_store = secret_store
        self._dns_client_factory = dns_client_factory

    @property
    def name(self) -> str:
        return self._settings.solver_name

    def initialize(self, kube_client_config: k8s_client.Configuration | None = None) -> None:
        """Wire up Secret access. Must run once before any present/cleanup."""
        self._secret_store = KubernetesSecretStore.from_config(kube_client_config)
        logger.info("Initialized solver %s", self.name)

    @contextmanager
    def _open_zone(self, ch: ChallengeRequest) -> Iterator[tuple[DnsApi, ZoneInfo, str]]:
        """Yield a DNS client, the owning zone and the record host for a challenge."""
        cfg = SolverConfig.from_json(ch.config)
        if cfg.zone_id:
            parse_zone_id(cfg.zone_id)

        credential = resolve_credential(cfg, ch.resource_namespace, self._secret_store, self._settings)
        with self._dns_client_factory(cfg.region, credential, self._settings) as client:
            zone = resolve_zone(client, ch.resolved_fqdn, cfg.zone_id or None)
            host = extract_host(ch.resolved_fqdn, zone.name)
            yield client, zone, host

    def present(self, ch: ChallengeRequest) -> None:
        """Create the challenge TXT record."""
        logger.info("Presenting challenge for %s", ch.resolved_fqdn)
        with self._open_zone(ch) as (client, zone, host):
            value = escape_txt_value(ch.key)
            client.create_record(zone.id, host, _TXT, value, self._settings.record_ttl)
        logger.info("Presented challenge for %s in zone %s as host %s", ch.resolved_fqdn, zone.name, host)

    def cleanup(self, ch: ChallengeRequest) -> None:
        """Delete the challenge TXT record; an already-absent record is not an error."""
        logger.info("Cleaning up challenge for %s", ch.resolved_fqdn)
        with self._open_zone(ch) as (client, zone, host):
            value = escape_txt_value(ch.key)
            # The host filter is only a hint to the provider
            for record in client.list_records(zone.id, host):
                if record.type != _TXT or record.host != host:
                    continue
                if record.value == value or unescape_txt_value(record.value) in (value, ch.key):
                    client.delete_record(zone.id, record.id)
                    logger.info("Cleaned up challenge for %s (record %s)", ch.resolved_fqdn, record.id)
                    return

        logger.warning("Record not found for cleanup: %s", ch.resolved_fqdn)
