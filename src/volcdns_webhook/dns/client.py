"""Volcengine Public DNS client: zones and records through the Volcengine SDK."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import urllib3
import volcenginesdkdns
from volcenginesdkcore.rest import ApiException

from volcdns_webhook.auth import StaticCredential
from volcdns_webhook.config import Settings
from volcdns_webhook.dns.base import DnsApi
from volcdns_webhook.dns.pager import fetch_all
from volcdns_webhook.errors import ProviderError
from volcdns_webhook.models import Record, Zone
from volcdns_webhook.sdk import build_api_client, describe_api_exception

logger = logging.getLogger(__name__)


class VolcengineDnsClient(DnsApi):
    """DNS API backed by Volcengine Public DNS.

    Args:
        region: Region the SDK signs requests for.
        credential: Access key pair, with a session token for temporary keys.
        settings: Page size, record remark, API host and request timeout.
        _dns_api: Pre-built ``volcenginesdkdns.DNSApi``; tests inject a mock.
    """

    def __init__(
        self,
        region: str,
        credential: StaticCredential,
        settings: Settings | None = None,
        _dns_api: volcenginesdkdns.DNSApi | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._dns_api = _dns_api or volcenginesdkdns.DNSApi(
            build_api_client(region, self._settings.api_host, credential)
        )

    def _call(self, operation: str, method: Callable[..., Any], request: Any) -> Any:
        """Invoke one SDK operation and return its response.

        Errors reported by the provider, transport failures, undecodable
        bodies and empty responses all raise :class:`ProviderError`.
        """
        try:
            resp = method(request, _request_timeout=self._settings.http_timeout)
        except ApiException as exc:
            message, code, request_id = describe_api_exception(exc)
            raise ProviderError(operation, message, code=code, request_id=request_id) from exc
        except (urllib3.exceptions.HTTPError, ValueError) as exc:
            raise ProviderError(operation, str(exc) or type(exc).__name__) from exc

        if resp is None:
            raise ProviderError(operation, "provider returned an empty response")
        return resp

    def list_zones(self) -> list[Zone]:
        def fetch(page_number: int, page_size: int) -> tuple[list[Zone], int]:
            resp = self._call(
                "list zones",
                self._dns_api.list_zones,
                volcenginesdkdns.ListZonesRequest(page_number=page_number, page_size=page_size),
            )
            zones = [Zone.from_sdk(z) for z in resp.zones or []]
            return zones, int(resp.total or 0)

        zones = fetch_all(self._settings.page_size, fetch)
        logger.debug("Listed %d zones", len(zones))
        return zones

    def list_records(self, zone_id: int, host: str | None = None) -> list[Record]:
        def fetch(page_number: int, page_size: int) -> tuple[list[Record], int]:
            request = volcenginesdkdns.ListRecordsRequest(
                zid=zone_id,
                host=host or None,
                page_number=page_number,
                page_size=page_size,
            )
            resp = self._call("list records", self._dns_api.list_records, request)
            records = [Record.from_sdk(r) for r in resp.records or []]
            return records, int(resp.total_count or 0)

        records = fetch_all(self._settings.page_size, fetch)
        logger.debug("Listed %d records in zone %s for host %r", len(records), zone_id, host)
        return records

    def create_record(self, zone_id: int, host: str, record_type: str, value: str, ttl: int) -> None:
        request = volcenginesdkdns.CreateRecordRequest(
            zid=zone_id,
            host=host,
            type=record_type,
            value=value,
            ttl=ttl,
            remark=self._settings.record_remark,
        )
        self._call("create record", self._dns_api.create_record, request)
        logger.info("Created %s record %s in zone %s", record_type, host, zone_id)

    def delete_record(self, zone_id: int, record_id: str) -> None:
        self._call(
            "delete record",
            self._dns_api.delete_record,
            volcenginesdkdns.DeleteRecordRequest(record_id=record_id),
        )
        logger.info("Deleted record %s from zone %s", record_id, zone_id)
