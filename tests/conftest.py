"""Shared test fixtures for volcdns-webhook."""

import pytest

from volcdns_webhook.config import Settings
from volcdns_webhook.dns.base import DnsApi
from volcdns_webhook.models import Record, Zone


class FakeDnsApi(DnsApi):
    """In-memory DNS API that records every call."""

    def __init__(self, zones=(), records=()):
        self.zones = list(zones)
        self.records = list(records)
        self.created = []
        self.deleted = []
        self.list_zones_calls = 0
        self.list_records_calls = []
        self.closed = False

    def list_zones(self):
        self.list_zones_calls += 1
        return list(self.zones)

    def list_records(self, zone_id, host=None):
        self.list_records_calls.append((zone_id, host))
        return list(self.records)

    def create_record(self, zone_id, host, record_type, value, ttl):
        self.created.append((zone_id, host, record_type, value, ttl))
        self.records.append(Record(id=f"rec-{len(self.created)}", host=host, type=record_type, value=value, ttl=ttl))

    def delete_record(self, zone_id, record_id):
        self.deleted.append((zone_id, record_id))
        self.records = [r for r in self.records if r.id != record_id]

    def close(self):
        self.closed = True


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_dns():
    return FakeDnsApi(zones=[Zone(id=1001, name="example.com"), Zone(id=1002, name="sub.example.com")])


@pytest.fixture
def make_fake_dns():
    return FakeDnsApi
