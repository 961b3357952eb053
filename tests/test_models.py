"""Tests for volcdns_webhook.models."""

from types import SimpleNamespace


def test_zone_from_sdk():
    from volcdns_webhook.models import Zone

    zone = SimpleNamespace(zid=1001, zone_name="example.com", record_count=3)
    assert Zone.from_sdk(zone) == Zone(1001, "example.com")


def test_record_from_sdk_missing_fields():
    from volcdns_webhook.models import Record

    record = Record.from_sdk(SimpleNamespace(record_id="r1", host="@", type="TXT", value=None, ttl=None))
    assert record.value == ""
    assert record.ttl == 0


def test_challenge_request_from_cert_manager_json():
    from volcdns_webhook.models import ChallengeRequest

    ch = ChallengeRequest.from_dict(
        {
            "uid": "abc",
            "action": "Present",
            "type": "dns-01",
            "dnsName": "foo.example.com",
            "key": "tok123",
            "resourceNamespace": "cert-manager",
            "resolvedFQDN": "_acme-challenge.foo.example.com.",
            "resolvedZone": "example.com.",
            "allowAmbientCredentials": False,
            "config": {"region": "cn-beijing"},
        }
    )
    assert ch.resolved_fqdn == "_acme-challenge.foo.example.com."
    assert ch.key == "tok123"
    assert ch.resource_namespace == "cert-manager"
    assert ch.config == {"region": "cn-beijing"}


def test_challenge_request_defaults():
    from volcdns_webhook.models import ChallengeRequest

    ch = ChallengeRequest.from_dict({"key": "k", "resolvedFQDN": "_acme-challenge.example.com."})
    assert ch.type == "dns-01"
    assert ch.config is None
    assert not ch.allow_ambient_credentials
