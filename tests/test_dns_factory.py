"""Tests for the DNS client factory."""

from unittest.mock import MagicMock, patch

from volcdns_webhook.auth import OidcCredential, StaticCredential
from volcdns_webhook.config import Settings
from volcdns_webhook.dns import get_dns_client


class TestGetDnsClient:
    @patch("volcdns_webhook.dns.VolcengineDnsClient")
    def test_static_credential_passed_through(self, mock_cls):
        cred = StaticCredential("AK", "SK")
        settings = Settings()

        client = get_dns_client("cn-shanghai", cred, settings)

        mock_cls.assert_called_once_with("cn-shanghai", cred, settings)
        assert client is mock_cls.return_value

    @patch("volcdns_webhook.dns.VolcengineDnsClient")
    def test_empty_region_defaults(self, mock_cls):
        get_dns_client("", StaticCredential("AK", "SK"), Settings())

        assert mock_cls.call_args.args[0] == "cn-beijing"

    @patch("volcdns_webhook.dns.VolcengineDnsClient")
    def test_oidc_credential_is_exchanged(self, mock_cls):
        oidc = MagicMock(spec=OidcCredential)
        oidc.exchange.return_value = StaticCredential("TMPAK", "TMPSK", "TOKEN")

        get_dns_client("cn-beijing", oidc, Settings(http_timeout=7))

        oidc.exchange.assert_called_once_with(timeout=7)
        assert mock_cls.call_args.args[1] == StaticCredential("TMPAK", "TMPSK", "TOKEN")
