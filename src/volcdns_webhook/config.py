"""Configuration loading: process settings from environment, solver config from JSON."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass

from volcdns_webhook.errors import InvalidArgumentError

_DEFAULT_PAGE_SIZE = 100
_DEFAULT_RECORD_TTL = 300
_DEFAULT_RECORD_REMARK = "managed by cert-manager-volcdns-webhook"
_DEFAULT_API_HOST = "open.volcengineapi.com"
_DEFAULT_HTTP_TIMEOUT = 30
_DEFAULT_STS_ENDPOINT = "sts.volcengineapi.com"
_DEFAULT_OIDC_SESSION_NAME = "cert-manager"
_DEFAULT_OIDC_TOKEN_FILE = "/var/run/secrets/vke.volcengine.com/irsa-tokens/token"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings shared by every challenge."""

    solver_name: str = "volcdns-resolver"
    page_size: int = _DEFAULT_PAGE_SIZE
    record_ttl: int = _DEFAULT_RECORD_TTL
    record_remark: str = _DEFAULT_RECORD_REMARK
    api_host: str = _DEFAULT_API_HOST
    http_timeout: float = _DEFAULT_HTTP_TIMEOUT
    sts_endpoint: str = _DEFAULT_STS_ENDPOINT
    oidc_role_trn: str | None = None
    oidc_token_file: str = _DEFAULT_OIDC_TOKEN_FILE
    oidc_session_name: str = _DEFAULT_OIDC_SESSION_NAME


def _positive_int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{name} must be an integer, got: {raw!r}")
    if value < 1:
        raise InvalidArgumentError(f"{name} must be a positive integer, got: {value}")
    return value


def load_settings() -> Settings:
    """Load and validate process settings from environment variables."""
    page_size = _positive_int_env("VOLCDNS_PAGE_SIZE", _DEFAULT_PAGE_SIZE)
    record_ttl = _positive_int_env("VOLCDNS_RECORD_TTL", _DEFAULT_RECORD_TTL)
    http_timeout = _positive_int_env("VOLCDNS_HTTP_TIMEOUT", _DEFAULT_HTTP_TIMEOUT)

    return Settings(
        page_size=page_size,
        record_ttl=record_ttl,
        record_remark=os.environ.get("VOLCDNS_RECORD_REMARK", _DEFAULT_RECORD_REMARK),
        api_host=os.environ.get("VOLCDNS_API_HOST") or _DEFAULT_API_HOST,
        http_timeout=http_timeout,
        # Empty values fall back to the defaults, like unset ones
        sts_endpoint=os.environ.get("VOLCENGINE_OIDC_ENDPOINT") or _DEFAULT_STS_ENDPOINT,
        oidc_role_trn=os.environ.get("VOLCENGINE_OIDC_ROLE_TRN") or None,
        oidc_token_file=os.environ.get("VOLCENGINE_OIDC_TOKEN_FILE") or _DEFAULT_OIDC_TOKEN_FILE,
        oidc_session_name=os.environ.get("VOLCENGINE_OIDC_ROLE_SESSION_NAME") or _DEFAULT_OIDC_SESSION_NAME,
    )


@dataclass(frozen=True)
class SecretKeySelector:
    """Reference to one key of a Kubernetes Secret in the challenge namespace."""

    name: str = ""
    key: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> SecretKeySelector:
        data = data or {}
        return cls(name=data.get("name", ""), key=data.get("key", ""))


@dataclass(frozen=True)
class SolverConfig:
    """Per-challenge configuration decoded from the issuer's webhook config."""

    region: str = ""
    zone_id: str = ""
    role_trn: str = ""
    access_key_secret_ref: SecretKeySelector = SecretKeySelector()
    secret_key_secret_ref: SecretKeySelector = SecretKeySelector()

    @property
    def uses_static_credentials(self) -> bool:
        return bool(self.access_key_secret_ref.name and self.secret_key_secret_ref.name)

    @classmethod
    def from_dict(cls, data: dict) -> SolverConfig:
        return cls(
            region=data.get("region") or "",
            zone_id=str(data.get("zoneID") or ""),
            role_trn=data.get("roleTrn") or "",
            access_key_secret_ref=SecretKeySelector.from_dict(data.get("accessKeySecretRef")),
            secret_key_secret_ref=SecretKeySelector.from_dict(data.get("secretKeySecretRef")),
        )

    @classmethod
    def from_json(cls, raw: str | bytes | dict | None) -> SolverConfig:
        """Decode solver config; an absent or empty config yields all defaults."""
        if raw is None:
            return cls()
        if isinstance(raw, dict):
            return cls.from_dict(raw)
        if isinstance(raw, bytes):
            raw = raw.decode()
        if not raw.strip():
            return cls()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InvalidArgumentError(f"error decoding solver config: {exc}") from exc
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise InvalidArgumentError(
                f"error decoding solver config: expected an object, got {type(data).__name__}"
            )
        return cls.from_dict(data)
