"""Shared plumbing for the Volcengine Python SDK."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import volcenginesdkcore
from volcenginesdkcore.rest import ApiException

if TYPE_CHECKING:
    from volcdns_webhook.auth import StaticCredential


def build_api_client(
    region: str,
    host: str,
    credential: StaticCredential | None = None,
) -> volcenginesdkcore.ApiClient:
    """Return an SDK API client scoped to one region, host and credential.

    A fresh configuration is built per client; the SDK's process-wide default
    configuration is never touched.
    """
    configuration = volcenginesdkcore.Configuration()
    configuration.region = region
    configuration.host = host
    if credential is not None:
        configuration.ak = credential.access_key_id
        configuration.sk = credential.secret_access_key
        if credential.session_token:
            configuration.session_token = credential.session_token
    return volcenginesdkcore.ApiClient(configuration)


def describe_api_exception(exc: ApiException) -> tuple[str, str | None, str | None]:
    """Extract ``(message, code, request_id)`` from an SDK error.

    The body normally carries the OpenAPI ``ResponseMetadata`` envelope; when it
    does not, the HTTP status and reason are used instead.
    """
    try:
        data = json.loads(exc.body or "")
    except (TypeError, ValueError):
        data = None

    metadata = data.get("ResponseMetadata") if isinstance(data, dict) else None
    if isinstance(metadata, dict):
        error = metadata.get("Error") or {}
        message = error.get("Message") or f"{exc.status} {exc.reason}"
        return message, error.get("Code"), metadata.get("RequestId")
    return f"{exc.status} {exc.reason}", None, None
