"""Credential resolution: static keys from Kubernetes Secrets or OIDC role exchange."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import urllib3
import volcenginesdksts
from volcenginesdkcore.rest import ApiException

from volcdns_webhook.config import Settings, SolverConfig
from volcdns_webhook.errors import AccessDeniedError
from volcdns_webhook.sdk import build_api_client, describe_api_exception

if TYPE_CHECKING:
    from volcdns_webhook.kube_secrets import KubernetesSecretStore

logger = logging.getLogger(__name__)

_STS_REGION = "cn-beijing"
_DEFAULT_DURATION_SECONDS = 3600


@dataclass(frozen=True)
class StaticCredential:
    """Access key pair, with a session token when it came from a role exchange."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class OidcCredential:
    """Descriptor for exchanging a projected service-account token for temporary keys."""

    role_trn: str
    endpoint: str
    token_file: str
    session_name: str
    duration_seconds: int = _DEFAULT_DURATION_SECONDS

    def exchange(self, _sts_api: volcenginesdksts.STSApi | None = None, timeout: float = 30) -> StaticCredential:
        """Call STS ``AssumeRoleWithOIDC`` and return the temporary credential."""
        if not self.role_trn:
            raise AccessDeniedError(
                "no role TRN configured for OIDC credential exchange: set roleTrn or VOLCENGINE_OIDC_ROLE_TRN"
            )
        try:
            token = Path(self.token_file).read_text().strip()
        except OSError as exc:
            raise AccessDeniedError(f"failed to read OIDC token file {self.token_file}: {exc}") from exc

        # The OIDC token authenticates the call; no access key is involved
        sts_api = _sts_api or volcenginesdksts.STSApi(
            build_api_client(_STS_REGION, self.endpoint.split("://", 1)[-1])
        )
        request = volcenginesdksts.AssumeRoleWithOIDCRequest(
            role_trn=self.role_trn,
            role_session_name=self.session_name,
            oidc_token=token,
            duration_seconds=self.duration_seconds,
        )
        try:
            resp = sts_api.assume_role_with_oidc(request, _request_timeout=timeout)
        except ApiException as exc:
            message, code, _ = describe_api_exception(exc)
            detail = f"{code}: {message}" if code else message
            raise AccessDeniedError(f"failed to assume role {self.role_trn}: {detail}") from exc
        except (urllib3.exceptions.HTTPError, ValueError) as exc:
            raise AccessDeniedError(f"failed to assume role {self.role_trn}: {exc}") from exc

        creds = resp.credentials if resp is not None else None
        if creds is None or not creds.access_key_id or not creds.secret_access_key:
            raise AccessDeniedError(f"failed to assume role {self.role_trn}: response carried no credentials")

        logger.info("Assumed role %s as session %s", self.role_trn, self.session_name)
        return StaticCredential(
            access_key_id=creds.access_key_id,
            secret_access_key=creds.secret_access_key,
            session_token=creds.session_token,
        )



Credential = StaticCredential | OidcCredential


def resolve_credential(
    config: SolverConfig,
    namespace: str,
    secret_store: KubernetesSecretStore | None,
    settings: Settings,
) -> Credential:
    """Build the credential for one challenge.

    Both secret references set selects static keys read from the challenge
    namespace. Otherwise an OIDC descriptor is built from the process
    settings, with ``config.role_trn`` taking precedence over the environment.
    """
    if config.uses_static_credentials:
        if secret_store is None:
            raise AccessDeniedError("solver has not been initialized: no secret store available")
        access_key = secret_store.get(namespace, config.access_key_secret_ref.name, config.access_key_secret_ref.key)
        secret_key = secret_store.get(namespace, config.secret_key_secret_ref.name, config.secret_key_secret_ref.key)
        return StaticCredential(access_key_id=access_key, secret_access_key=secret_key)

    return OidcCredential(
        role_trn=config.role_trn or settings.oidc_role_trn or "",
        endpoint=settings.sts_endpoint,
        token_file=settings.oidc_token_file,
        session_name=settings.oidc_session_name,
    )
