"""Solver exceptions."""

from __future__ import annotations


class SolverError(Exception):
    """Base exception for all solver failures."""


class InvalidArgumentError(SolverError, ValueError):
    """Bad configuration, unparsable zone ID or invalid page size."""


class NotFoundError(SolverError, LookupError):
    """A zone, secret or secret key that was required does not exist."""


class ZoneNotFoundError(NotFoundError):
    """No hosted zone owns the requested name, or the pinned zone is absent."""


class SecretNotFoundError(NotFoundError):
    """The referenced secret, or the key inside it, does not exist."""


class AccessDeniedError(SolverError, PermissionError):
    """Credential material could not be obtained or was rejected upstream."""


class ProviderError(SolverError):
    """The DNS provider call failed.

    Covers both transport failures and logical errors the provider reports
    inside an otherwise successful response envelope; callers cannot act
    differently on either.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        code: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.operation = operation
        self.code = code
        self.request_id = request_id
        detail = f"{code}: {message}" if code else message
        if request_id:
            detail = f"{detail} (request id {request_id})"
        super().__init__(f"failed to {operation}: {detail}")
