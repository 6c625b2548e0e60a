from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError

from src.integrations.contracts.interfaces import ContractErrorKind, ContractOperation
from src.integrations.contracts.portal import Contract


_DEFAULT_MESSAGES = {
    ContractOperation.LOOKUP: "Failed to fetch contract",
    ContractOperation.SIGN: "Failed to sign contract",
}


class ContractClientError(ValueError):
    """Base error for every contract portal failure.

    `server_message` is the `message` field of the response body when the API
    supplied one; views should prefer it over their own fallback text.
    """

    kind = ContractErrorKind.SERVER

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        operation: ContractOperation = ContractOperation.LOOKUP,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or server_message or _DEFAULT_MESSAGES[operation])
        self.operation = operation
        self.status_code = status_code
        self.server_message = server_message
        self.payload = payload or {}


class ContractValidationError(ContractClientError):
    kind = ContractErrorKind.VALIDATION


class ContractNotFoundError(ContractClientError):
    kind = ContractErrorKind.NOT_FOUND


class ContractServerError(ContractClientError):
    kind = ContractErrorKind.SERVER


class ContractNetworkError(ContractClientError):
    kind = ContractErrorKind.NETWORK


class ContractTimeoutError(ContractNetworkError):
    kind = ContractErrorKind.TIMEOUT


def extract_server_message(payload: Any) -> Optional[str]:
    """Return the body's `message` field when it is a non-empty string."""
    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    if isinstance(message, str) and message.strip():
        return message.strip()
    return None


def error_for_status(
    status_code: int,
    payload: Any,
    *,
    operation: ContractOperation,
) -> ContractClientError:
    """Map a non-2xx response onto the error taxonomy."""
    if status_code == 404:
        error_type = ContractNotFoundError
    elif status_code in (400, 409, 422):
        error_type = ContractValidationError
    else:
        error_type = ContractServerError

    return error_type(
        operation=operation,
        status_code=status_code,
        server_message=extract_server_message(payload),
        payload=payload if isinstance(payload, dict) else {},
    )


def normalize_contract_response(raw: Any, *, fallback_ref: str) -> Contract:
    """Validate a lookup body into a `Contract`.

    The lookup key is used as `ref` when the server omits it.
    """
    if not isinstance(raw, dict):
        raise ContractServerError(
            f"Unexpected contract payload type: {type(raw).__name__}",
            operation=ContractOperation.LOOKUP,
        )

    payload = dict(raw)
    if payload.get("ref") in (None, ""):
        payload["ref"] = fallback_ref

    try:
        return Contract(**payload)
    except ValidationError as exc:
        raise ContractServerError(
            f"Contract validation failed: {exc}",
            operation=ContractOperation.LOOKUP,
            payload=raw,
        ) from exc
