"""
Real Contract Portal HTTP Client.

Purpose:
- Looks up a contract by reference number on the contract-management API
- Attaches a digital signature to a contract

Usage:
- Wired in src/api/main.py when the integrations mode is "real"
- Called by ContractViewController via the ContractPortalClient interface

Implementation notes:
- One attempt per call, no retries
- Non-2xx responses and transport failures are raised as ContractClientError
  subclasses carrying the server's `message` when there is one
- The signature is sent in the query string with an empty body; the API
  expects it there

Important:
- Keep this client as the ONLY place where contract portal HTTP calls are made.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional
from urllib.parse import quote

import httpx

from src.integrations.contracts.interfaces import ContractOperation, ContractPortalClient
from src.integrations.contracts.portal import Contract
from src.integrations.policy.response_wrappers import (
    ContractNetworkError,
    ContractServerError,
    ContractTimeoutError,
    ContractValidationError,
    error_for_status,
    normalize_contract_response,
)
from src.utils.config_loader import DEFAULT_API_BASE_URL

logger = logging.getLogger(__name__)


class RealContractPortalClient(ContractPortalClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        contract_prefix: str = "/portal/contract",
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("CONTRACT_API_BASE_URL", "") or DEFAULT_API_BASE_URL).rstrip("/")
        self.contract_prefix = "/" + contract_prefix.strip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def contract_url(self, ref: str) -> str:
        return f"{self.base_url}{self.contract_prefix}/{quote(ref, safe='')}"

    async def lookup(self, ref: str) -> Contract:
        ref = _require(ref, "ref", ContractOperation.LOOKUP)
        response = await self._send("GET", self.contract_url(ref), operation=ContractOperation.LOOKUP)

        data = _decode_json(response)
        if data is None:
            raise ContractServerError(
                "Contract lookup returned a non-JSON body",
                operation=ContractOperation.LOOKUP,
                status_code=response.status_code,
            )
        return normalize_contract_response(data, fallback_ref=ref)

    async def sign(self, ref: str, signature: str) -> None:
        ref = _require(ref, "ref", ContractOperation.SIGN)
        signature = _require(signature, "signature", ContractOperation.SIGN)
        await self._send(
            "POST",
            f"{self.contract_url(ref)}/sign",
            operation=ContractOperation.SIGN,
            params={"signature": signature},
            content=b"",
        )

    async def _send(self, method: str, url: str, *, operation: ContractOperation, **kwargs: Any) -> httpx.Response:
        # The query string is left out of log lines; it carries the signature.
        logger.info("Contract portal request: %s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("Contract portal request timed out after %ss: %s %s", self.timeout_seconds, method, url)
            raise ContractTimeoutError(operation=operation) from e
        except httpx.RequestError as e:
            logger.error("Request error connecting to contract portal API: %s", e)
            raise ContractNetworkError(operation=operation) from e

        logger.info("Contract portal response: %s %s status=%s", method, url, response.status_code)
        if response.is_success:
            return response

        payload = _decode_json(response)
        logger.warning(
            "Contract portal API error: %s %s status=%s body=%s",
            method,
            url,
            response.status_code,
            response.text[:500],
        )
        raise error_for_status(response.status_code, payload, operation=operation)


def _require(value: Optional[str], field: str, operation: ContractOperation) -> str:
    value = (value or "").strip()
    if not value:
        raise ContractValidationError(f"{field} is required", operation=operation)
    return value


def _decode_json(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
