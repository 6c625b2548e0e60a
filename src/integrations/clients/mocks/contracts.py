"""
Mock Contract Portal Client.

Purpose:
- Provides a fake contract portal so the view can be developed and tested
  without the contract-management API
- Does NOT make network calls
- Keeps contracts in memory; signing flips `is_signed` on the stored record

Usage:
- Wired in src/api/main.py when INTEGRATIONS_MODE=mock
- Called by ContractViewController via the ContractPortalClient interface

Swap:
Replace with the real HTTP client in clients/real_http/contracts.py by
setting INTEGRATIONS_MODE=real (the default).
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

from src.integrations.contracts.interfaces import ContractOperation, ContractPortalClient
from src.integrations.contracts.portal import Contract
from src.integrations.policy.response_wrappers import (
    ContractNotFoundError,
    ContractValidationError,
    normalize_contract_response,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_CONTRACTS: List[Dict[str, Any]] = [
    {
        "ref": "C-1001",
        "is_signed": False,
        "commission_percentage": 12.5,
        "start_date": "2025-01-01T09:00:00Z",
        "end_date": "2025-12-31T17:00:00Z",
        "business_details": {
            "business_name": {"ar": "مطعم الواحة", "en": "Oasis Restaurant"},
            "cr_number": "1010123456",
        },
        "highlighted_terms": [
            {"ar": "مدة العقد سنة واحدة قابلة للتجديد", "en": "The contract term is one year, renewable"},
        ],
        "obligations": [
            {"ar": "الالتزام بجودة الخدمة", "en": "Maintain service quality"},
            {"ar": "تحديث العروض شهريا", "en": "Update offers monthly"},
        ],
        "services": [
            {"ar": "نشر العروض على المنصة", "en": "Publishing offers on the platform"},
        ],
    },
    {
        "ref": "C-1002",
        "is_signed": True,
        "commission_percentage": 10,
        "start_date": "2024-06-01T00:00:00Z",
        "end_date": None,
        "business_details": {
            "business_name": {"ar": "مقهى النخيل", "en": "Palm Cafe"},
            "cr_number": "1010654321",
        },
        "highlighted_terms": [],
        "obligations": [],
        "services": [
            {"ar": "إدارة القسائم", "en": "Coupon management"},
        ],
    },
]


# ---------------------------------------------------------------------------
# Mock client
# ---------------------------------------------------------------------------

class MockContractPortalClient(ContractPortalClient):
    """
    In-memory contract portal.

    Parameters
    ----------
    contracts : list of dict, optional
        Raw contract payloads keyed by their `ref`. Defaults to a small seed set.

    Every call is recorded in `calls` as (operation, ref) so tests can assert
    how many requests a view issued.
    """

    def __init__(self, contracts: Optional[List[Dict[str, Any]]] = None) -> None:
        seed = _MOCK_CONTRACTS if contracts is None else contracts
        self._contracts: Dict[str, Dict[str, Any]] = {c["ref"]: copy.deepcopy(c) for c in seed}
        self.calls: List[Tuple[ContractOperation, str]] = []

    async def lookup(self, ref: str) -> Contract:
        ref = (ref or "").strip()
        self.calls.append((ContractOperation.LOOKUP, ref))
        if not ref:
            raise ContractValidationError("ref is required", operation=ContractOperation.LOOKUP)

        raw = self._contracts.get(ref)
        if raw is None:
            logger.info("Mock contract portal: %s not found", ref)
            raise ContractNotFoundError(
                operation=ContractOperation.LOOKUP,
                status_code=404,
                server_message="Contract not found",
            )
        return normalize_contract_response(copy.deepcopy(raw), fallback_ref=ref)

    async def sign(self, ref: str, signature: str) -> None:
        ref = (ref or "").strip()
        signature = (signature or "").strip()
        self.calls.append((ContractOperation.SIGN, ref))
        if not ref or not signature:
            raise ContractValidationError("ref and signature are required", operation=ContractOperation.SIGN)

        raw = self._contracts.get(ref)
        if raw is None:
            raise ContractNotFoundError(
                operation=ContractOperation.SIGN,
                status_code=404,
                server_message="Contract not found",
            )
        if raw.get("is_signed"):
            raise ContractValidationError(
                operation=ContractOperation.SIGN,
                status_code=409,
                server_message="Contract is already signed",
            )
        raw["is_signed"] = True
        raw["signature"] = signature
        logger.info("Mock contract portal: %s signed", ref)
