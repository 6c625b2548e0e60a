"""Pytest fixtures for contract portal tests."""

import pytest

from src.integrations.clients.mocks.contracts import MockContractPortalClient


@pytest.fixture
def unsigned_contract():
    return {
        "ref": "C-1",
        "is_signed": False,
        "obligations": [{"ar": "أ", "en": "A"}],
    }


@pytest.fixture
def full_contract():
    return {
        "ref": "C-100",
        "is_signed": False,
        "commission_percentage": 12.5,
        "start_date": "2025-01-01T09:00:00Z",
        "end_date": "2025-12-31T15:30:00Z",
        "business_details": {
            "business_name": {"ar": "مطعم الواحة", "en": "Oasis Restaurant"},
            "cr_number": "1010123456",
        },
        "highlighted_terms": [{"ar": "شرط ١", "en": "Term 1"}, {"ar": "شرط ٢", "en": "Term 2"}],
        "obligations": [{"ar": "التزام", "en": "Obligation"}],
        "services": [{"ar": "خدمة", "en": "Service"}],
    }


@pytest.fixture
def mock_client(unsigned_contract, full_contract):
    """In-memory contract portal seeded with C-1 and C-100."""
    return MockContractPortalClient(contracts=[unsigned_contract, full_contract])
