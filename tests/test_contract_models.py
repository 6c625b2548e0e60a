import pytest
from pydantic import ValidationError

from src.integrations.contracts.portal import Contract


def test_minimal_payload_defaults_every_optional_field():
    contract = Contract(ref="C-1")

    assert contract.is_signed is False
    assert contract.commission_percentage is None
    assert contract.start_date is None
    assert contract.end_date is None
    assert contract.business_details is None
    assert contract.highlighted_terms == []
    assert contract.obligations == []
    assert contract.services == []


def test_null_term_lists_and_status_are_normalized():
    contract = Contract(ref="C-1", is_signed=None, highlighted_terms=None, obligations=None, services=None)

    assert contract.is_signed is False
    assert contract.highlighted_terms == []
    assert contract.obligations == []
    assert contract.services == []


def test_term_order_is_preserved(full_contract):
    contract = Contract(**full_contract)

    assert [t.en for t in contract.highlighted_terms] == ["Term 1", "Term 2"]
    assert contract.business_details.business_name.ar == "مطعم الواحة"
    assert contract.business_details.cr_number == "1010123456"


def test_unknown_fields_are_ignored_and_numbers_become_text():
    contract = Contract(
        ref=42,
        created_by="admin",
        business_details={"cr_number": 1010123456, "extra": True},
        services=[{"ar": "خدمة", "en": "Service", "id": 7}],
    )

    assert contract.ref == "42"
    assert contract.business_details.cr_number == "1010123456"
    assert contract.business_details.business_name is None
    assert contract.services[0].en == "Service"


def test_term_entry_may_miss_a_language():
    contract = Contract(ref="C-1", obligations=[{"ar": "أ"}])

    assert contract.obligations[0].ar == "أ"
    assert contract.obligations[0].en is None


def test_contract_is_immutable():
    contract = Contract(ref="C-1")

    with pytest.raises(ValidationError):
        contract.is_signed = True


def test_numeric_dates_are_kept_as_text():
    contract = Contract(ref="C-1", start_date=1735722000000, end_date=None)

    assert contract.start_date == "1735722000000"
    assert contract.end_date is None
