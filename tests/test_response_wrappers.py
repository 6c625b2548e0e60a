import pytest

from src.integrations.contracts.interfaces import ContractErrorKind, ContractOperation
from src.integrations.policy.response_wrappers import (
    ContractClientError,
    ContractNotFoundError,
    ContractServerError,
    ContractValidationError,
    error_for_status,
    extract_server_message,
    normalize_contract_response,
)


@pytest.mark.parametrize(
    "status_code, expected_type",
    [
        (404, ContractNotFoundError),
        (400, ContractValidationError),
        (422, ContractValidationError),
        (409, ContractValidationError),
        (401, ContractServerError),
        (500, ContractServerError),
        (503, ContractServerError),
    ],
)
def test_error_for_status_maps_onto_taxonomy(status_code, expected_type):
    err = error_for_status(status_code, {}, operation=ContractOperation.LOOKUP)

    assert type(err) is expected_type
    assert err.status_code == status_code


def test_server_message_is_preferred():
    err = error_for_status(404, {"message": "Not found"}, operation=ContractOperation.LOOKUP)

    assert err.server_message == "Not found"
    assert str(err) == "Not found"
    assert err.kind == ContractErrorKind.NOT_FOUND


def test_fallback_message_depends_on_operation():
    lookup_err = error_for_status(500, None, operation=ContractOperation.LOOKUP)
    sign_err = error_for_status(500, "oops", operation=ContractOperation.SIGN)

    assert lookup_err.server_message is None
    assert str(lookup_err) == "Failed to fetch contract"
    assert str(sign_err) == "Failed to sign contract"
    assert sign_err.payload == {}


@pytest.mark.parametrize("payload", [None, [], "text", {"message": ""}, {"message": "   "}, {"message": 5}, {"detail": "x"}])
def test_extract_server_message_ignores_unusable_values(payload):
    assert extract_server_message(payload) is None


def test_normalize_fills_missing_ref_from_lookup_key():
    contract = normalize_contract_response({"is_signed": True}, fallback_ref="C-7")

    assert contract.ref == "C-7"
    assert contract.is_signed is True


def test_normalize_rejects_non_object_payload():
    with pytest.raises(ContractServerError):
        normalize_contract_response(["C-7"], fallback_ref="C-7")


def test_normalize_wraps_schema_errors():
    with pytest.raises(ContractClientError) as excinfo:
        normalize_contract_response({"ref": "C-7", "obligations": "not-a-list"}, fallback_ref="C-7")

    assert excinfo.value.kind == ContractErrorKind.SERVER
    assert excinfo.value.payload["ref"] == "C-7"
