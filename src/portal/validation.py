"""Validation for the portal's two forms.

The page submits the lookup form (`ref`) and the signing form (`signature`)
as dictionaries. Missing values are reported per field before any call to the
contract API.

On validation failure, raise `FormValidationError`; the controller keeps the
`field_errors` on the view state so they render under the inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional


@dataclass
class FormValidationError(Exception):
    """A lookup or signing form was submitted with missing input.

    `field_errors` maps the form field (`ref`, `signature`) to the localized
    message shown under it; `message` is the first of those.
    """

    field_errors: Dict[str, str]
    message: str = ""

    def __str__(self) -> str:
        return self.message or ", ".join(self.field_errors.values())


def _strip(v: Any) -> str:
    return "" if v is None else str(v).strip()


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def require_str(payload: Mapping[str, Any], field: str, errors: Dict[str, str], *, message: Optional[str] = None) -> str:
    value = _strip(payload.get(field))
    if not value:
        add_error(errors, field, message or f"{field} is required")
    return value


def validate_lookup_form(payload: Mapping[str, Any], t: Callable[[str], str]) -> str:
    """Return the trimmed reference number or raise FormValidationError."""
    errors: Dict[str, str] = {}
    ref = require_str(payload, "ref", errors, message=t("lookup.ref_required"))
    if errors:
        raise FormValidationError(errors, errors["ref"])
    return ref


def validate_sign_form(payload: Mapping[str, Any], t: Callable[[str], str]) -> str:
    """Return the trimmed signature or raise FormValidationError."""
    errors: Dict[str, str] = {}
    signature = require_str(payload, "signature", errors, message=t("sign.signature_required"))
    if errors:
        raise FormValidationError(errors, errors["signature"])
    return signature
