"""
Contract portal contracts.

Defines the shape of the contract record returned by the external
contract-management API (`GET /portal/contract/{ref}`).

These contracts must be used by both:
- clients/mocks/contracts.py (in-memory contracts for development/testing)
- clients/real_http/contracts.py (real API calls)

The server owns the data. Every nested field is optional here and unknown
fields are ignored, so a partial payload still renders.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BilingualText(BaseModel):
    """An Arabic/English pair, used for term entries and business names."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    ar: Optional[str] = None
    en: Optional[str] = None


class BusinessDetails(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    business_name: Optional[BilingualText] = None
    cr_number: Optional[str] = None

    @field_validator("cr_number", mode="before")
    @classmethod
    def _cr_number_as_text(cls, value):
        # Some deployments send the registration number as an integer.
        if value is None or isinstance(value, str):
            return value
        return str(value)


class Contract(BaseModel):
    """Contract record as returned by the portal lookup endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    ref: str
    is_signed: bool = False
    commission_percentage: Optional[Union[int, float]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    business_details: Optional[BusinessDetails] = None
    highlighted_terms: List[BilingualText] = Field(default_factory=list)
    obligations: List[BilingualText] = Field(default_factory=list)
    services: List[BilingualText] = Field(default_factory=list)

    @field_validator("highlighted_terms", "obligations", "services", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("is_signed", mode="before")
    @classmethod
    def _none_as_unsigned(cls, value):
        return False if value is None else value

    @field_validator("ref", "start_date", "end_date", mode="before")
    @classmethod
    def _as_text(cls, value):
        if value is None or isinstance(value, str):
            return value
        return str(value)


TERM_GROUP_FIELDS = ("highlighted_terms", "obligations", "services")
