"""
Presentation helpers: turn a Contract into a render-friendly dict.

Nothing here mutates the Contract; dates are parsed only to produce display
text and the raw strings stay on the model.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, Dict, List, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.integrations.contracts.portal import TERM_GROUP_FIELDS, BilingualText, Contract

logger = logging.getLogger(__name__)

ARABIC_MONTHS = (
    "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
    "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
)
ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")

# Colour used by the template for each term group's entries.
TERM_GROUP_TONES = {
    "highlighted_terms": "yellow",
    "obligations": "blue",
    "services": "green",
}


def resolve_timezone(name: Optional[str]) -> tzinfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown display timezone %r, falling back to UTC", name)
        return timezone.utc


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp or epoch milliseconds; naive values are taken as UTC."""
    text = (value or "").strip()
    if not text:
        return None
    if text.lstrip("-").isdigit():
        try:
            return datetime.fromtimestamp(int(text) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(
    value: Optional[str],
    t: Callable[[str], str],
    *,
    lang: str = "ar",
    tz: Optional[tzinfo] = None,
) -> str:
    """Long-form date and time, e.g. "١ يناير ٢٠٢٥ في ٠٩:٠٠ ص".

    Missing values render as the "not available" placeholder; values that do
    not parse are shown as received.
    """
    if not value:
        return t("common.not_available")

    parsed = parse_timestamp(value)
    if parsed is None:
        logger.debug("Unparseable contract date: %r", value)
        return value

    local = parsed.astimezone(tz or timezone.utc)
    hour12 = local.hour % 12 or 12
    clock = f"{hour12:02d}:{local.minute:02d}"

    if (lang or "").lower().startswith("en"):
        meridiem = "AM" if local.hour < 12 else "PM"
        return f"{ENGLISH_MONTHS[local.month - 1]} {local.day}, {local.year} at {clock} {meridiem}"

    meridiem = "ص" if local.hour < 12 else "م"
    text = f"{local.day} {ARABIC_MONTHS[local.month - 1]} {local.year} في {clock} {meridiem}"
    return text.translate(_ARABIC_DIGITS)


def format_commission(value: Optional[Union[int, float]], t: Callable[[str], str], *, lang: str = "ar") -> str:
    if value is None:
        return t("common.not_available")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if (lang or "").lower().startswith("en"):
        return f"{value}%"
    return f"%{value}"


def _text_or_placeholder(value: Optional[str], t: Callable[[str], str]) -> str:
    value = (value or "").strip()
    return value or t("common.not_available")


def _term_entries(terms: List[BilingualText], t: Callable[[str], str]) -> List[Dict[str, str]]:
    return [{"ar": _text_or_placeholder(term.ar, t), "en": _text_or_placeholder(term.en, t)} for term in terms]


def term_groups(contract: Contract, t: Callable[[str], str]) -> List[Dict[str, Any]]:
    """The non-empty term groups, in display order, entries in received order."""
    groups = []
    for key in TERM_GROUP_FIELDS:
        terms = getattr(contract, key)
        if not terms:
            continue
        groups.append(
            {
                "key": key,
                "title": t(f"terms.{key}"),
                "tone": TERM_GROUP_TONES[key],
                "entries": _term_entries(terms, t),
            }
        )
    return groups


def build_contract_view(
    contract: Contract,
    t: Callable[[str], str],
    *,
    lang: str = "ar",
    tz: Optional[tzinfo] = None,
) -> Dict[str, Any]:
    """
    Map Contract -> render-friendly dict.
    """
    business = None
    details = contract.business_details
    if details is not None:
        name = details.business_name or BilingualText()
        business = {
            "name_en": _text_or_placeholder(name.en, t),
            "name_ar": _text_or_placeholder(name.ar, t),
            "cr_number": _text_or_placeholder(details.cr_number, t),
        }

    return {
        "ref": contract.ref,
        "is_signed": contract.is_signed,
        "status_label": t("details.signed") if contract.is_signed else t("details.unsigned"),
        "commission": format_commission(contract.commission_percentage, t, lang=lang),
        "start_date": format_date(contract.start_date, t, lang=lang, tz=tz),
        "end_date": format_date(contract.end_date, t, lang=lang, tz=tz),
        "business": business,
        "term_groups": term_groups(contract, t),
    }
