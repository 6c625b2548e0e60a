from __future__ import annotations

import logging
from typing import Callable, Dict

logger = logging.getLogger(__name__)


MESSAGES_AR: Dict[str, str] = {
    "page.title": "منصة العقود الرقمية",
    "lookup.title": "البحث عن عقد",
    "lookup.ref_label": "الرقم المرجعي للعقد",
    "lookup.ref_placeholder": "أدخل الرقم المرجعي للعقد",
    "lookup.ref_required": "الرقم المرجعي للعقد مطلوب",
    "lookup.submit": "جلب العقد",
    "lookup.loading": "جاري التحميل...",
    "lookup.failed": "فشل في جلب العقد",
    "details.title": "تفاصيل العقد",
    "details.signed": "موقع",
    "details.unsigned": "غير موقع",
    "details.ref": "الرقم المرجعي",
    "details.commission": "العمولة",
    "details.start_date": "تاريخ البدء",
    "details.end_date": "تاريخ الانتهاء",
    "business.title": "تفاصيل العمل",
    "business.name_en": "اسم العمل (EN)",
    "business.name_ar": "اسم العمل (AR)",
    "business.cr_number": "رقم السجل التجاري",
    "terms.title": "شروط وتفاصيل العقد",
    "terms.highlighted_terms": "شروط هامة",
    "terms.obligations": "الالتزامات",
    "terms.services": "الخدمات",
    "sign.title": "توقيع العقد",
    "sign.signature_label": "التوقيع الرقمي",
    "sign.signature_placeholder": "أدخل توقيعك الرقمي",
    "sign.signature_required": "التوقيع مطلوب",
    "sign.submit": "توقيع العقد",
    "sign.loading": "جاري التوقيع...",
    "sign.failed": "فشل في توقيع العقد",
    "sign.success": "تم توقيع العقد بنجاح!",
    "common.not_available": "غير متاح",
}

MESSAGES_EN: Dict[str, str] = {
    "page.title": "Digital Contracts Portal",
    "lookup.title": "Find a contract",
    "lookup.ref_label": "Contract reference number",
    "lookup.ref_placeholder": "Enter the contract reference number",
    "lookup.ref_required": "Contract reference number is required",
    "lookup.submit": "Fetch contract",
    "lookup.loading": "Loading...",
    "lookup.failed": "Failed to fetch contract",
    "details.title": "Contract details",
    "details.signed": "Signed",
    "details.unsigned": "Not signed",
    "details.ref": "Reference",
    "details.commission": "Commission",
    "details.start_date": "Start date",
    "details.end_date": "End date",
    "business.title": "Business details",
    "business.name_en": "Business name (EN)",
    "business.name_ar": "Business name (AR)",
    "business.cr_number": "Commercial registration number",
    "terms.title": "Contract terms and details",
    "terms.highlighted_terms": "Important terms",
    "terms.obligations": "Obligations",
    "terms.services": "Services",
    "sign.title": "Sign contract",
    "sign.signature_label": "Digital signature",
    "sign.signature_placeholder": "Enter your digital signature",
    "sign.signature_required": "Signature is required",
    "sign.submit": "Sign contract",
    "sign.loading": "Signing...",
    "sign.failed": "Failed to sign contract",
    "sign.success": "Contract signed successfully!",
    "common.not_available": "Not available",
}


def get_translator(lang: str) -> Callable[[str], str]:
    """
    Returns a translator function t(key) for `lang`.

    Arabic is the primary table; missing keys fall back to English and then to
    the key itself.
    """
    primary = MESSAGES_EN if (lang or "").lower().startswith("en") else MESSAGES_AR

    def t(key: str) -> str:
        msg = primary.get(key)
        if msg is None:
            msg = MESSAGES_EN.get(key)
            if msg is None:
                logger.warning("i18n: missing key '%s' for lang='%s'", key, lang)
                msg = key
        return msg

    return t
