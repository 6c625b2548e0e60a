from __future__ import annotations

import logging
from datetime import tzinfo
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.portal.i18n import get_translator
from src.portal.presenter import build_contract_view
from src.portal.state import ContractViewState

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "contract_portal.html"


def build_env(templates_dir: Optional[Path] = None) -> Environment:
    search_path = str(templates_dir or TEMPLATES_DIR)
    logger.debug("Jinja2 search path: %s", search_path)
    return Environment(
        loader=FileSystemLoader(search_path),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


_ENV = build_env()


def render_page(
    state: ContractViewState,
    *,
    lang: str = "ar",
    tz: Optional[tzinfo] = None,
    form_values: Optional[Dict[str, Any]] = None,
    env: Optional[Environment] = None,
) -> str:
    """
    Pure renderer: ContractViewState -> HTML string.

    form_values: last submitted input values, echoed back into the inputs.
    """
    t = get_translator(lang)
    contract = build_contract_view(state.contract, t, lang=lang, tz=tz) if state.contract is not None else None

    template = (env or _ENV).get_template(PAGE_TEMPLATE)
    return template.render(
        t=t,
        lang=lang,
        direction="ltr" if lang.lower().startswith("en") else "rtl",
        state=state,
        contract=contract,
        show_sign_form=state.show_sign_form,
        field_errors=state.field_errors,
        form_values=form_values or {},
    )
