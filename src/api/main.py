"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, Query, Request
from fastapi.responses import HTMLResponse

from src.integrations.clients.mocks.contracts import MockContractPortalClient
from src.integrations.clients.real_http.contracts import RealContractPortalClient
from src.integrations.contracts.interfaces import ContractPortalClient
from src.portal.controller import ContractViewController
from src.portal.presenter import resolve_timezone
from src.portal.renderer import render_page
from src.portal.session_store import ViewSessionStore
from src.utils.config_loader import PortalConfig, load_portal_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SESSION_COOKIE = "portal_session"


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

def select_contract_client(config: PortalConfig) -> ContractPortalClient:
    """Pick the mock or real contract client. This is the only place that decides."""
    if config.integrations_mode == "mock":
        logger.info("Using mock contract portal client")
        return MockContractPortalClient()

    logger.info("Using contract portal API at %s", config.api.base_url)
    return RealContractPortalClient(
        base_url=config.api.base_url,
        contract_prefix=config.api.contract_prefix,
        timeout_seconds=config.api.timeout_seconds,
    )


def create_app(client: Optional[ContractPortalClient] = None, config: Optional[PortalConfig] = None) -> FastAPI:
    config = config or load_portal_config()
    client = client or select_contract_client(config)
    lang = config.display.locale
    tz = resolve_timezone(config.display.timezone)

    app = FastAPI(
        title="Contract Portal",
        description="Look up a contract by reference number and sign it",
        version="1.0.0",
    )
    app.state.config = config
    app.state.sessions = ViewSessionStore(lambda: ContractViewController(client, lang=lang))

    def _page(controller: ContractViewController, session_id: str, form_values: Dict[str, Any]) -> HTMLResponse:
        html = render_page(controller.state, lang=lang, tz=tz, form_values=form_values)
        response = HTMLResponse(html)
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return response

    @app.get("/", response_class=HTMLResponse, tags=["Portal"])
    async def portal_page(request: Request, ref: Optional[str] = Query(default=None)):
        session_id, controller = app.state.sessions.get_or_create(request.cookies.get(SESSION_COOKIE))
        form_values: Dict[str, Any] = {}
        if ref is not None:
            form_values["ref"] = ref
            await controller.submit_lookup({"ref": ref})
        elif controller.state.contract is not None:
            form_values["ref"] = controller.state.contract.ref
        return _page(controller, session_id, form_values)

    @app.post("/lookup", response_class=HTMLResponse, tags=["Portal"])
    async def lookup_contract(request: Request, ref: str = Form(default="")):
        session_id, controller = app.state.sessions.get_or_create(request.cookies.get(SESSION_COOKIE))
        await controller.submit_lookup({"ref": ref})
        return _page(controller, session_id, {"ref": ref})

    @app.post("/sign", response_class=HTMLResponse, tags=["Portal"])
    async def sign_contract(request: Request, ref: str = Form(default=""), signature: str = Form(default="")):
        session_id, controller = app.state.sessions.get_or_create(request.cookies.get(SESSION_COOKIE))
        await controller.submit_signature({"signature": signature}, ref=ref)
        shown_ref = controller.state.contract.ref if controller.state.contract is not None else ref
        return _page(controller, session_id, {"ref": shown_ref})

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {
            "status": "ok",
            "integrations_mode": config.integrations_mode,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()
