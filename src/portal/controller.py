"""Controller for the contract portal page.

Drives `ContractViewState` through the lookup and signing cycles:

    IDLE -> LOADING -> LOADED | LOOKUP_FAILED
    LOADED (unsigned) -> SIGNING -> LOADING (refresh) -> LOADED | LOOKUP_FAILED
                                 -> SIGN_FAILED

The contract on the state is only ever replaced by a lookup result or cleared,
never edited in place.
"""

import logging
from typing import Any, Mapping, Optional

from src.integrations.contracts.interfaces import ContractOperation, ContractPortalClient
from src.integrations.policy.response_wrappers import ContractClientError
from src.portal.i18n import get_translator
from src.portal.state import ContractViewState, ViewStatus
from src.portal.validation import FormValidationError, validate_lookup_form, validate_sign_form

logger = logging.getLogger(__name__)


class ContractViewController:
    def __init__(self, client: ContractPortalClient, lang: str = "ar"):
        self.client = client
        self.lang = lang
        self.t = get_translator(lang)
        self.state = ContractViewState()

    async def submit_lookup(self, form: Mapping[str, Any]) -> ContractViewState:
        """Validate the lookup form and fetch the contract it names."""
        try:
            ref = validate_lookup_form(form, self.t)
        except FormValidationError as e:
            self.state.field_errors = dict(e.field_errors)
            return self.state

        self.state.clear_messages()
        await self.lookup(ref)
        return self.state

    async def submit_signature(self, form: Mapping[str, Any], ref: Optional[str] = None) -> ContractViewState:
        """Sign a contract, then fetch it again.

        A posted `ref` names the contract the user was looking at and wins
        over whatever this session loaded since. Without one the loaded
        contract is signed. With neither, nothing happens.
        """
        ref = (ref or "").strip()
        if not ref and self.state.contract is not None:
            ref = self.state.contract.ref
        if not ref:
            return self.state

        try:
            signature = validate_sign_form(form, self.t)
        except FormValidationError as e:
            self.state.field_errors = dict(e.field_errors)
            return self.state

        self.state.clear_messages()
        if not await self.sign(ref, signature):
            return self.state

        self.state.success = self.t("sign.success")
        await self.lookup(ref)
        return self.state

    async def lookup(self, ref: str) -> bool:
        state = self.state
        state.status = ViewStatus.LOADING
        state.contract = None
        state.error = None
        try:
            contract = await self.client.lookup(ref)
        except ContractClientError as e:
            logger.info("Contract lookup failed for %s: kind=%s status=%s", ref, e.kind.value, e.status_code)
            self.fail(ContractOperation.LOOKUP, e.server_message)
            return False
        except Exception:
            logger.exception("Unexpected error looking up contract %s", ref)
            self.fail(ContractOperation.LOOKUP)
            return False

        state.contract = contract
        state.status = ViewStatus.LOADED
        return True

    async def sign(self, ref: str, signature: str) -> bool:
        state = self.state
        state.status = ViewStatus.SIGNING
        try:
            await self.client.sign(ref, signature)
        except ContractClientError as e:
            logger.info("Contract signing failed for %s: kind=%s status=%s", ref, e.kind.value, e.status_code)
            self.fail(ContractOperation.SIGN, e.server_message)
            return False
        except Exception:
            logger.exception("Unexpected error signing contract %s", ref)
            self.fail(ContractOperation.SIGN)
            return False

        logger.info("Contract %s signed", ref)
        return True

    def fail(self, operation: ContractOperation, message: Optional[str] = None) -> None:
        """Put the state into the failure status for `operation`.

        A lookup failure drops the displayed contract; a signing failure keeps
        it so the user can try again.
        """
        state = self.state
        state.success = None
        if operation == ContractOperation.LOOKUP:
            state.contract = None
            state.status = ViewStatus.LOOKUP_FAILED
            state.error = message or self.t("lookup.failed")
        else:
            state.status = ViewStatus.SIGN_FAILED
            state.error = message or self.t("sign.failed")
