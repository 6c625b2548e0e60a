"""
View state for the contract portal page
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from src.integrations.contracts.portal import Contract


class ViewStatus(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    LOADED = "LOADED"
    SIGNING = "SIGNING"
    LOOKUP_FAILED = "LOOKUP_FAILED"
    SIGN_FAILED = "SIGN_FAILED"


@dataclass
class ContractViewState:
    status: ViewStatus = ViewStatus.IDLE
    contract: Optional[Contract] = None
    error: Optional[str] = None
    success: Optional[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def show_sign_form(self) -> bool:
        """The signing form exists only while a loaded contract is unsigned."""
        return self.contract is not None and not self.contract.is_signed

    def clear_messages(self) -> None:
        self.error = None
        self.success = None
        self.field_errors = {}
