from abc import ABC, abstractmethod
from enum import Enum

from .portal import Contract


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ContractErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    SERVER = "SERVER"
    NETWORK = "NETWORK"
    TIMEOUT = "TIMEOUT"


class ContractOperation(str, Enum):
    LOOKUP = "LOOKUP"
    SIGN = "SIGN"


# ---------------------------------------------------------------------------
# Abstract client interface
# ---------------------------------------------------------------------------

class ContractPortalClient(ABC):
    """Every contract portal client (mock or real HTTP) must implement this interface."""

    @abstractmethod
    async def lookup(self, ref: str) -> Contract:
        """Fetch the contract identified by `ref`."""

    @abstractmethod
    async def sign(self, ref: str, signature: str) -> None:
        """Attach `signature` to the contract identified by `ref`.

        Does not return the updated contract; callers run `lookup` again.
        """
