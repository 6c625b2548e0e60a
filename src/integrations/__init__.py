"""
Integrations layer.
This package contains all code used to communicate with the external
contract-management API:
- contract lookup by reference number
- contract signing

Key rule:
- The portal view MUST NOT call the API directly.
- It calls integration clients (under src/integrations/clients).
- The mock client serves development and tests; the real HTTP client talks to the API.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/api/main.py).
"""

from .contracts.interfaces import ContractErrorKind, ContractOperation, ContractPortalClient
from .contracts.portal import BilingualText, BusinessDetails, Contract

__all__ = [
    "BilingualText", "BusinessDetails", "Contract",
    "ContractErrorKind", "ContractOperation", "ContractPortalClient",
]
