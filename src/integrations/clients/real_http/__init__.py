"""
Real HTTP integration clients.

These clients communicate with the external contract-management API over HTTP.

Important:
- Must implement the same interface as the mock clients
- Must return data shaped according to src/integrations/contracts/*

Switching:
The selection of mock vs real clients should happen in src/api/main.py only.
"""
