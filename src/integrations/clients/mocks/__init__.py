"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- The contract-management API is not reachable from a development machine
- We want to test the portal end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients should return data shaped according to src/integrations/contracts/*

Switching to real:
Set INTEGRATIONS_MODE=real (the default) so src/api/main.py wires
clients/real_http/* implementations instead.
"""
