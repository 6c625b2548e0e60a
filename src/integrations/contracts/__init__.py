"""
Contracts (data models).

This folder defines the request/response shapes for the external
contract-management API:
- the contract record returned by the lookup endpoint
- the client interface shared by the mock and real HTTP clients

Both mock and real HTTP clients should use these contracts.
"""
