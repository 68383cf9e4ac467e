"""Tenancy bounded context.

Identifies the tenant a request belongs to from the domain it arrived on,
manages the request-scoped tenancy lifecycle and keeps the CORS origin
registry in step with each tenant's configured frontend.
"""
