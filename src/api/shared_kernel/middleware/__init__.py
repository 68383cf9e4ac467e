"""Shared middleware for cross-cutting concerns.

Holds the request-scoped tenant context and the middleware that reports it
back to clients through response headers.
"""
