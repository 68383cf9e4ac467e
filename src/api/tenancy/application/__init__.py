"""Application layer for the Tenancy context."""
