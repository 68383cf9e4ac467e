"""Domain layer for the Tenancy context."""
