"""Infrastructure layer for the Tenancy context."""
