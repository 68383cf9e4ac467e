"""Ports (interfaces) for the Tenancy context."""
