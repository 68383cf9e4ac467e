"""Presentation layer for the Tenancy context."""
