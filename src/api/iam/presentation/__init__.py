"""Presentation layer for IAM bounded context."""
