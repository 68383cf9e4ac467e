"""Ports (interfaces) for the IAM context."""
