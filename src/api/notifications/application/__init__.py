"""Application layer for the Notifications context."""
