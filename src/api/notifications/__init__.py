"""Notifications bounded context.

Renders notifications (welcome emails, password resets) and delivers them
through transactional email channels.
"""
