"""
Admin System Module

Administrative endpoints for the tour platform: the single site-settings
record (branding, contact details, currency, policies and notification
switches) and account management (listing with payment totals, creation
with a role, edits, deletion and activation toggling).
"""

from . import router, schemas, settings_service

__all__ = [
    "router",
    "schemas",
    "settings_service"
]
