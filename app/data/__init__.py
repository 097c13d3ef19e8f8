"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- Backend reads are wrapped so a failure becomes a user-facing message, never an exception in a view.
- No env var reads here (config-only).
"""
