"""Core business logic layer.

Subpackages:
- account: login, registration and sign-out flows
- catalog: catalog filtering and favorite annotation
- favorites: confirmation gate for favorite toggles
"""
__all__ = ["account", "catalog", "favorites"]
