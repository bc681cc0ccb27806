# ABOUTME: HTTP surface consumed by the species catalog UI
# ABOUTME: Wikipedia autofill lookup, species chat proxy, health check

from .app import create_app

__all__ = ["create_app"]
