"""
Core Utilities

Modules:
    - security: API key generation and hashing
    - exceptions: Custom exceptions and HTTP helpers
"""

from linkshelf.core import security, exceptions

__all__ = ["security", "exceptions"]
