"""
Utility Functions and Classes

Provides error handling, text normalization, URL checks and log sanitizing.
"""

from linkshelf.utils.error_handlers import (
    ErrorHandler,
    setup_error_handlers
)

__all__ = [
    "ErrorHandler",
    "setup_error_handlers"
]
