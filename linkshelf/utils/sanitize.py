"""
Security utility for sanitizing sensitive data in logs
Prevents API keys from being exposed in logs
"""

import re

SENSITIVE_PATTERNS = [
    (re.compile(r'(ls_[a-zA-Z0-9_\-]{32,})'), 'ls_***REDACTED***'),  # Linkshelf API keys
    (re.compile(r'(Bearer\s+[a-zA-Z0-9_\-\.]+)'), 'Bearer ***REDACTED***'),  # Bearer tokens
]


def sanitize_string(text: str) -> str:
    """
    Remove sensitive patterns from string

    Args:
        text: String that may contain sensitive data

    Returns:
        Sanitized string with patterns redacted
    """
    if not isinstance(text, str):
        return text

    sanitized = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)

    return sanitized


def get_safe_api_key_display(api_key: str) -> str:
    """
    Get safe version of API key for logging (only prefix)

    Args:
        api_key: Full API key

    Returns:
        Safe display string (e.g., "ls_AbCdEfGh...***")
    """
    if not api_key or not isinstance(api_key, str):
        return "***INVALID***"

    if len(api_key) < 12:
        return "***REDACTED***"

    return f"{api_key[:12]}...***"
