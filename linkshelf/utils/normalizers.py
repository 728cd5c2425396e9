"""
Free-text normalization for collection descriptions

Create and update have different semantics:
- create: missing, None and blank all mean "no description"
- update: missing means "leave as is", None or blank means "clear it"
"""

from typing import Optional, Union


class _Unset:
    """Marker for a field the client did not send"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET = _Unset()


def normalize_description(value: Optional[str]) -> Optional[str]:
    """Read path: pass stored descriptions through, None stays None"""
    if value is None:
        return None
    return value


def normalize_description_for_create(value: Optional[str]) -> Optional[str]:
    """
    Normalize a description for insert

    Args:
        value: Raw description from the request (may be None)

    Returns:
        Trimmed description, or None when missing or blank
    """
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def normalize_description_for_update(
    value: Union[Optional[str], _Unset]
) -> Union[Optional[str], _Unset]:
    """
    Normalize a description for a partial update

    Args:
        value: Raw description, or UNSET if the client did not send the field

    Returns:
        UNSET (no change), None (clear), or the trimmed description
    """
    if value is UNSET:
        return UNSET
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None
