"""
Input validation and sanitization for OCR frame data and scanner settings.

Frame content is never rejected: malformed fragments are coerced or dropped
so the parsers see a plain list of strings. Settings are validated strictly
and raise ConfigurationError.
"""

from typing import Any, List

from .error_handler import ConfigurationError


def validate_fragments(value: Any) -> List[str]:
    """
    Coerce OCR collaborator output into a list of text fragments.

    Args:
        value: None, a single string, or an iterable of fragments

    Returns:
        List of fragment strings in detection order; non-string items dropped

    Examples:
        >>> validate_fragments(None)
        []
        >>> validate_fragments("4111 1111 1111 1111")
        ['4111 1111 1111 1111']
        >>> validate_fragments(["VALID THRU 11/29", 42, None])
        ['VALID THRU 11/29']
    """
    if value is None:
        return []

    if isinstance(value, str):
        return [value]

    try:
        items = list(value)
    except TypeError:
        return []

    return [item for item in items if isinstance(item, str)]


def validate_try_count(value: Any, field_name: str = "try_count") -> int:
    """
    Validate the number of valid observations required before stabilizing.

    Raises:
        ConfigurationError: If value is not an integer or is below 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{field_name} must be an integer",
            details={"field": field_name, "value": value, "type": type(value).__name__}
        )

    if value < 1:
        raise ConfigurationError(
            f"{field_name} must be at least 1",
            details={"field": field_name, "value": value}
        )

    return value
