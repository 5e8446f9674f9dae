# src/utils/errors.py
"""
Errors Module
Exceptions surfaced to callers of the corpus and scorer
"""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a missing or non-string text value."""


def require_text(text, argument: str = "text") -> str:
    """
    Reject None and non-string values.

    Args:
        text: Value supplied by the caller
        argument: Argument name used in the error message

    Returns:
        The text unchanged
    """
    if text is None:
        raise InvalidArgumentError(f"{argument} must not be None")
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"{argument} must be a str, got {type(text).__name__}"
        )
    return text
