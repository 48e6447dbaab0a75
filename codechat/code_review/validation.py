from __future__ import annotations

from typing import Any, Optional, Tuple

from codechat import config

from .utils.language_detect import normalize_language


class ReviewValidationError(ValueError):
    """Errors safe to show directly to users."""


def validate_review_request(language: Optional[Any], code: Optional[Any]) -> Tuple[str, str]:
    """
    Check a (language, code) pair before it reaches the reviewer.

    Returns the normalized language and the code unchanged. The language is
    not checked against SUPPORTED_LANGUAGES; any non-blank value is reviewed.
    """
    if not isinstance(language, str) or not language.strip():
        raise ReviewValidationError("Please select a language.")
    if not isinstance(code, str) or not code.strip():
        raise ReviewValidationError("Please paste some code before requesting a review.")
    if len(code) < config.MIN_CODE_CHARS:
        raise ReviewValidationError("Please paste at least a few lines of code.")
    if len(code) > config.MAX_CODE_CHARS:
        raise ReviewValidationError(
            f"Snippet too large. Max allowed is {config.MAX_CODE_CHARS:,} characters."
        )
    return normalize_language(language), code
