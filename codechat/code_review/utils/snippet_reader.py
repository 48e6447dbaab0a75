# codechat/code_review/utils/snippet_reader.py
from __future__ import annotations

from typing import Optional, Tuple

from .language_detect import detect_language_from_filename


def decode_snippet(data: bytes) -> str:
    if not data:
        return ""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("latin-1", errors="ignore")
    # Browsers and editors on Windows may prepend a BOM.
    return text.lstrip("\ufeff")


def read_uploaded_snippet(filename: Optional[str], data: bytes) -> Tuple[str, Optional[str]]:
    """
    Returns (code, detected_language). The language is None when the file
    extension is not one of the supported languages.
    """
    return decode_snippet(data), detect_language_from_filename(filename)
