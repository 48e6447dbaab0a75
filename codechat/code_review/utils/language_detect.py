# codechat/code_review/utils/language_detect.py
from __future__ import annotations

import os
from typing import Optional


# Order matters: this is the order of the language picker in the UI.
SUPPORTED_LANGUAGES = ("C++", "Java", "Python", "JavaScript", "TypeScript", "Go")

# Languages whose statements are closed with a terminator character.
TERMINATOR_LANGUAGES = {"C++", "Java", "JavaScript", "TypeScript"}
STATEMENT_TERMINATOR = ";"

LANGUAGE_ALIASES = {
    "c++": "C++",
    "cpp": "C++",
    "cxx": "C++",
    "java": "Java",
    "python": "Python",
    "py": "Python",
    "python3": "Python",
    "javascript": "JavaScript",
    "js": "JavaScript",
    "node": "JavaScript",
    "typescript": "TypeScript",
    "ts": "TypeScript",
    "go": "Go",
    "golang": "Go",
}

EXT_TO_LANG = {
    ".cpp": "C++",
    ".cc": "C++",
    ".cxx": "C++",
    ".hpp": "C++",
    ".hh": "C++",
    ".h": "C++",
    ".java": "Java",
    ".py": "Python",
    ".pyw": "Python",
    ".js": "JavaScript",
    ".jsx": "JavaScript",
    ".mjs": "JavaScript",
    ".cjs": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".go": "Go",
}


def normalize_language(language: Optional[str]) -> str:
    """
    Map user input like "cpp" or "typescript" to the display name used
    everywhere else. Unknown values are passed through (stripped) since
    the review engine accepts any language string.
    """
    raw = (language or "").strip()
    return LANGUAGE_ALIASES.get(raw.lower(), raw)


def uses_terminator(language: Optional[str]) -> bool:
    return normalize_language(language) in TERMINATOR_LANGUAGES


def detect_language_from_filename(filename: Optional[str]) -> Optional[str]:
    if not filename:
        return None
    _, ext = os.path.splitext(filename.replace("\\", "/").lower())
    return EXT_TO_LANG.get(ext)
