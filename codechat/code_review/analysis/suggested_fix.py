"""
Textual punctuation repair for terminator-using languages.

This patches characters, not meaning: a missing closing quote and a
missing terminator are appended at the end of the line. Running it again
on its own output changes nothing.
"""
from __future__ import annotations

from typing import Optional

from ..utils.language_detect import STATEMENT_TERMINATOR, uses_terminator
from .quotes import QUOTE, has_unclosed_quote
from .terminators import needs_terminator


def fix_line(line: str, terminator: str = STATEMENT_TERMINATOR) -> str:
    eol = "\r" if line.endswith("\r") else ""
    body = line[:-1] if eol else line
    fixed = body

    if has_unclosed_quote(fixed):
        fixed = fixed.rstrip() + QUOTE
    if needs_terminator(fixed, terminator):
        fixed = fixed.rstrip() + terminator

    if fixed == body:
        return line
    return fixed + eol


def suggest_fix(language: Optional[str], code: str) -> str:
    if not uses_terminator(language):
        return code
    return "\n".join(fix_line(line) for line in (code or "").split("\n"))
