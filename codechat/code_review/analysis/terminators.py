"""
Missing statement terminator heuristics.

The predicates below work on a single line of text and know nothing about
strings or comments beyond a leading comment marker. They are shared with
the suggested-fix generator so both always agree on which lines need a
terminator.
"""
from __future__ import annotations

import re
from typing import List, Optional

from ..reviewers.base import LineIssue
from ..utils.language_detect import STATEMENT_TERMINATOR, uses_terminator

COMMENT_PREFIXES = ("//", "/*", "*", "#")
BLOCK_ENDINGS = ("{", "}", ":")

BLOCK_OPENER_RX = re.compile(
    r"^(?:(?:public|private|protected|static|final|abstract|export|default|async)\s+)*"
    r"(?:if|else|for|while|do|switch|try|catch|finally|class|struct|interface|enum|namespace)\b"
)

# Assignment, return, I/O calls and print/log calls.
TERMINATOR_TRIGGERS = (
    "=",
    "return",
    "cout <<",
    "cin >>",
    "printf(",
    "scanf(",
    "System.out.print",
    "fmt.Print",
    "console.log",
    "console.error",
    "console.warn",
    "print(",
    "puts(",
)


def is_skippable(trimmed: str) -> bool:
    if not trimmed:
        return True
    if trimmed.startswith(COMMENT_PREFIXES):
        return True
    return trimmed.endswith(BLOCK_ENDINGS)


def opens_block(trimmed: str) -> bool:
    return bool(BLOCK_OPENER_RX.match(trimmed))


def triggers_terminator(trimmed: str) -> bool:
    return any(t in trimmed for t in TERMINATOR_TRIGGERS)


def needs_terminator(line: str, terminator: str = STATEMENT_TERMINATOR) -> bool:
    trimmed = (line or "").strip()
    if is_skippable(trimmed) or opens_block(trimmed):
        return False
    if not triggers_terminator(trimmed):
        return False
    return not trimmed.endswith(terminator)


def check_terminators(language: Optional[str], code: str) -> List[LineIssue]:
    if not uses_terminator(language):
        return []

    issues: List[LineIssue] = []
    for n, line in enumerate((code or "").split("\n"), start=1):
        if needs_terminator(line):
            issues.append(LineIssue(n, f"Possible missing '{STATEMENT_TERMINATOR}' at end of statement."))
    return issues
