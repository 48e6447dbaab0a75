from __future__ import annotations

from typing import List

from ..reviewers.base import LineIssue

QUOTE = '"'


def has_unclosed_quote(line: str) -> bool:
    # Escaped quotes are counted too; multi-line literals are not tracked.
    return (line or "").count(QUOTE) % 2 == 1


def check_quotes(code: str) -> List[LineIssue]:
    issues: List[LineIssue] = []
    for n, line in enumerate((code or "").split("\n"), start=1):
        if has_unclosed_quote(line):
            issues.append(LineIssue(n, "Unclosed string literal (odd number of '\"')."))
    return issues
