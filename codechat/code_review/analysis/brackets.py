"""
Bracket balance check.

Single pass over the raw characters with an explicit stack. There is no
notion of strings or comments here, so a "(" inside a literal counts the
same as one in code.
"""
from __future__ import annotations

from typing import Dict, List

OPENERS = "({["
CLOSER_TO_OPENER: Dict[str, str] = {")": "(", "}": "{", "]": "["}


def check_brackets(code: str) -> List[str]:
    diagnostics: List[str] = []
    stack: List[str] = []

    for idx, ch in enumerate(code or ""):
        if ch in OPENERS:
            stack.append(ch)
        elif ch in CLOSER_TO_OPENER:
            opened = stack.pop() if stack else None
            if opened != CLOSER_TO_OPENER[ch]:
                diagnostics.append(f"Unexpected '{ch}' at position {idx}.")

    if stack:
        unclosed = ", ".join(f"'{b}'" for b in stack)
        diagnostics.append(f"Unclosed bracket(s) remain: {unclosed}.")

    return diagnostics
