"""
Coarse time/space complexity guess.

Pattern matching only: no loop bounds, no call graph. Any two loop
constructs count as nesting, so sequential loops are over-estimated.
"""
from __future__ import annotations

import re

from ..reviewers.base import Complexity

LOOP_RX = re.compile(r"\bfor\b|\bwhile\b|\.forEach\s*\(|\.map\s*\(")

ALLOCATION_MARKERS = (
    "new ",
    "vector",
    "Array",
    "ArrayList",
    "HashMap",
    "malloc(",
    "make(",
    "append(",
    "list(",
    "dict(",
    "[]",
)

TIME_CONSTANT = "O(1) (no loops detected)"
TIME_LINEAR = "O(n) (approximate guess based on loops)"
TIME_QUADRATIC = "O(n^2) (nested loops detected)"

SPACE_CONSTANT = "O(1) additional space (rough estimate)"
SPACE_LINEAR = "O(n) due to dynamic allocations/collections"

NOTES = "Complexity here is a heuristic guess based on simple pattern matching, not a full analysis."


def count_loops(code: str) -> int:
    return len(LOOP_RX.findall(code or ""))


def estimate_complexity(code: str) -> Complexity:
    time = TIME_CONSTANT
    loops = count_loops(code)
    if loops >= 1:
        time = TIME_LINEAR
    if loops >= 2:
        time = TIME_QUADRATIC

    space = SPACE_CONSTANT
    if any(marker in (code or "") for marker in ALLOCATION_MARKERS):
        space = SPACE_LINEAR

    return Complexity(time=time, space=space, notes=NOTES)
