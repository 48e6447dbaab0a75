from __future__ import annotations

from codechat import config

DEBUG_OUTPUT_CALLS = (
    "console.log",
    "System.out.println",
    "cout <<",
    "fmt.Println",
    "print(",
)

TODO_MARKERS = ("todo", "fixme")


def has_debug_output(code: str) -> bool:
    return any(call in (code or "") for call in DEBUG_OUTPUT_CALLS)


def has_todo(code: str) -> bool:
    lowered = (code or "").lower()
    return any(m in lowered for m in TODO_MARKERS)


def is_long_snippet(code: str, max_lines: int = config.LONG_SNIPPET_LINES) -> bool:
    return len((code or "").split("\n")) > max_lines
