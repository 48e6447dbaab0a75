# codechat/code_review/reviewers/heuristic.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from codechat import config

from ..analysis.brackets import check_brackets
from ..analysis.complexity import estimate_complexity
from ..analysis.markers import has_debug_output, has_todo, is_long_snippet
from ..analysis.quality import score_quality
from ..analysis.quotes import check_quotes
from ..analysis.suggested_fix import suggest_fix
from ..analysis.terminators import check_terminators
from ..utils.language_detect import normalize_language
from .base import Reviewer, ReviewResult

logger = logging.getLogger(__name__)


NO_ISSUES_MESSAGE = "No obvious red flags detected from a static scan. Edge cases may still exist."

DEBUG_OUTPUT_MESSAGE = (
    "Debug logging (console.log / println / cout / print) detected. "
    "Remove or guard logs for production builds."
)
TODO_MESSAGE = "Found TODO/FIXME comments. Make sure to address them before production."
LONG_SNIPPET_MESSAGE = (
    "Function or snippet is quite long. Consider breaking it into smaller functions for readability."
)

GENERIC_IMPROVEMENTS = (
    "Ensure variable and function names are descriptive and follow a consistent naming convention.",
    "Add comments or docstrings for complex logic and non-trivial algorithms.",
    "Consider adding unit tests for edge cases and failure scenarios.",
)

LANGUAGE_IMPROVEMENTS: Dict[str, str] = {
    "Python": "Add type hints and docstrings to public functions so intent is clear and tools can check usage.",
    "TypeScript": "Enable strict compiler options and avoid `any` so the type checker can catch mistakes.",
    "JavaScript": "Prefer `const`/`let` over `var` and use strict equality (`===`) in comparisons.",
    "Java": "Prefer interfaces for declared types (e.g. `List` over `ArrayList`) and close resources with try-with-resources.",
    "C++": "Prefer RAII and smart pointers over manual `new`/`delete` to avoid leaks.",
    "Go": "Check every returned error value and wrap it with context before returning it.",
}


def _improvements_for(language: str) -> List[str]:
    items = list(GENERIC_IMPROVEMENTS)
    tip = LANGUAGE_IMPROVEMENTS.get(language)
    if tip:
        items.append(tip)
    return items


class HeuristicReviewer(Reviewer):
    """Rule-based review built from plain text scans."""

    name = "heuristic"

    def __init__(self, long_snippet_lines: Optional[int] = None):
        if long_snippet_lines is None:
            long_snippet_lines = config.LONG_SNIPPET_LINES
        self.long_snippet_lines = long_snippet_lines

    def review(self, code: str, language: str) -> ReviewResult:
        lang = normalize_language(language)
        code = code or ""

        issues: List[str] = []
        issues.extend(i.as_text() for i in check_terminators(lang, code))
        issues.extend(i.as_text() for i in check_quotes(code))
        issues.extend(check_brackets(code))

        if has_debug_output(code):
            issues.append(DEBUG_OUTPUT_MESSAGE)
        if has_todo(code):
            issues.append(TODO_MESSAGE)
        if is_long_snippet(code, self.long_snippet_lines):
            issues.append(LONG_SNIPPET_MESSAGE)

        quality = score_quality(len(issues))
        if not issues:
            issues.append(NO_ISSUES_MESSAGE)

        logger.debug(
            "Reviewed %d chars of %s: %d issue(s), score %d",
            len(code), lang or "unknown", len(issues), quality.score,
        )

        return ReviewResult(
            language=lang,
            potential_issues=tuple(issues),
            improvements=tuple(_improvements_for(lang)),
            complexity=estimate_complexity(code),
            suggested_fix=suggest_fix(lang, code),
            quality=quality,
        )


_default_reviewer = HeuristicReviewer()


def review_snippet(language: str, code: str) -> ReviewResult:
    return _default_reviewer.review(code, language)
