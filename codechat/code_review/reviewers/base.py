from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LineIssue:
    line: int                # 1-based
    message: str

    def as_text(self) -> str:
        return f"Line {self.line}: {self.message}"


@dataclass(frozen=True)
class Complexity:
    time: str
    space: str
    notes: str


@dataclass(frozen=True)
class QualityScore:
    score: int               # 0..100
    grade: str               # "A"|"B"|"C"|"D"|"F"
    label: str


@dataclass(frozen=True)
class ReviewResult:
    language: str
    potential_issues: Tuple[str, ...]
    improvements: Tuple[str, ...]
    complexity: Complexity
    suggested_fix: str
    quality: QualityScore


class Reviewer:
    name: str

    def review(self, code: str, language: str) -> ReviewResult:
        raise NotImplementedError
