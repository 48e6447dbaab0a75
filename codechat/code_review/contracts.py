from typing import List, TypedDict


class QualityPayload(TypedDict):
    score: int
    grade: str
    label: str


class ReviewSection(TypedDict):
    title: str
    items: List[str]


class ComplexityPayload(TypedDict):
    time: str
    space: str
    notes: str


class ReviewResponse(TypedDict):
    language: str
    quality: QualityPayload
    potentialIssues: ReviewSection
    improvements: ReviewSection
    complexity: ComplexityPayload
    suggestedFix: str
