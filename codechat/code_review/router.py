# codechat/code_review/router.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse, StreamingResponse

from codechat import config

from .contracts import ReviewResponse
from .render import render
from .reporting.pdf_report import build_pdf_report
from .reviewers.base import ReviewResult
from .reviewers.heuristic import HeuristicReviewer
from .utils.language_detect import SUPPORTED_LANGUAGES
from .utils.snippet_reader import read_uploaded_snippet
from .validation import ReviewValidationError, validate_review_request

logger = logging.getLogger(__name__)


# ============================================================
# Router (NO prefix – included by the app at /)
# ============================================================
router = APIRouter(tags=["Code Review"])

reviewer = HeuristicReviewer()

DEFAULT_LANGUAGE = SUPPORTED_LANGUAGES[0]
INTERNAL_ERROR_API = "Unexpected server error while reviewing code."
INTERNAL_ERROR_UI = "Something went wrong while reviewing your code. Please try again."


# ============================================================
# Response shaping
# ============================================================
def review_payload(rr: ReviewResult) -> ReviewResponse:
    return {
        "language": rr.language,
        "quality": {
            "score": rr.quality.score,
            "grade": rr.quality.grade,
            "label": rr.quality.label,
        },
        "potentialIssues": {"title": "Potential Issues", "items": list(rr.potential_issues)},
        "improvements": {"title": "Improvements", "items": list(rr.improvements)},
        "complexity": {
            "time": rr.complexity.time,
            "space": rr.complexity.space,
            "notes": rr.complexity.notes,
        },
        "suggestedFix": rr.suggested_fix,
    }


async def _merge_upload(
    language: str,
    code: str,
    snippet_file: Optional[UploadFile],
) -> Tuple[str, str]:
    """
    Pasted code wins over an uploaded file. The file's extension only picks
    the language when none was selected. Code is trimmed the way the browser
    client trims it, so line numbers match what the user sees.
    """
    if snippet_file is None or not snippet_file.filename:
        return language, (code or "").strip()

    max_bytes = config.MAX_CODE_CHARS * 4
    data = await snippet_file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ReviewValidationError(
            f"Uploaded file too large. Max allowed is {config.MAX_CODE_CHARS:,} characters."
        )
    file_code, detected = read_uploaded_snippet(snippet_file.filename, data)

    if not (code or "").strip():
        code = file_code
    if not (language or "").strip() and detected:
        language = detected
    return language, (code or "").strip()


def _form_error(request: Request, message: str, language: str, code: str, status_code: int):
    return render(
        request,
        "index.html",
        {"error": message, "language": language or DEFAULT_LANGUAGE, "code": code},
        status_code=status_code,
    )


# ============================================================
# Routes
# ============================================================
@router.get("/", response_class=HTMLResponse)
def home_page(request: Request):
    return render(request, "index.html", {"language": DEFAULT_LANGUAGE, "code": ""})


@router.post("/review", response_class=HTMLResponse)
async def review_form(
    request: Request,
    language: str = Form(""),
    code: str = Form(""),
    snippet_file: Optional[UploadFile] = File(default=None),
):
    try:
        language, code = await _merge_upload(language, code, snippet_file)
        lang, code = validate_review_request(language, code)
    except ReviewValidationError as e:
        logger.info("Rejected review form: %s", e)
        return _form_error(request, str(e), language, code or "", status_code=400)

    try:
        rr = reviewer.review(code, lang)
    except Exception:
        logger.exception("Review failed for %s snippet", lang)
        return _form_error(request, INTERNAL_ERROR_UI, lang, code, status_code=500)

    return render(
        request,
        "report.html",
        {"review": review_payload(rr), "language": lang, "code": code},
    )


@router.post("/review/pdf")
async def review_pdf(
    request: Request,
    language: str = Form(""),
    code: str = Form(""),
    snippet_file: Optional[UploadFile] = File(default=None),
):
    try:
        language, code = await _merge_upload(language, code, snippet_file)
        lang, code = validate_review_request(language, code)
    except ReviewValidationError as e:
        logger.info("Rejected PDF request: %s", e)
        return _form_error(request, str(e), language, code or "", status_code=400)

    try:
        pdf_bytes = build_pdf_report(reviewer.review(code, lang))
    except Exception:
        logger.exception("PDF export failed for %s snippet", lang)
        return _form_error(request, INTERNAL_ERROR_UI, lang, code, status_code=500)

    return StreamingResponse(
        iter([pdf_bytes]),
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=code_review.pdf"},
    )


@router.post("/api/review")
async def review_api(request: Request):
    try:
        body = await request.json()
    except (ValueError, RecursionError):
        return JSONResponse(status_code=400, content={"error": "Invalid request payload."})
    if not isinstance(body, dict):
        return JSONResponse(status_code=400, content={"error": "Invalid request payload."})

    try:
        lang, code = validate_review_request(body.get("language"), body.get("code"))
    except ReviewValidationError as e:
        logger.info("Rejected review request: %s", e)
        return JSONResponse(status_code=400, content={"error": str(e)})

    try:
        rr = reviewer.review(code, lang)
    except Exception:
        logger.exception("Review API error")
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_API})

    return review_payload(rr)
