"""
PDF export of a single review.

Layout:
- Title + meta block (language, quality, author)
- Potential issues and improvements as numbered tables
- Complexity table
- Suggested fix as preformatted monospace text
Header rows repeat on every page (repeatRows=1).
"""

from __future__ import annotations

import html
import io
from typing import Any, List, Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    PageBreak,
    Paragraph,
    Preformatted,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from codechat import config

from ..reviewers.base import ReviewResult

GRID = colors.HexColor("#9CA3AF")     # gray-400
ALT_ROW = colors.HexColor("#F3F4F6")  # gray-100
CODE_BG = colors.HexColor("#EEF2FF")  # indigo-50
WHITE = colors.white

TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), WHITE),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("LINEBELOW", (0, 0), (-1, 0), 1.2, colors.black),
    ("GRID", (0, 0), (-1, -1), 0.6, GRID),
    ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ("TOPPADDING", (0, 0), (-1, -1), 6),
    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
    ("LEFTPADDING", (0, 0), (-1, -1), 6),
    ("RIGHTPADDING", (0, 0), (-1, -1), 6),
    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [WHITE, ALT_ROW]),
])


def _text(value: Any) -> str:
    # Paragraph parses a small XML dialect, so user text must be escaped.
    return html.escape(str(value if value is not None else ""), quote=False)


def _styles():
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "title", parent=base["Title"], fontName="Helvetica-Bold",
            fontSize=20, leading=24, alignment=1, textColor=colors.black,
        ),
        "h2": ParagraphStyle(
            "h2", parent=base["Heading2"], fontName="Helvetica-Bold",
            fontSize=14, leading=18, textColor=colors.black, spaceBefore=10, spaceAfter=6,
        ),
        "body": ParagraphStyle(
            "body", parent=base["BodyText"], fontName="Helvetica",
            fontSize=10, leading=13, textColor=colors.black,
        ),
        "cell": ParagraphStyle(
            "cell", parent=base["BodyText"], fontName="Helvetica",
            fontSize=9, leading=11, textColor=colors.black,
        ),
        "header": ParagraphStyle(
            "header_cell", parent=base["BodyText"], fontName="Helvetica-Bold",
            fontSize=9, leading=11, textColor=colors.black,
        ),
        "code": ParagraphStyle(
            "code", parent=base["Code"], fontName="Courier",
            fontSize=8, leading=10, backColor=CODE_BG, borderPadding=6,
        ),
    }


def _numbered_table(title: str, items: Sequence[str], styles) -> Table:
    data: List[List[Any]] = [[Paragraph("#", styles["header"]), Paragraph(title, styles["header"])]]
    for idx, item in enumerate(items, start=1):
        data.append([Paragraph(str(idx), styles["cell"]), Paragraph(_text(item), styles["cell"])])

    tbl = Table(data, colWidths=[12 * mm, 166 * mm], repeatRows=1)
    tbl.setStyle(TABLE_STYLE)
    return tbl


def build_pdf_report(result: ReviewResult, *, prepared_by: Optional[str] = None) -> bytes:
    styles = _styles()
    author = prepared_by or config.REPORT_PREPARED_BY

    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=16 * mm,
        rightMargin=16 * mm,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
        title="Code Review Report",
        author=author,
    )

    story: List[Any] = []
    story.append(Paragraph("Code Review Report", styles["title"]))
    story.append(Spacer(1, 10))

    q = result.quality
    meta_lines = [
        f"<b>Language:</b> {_text(result.language or 'Unknown')}",
        f"<b>Quality:</b> {q.score}/100 ({_text(q.grade)}, {_text(q.label)})",
        f"<b>Potential issues:</b> {len(result.potential_issues)}",
        f"<b>Prepared by:</b> {_text(author)}",
    ]
    for line in meta_lines:
        story.append(Paragraph(line, styles["body"]))
    story.append(Spacer(1, 14))

    story.append(Paragraph("Potential Issues", styles["h2"]))
    story.append(_numbered_table("Finding", result.potential_issues, styles))

    story.append(Paragraph("Improvements", styles["h2"]))
    story.append(_numbered_table("Suggestion", result.improvements, styles))

    story.append(Paragraph("Complexity", styles["h2"]))
    cx = result.complexity
    ctbl = Table(
        [
            [Paragraph("Measure", styles["header"]), Paragraph("Estimate", styles["header"])],
            [Paragraph("Time", styles["cell"]), Paragraph(_text(cx.time), styles["cell"])],
            [Paragraph("Space", styles["cell"]), Paragraph(_text(cx.space), styles["cell"])],
            [Paragraph("Notes", styles["cell"]), Paragraph(_text(cx.notes), styles["cell"])],
        ],
        colWidths=[30 * mm, 148 * mm],
        repeatRows=1,
    )
    ctbl.setStyle(TABLE_STYLE)
    story.append(ctbl)

    story.append(PageBreak())
    story.append(Paragraph("Suggested Fix", styles["h2"]))
    # Preformatted does not parse markup, so the code goes in as-is.
    story.append(Preformatted(result.suggested_fix or "", styles["code"], maxLineLength=110))

    doc.build(story)
    return buf.getvalue()
