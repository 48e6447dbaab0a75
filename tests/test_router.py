"""Tests for the HTTP routes."""

from codechat import config
from codechat.code_review import router as review_router
from codechat.code_review.router import INTERNAL_ERROR_API, INTERNAL_ERROR_UI
from codechat.code_review.reviewers.heuristic import NO_ISSUES_MESSAGE


def _boom(*args, **kwargs):
    raise RuntimeError("scanner exploded")


def test_home_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "CodeChat Reviewer" in response.text
    for lang in ("C++", "Java", "Python", "JavaScript", "TypeScript", "Go"):
        assert f">{lang}</option>" in response.text


def test_health_endpoints(client):
    assert client.get("/healthz").json() == {"status": "ok"}
    assert client.head("/healthz").status_code == 200
    assert client.head("/").status_code == 200


def test_api_review_returns_full_shape(client):
    response = client.post(
        "/api/review",
        json={"language": "Java", "code": "int x = 5\nSystem.out.println(x);"},
    )
    assert response.status_code == 200
    data = response.json()

    assert set(data) == {
        "language", "quality", "potentialIssues", "improvements", "complexity", "suggestedFix",
    }
    assert data["language"] == "Java"
    assert data["potentialIssues"]["items"][0] == "Line 1: Possible missing ';' at end of statement."
    assert data["improvements"]["items"]
    assert set(data["complexity"]) == {"time", "space", "notes"}
    assert set(data["quality"]) == {"score", "grade", "label"}
    assert data["suggestedFix"] == "int x = 5;\nSystem.out.println(x);"


def test_api_review_clean_code_has_placeholder(client):
    response = client.post("/api/review", json={"language": "Go", "code": "package main\n\nfunc main() {}\n"})
    assert response.status_code == 200
    assert response.json()["potentialIssues"]["items"] == [NO_ISSUES_MESSAGE]


def test_api_review_rejects_short_code(client):
    response = client.post("/api/review", json={"language": "Java", "code": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "Please paste at least a few lines of code."}


def test_api_review_rejects_missing_language(client):
    response = client.post("/api/review", json={"code": "int x = 10;"})
    assert response.status_code == 400
    assert response.json() == {"error": "Please select a language."}


def test_api_review_rejects_malformed_body(client):
    response = client.post(
        "/api/review",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request payload."}

    response = client.post("/api/review", json=["Java", "int x = 10;"])
    assert response.status_code == 400


def test_api_review_internal_error(client, monkeypatch):
    monkeypatch.setattr(review_router.reviewer, "review", _boom)
    response = client.post("/api/review", json={"language": "Java", "code": "int x = 10;"})
    assert response.status_code == 500
    assert response.json() == {"error": INTERNAL_ERROR_API}


def test_form_review_renders_report(client):
    response = client.post("/review", data={"language": "C++", "code": "int x = 5\nreturn x;"})
    assert response.status_code == 200
    assert "Suggested Fix" in response.text
    assert "int x = 5;" in response.text
    assert "Download PDF" in response.text


def test_form_review_escapes_user_code(client):
    response = client.post("/review", data={"language": "Java", "code": "<script>alert(1)</script>"})
    assert response.status_code == 200
    assert "<script>alert(1)</script>" not in response.text
    assert "&lt;script&gt;" in response.text


def test_form_review_validation_error(client):
    response = client.post("/review", data={"language": "Java", "code": "   "})
    assert response.status_code == 400
    assert "Please paste some code before requesting a review." in response.text


def test_form_review_uses_uploaded_file(client):
    response = client.post(
        "/review",
        data={"language": "", "code": ""},
        files={"snippet_file": ("Main.java", b"int x = 5\nint y = 6;\n", "text/x-java")},
    )
    assert response.status_code == 200
    assert "Review Summary (Java)" in response.text
    assert "int x = 5;" in response.text


def test_form_review_internal_error(client, monkeypatch):
    monkeypatch.setattr(review_router.reviewer, "review", _boom)
    response = client.post("/review", data={"language": "Java", "code": "int x = 10;"})
    assert response.status_code == 500
    assert INTERNAL_ERROR_UI in response.text


def test_pdf_download(client):
    response = client.post("/review/pdf", data={"language": "Java", "code": "int x = 5\nreturn x;"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "attachment" in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


def test_pdf_download_validation_error(client):
    response = client.post("/review/pdf", data={"language": "", "code": "int x = 10;"})
    assert response.status_code == 400
    assert "Please select a language." in response.text


def test_api_review_rejects_deeply_nested_json(client):
    response = client.post(
        "/api/review",
        content=b"[" * 100_000 + b"]" * 100_000,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request payload."}


def test_form_review_trims_pasted_code(client):
    response = client.post("/review", data={"language": "Java", "code": "\n\nint x = 50\n"})
    assert response.status_code == 200
    assert "Line 1: Possible missing" in response.text
    # Leading newline after <textarea> is eaten by HTML parsers, the code itself must survive.
    assert 'style="display: none;">\nint x = 50</textarea>' in response.text


def test_form_review_minimum_length_ignores_whitespace(client):
    response = client.post("/review", data={"language": "Java", "code": "\n\n   x = 5   \n\n"})
    assert response.status_code == 400
    assert "Please paste at least a few lines of code." in response.text


def test_pdf_download_trims_code_like_the_report(client, monkeypatch):
    captured = []

    def fake_pdf(result, **kwargs):
        captured.append(result)
        return b"%PDF-1.4 fake"

    monkeypatch.setattr(review_router, "build_pdf_report", fake_pdf)
    response = client.post("/review/pdf", data={"language": "Java", "code": "\nint x = 50\n"})
    assert response.status_code == 200
    assert captured[0].potential_issues[0].startswith("Line 1:")
    assert captured[0].suggested_fix == "int x = 50;"


def test_form_review_rejects_oversized_upload(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_CODE_CHARS", 20)
    response = client.post(
        "/review",
        data={"language": "", "code": ""},
        files={"snippet_file": ("Main.java", b"int x = 5;\n" * 20, "text/x-java")},
    )
    assert response.status_code == 400
    assert "Uploaded file too large" in response.text
