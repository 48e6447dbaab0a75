from __future__ import annotations

import logging

from fastapi import FastAPI, Response

from codechat import config
from codechat.core.logging import setup_logging
from codechat.code_review.router import router as code_review_router

setup_logging()
logger = logging.getLogger("codechat.main")


# ------------------------------------------------------------
# App
# ------------------------------------------------------------
app = FastAPI(
    title="CodeChat Reviewer",
    description="Rule-based code review: issues, improvements, complexity and a suggested fix.",
    version="0.1.0",
)


# Render-safe health endpoints (GET + HEAD)
@app.get("/healthz")
def healthz_get():
    return {"status": "ok"}


@app.head("/healthz")
def healthz_head():
    return Response(status_code=200)


# Some hosts probe with HEAD /
@app.head("/")
def head_root():
    return Response(status_code=200)


app.include_router(code_review_router)
logger.info("CodeChat Reviewer ready")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "codechat.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level="debug" if config.DEBUG else "info",
    )
