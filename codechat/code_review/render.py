from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from .utils.language_detect import SUPPORTED_LANGUAGES


# Always resolve templates relative to this file
TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    template_name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> Response:
    """
    Render a Jinja2 template with the request and the language list injected.
    """
    ctx: Dict[str, Any] = {"request": request, "languages": SUPPORTED_LANGUAGES}
    if context:
        ctx.update(context)

    return templates.TemplateResponse(
        request,
        template_name,
        ctx,
        status_code=status_code,
    )
