"""
SecDay Web - FastAPI Application

Serves the event home page, the security awareness survey and the
password checker, plus a small JSON API.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import AsyncIterator, List, Optional

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from secday import __version__
from secday.core.config import get_config
from secday.core.logging_config import setup_logging
from secday.password.service import PasswordCheckService, create_password_service
from secday.survey.models import SurveyQuestion, load_questions

from . import views

logger = logging.getLogger(__name__)

# Setup paths
WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"

# Create FastAPI app
app = FastAPI(
    title="SecDay",
    description="Information Security Day site with survey and password checker",
    version=__version__,
)

# Mount static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Setup Jinja2 templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class PasswordCheckRequest(BaseModel):
    """JSON body for the password check API."""

    password: Optional[str] = None


# ============================================================================
# Dependencies
# ============================================================================

@lru_cache(maxsize=1)
def get_questions() -> List[SurveyQuestion]:
    """Survey questions, loaded once."""
    return load_questions()


async def get_password_service() -> AsyncIterator[PasswordCheckService]:
    """
    Provide a password check service for one request.

    The underlying HTTP client is closed when the request finishes.
    """
    service = create_password_service(get_config())
    try:
        yield service
    finally:
        await service.close()


# ============================================================================
# HTML Pages
# ============================================================================

@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """
    Home page with the event introduction.
    """
    return templates.TemplateResponse(request, "index.html", views.get_home_view())


@app.get("/survey", response_class=HTMLResponse)
async def survey_get(
    request: Request,
    questions: List[SurveyQuestion] = Depends(get_questions),
):
    """
    Security awareness survey form.
    """
    return templates.TemplateResponse(
        request,
        "survey.html",
        views.get_survey_view(questions),
    )


@app.post("/survey", response_class=HTMLResponse)
async def survey_post(
    request: Request,
    questions: List[SurveyQuestion] = Depends(get_questions),
):
    """
    Process a survey submission.

    Incomplete submissions re-render the form with an error notification.
    """
    form = await request.form()
    submitted = {q.id: form.getlist(q.id) for q in questions}

    answers, notification = views.submit_survey(questions, submitted)

    if answers is None:
        return templates.TemplateResponse(
            request,
            "survey.html",
            views.get_survey_view(questions, selected=submitted, notification=notification),
            status_code=400,
        )

    return templates.TemplateResponse(
        request,
        "survey_complete.html",
        {**views.base_context(), "notification": notification},
    )


@app.get("/password-check", response_class=HTMLResponse)
async def password_check_get(request: Request):
    """
    Password checker form.
    """
    return templates.TemplateResponse(
        request,
        "password_check.html",
        views.get_password_check_view(),
    )


@app.post("/password-check", response_class=HTMLResponse)
async def password_check_post(
    request: Request,
    password: str = Form(""),
    service: PasswordCheckService = Depends(get_password_service),
):
    """
    Run a password check and render the score breakdown.
    """
    outcome = await views.run_password_check(service, password)

    return templates.TemplateResponse(
        request,
        "password_check.html",
        views.get_password_check_view(outcome),
        status_code=outcome.status_code,
    )


# ============================================================================
# JSON API Endpoints
# ============================================================================

@app.post("/api/password/check")
async def api_password_check(
    body: Optional[PasswordCheckRequest] = None,
    service: PasswordCheckService = Depends(get_password_service),
):
    """
    Check a password and return the score breakdown.

    Returns:
        Result and notification; 400 for empty or missing input, 502
        when the breach lookup fails
    """
    password = body.password if body else None
    outcome = await views.run_password_check(service, password)

    return JSONResponse(
        status_code=outcome.status_code,
        content=outcome.model_dump(mode="json", exclude={"status_code"}),
    )


@app.get("/health")
async def health_check():
    """
    Health check endpoint.
    """
    return {"status": "ok", "version": __version__}


# ============================================================================
# Server Startup
# ============================================================================

def main() -> None:
    """Main entry point for the web server."""
    import uvicorn

    config = get_config()
    setup_logging(config.log_level)

    logger.info("=" * 60)
    logger.info("SecDay - Information Security Day site")
    logger.info("=" * 60)
    logger.info(f"Host: {config.web.host}")
    logger.info(f"Port: {config.web.port}")
    logger.info(f"Pwned Passwords API: {config.pwned.api_url}")
    logger.info(f"Scoring mode: {config.scoring.mode.value}")
    logger.info("=" * 60)

    uvicorn.run(
        "secday.web.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=config.web.reload,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
