"""HTML interface: form to shorten a URL, result page and error page."""

import os

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from shorten_app.dependencies import get_shortener
from shorten_app.exceptions import ShortenerError
from shorten_app.services.shortener import Shortener

router = APIRouter(include_in_schema=False)

static_dir = os.path.join(os.path.dirname(__file__), "..", "static")
template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


@router.get("/")
def redirect_ui():
    return RedirectResponse(url="/ui")


@router.get("/ui", response_class=HTMLResponse)
def home(request: Request):
    return templates.TemplateResponse(request, "pages/home.html", {"title": "Home"})


@router.get("/ui/error", response_class=HTMLResponse)
def error(request: Request, msg: str = ""):
    return templates.TemplateResponse(
        request, "pages/error.html", {"title": "Error", "error": msg}
    )


@router.post("/ui/generated", response_class=HTMLResponse)
def ui_generated(
    request: Request,
    url: str = Form(...),
    shortener: Shortener = Depends(get_shortener)
):
    """Handle the home page form"""
    try:
        record = shortener.store(url)
    except ShortenerError as e:
        return templates.TemplateResponse(
            request, "pages/error.html", {"title": "Error", "error": str(e)}
        )

    return templates.TemplateResponse(
        request,
        "pages/generated.html",
        {
            "title": "Generated",
            "short_url": record.short_url,
            "original_url": record.original_url,
        },
    )
