from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from notes_backend.api.schemas import Message

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["General"])

SITE_PAGE = {
    "title": "Tiny Notes Site",
    "heading": "Welcome to the tiny notes site",
    "message": "This page is rendered by FastAPI using Jinja2 templates.",
    "items": [
        "Python basics",
        "HTTP & JSON APIs",
        "Templates & HTML rendering",
    ],
}


@router.get("/health", response_model=Message, summary="Health Check")
def health_check():
    """Simple health check endpoint."""
    return {"message": "Healthy"}


@router.get("/hello", response_model=Message, summary="Hello")
def hello():
    return {"message": "hello"}


@router.get("/", include_in_schema=False)
def front_page(request: Request):
    """Notes front end."""
    return templates.TemplateResponse(request, "index.html", {})


@router.get("/site", include_in_schema=False)
def site_page(request: Request):
    return templates.TemplateResponse(request, "site.html", SITE_PAGE)
