# server/api/pages.py

from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse


router = APIRouter()

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@router.get("/", include_in_schema=False)
def index():
    """
    Landing page with the login / register forms.
    """
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@router.get("/chart", include_in_schema=False)
def chart():
    """
    Standalone revenue chart demo.
    """
    return FileResponse(STATIC_DIR / "chart.html", media_type="text/html")
