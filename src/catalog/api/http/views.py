"""Template rendering and redirects for the HTML routes."""

from pathlib import Path
from typing import Any

from fastapi import Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from src.catalog.core.services import CoverImageStore
from src.catalog.runtime.context import get_config

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class ViewRenderer:
    """Renders a named view with a parameter mapping, or redirects."""

    def __init__(
        self, request: Request, covers: CoverImageStore, engine: Jinja2Templates = templates
    ) -> None:
        self._request = request
        self._covers = covers
        self._engine = engine

    def render(self, name: str, **params: Any) -> HTMLResponse:
        context = {
            "site_title": get_config().app.title,
            "covers": self._covers,
            **params,
        }
        return self._engine.TemplateResponse(self._request, name, context)

    @staticmethod
    def redirect(url: str) -> RedirectResponse:
        # 303 so a browser follows up with GET after PUT/DELETE submissions
        return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
