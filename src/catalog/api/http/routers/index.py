from fastapi import APIRouter, Depends
from fastapi.responses import Response

from src.catalog.api.http.deps import get_book_repository, get_catalog_settings, get_view
from src.catalog.api.http.views import ViewRenderer
from src.catalog.entities.service.book import BookRepository
from src.catalog.runtime.config.config_data import CatalogConfig

router = APIRouter(tags=["index"])


@router.get("/")
def index(
    books: BookRepository = Depends(get_book_repository),
    settings: CatalogConfig = Depends(get_catalog_settings),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    """Landing page with the most recently added books."""
    result = books.recent(settings.recent_books_limit)
    return view.render("index.html", books=result.value if result.is_ok else [])
