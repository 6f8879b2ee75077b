"""Author pages."""

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from src.catalog.api.http.deps import (
    get_author_repository,
    get_book_repository,
    get_catalog_settings,
    get_view,
)
from src.catalog.api.http.views import ViewRenderer
from src.catalog.entities.service.author import Author, AuthorRepository
from src.catalog.entities.service.book import BookRepository
from src.catalog.runtime.config.config_data import CatalogConfig

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("")
def list_authors(
    name: str | None = None,
    authors: AuthorRepository = Depends(get_author_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    result = authors.search(name)
    if not result.is_ok:
        return view.redirect("/")
    return view.render(
        "authors/index.html",
        authors=result.value,
        search_options={"name": name or ""},
    )


@router.get("/new")
def new_author(view: ViewRenderer = Depends(get_view)) -> Response:
    return view.render("authors/new.html", author=Author())


@router.post("")
def create_author(
    name: str = Form(""),
    authors: AuthorRepository = Depends(get_author_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    author = Author(name=name.strip())
    result = authors.create(author)
    if result.is_ok:
        return view.redirect(f"/authors/{result.value.id}")
    return view.render(
        "authors/new.html", author=author, error_message="Error creating Author"
    )


@router.get("/{author_id}")
def show_author(
    author_id: str,
    authors: AuthorRepository = Depends(get_author_repository),
    books: BookRepository = Depends(get_book_repository),
    settings: CatalogConfig = Depends(get_catalog_settings),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    found = authors.get(author_id)
    if not found.is_ok:
        return view.redirect("/")
    by_author = books.list_by_author(author_id, settings.author_books_limit)
    if not by_author.is_ok:
        return view.redirect("/")
    return view.render(
        "authors/show.html", author=found.value, books=by_author.value
    )


@router.get("/{author_id}/edit")
def edit_author(
    author_id: str,
    authors: AuthorRepository = Depends(get_author_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    result = authors.get(author_id)
    if not result.is_ok:
        return view.redirect("/authors")
    return view.render("authors/edit.html", author=result.value)


@router.put("/{author_id}")
def update_author(
    author_id: str,
    name: str = Form(""),
    authors: AuthorRepository = Depends(get_author_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    found = authors.get(author_id)
    if not found.is_ok:
        return view.redirect("/")

    author = found.value
    author.name = name.strip()
    result = authors.update(author)
    if result.is_ok:
        return view.redirect(f"/authors/{author.id}")
    if result.is_not_found:
        return view.redirect("/")
    return view.render(
        "authors/edit.html", author=author, error_message="Error updating Author"
    )


@router.delete("/{author_id}")
def delete_author(
    author_id: str,
    authors: AuthorRepository = Depends(get_author_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    result = authors.delete(author_id)
    if result.is_ok:
        return view.redirect("/authors")
    if result.value is not None:
        return view.redirect(f"/authors/{author_id}")
    return view.redirect("/")
