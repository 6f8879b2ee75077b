"""Book pages: list/search, create, show, edit, update and delete."""

from datetime import date, datetime

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import Response
from loguru import logger

from src.catalog.api.http.deps import (
    get_author_repository,
    get_book_repository,
    get_catalog_settings,
    get_cover_store,
    get_view,
)
from src.catalog.api.http.views import ViewRenderer
from src.catalog.core.services import CoverImageStore
from src.catalog.entities.service.author import AuthorRepository
from src.catalog.entities.service.book import Book, BookRepository, BookSearch
from src.catalog.runtime.config.config_data import CatalogConfig

router = APIRouter(prefix="/books", tags=["books"])

FORM_ERRORS = {"new": "Error creating book", "edit": "Error updating book"}
MAX_STORED_INT = 2**63 - 1
MIN_STORED_INT = -(2**63)


def _parse_form_date(value: str) -> date | None:
    """Form dates are ISO strings; anything unparseable is treated as missing."""
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _parse_form_int(value: str) -> int | None:
    """Integers outside a 64-bit column are treated as missing."""
    try:
        number = int(value.strip())
    except ValueError:
        return None
    if not MIN_STORED_INT <= number <= MAX_STORED_INT:
        return None
    return number


def _render_form_page(
    view: ViewRenderer,
    authors: AuthorRepository,
    book: Book,
    form: str,
    has_error: bool = False,
) -> Response:
    result = authors.list_all()
    if not result.is_ok:
        return view.redirect("/books")
    params = {"authors": result.value, "book": book}
    if has_error:
        params["error_message"] = FORM_ERRORS[form]
    return view.render(f"books/{form}.html", **params)


@router.get("")
def list_books(
    request: Request,
    books: BookRepository = Depends(get_book_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    """List books, narrowed by the optional title and date filters."""
    search = BookSearch.from_query(request.query_params)
    result = books.search(search)
    if not result.is_ok:
        return view.redirect("/")
    return view.render(
        "books/all.html", books=result.value, search_options=search.as_form_values()
    )


@router.get("/new")
def new_book(
    authors: AuthorRepository = Depends(get_author_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    return _render_form_page(view, authors, Book(), "new")


@router.post("")
def create_book(
    title: str = Form(""),
    author: str = Form(""),
    publish_date: str = Form("", alias="publishDate"),
    page_count: str = Form("", alias="pageCount"),
    description: str = Form(""),
    cover: UploadFile | None = File(None),
    books: BookRepository = Depends(get_book_repository),
    authors: AuthorRepository = Depends(get_author_repository),
    covers: CoverImageStore = Depends(get_cover_store),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    """Create a book; on failure drop the uploaded cover and re-show the form."""
    file_name = covers.store_upload(cover)
    book = Book(
        title=title,
        author_id=author or None,
        publish_date=_parse_form_date(publish_date),
        page_count=_parse_form_int(page_count),
        cover_image_name=file_name,
        description=description or None,
    )

    result = books.create(book)
    if result.is_ok:
        return view.redirect(f"/books/{result.value.id}")

    covers.delete(file_name)
    return _render_form_page(view, authors, book, "new", has_error=True)


@router.get("/{book_id}")
def show_book(
    book_id: str,
    books: BookRepository = Depends(get_book_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    result = books.get(book_id, populate_author=True)
    if not result.is_ok:
        return view.redirect("/")
    return view.render("books/show.html", book=result.value)


@router.get("/{book_id}/edit")
def edit_book(
    book_id: str,
    books: BookRepository = Depends(get_book_repository),
    authors: AuthorRepository = Depends(get_author_repository),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    result = books.get(book_id)
    if not result.is_ok:
        return view.redirect("/")
    return _render_form_page(view, authors, result.value, "edit")


@router.put("/{book_id}")
def update_book(
    book_id: str,
    title: str = Form(""),
    author: str = Form(""),
    publish_date: str = Form("", alias="publishDate"),
    page_count: str = Form("", alias="pageCount"),
    description: str = Form(""),
    cover: UploadFile | None = File(None),
    books: BookRepository = Depends(get_book_repository),
    authors: AuthorRepository = Depends(get_author_repository),
    covers: CoverImageStore = Depends(get_cover_store),
    settings: CatalogConfig = Depends(get_catalog_settings),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    """Overwrite every field of an existing book.

    Without ``preserve_cover_on_update`` the cover reference is replaced by
    this request's upload even when there is none. Compensation only ever
    removes the file written by this request.
    """
    file_name = covers.store_upload(cover)

    found = books.get(book_id)
    if not found.is_ok:
        covers.delete(file_name)
        return view.redirect("/")

    book = found.value
    previous_cover = book.cover_image_name
    book.title = title
    book.author_id = author or None
    book.publish_date = _parse_form_date(publish_date)
    book.page_count = _parse_form_int(page_count)
    book.description = description or None
    if file_name is not None or not settings.preserve_cover_on_update:
        book.cover_image_name = file_name

    result = books.update(book)
    if result.is_ok:
        if (
            settings.preserve_cover_on_update
            and file_name is not None
            and previous_cover
            and previous_cover != file_name
        ):
            covers.delete(previous_cover)
        return view.redirect(f"/books/{book.id}")

    covers.delete(file_name)
    if result.is_not_found:
        return view.redirect("/")
    return _render_form_page(view, authors, book, "edit", has_error=True)


@router.delete("/{book_id}")
def delete_book(
    book_id: str,
    books: BookRepository = Depends(get_book_repository),
    covers: CoverImageStore = Depends(get_cover_store),
    settings: CatalogConfig = Depends(get_catalog_settings),
    view: ViewRenderer = Depends(get_view),
) -> Response:
    result = books.delete(book_id)
    if result.is_ok:
        if settings.remove_cover_on_delete:
            covers.delete(result.value.cover_image_name)
        return view.redirect("/books")

    if result.value is not None:
        logger.warning("Book {} was found but could not be removed", book_id)
        return view.render(
            "books/show.html", book=result.value, error_message="Could not remove book"
        )
    return view.redirect("/")
