#!/usr/bin/env python3
"""Command-line interface for running and managing the catalog."""

import typer
from rich.console import Console
from rich.table import Table

from src.catalog.core.services import CoverImageStore, DbSessionService
from src.catalog.entities.service.author import Author, AuthorRepository
from src.catalog.entities.service.book import BookRepository, BookSearch
from src.catalog.runtime.context import get_config
from src.catalog.runtime.init_db import init_db as create_schema

console = Console()

app = typer.Typer(
    name="catalog",
    help="Library catalog - run the web app and manage its data",
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str = typer.Option(None, help="Bind address (defaults to config)"),
    port: int = typer.Option(None, help="Port (defaults to config)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the web application with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database tables and the cover upload directory."""
    config = get_config()
    create_schema()
    store = CoverImageStore.from_config(config.storage)
    console.print(f"[green]Database ready at {config.database.url}[/green]")
    console.print(f"[green]Covers stored in {store.upload_dir}[/green]")


@app.command("add-author")
def add_author(name: str = typer.Argument(..., help="Author name")) -> None:
    """Add an author so books can reference it."""
    service = DbSessionService(get_config())
    service.create_all()
    session = service.get_session()
    try:
        result = AuthorRepository(session).create(Author(name=name.strip()))
    finally:
        session.close()

    if not result.is_ok:
        console.print(f"[red]Could not add author: {result.error}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Added author {result.value.name} ({result.value.id})[/green]")


@app.command("list-books")
def list_books(
    title: str = typer.Option(None, help="Case-insensitive title substring"),
    published_before: str = typer.Option(None, help="Latest publish date (YYYY-MM-DD)"),
    published_after: str = typer.Option(None, help="Earliest publish date (YYYY-MM-DD)"),
) -> None:
    """List books matching the given filters."""
    service = DbSessionService(get_config())
    session = service.get_session()
    try:
        result = BookRepository(session).search(
            BookSearch(
                title=title,
                published_before=published_before,
                published_after=published_after,
            )
        )
    finally:
        session.close()

    if not result.is_ok:
        console.print(f"[red]Search failed: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="Books")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Published")
    table.add_column("Pages", justify="right")
    for book in result.value:
        table.add_row(
            book.id,
            book.title,
            book.publish_date.isoformat() if book.publish_date else "",
            str(book.page_count) if book.page_count is not None else "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
