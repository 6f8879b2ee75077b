import base64
import re

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
GIF_BYTES = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"

_BOOK_PATH = re.compile(r"^/books/([^/?]+)$")


def book_id_from_location(location: str) -> str:
    """Extract the book id from a ``/books/{id}`` redirect target."""
    match = _BOOK_PATH.match(location)
    assert match, f"not a book detail location: {location}"
    return match.group(1)


def book_form(**overrides: str) -> dict[str, str]:
    form = {
        "title": "The Left Hand of Darkness",
        "author": "",
        "publishDate": "1969-03-01",
        "pageCount": "304",
        "description": "Winter on Gethen.",
    }
    form.update(overrides)
    return form
