"""Tests for the author pages."""

from fastapi import status
from sqlmodel import select

from src.catalog.entities.service.author import AuthorTable


class TestAuthorPages:
    def test_list_and_search(self, client, make_author):
        make_author("Octavia E. Butler")
        make_author("N. K. Jemisin")

        everyone = client.get("/authors")
        searched = client.get("/authors", params={"name": "jemisin"})

        assert "Octavia E. Butler" in everyone.text
        assert "N. K. Jemisin" in everyone.text
        assert "N. K. Jemisin" in searched.text
        assert "Octavia E. Butler" not in searched.text

    def test_create(self, client, session):
        response = client.post("/authors", data={"name": "Ted Chiang"})

        assert response.status_code == status.HTTP_303_SEE_OTHER
        author_id = response.headers["location"].rsplit("/", 1)[-1]
        assert session.get(AuthorTable, author_id).name == "Ted Chiang"

    def test_create_failure_rerenders_form(self, client, session):
        response = client.post("/authors", data={"name": "   "})

        assert response.status_code == status.HTTP_200_OK
        assert "Error creating Author" in response.text
        assert session.exec(select(AuthorTable)).all() == []

    def test_show_lists_their_books(self, client, make_author, make_book):
        author = make_author("Ursula K. Le Guin")
        make_book("The Word for World Is Forest", author_id=author.id)
        make_book("Someone Else's Book")

        response = client.get(f"/authors/{author.id}")

        assert "The Word for World Is Forest" in response.text
        assert "Someone Else" not in response.text

    def test_show_unknown_redirects_to_root(self, client):
        assert client.get("/authors/missing").headers["location"] == "/"

    def test_edit_unknown_redirects_to_author_list(self, client):
        assert client.get("/authors/missing/edit").headers["location"] == "/authors"

    def test_update(self, client, session, make_author):
        author = make_author("Typo Name")

        response = client.put(f"/authors/{author.id}", data={"name": "Real Name"})

        assert response.headers["location"] == f"/authors/{author.id}"
        session.expire_all()
        assert session.get(AuthorTable, author.id).name == "Real Name"

    def test_update_failure_rerenders_edit(self, client, make_author):
        author = make_author("Kept Name")

        response = client.put(f"/authors/{author.id}", data={"name": ""})

        assert response.status_code == status.HTTP_200_OK
        assert "Error updating Author" in response.text

    def test_delete(self, client, session, make_author):
        author = make_author()

        response = client.post(f"/authors/{author.id}?_method=DELETE")

        assert response.headers["location"] == "/authors"
        assert session.get(AuthorTable, author.id) is None

    def test_delete_with_books_redirects_back(self, client, session, make_author, make_book):
        author = make_author()
        make_book(author_id=author.id)

        response = client.delete(f"/authors/{author.id}")

        assert response.headers["location"] == f"/authors/{author.id}"
        assert session.get(AuthorTable, author.id) is not None

    def test_delete_unknown_redirects_to_root(self, client):
        assert client.delete("/authors/missing").headers["location"] == "/"
