"""
End-to-end flows across several routes, the way a browser would use them.
"""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from book_tracker.models import User
from tests.conftest import book_form, login


class TestReadingListFlow:

    def test_register_login_add_and_list(self, client: TestClient, db_session: Session):
        """Register ana, log in again, add Dune and see it on the list."""
        response = client.post(
            "/register",
            data={"userName": "ana", "userEmail": "a@x.com", "userPassword": "pw1"},
            follow_redirects=False,
        )
        assert response.headers["location"] == "/home"
        client.get("/logout")

        response = login(client, "a@x.com", "pw1")
        assert response.headers["location"] == "/home"

        assert client.get("/home").json()["books"] == []

        response = client.post(
            "/add",
            data=book_form(title="Dune", author="Herbert", status="read", rate="5", notes="classic"),
            follow_redirects=False,
        )
        assert response.headers["location"] == "/addNew"

        ana = db_session.execute(select(User).where(User.email == "a@x.com")).scalar_one()
        books = client.get("/home").json()["books"]
        assert len(books) == 1
        book = books[0]
        assert book["title"] == "Dune"
        assert book["author"] == "Herbert"
        assert book["status"] == "read"
        assert book["rate"] == 5
        assert book["notes"] == "classic"
        assert book["user_id"] == ana.id

    def test_edit_then_delete(self, auth_client: TestClient):
        auth_client.post("/add", data=book_form(), follow_redirects=False)
        book_id = auth_client.get("/home").json()["books"][0]["id"]

        form = book_form(status="re-reading")
        form["updatedBookId"] = str(book_id)
        response = auth_client.post("/edit", data=form)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["books"][0]["status"] == "re-reading"

        response = auth_client.post("/delete", data={"deletedBookId": str(book_id)})
        assert response.json()["books"] == []

    def test_failed_login_then_success(self, client: TestClient, sample_user: User):
        response = client.post(
            "/login",
            data={"userEmail": "a@x.com", "userPassword": "nope"},
        )
        # Redirect followed to the login form, which shows the message
        assert response.json() == {"view": "login", "messages": ["Incorrect password."]}

        response = client.post(
            "/login",
            data={"userEmail": "a@x.com", "userPassword": "pw1"},
        )
        assert response.json()["view"] == "home"
