"""
QuickNotes Backend - Notes API Tests
======================================

What:  Endpoint tests for /notes and /notes/{id}.
How:   HTTPX AsyncClient over ASGITransport against an app built around a
       fresh NoteStore (see conftest.py); no server process needed.

What we test:
    ✅ Status codes and JSON bodies for every route
    ✅ Exact error messages for 400 and 404
    ✅ Non-numeric ids behave as not found
    ✅ Request ID header on responses
"""

import logging

import pytest
from httpx import AsyncClient, ASGITransport

from quicknotes.exceptions import NotFoundError
from quicknotes.main import create_app
from quicknotes.models.note import Note
from quicknotes.routes.notes import parse_note_id
from quicknotes.services.note_store import NoteStore


class TestListNotes:

    @pytest.mark.asyncio
    async def test_list_notes_empty(self, test_client):
        response = await test_client.get("/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_notes_returns_all(self, test_client, sample_notes):
        response = await test_client.get("/notes")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "title": "T1", "content": "C1"},
            {"id": 2, "title": "T2", "content": "C2"},
        ]


class TestCreateNote:

    @pytest.mark.asyncio
    async def test_create_note(self, test_client, note_store):
        new_note = {"title": "Test Title", "content": "Test Content"}

        response = await test_client.post("/notes", json=new_note)

        assert response.status_code == 201
        assert response.json() == {"id": 1, "title": "Test Title", "content": "Test Content"}
        assert note_store.get_note_by_id(1) == Note(id=1, title="Test Title", content="Test Content")

    @pytest.mark.asyncio
    async def test_create_note_missing_content(self, test_client, note_store):
        response = await test_client.post("/notes", json={"title": "A"})

        assert response.status_code == 400
        assert response.json() == {"error": "Title and content are required"}
        assert note_store.count() == 0

    @pytest.mark.asyncio
    async def test_create_note_missing_title(self, test_client):
        response = await test_client.post("/notes", json={"content": "B"})

        assert response.status_code == 400
        assert response.json()["error"] == "Title and content are required"

    @pytest.mark.asyncio
    async def test_create_note_null_field(self, test_client):
        response = await test_client.post("/notes", json={"title": "A", "content": None})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_note_without_body(self, test_client):
        response = await test_client.post("/notes")

        assert response.status_code == 400
        assert response.json() == {"error": "Title and content are required"}

    @pytest.mark.asyncio
    async def test_create_note_empty_strings_are_present(self, test_client):
        response = await test_client.post("/notes", json={"title": "", "content": ""})

        assert response.status_code == 201
        assert response.json() == {"id": 1, "title": "", "content": ""}

    @pytest.mark.asyncio
    async def test_created_ids_increase(self, test_client):
        first = await test_client.post("/notes", json={"title": "A", "content": "1"})
        await test_client.delete(f"/notes/{first.json()['id']}")
        second = await test_client.post("/notes", json={"title": "B", "content": "2"})

        assert second.json()["id"] == first.json()["id"] + 1


class TestGetNote:

    @pytest.mark.asyncio
    async def test_get_note(self, test_client):
        created = await test_client.post("/notes", json={"title": "Test Title", "content": "Test Content"})

        response = await test_client.get(f"/notes/{created.json()['id']}")

        assert response.status_code == 200
        assert response.json() == created.json()

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, test_client):
        response = await test_client.get("/notes/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Note not found"}

    @pytest.mark.asyncio
    async def test_get_note_non_numeric_id(self, test_client, sample_notes):
        response = await test_client.get("/notes/abc")

        assert response.status_code == 404
        assert response.json() == {"error": "Note not found"}


class TestUpdateNote:

    @pytest.mark.asyncio
    async def test_update_note(self, test_client, note_store):
        created = await test_client.post("/notes", json={"title": "Old Title", "content": "Old Content"})
        note_id = created.json()["id"]

        response = await test_client.put(
            f"/notes/{note_id}", json={"title": "New Title", "content": "New Content"}
        )

        assert response.status_code == 200
        assert response.json() == {"id": note_id, "title": "New Title", "content": "New Content"}
        assert note_store.get_note_by_id(note_id).title == "New Title"

    @pytest.mark.asyncio
    async def test_update_note_partial_body(self, test_client, sample_notes):
        response = await test_client.put("/notes/1", json={"content": "Changed"})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "title": "T1", "content": "Changed"}

    @pytest.mark.asyncio
    async def test_update_note_not_found(self, test_client, note_store):
        response = await test_client.put("/notes/999", json={"title": "X", "content": "Y"})

        assert response.status_code == 404
        assert response.json() == {"error": "Note not found"}
        assert note_store.count() == 0

    @pytest.mark.asyncio
    async def test_update_note_non_numeric_id(self, test_client):
        response = await test_client.put("/notes/one", json={"title": "X", "content": "Y"})

        assert response.status_code == 404


class TestDeleteNote:

    @pytest.mark.asyncio
    async def test_delete_note(self, test_client, note_store):
        created = await test_client.post("/notes", json={"title": "Test Title", "content": "Test Content"})

        response = await test_client.delete(f"/notes/{created.json()['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Note deleted", "deletedNote": created.json()}
        assert note_store.count() == 0

    @pytest.mark.asyncio
    async def test_delete_note_not_found(self, test_client):
        response = await test_client.delete("/notes/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Note not found"}

    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, test_client, sample_notes):
        await test_client.delete("/notes/1")

        assert (await test_client.get("/notes/1")).status_code == 404
        assert (await test_client.delete("/notes/1")).status_code == 404
        assert (await test_client.get("/notes")).json() == [{"id": 2, "title": "T2", "content": "C2"}]


class TestNoteIdParsing:
    """Path ids must be plain ASCII digit strings; anything else is not found."""

    @pytest.fixture
    def ten_notes(self, note_store):
        return [note_store.add_note(f"T{i}", "C") for i in range(1, 11)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    @pytest.mark.parametrize("raw_id", ["1_0", "+1", "+10", " 10", "١", "١٠", "-1"])
    async def test_non_plain_ids_are_not_found(self, test_client, note_store, ten_notes, method, raw_id):
        kwargs = {"json": {"title": "X", "content": "Y"}} if method == "PUT" else {}

        response = await test_client.request(method, f"/notes/{raw_id}", **kwargs)

        assert response.status_code == 404
        assert response.json() == {"error": "Note not found"}
        assert note_store.get_all_notes() == ten_notes

    @pytest.mark.asyncio
    async def test_leading_zero_id_is_numeric(self, test_client, ten_notes):
        response = await test_client.get("/notes/010")

        assert response.status_code == 200
        assert response.json()["id"] == 10

    def test_parse_note_id(self):
        assert parse_note_id("42") == 42

        with pytest.raises(NotFoundError):
            parse_note_id("4_2")


class FailingNoteStore(NoteStore):
    def get_all_notes(self):
        raise RuntimeError("store exploded")


class TestApplicationWiring:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/notes")

        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/notes", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"

    def test_apps_have_isolated_stores(self):
        first = create_app()
        second = create_app()

        first.state.note_store.add_note("T", "C")

        assert second.state.note_store.count() == 0

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_generic_500(self):
        app = create_app(store=FailingNoteStore())
        transport = ASGITransport(app=app, raise_app_exceptions=False)

        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/notes")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    @pytest.mark.asyncio
    async def test_missing_field_warned_once(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="quicknotes")

        await test_client.post("/notes", json={"title": "A"})

        handler_records = [r for r in caplog.records if r.name == "quicknotes.main"]
        access_records = [r for r in caplog.records if r.name == "quicknotes.access"]
        assert [r.levelno for r in handler_records] == [logging.INFO]
        assert [r.levelno for r in access_records] == [logging.WARNING]
