"""
QuickNotes Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped, so no state leaks between tests):
    ├── note_store: Empty NoteStore
    ├── app: FastAPI app built around `note_store`
    ├── test_client: HTTPX AsyncClient talking to `app`
    └── sample_notes: note_store pre-filled with two notes
"""

import os

# Must be set before quicknotes.config is imported
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from quicknotes.main import create_app
from quicknotes.services.note_store import NoteStore


@pytest.fixture
def note_store():
    """A fresh, empty in-memory store for each test."""
    return NoteStore()


@pytest.fixture
def app(note_store):
    """
    An application instance serving `note_store`.

    Tests can inspect `note_store` directly to check what a request did.
    """
    return create_app(store=note_store)


@pytest.fixture
def sample_notes(note_store):
    """Two notes created through the store: ids 1 and 2."""
    return [
        note_store.add_note("T1", "C1"),
        note_store.add_note("T2", "C2"),
    ]


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
