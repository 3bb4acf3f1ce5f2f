"""
QuickNotes Backend - Store Wiring
===================================

What:  Attaches a NoteStore to the application and hands it to route handlers.
How:   The application factory stores one NoteStore on `app.state`; the
       `get_note_store` dependency reads it back for each request.
Who:   create_app() calls attach_store(); routes use Depends(get_note_store).

There is no module-level store. Each application owns its own instance,
so tests can build isolated apps side by side.
"""

from typing import Optional

from fastapi import FastAPI, Request

from quicknotes.services.note_store import NoteStore


def attach_store(app: FastAPI, store: Optional[NoteStore] = None) -> NoteStore:
    """Install `store` (or a fresh NoteStore) as the application's note store."""
    if store is None:
        store = NoteStore()
    app.state.note_store = store
    return store


# ── Store Dependency ──────────────────────────────────────────────────────
def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency that provides the application's note store.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            return store.get_all_notes()
    """
    return request.app.state.note_store
