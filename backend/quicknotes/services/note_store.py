"""
QuickNotes Backend - Note Store
=================================

What:  Authoritative in-memory collection of notes with CRUD operations.
How:   An ordered list of Note records plus a monotonically increasing id
       counter, both guarded by one lock.
Who:   Created by the application factory (main.create_app) and injected
       into route handlers through the `get_note_store` dependency.
When:  One instance per application; lives until the process exits.

Semantics:
    - Ids start at 1 and are never reused, even after deletion.
    - Listing preserves insertion order.
    - "Not found" is always None (get, update and delete alike).
    - Every Note leaving the store is a copy; callers cannot corrupt
      internal state through a returned value.

Thread Safety:
    FastAPI may run handlers on the event loop or in a threadpool. A single
    threading.Lock guards the counter and the list so concurrent requests
    never see duplicate ids or lost updates.
"""

import logging
import threading
from typing import List, Optional

from quicknotes.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """
    In-memory note store.

    Responsibilities:
        - add_note():       Create a note with the next unused id
        - get_all_notes():  Snapshot of every note in insertion order
        - get_note_by_id(): Single note lookup
        - update_note():    Replace title/content in place
        - delete_note():    Remove a note and return its last value
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_id = 1
        self._notes: List[Note] = []

    def add_note(self, title: str, content: str) -> Note:
        """
        Create a note and append it to the collection.

        No validation is done here; presence checks belong to the HTTP layer.

        Returns:
            Copy of the created Note, carrying its assigned id.
        """
        with self._lock:
            note = Note(id=self._next_id, title=title, content=content)
            self._next_id += 1
            self._notes.append(note)
            logger.info("Note %d created", note.id)
            return note.copy()

    def get_all_notes(self) -> List[Note]:
        """Return copies of all notes, oldest first."""
        with self._lock:
            return [note.copy() for note in self._notes]

    def get_note_by_id(self, note_id: int) -> Optional[Note]:
        """Return the note with `note_id`, or None if there is none."""
        with self._lock:
            note = self._find(note_id)
            return note.copy() if note is not None else None

    def update_note(
        self,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Note]:
        """
        Replace a note's title and content in place.

        The id never changes. A None title or content keeps the current
        value of that field.

        Returns:
            Copy of the updated Note, or None when `note_id` is unknown
            (in which case nothing is modified).
        """
        with self._lock:
            note = self._find(note_id)
            if note is None:
                return None
            if title is not None:
                note.title = title
            if content is not None:
                note.content = content
            logger.info("Note %d updated", note.id)
            return note.copy()

    def delete_note(self, note_id: int) -> Optional[Note]:
        """
        Remove a note from the collection.

        Returns:
            The removed Note with its last-known values, or None when
            `note_id` is unknown.
        """
        with self._lock:
            for index, note in enumerate(self._notes):
                if note.id == note_id:
                    del self._notes[index]
                    logger.info("Note %d deleted", note.id)
                    return note
            return None

    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    def __len__(self) -> int:
        return self.count()

    def _find(self, note_id: int) -> Optional[Note]:
        # Caller must hold self._lock
        for note in self._notes:
            if note.id == note_id:
                return note
        return None
