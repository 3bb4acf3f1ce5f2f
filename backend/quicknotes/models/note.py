"""
QuickNotes Backend - Note Entity
==================================

What:  The Note record held by the in-memory store.
How:   A plain dataclass; the store owns every instance and only hands out
       copies, so a Note returned to a caller is safe to read or mutate
       without touching store state.

Fields:
    id:       Integer assigned by the store on creation. Never reused.
    title:    Note title, replaced by update.
    content:  Note body, replaced by update.
"""

from dataclasses import dataclass, replace


@dataclass
class Note:
    id: int
    title: str
    content: str

    def copy(self) -> "Note":
        """Detached copy with the same field values."""
        return replace(self)

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title[:30]}')>"
