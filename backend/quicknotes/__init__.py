"""
QuickNotes Backend - Application Package Initializer
====================================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Imported by uvicorn (`uvicorn quicknotes.main:app`) and by pytest.

Architecture Note:
    The backend keeps the usual layered split, minus a database:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Note Store (in-memory state)   │  ← id assignment, CRUD
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note entity + Pydantic
    └─────────────────────────────────────┘

    Routes translate store results into status codes; the store knows
    nothing about HTTP and can be tested on its own.
"""

__version__ = "1.0.0"
