# Routes package init
"""
QuickNotes Backend - API Routes Package
=========================================

Route Inventory:
    - notes.py:   GET/POST       /notes
                  GET/PUT/DELETE /notes/{id}
    - health.py:  GET            /health

Routes stay thin: read the request, call the NoteStore, pick the status
code. "Not found" and missing-field outcomes are raised as exceptions and
rendered by the handlers registered in main.py.
"""
