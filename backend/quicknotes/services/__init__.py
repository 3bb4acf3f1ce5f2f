# Services package init
"""
QuickNotes Backend - Services Layer
=====================================

Service Inventory:
    - NoteStore: In-memory note collection with id assignment and CRUD
"""
