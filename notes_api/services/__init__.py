# Services package init
"""
Notes API: Services Layer
==========================

What:  Business logic sitting between the routes (HTTP) and the store.
How:   Services accept plain values, apply the note rules and return
       response schemas. Routes receive them through FastAPI dependencies.

Service Inventory:
    - NoteService: validation and CRUD over the in-memory NoteStore
"""
