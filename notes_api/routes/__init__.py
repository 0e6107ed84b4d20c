# Routes package init
"""
Notes API: Routes Package
==========================

Route Inventory:
    - health.py:  GET /                      (service health check)
    - notes.py:   GET    /api/notes          (list, optional ?q= search)
                  GET    /api/notes/{id}     (single note)
                  POST   /api/notes          (create)
                  PUT    /api/notes/{id}     (partial update)
                  DELETE /api/notes/{id}     (delete)

Routes stay thin: they pull values out of the request, call NoteService and
return its schema. Rules and error decisions live in the service.
"""
