# Routes package init
"""
NoteKeeper Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - auth.py:    POST   /signup   (register)
                  POST   /login    (obtain session token)
    - notes.py:   GET    /notes    (list caller's notes)
                  POST   /notes    (create note)
                  DELETE /notes    (delete note)
    - health.py:  GET    /health   (service health check)
    - body.py:    JSON body dependency shared by the routes above

Routes stay thin: extract the body, call a service, shape the response.
Errors are raised as application exceptions and formatted in main.py.
"""
