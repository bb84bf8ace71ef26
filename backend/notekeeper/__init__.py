"""
NoteKeeper Backend — Application Package Initializer
=====================================================

What: Multi-user note-taking service with session-token authentication.
Who:  Imported by uvicorn (`notekeeper.main:app`), pytest, and `python -m notekeeper`.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Store, Sessions, Auth)  │  ← ownership and auth rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The session registry sits beside the store as an in-memory leaf; only
    the services layer talks to either of them.
"""

__version__ = "1.0.0"
