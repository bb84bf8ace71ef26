# Services package init
"""
NoteKeeper Backend — Services Layer
=====================================

What:  Business logic between routes (HTTP) and the database / session map.

Service Inventory:
    - UserService:      users table (insert, credential lookup, email lookup)
    - NoteService:      notes table, always scoped to an owner id
    - SessionRegistry:  in-memory token → email map, lock-guarded
    - AuthService:      login and token → owning user resolution

Services other than the registry hold no state; each call receives the
request's database session.
"""
