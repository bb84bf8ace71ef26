# Middleware package init
"""
NoteKeeper Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    The order is reversed for responses, so the request id is available to
    the access log line and is echoed back in X-Request-ID.
"""
