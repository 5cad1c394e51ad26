# Middleware package init
"""
crudsuite — Middleware Package
================================

What:  Cross-cutting concerns applied to every request of every app.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error body can
    carry the same correlation ID.
"""
