# Middleware package init
"""
WEB 420 API: Middleware Package
===============================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so every log line for the request, including the
    access log line, carries the same correlation id.
"""
