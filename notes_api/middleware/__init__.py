# Middleware package init
"""
Notes API: Middleware Package
==============================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    The request id is assigned first so the access-log line and any error
    log emitted by the handlers carry it.
"""
