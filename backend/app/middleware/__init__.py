# Middleware package init
"""
Users API Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Security Headers] → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Security Headers: outermost, applied to every response a route produces
    2. Request ID: generate correlation ID for logging and tracing
    3. Logging: log request details with the generated request ID
    4. GZip / CORS: Starlette built-ins

    Responses pass back through the chain in reverse order.
"""
