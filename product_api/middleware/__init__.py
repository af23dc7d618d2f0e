# Middleware package init
"""
Product Management API — Middleware Package
=============================================

What:  Cross-cutting request handling.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Router → [Auth dependency] → Route Handler

    1. Request ID: correlation ID for logs and the X-Request-ID header
    2. Logging: method, path, status, duration with the request ID
    3. CORS: FastAPI's CORSMiddleware (answers preflight OPTIONS)
    4. Auth: not a Starlette middleware but a route dependency, attached
       only to protected routers so public routes never pay for it
"""
