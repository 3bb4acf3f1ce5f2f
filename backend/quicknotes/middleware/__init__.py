# Middleware package init
"""
QuickNotes Backend - Middleware Package
========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: FastAPI built-ins, configured in main.create_app()

    The order is reversed for responses, so the logging middleware sees
    the final status code and the request ID header is set last.
"""
