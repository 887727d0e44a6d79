# Middleware package init
"""
Humans API — Middleware Package
=================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → [Unhandled Error] → Route Handler

    1. Request ID: correlation ID for logs and error bodies
    2. Logging: one access line per request, with status and duration
    3. GZip: compresses responses of 500 bytes or more
    4. CORS: answers preflight requests and adds Access-Control-* headers
    5. Unhandled Error: turns uncaught exceptions into a JSON 500 that still
       passes back through CORS and Request ID
"""
