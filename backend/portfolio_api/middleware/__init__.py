# Middleware package init
"""
Portfolio Backend — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [CORS] → Route Handler

    1. Request ID first so every log line of the request can carry it
    2. Access log measures duration around everything below it
    3. CORS (Starlette's CORSMiddleware) answers browser preflights; the
       portfolio frontend runs on a different origin than the API
"""
