# Routes package init
"""
Portfolio Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - skills.py:    POST   /api/skills
                    GET    /api/skills
                    PUT    /api/skills/{id}
                    DELETE /api/skills/{id}
    - projects.py:  POST   /api/projects
                    GET    /api/projects
                    PUT    /api/projects/{id}
                    DELETE /api/projects/{id}
    - messages.py:  POST   /api/messages
    - health.py:    GET    /health

Uploaded images are not served by a route module: main.py mounts the upload
directory under its URL prefix with Starlette's StaticFiles.

Design Principle:
    Routes are THIN. They collect form fields and the optional file, call
    a service, and wrap the result in the response record. Errors propagate
    to the handlers registered in main.py.
"""
