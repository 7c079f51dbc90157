# Services package init
"""
Portfolio Backend — Services Layer
====================================

What:  Logic between routes (HTTP) and the store/upload directory.

Service Inventory:
    - FileService:     Upload naming, writing and best-effort removal
    - SkillService:    Skill CRUD; deletion also removes the image file
    - ProjectService:  Project CRUD; files are never removed
    - MessageService:  Contact form submission

Services are constructed per request by the providers in dependencies.py
from the store and FileService kept on app.state.
"""
