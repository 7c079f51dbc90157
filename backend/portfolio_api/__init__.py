"""
Portfolio Backend — Application Package Initializer
=====================================================

What: Backend for a personal portfolio site: skills, projects and contact
      messages over JSON, with image uploads served from disk.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (upload + store calls)   │  ← Error translation, ordering
    ├─────────────────────────────────────┤
    │  FileService    │   PortfolioStore  │  ← Disk / parameterized SQL
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    The store and FileService are created by the application factory and
    handed to routes through FastAPI dependencies.
"""

__version__ = "1.0.0"
