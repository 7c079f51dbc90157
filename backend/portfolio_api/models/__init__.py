# Models package init
"""
Portfolio Backend — ORM Models
================================

Importing this package registers every table on Base.metadata, which the
test fixtures use to create the schema in SQLite.
"""

from portfolio_api.models.message import Message
from portfolio_api.models.project import Project
from portfolio_api.models.skill import Skill

__all__ = ["Message", "Project", "Skill"]
