"""
Portfolio Backend — Skill SQLAlchemy Model
============================================

What:  ORM model representing the `skills` table.
Why:   Gives the data access layer typed columns to build statements from.
Who:   Used by PortfolioStore for inserts, listing, updates and deletes.

The table is assumed to exist already (see sql/schema.sql); this service
never creates or migrates it outside of tests.
"""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.database import Base


class Skill(Base):
    """
    A skill shown on the portfolio, optionally with an icon image.

    Lifecycle:
        1. Created by POST /api/skills (image_path set only if a file was sent)
        2. Updated by PUT /api/skills/{id}; image_path replaced only when a
           new file arrives, the superseded file stays on disk
        3. Deleted by DELETE /api/skills/{id}, which also removes the image
           file best-effort
    """

    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)

    # Relative path, e.g. "uploads/1700000000000.png"; NULL when no image
    image_path: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, title='{self.title}')>"
