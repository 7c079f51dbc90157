"""
Portfolio Backend — Project SQLAlchemy Model
==============================================

What:  ORM model representing the `projects` table.
Who:   Used by PortfolioStore.

Unlike skills, deleting a project never touches its image file.
"""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.database import Base


class Project(Base):
    """A portfolio project with a description and an optional screenshot."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_path: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, title='{self.title}')>"
