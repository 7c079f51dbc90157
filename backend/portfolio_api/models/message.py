"""Contact form submissions (`messages` table). Write-only from the API."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.database import Base


class Message(Base):
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, email='{self.email}')>"
