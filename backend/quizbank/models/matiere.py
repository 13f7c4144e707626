"""
Matiere (subject): caller-supplied id in INFxxx format, globally unique and immutable.
The unique index on id is the authoritative duplicate guard for concurrent creators.
Deleting a matiere does not touch its questions.
"""
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from quizbank.database import Base


class Matiere(Base):
    __tablename__ = "matieres"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(6), unique=True, nullable=False, index=True)  # e.g. INF111
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Matiere(id={self.id}, name='{self.name}')>"
