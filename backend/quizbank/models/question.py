"""
Question: one MCQ with exactly four propositions and a correct answer text.
subject_id is a plain value reference to Matiere.id (no FK, orphans allowed).
"""
import uuid

from sqlalchemy import Integer, String, Text
from sqlalchemy.types import JSON
from sqlalchemy.orm import Mapped, mapped_column

from quizbank.database import Base


class Question(Base):
    __tablename__ = "questions"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(36), unique=True, nullable=False, index=True, default=lambda: str(uuid.uuid4())
    )
    subject_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    propositions: Mapped[list] = mapped_column(JSON, nullable=False)  # ["...", "...", "...", "..."] in display order
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self):
        return f"<Question(id={self.id}, subject_id='{self.subject_id}')>"
