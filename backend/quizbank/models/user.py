"""
User model: name, email, phone, password (stored by the configured verifier), role.
Role is free text (student | admin expected); email is not unique. Never updated in place.
"""
import uuid

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from quizbank.database import Base


class User(Base):
    __tablename__ = "users"

    # seq keeps insertion order for listing; id is the public identifier
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(36), unique=True, nullable=False, index=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str | None] = mapped_column(String(30), nullable=True)  # student | admin

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
