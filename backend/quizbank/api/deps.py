"""
Shared dependencies: request-scoped stores over get_db, the configured password verifier,
and quiz settings. Tests override get_db to point every store at a throwaway database.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from quizbank.config import settings
from quizbank.database import get_db
from quizbank.services.auth import PasswordVerifier, get_password_verifier
from quizbank.services.store import MatiereStore, QuestionStore, UserStore


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_matiere_store(db: Session = Depends(get_db)) -> MatiereStore:
    return MatiereStore(db)


def get_question_store(db: Session = Depends(get_db)) -> QuestionStore:
    return QuestionStore(db)


def get_verifier() -> PasswordVerifier:
    """Verifier for settings.password_scheme (bcrypt unless configured otherwise)."""
    return get_password_verifier(settings.password_scheme)


def get_quiz_size() -> int:
    return settings.quiz_size
