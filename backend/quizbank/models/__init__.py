"""
SQLAlchemy models. Import here so the app and init_db can use them.
"""
from quizbank.models.user import User
from quizbank.models.matiere import Matiere
from quizbank.models.question import Question

__all__ = ["User", "Matiere", "Question"]
