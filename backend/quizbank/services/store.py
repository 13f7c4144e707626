"""
Entity store: create / list / find / delete per entity kind over one SQLAlchemy session.
Every write is a single commit. Any SQLAlchemyError is rolled back and raised once as StoreFault
(no retries). Deletes are idempotent: an unknown id is not an error.
"""
import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from quizbank.errors import Conflict, StoreFault
from quizbank.models.matiere import Matiere
from quizbank.models.question import Question
from quizbank.models.user import User

logger = logging.getLogger(__name__)


class EntityStore:
    """Base store; subclasses set model. Rows are listed in insertion order (seq)."""

    model = None

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            cause = str(getattr(e, "orig", None) or e)
            logger.exception("%s %s failed: %s", self.model.__tablename__, action, cause)
            raise StoreFault(cause) from e

    def _on_integrity_error(self, e: IntegrityError):
        raise StoreFault(str(getattr(e, "orig", None) or e)) from e

    def create(self, **fields):
        row = self.model(**fields)
        with self._guard("create"):
            try:
                self.db.add(row)
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                self._on_integrity_error(e)
            self.db.refresh(row)
        logger.info("%s created id=%s", self.model.__tablename__, row.id)
        return row

    def list(self) -> list:
        with self._guard("list"):
            return self.db.query(self.model).order_by(self.model.seq).all()

    def find_by_id(self, entity_id: str):
        with self._guard("find"):
            return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def delete_by_id(self, entity_id: str) -> bool:
        """Delete the row with entity_id if present. Returns True when a row was removed."""
        with self._guard("delete"):
            deleted = (
                self.db.query(self.model)
                .filter(self.model.id == entity_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        logger.info("%s delete id=%s removed=%s", self.model.__tablename__, entity_id, deleted)
        return bool(deleted)


class UserStore(EntityStore):
    model = User

    def find_by_email(self, email: str) -> list[User]:
        """All users with this exact email (email is not unique)."""
        with self._guard("find_by_email"):
            return self.db.query(User).filter(User.email == email).order_by(User.seq).all()


class MatiereStore(EntityStore):
    model = Matiere

    def _on_integrity_error(self, e: IntegrityError):
        # Unique index on id rejected a concurrent creator; the stored row is untouched.
        logger.warning("matieres duplicate id rejected by store: %s", getattr(e, "orig", e))
        raise Conflict() from e


class QuestionStore(EntityStore):
    model = Question

    def list_by_subject(self, subject_id: str) -> list[Question]:
        with self._guard("list_by_subject"):
            return (
                self.db.query(Question)
                .filter(Question.subject_id == subject_id)
                .order_by(Question.seq)
                .all()
            )
