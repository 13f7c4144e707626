"""
Catalog writes: matiere creation (validate → check uniqueness → persist) and question submission.
Validation and conflict errors are raised before any write.
"""
import logging

from quizbank.errors import Conflict, InvalidFormat, InvalidInput
from quizbank.models.matiere import Matiere
from quizbank.models.question import Question
from quizbank.services.identifiers import is_valid_matiere_id
from quizbank.services.store import MatiereStore, QuestionStore

logger = logging.getLogger(__name__)

PROPOSITION_COUNT = 4


def create_matiere(store: MatiereStore, matiere_id, name: str | None, description: str | None = None) -> Matiere:
    """
    Create a matiere. InvalidFormat for a bad id, Conflict if the id exists.
    find_by_id is only a fast path; the unique index still rejects a concurrent duplicate (Conflict).
    """
    if not is_valid_matiere_id(matiere_id):
        raise InvalidFormat()
    if store.find_by_id(matiere_id) is not None:
        logger.warning("Matiere %s already exists; create rejected", matiere_id)
        raise Conflict()
    return store.create(id=matiere_id, name=name, description=description)


def _non_empty_str(v) -> bool:
    return isinstance(v, str) and v != ""


def validate_question(subject_id, text, propositions, answer) -> None:
    """Raise InvalidInput unless ids/text/answer are non-empty and there are exactly 4 text propositions."""
    if not (_non_empty_str(subject_id) and _non_empty_str(text) and _non_empty_str(answer)):
        raise InvalidInput()
    if not isinstance(propositions, list) or len(propositions) != PROPOSITION_COUNT:
        raise InvalidInput()
    if not all(isinstance(p, str) for p in propositions):
        raise InvalidInput()


def submit_question(
    store: QuestionStore,
    subject_id,
    text,
    propositions,
    answer,
    explanation: str | None = None,
) -> Question:
    """
    Store a question. subject_id is not checked against existing matieres and answer is not
    checked against propositions; both are left to the caller.
    """
    validate_question(subject_id, text, propositions, answer)
    return store.create(
        subject_id=subject_id,
        text=text,
        propositions=list(propositions),
        answer=answer,
        explanation=explanation,
    )
