"""
Quiz draw: uniform random sample without replacement of up to quiz_size questions of one matiere.
Fewer matching questions → all of them (shuffled); none → empty list. Each call is an independent draw.
"""
import random

from quizbank.models.question import Question
from quizbank.services.store import QuestionStore

DEFAULT_QUIZ_SIZE = 5

_rng = random.SystemRandom()


def sample_questions(questions: list, size: int, rng: random.Random | None = None) -> list:
    """Return min(size, len(questions)) distinct items in uniformly random order."""
    if size < 0:
        raise ValueError("size must be >= 0")
    rng = rng or _rng
    return rng.sample(questions, min(size, len(questions)))


def draw_quiz(
    store: QuestionStore,
    subject_id: str,
    size: int = DEFAULT_QUIZ_SIZE,
    rng: random.Random | None = None,
) -> list[Question]:
    return sample_questions(store.list_by_subject(subject_id), size, rng)
