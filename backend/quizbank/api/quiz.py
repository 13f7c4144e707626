"""
Quiz API: GET /api/quiz/{matiere_id} draws up to quiz_size random questions of that matiere.
An unknown matiere or one without questions gives an empty list, not a 404.
"""
from fastapi import APIRouter, Depends

from quizbank.api.deps import get_question_store, get_quiz_size
from quizbank.schemas.question import QuestionListEnvelope, QuestionResponse
from quizbank.services.quiz import draw_quiz
from quizbank.services.store import QuestionStore

router = APIRouter(prefix="/api/quiz", tags=["quiz"])


@router.get("/{matiere_id}", response_model=QuestionListEnvelope)
def draw(
    matiere_id: str,
    store: QuestionStore = Depends(get_question_store),
    size: int = Depends(get_quiz_size),
):
    questions = draw_quiz(store, matiere_id, size=size)
    return QuestionListEnvelope(questions=[QuestionResponse.model_validate(q) for q in questions])
