"""
Questions API: create (exactly 4 propositions), list, delete by id.
The matiere referenced by subject_id is not required to exist.
"""
from fastapi import APIRouter, Depends

from quizbank.api.deps import get_question_store
from quizbank.schemas.common import Ack
from quizbank.schemas.question import (
    QuestionCreateRequest,
    QuestionEnvelope,
    QuestionListEnvelope,
    QuestionResponse,
)
from quizbank.services.catalog import submit_question
from quizbank.services.store import QuestionStore

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.post("", response_model=QuestionEnvelope)
def create_question(data: QuestionCreateRequest, store: QuestionStore = Depends(get_question_store)):
    question = submit_question(
        store,
        subject_id=data.subject_id,
        text=data.text,
        propositions=data.propositions,
        answer=data.answer,
        explanation=data.explanation,
    )
    return QuestionEnvelope(question=QuestionResponse.model_validate(question))


@router.get("", response_model=QuestionListEnvelope)
def list_questions(store: QuestionStore = Depends(get_question_store)):
    return QuestionListEnvelope(questions=[QuestionResponse.model_validate(q) for q in store.list()])


@router.delete("/{question_id}", response_model=Ack)
def delete_question(question_id: str, store: QuestionStore = Depends(get_question_store)):
    store.delete_by_id(question_id)
    return Ack()
