"""
Question request/response schemas.
Field shapes are loose on purpose: the service decides what is InvalidInput (400).
Legacy names: matiere, question, reponses, bonneReponse, explication.
"""
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class QuestionCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject_id: Any = Field(default=None, validation_alias=AliasChoices("subject_id", "matiere"))
    text: Any = Field(default=None, validation_alias=AliasChoices("text", "question"))
    propositions: Any = Field(default=None, validation_alias=AliasChoices("propositions", "reponses"))
    answer: Any = Field(default=None, validation_alias=AliasChoices("answer", "bonneReponse"))
    explanation: str | None = Field(default=None, validation_alias=AliasChoices("explanation", "explication"))


class QuestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    subject_id: str
    text: str
    propositions: list[str]
    answer: str
    explanation: str | None = None


class QuestionEnvelope(BaseModel):
    success: bool = True
    question: QuestionResponse


class QuestionListEnvelope(BaseModel):
    success: bool = True
    questions: list[QuestionResponse]
