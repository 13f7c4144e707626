"""
Matiere request/response schemas. Request id also accepted as _id (legacy clients).
"""
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from quizbank.schemas.common import Text


class MatiereCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Format (INFxxx) is checked by the service so a bad id is a 400, not a 422
    id: Any = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    name: Text = Field(default=None, validation_alias=AliasChoices("name", "nom"))
    description: Text = None


class MatiereResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MatiereEnvelope(BaseModel):
    success: bool = True
    matiere: MatiereResponse


class MatiereListEnvelope(BaseModel):
    success: bool = True
    matieres: list[MatiereResponse]
