"""
Matieres API: create (INFxxx id, unique), list, delete by id.
Deleting a matiere leaves its questions in place.
"""
from fastapi import APIRouter, Depends

from quizbank.api.deps import get_matiere_store
from quizbank.schemas.common import Ack
from quizbank.schemas.matiere import (
    MatiereCreateRequest,
    MatiereEnvelope,
    MatiereListEnvelope,
    MatiereResponse,
)
from quizbank.services.catalog import create_matiere
from quizbank.services.store import MatiereStore

router = APIRouter(prefix="/api/matieres", tags=["matieres"])


@router.post("", response_model=MatiereEnvelope)
def create(data: MatiereCreateRequest, store: MatiereStore = Depends(get_matiere_store)):
    """400 if the id is not INFxxx, 409 if it already exists."""
    matiere = create_matiere(store, data.id, data.name, data.description)
    return MatiereEnvelope(matiere=MatiereResponse.model_validate(matiere))


@router.get("", response_model=MatiereListEnvelope)
def list_matieres(store: MatiereStore = Depends(get_matiere_store)):
    return MatiereListEnvelope(matieres=[MatiereResponse.model_validate(m) for m in store.list()])


@router.delete("/{matiere_id}", response_model=Ack)
def delete_matiere(matiere_id: str, store: MatiereStore = Depends(get_matiere_store)):
    store.delete_by_id(matiere_id)
    return Ack()
