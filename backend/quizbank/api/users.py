"""
Users API: create, list, delete by id. Responses never include the password.
"""
from fastapi import APIRouter, Depends

from quizbank.api.deps import get_user_store, get_verifier
from quizbank.schemas.common import Ack
from quizbank.schemas.user import UserCreateRequest, UserEnvelope, UserListEnvelope, UserResponse
from quizbank.services.auth import PasswordVerifier, register_user
from quizbank.services.store import UserStore

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserEnvelope)
def create_user(
    data: UserCreateRequest,
    store: UserStore = Depends(get_user_store),
    verifier: PasswordVerifier = Depends(get_verifier),
):
    user = register_user(store, verifier, data.name, data.email, data.phone, data.password, data.role)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.get("", response_model=UserListEnvelope)
def list_users(store: UserStore = Depends(get_user_store)):
    return UserListEnvelope(users=[UserResponse.model_validate(u) for u in store.list()])


@router.delete("/{user_id}", response_model=Ack)
def delete_user(user_id: str, store: UserStore = Depends(get_user_store)):
    """Idempotent: deleting an unknown id still succeeds."""
    store.delete_by_id(user_id)
    return Ack()
