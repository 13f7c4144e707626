"""
Auth routes: POST /auth/login (email + password → user view, no token).
"""
from fastapi import APIRouter, Depends

from quizbank.api.deps import get_user_store, get_verifier
from quizbank.schemas.user import LoginRequest, LoginResponse, UserView
from quizbank.services.auth import PasswordVerifier, login as check_credentials
from quizbank.services.store import UserStore

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    store: UserStore = Depends(get_user_store),
    verifier: PasswordVerifier = Depends(get_verifier),
):
    """Login with email/password; 401 with one generic message on any mismatch."""
    view = check_credentials(store, verifier, data.email, data.password)
    return LoginResponse(user=UserView(**view))
