"""
User and login request/response schemas.
Requests also accept the legacy French field names (nom, numero, type).
Request fields are cast to text: creating a user or logging in never fails on field types.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from quizbank.schemas.common import Text


class UserCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Text = Field(default=None, validation_alias=AliasChoices("name", "nom"))
    email: Text = None
    phone: Text = Field(default=None, validation_alias=AliasChoices("phone", "numero"))
    password: Text = None
    role: Text = Field(default=None, validation_alias=AliasChoices("role", "type"))  # student | admin


class LoginRequest(BaseModel):
    email: Text = None
    password: Text = None


class UserView(BaseModel):
    """What login returns: no id, no password."""
    name: str | None
    email: str | None
    phone: str | None
    role: str | None


class UserResponse(UserView):
    model_config = ConfigDict(from_attributes=True)

    id: str


class LoginResponse(BaseModel):
    success: bool = True
    user: UserView


class UserEnvelope(BaseModel):
    success: bool = True
    user: UserResponse


class UserListEnvelope(BaseModel):
    success: bool = True
    users: list[UserResponse]
