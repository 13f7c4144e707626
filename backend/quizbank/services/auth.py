"""
Auth service: pluggable password verifier (bcrypt by default, plaintext for legacy data),
user registration and login.
Uses bcrypt directly (no passlib) to avoid passlib/bcrypt version conflicts.
Login gives one combined pass/fail: unknown email and wrong password are indistinguishable.
"""
import hmac
import logging

import bcrypt

from quizbank.config import settings
from quizbank.errors import Unauthorized
from quizbank.models.user import User
from quizbank.services.store import UserStore

logger = logging.getLogger(__name__)

# Bcrypt limit is 72 bytes; use 71 so we never exceed
BCRYPT_MAX_BYTES = 71


def _truncate_to_bytes(s: str, max_bytes: int = BCRYPT_MAX_BYTES) -> bytes:
    """Truncate string to at most max_bytes UTF-8; return bytes for bcrypt."""
    if not s:
        return b""
    encoded = s.encode("utf-8")
    if len(encoded) <= max_bytes:
        return encoded
    return encoded[:max_bytes]


class PasswordVerifier:
    """Turns a plain password into its stored form and checks candidates against it."""

    name = ""

    def hash(self, plain: str) -> str:
        raise NotImplementedError

    def verify(self, candidate: str, stored: str | None) -> bool:
        raise NotImplementedError


class BcryptVerifier(PasswordVerifier):
    name = "bcrypt"

    def hash(self, plain: str) -> str:
        """Hash password for storage. Raises ValueError if password is None."""
        if plain is None:
            raise ValueError("password is required")
        return bcrypt.hashpw(_truncate_to_bytes(plain), bcrypt.gensalt()).decode("utf-8")

    def verify(self, candidate: str, stored: str | None) -> bool:
        if candidate is None or not stored:
            return False
        try:
            return bcrypt.checkpw(_truncate_to_bytes(candidate), stored.encode("utf-8"))
        except ValueError:
            # stored value is not a bcrypt hash (e.g. legacy plaintext row)
            return False


class PlaintextVerifier(PasswordVerifier):
    """Stores passwords as given and compares them byte for byte. Legacy data only."""

    name = "plaintext"

    def hash(self, plain: str) -> str:
        return plain

    def verify(self, candidate: str, stored: str | None) -> bool:
        if candidate is None or stored is None:
            return False
        return hmac.compare_digest(candidate.encode("utf-8"), stored.encode("utf-8"))


_VERIFIERS = {
    BcryptVerifier.name: BcryptVerifier,
    PlaintextVerifier.name: PlaintextVerifier,
}


def get_password_verifier(scheme: str | None = None) -> PasswordVerifier:
    scheme = (scheme or settings.password_scheme).strip().lower()
    try:
        return _VERIFIERS[scheme]()
    except KeyError:
        raise ValueError(f"Unknown password scheme: {scheme}") from None


def user_view(user: User) -> dict:
    """Public user fields; the password is never included."""
    return {
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
        "role": user.role,
    }


def register_user(
    store: UserStore,
    verifier: PasswordVerifier,
    name: str | None,
    email: str | None,
    phone: str | None,
    password: str | None,
    role: str | None,
) -> User:
    """Create a user; the password goes through verifier.hash. No field validation beyond that."""
    stored = verifier.hash(password) if password is not None else None
    return store.create(name=name, email=email, phone=phone, password=stored, role=role)


def login(store: UserStore, verifier: PasswordVerifier, email: str, password: str) -> dict:
    """Return the user view for the first user matching email and password, else raise Unauthorized."""
    if email is None or password is None:
        raise Unauthorized()
    for user in store.find_by_email(email):
        if verifier.verify(password, user.password):
            logger.info("Login ok for user id=%s", user.id)
            return user_view(user)
    logger.debug("Login failed")
    raise Unauthorized()
