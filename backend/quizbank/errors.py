"""
Error taxonomy for the quiz core. Services raise these; the app turns them into
{"success": false, "message": ..., "error"?: ...} with the matching status code.
"""
from fastapi import status


class QuizBankError(Exception):
    """Base for every reportable failure of the core."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"success": False, "message": self.message}


class InvalidFormat(QuizBankError):
    """Matiere id does not match INF + 3 digits."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Matiere id must be in INFxxx format."


class InvalidInput(QuizBankError):
    """Question payload has missing or malformed fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid or missing fields."


class Conflict(QuizBankError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "This matiere already exists."


class Unauthorized(QuizBankError):
    """Credential mismatch. Never says whether email or password was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class StoreFault(QuizBankError):
    """Any persistence failure; cause keeps the driver message for diagnosis."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, cause: str, message: str | None = None):
        self.cause = cause
        super().__init__(message)

    def to_body(self) -> dict:
        return {**super().to_body(), "error": self.cause}
