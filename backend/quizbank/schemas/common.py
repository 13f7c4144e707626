"""
Shared response shapes and lenient field types.
"""
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator


def _to_text(v: Any) -> str | None:
    """Store-side string cast: numbers and other scalars become their text form, None stays None."""
    if v is None or isinstance(v, str):
        return v
    return str(v)


# Free-text field that never rejects a request: non-string JSON values are cast to str
Text = Annotated[str | None, BeforeValidator(_to_text)]


class Ack(BaseModel):
    """Body of successful deletes."""
    success: bool = True
