"""
Application configuration from environment variables.
Loads .env from the backend directory so settings are found regardless of cwd.
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Credential schemes understood by services.auth.get_password_verifier
PASSWORD_SCHEMES = frozenset({"bcrypt", "plaintext"})

# .env next to backend/ (parent of quizbank/): load explicitly so values are set even when run from repo root
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    from dotenv import load_dotenv
    load_dotenv(_ENV_FILE, override=False)


class Settings(BaseSettings):
    """Load and validate config from env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database: sqlite by default; any SQLAlchemy URL works (postgresql for production)
    database_url: str = "sqlite:///./quizbank_dev.db"

    # Environment: set ENV=production in production; refuses plaintext passwords there.
    env: str = ""
    debug: bool = False

    # CORS: comma-separated origins
    cors_origins: str = "http://localhost:3000"

    # How user passwords are stored and compared: bcrypt (default) or plaintext (legacy clients)
    password_scheme: str = "bcrypt"

    # Maximum number of questions returned by one quiz draw
    quiz_size: int = 5

    log_level: str = "INFO"

    @field_validator("password_scheme", mode="before")
    @classmethod
    def _scheme_known(cls, v: str) -> str:
        s = (v or "bcrypt").strip().lower()
        if s not in PASSWORD_SCHEMES:
            raise ValueError(f"password_scheme must be one of {sorted(PASSWORD_SCHEMES)}")
        return s

    @field_validator("quiz_size")
    @classmethod
    def _quiz_size_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("quiz_size must be at least 1")
        return v

    @property
    def is_production(self) -> bool:
        return (self.env or "").strip().lower() == "production"


settings = Settings()
