"""
FastAPI application entrypoint.
APIs: auth, users, matieres, questions, quiz. Run with: uvicorn quizbank.main:app --reload --port 3000

Routes (same paths the quiz-app frontend already calls):
  - Auth:      POST /auth/login
  - Users:     POST /api/users, GET /api/users, DELETE /api/users/{id}
  - Matieres:  POST /api/matieres, GET /api/matieres, DELETE /api/matieres/{id}
  - Questions: POST /api/questions, GET /api/questions, DELETE /api/questions/{id}
  - Quiz:      GET /api/quiz/{matiere_id}

Every failure body is {"success": false, "message": ..., "error"?: ...}.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quizbank.config import settings
from quizbank.database import dispose_engine, init_db
from quizbank.errors import InvalidInput, QuizBankError, Unauthorized
from quizbank.api.auth import router as auth_router
from quizbank.api.users import router as users_router
from quizbank.api.matieres import router as matieres_router
from quizbank.api.questions import router as questions_router
from quizbank.api.quiz import router as quiz_router

logger = logging.getLogger("quizbank.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: configure logging, create tables. Shutdown: close the engine.
    Refuses plaintext passwords in production."""
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if settings.is_production and settings.password_scheme == "plaintext":
        logger.critical("PASSWORD_SCHEME=plaintext is not allowed when ENV=production.")
        raise RuntimeError("PASSWORD_SCHEME=plaintext is not allowed when ENV=production.")
    init_db()
    logger.info("Password scheme: %s, quiz size: %s", settings.password_scheme, settings.quiz_size)
    yield
    dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        lifespan=lifespan,
        debug=settings.debug,
        title="Quiz Bank API",
        description="Matieres, four-choice questions, users and random quiz draws.",
        version="0.1.0",
    )

    _origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_origins if _origins else ["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(matieres_router)
    app.include_router(questions_router)
    app.include_router(quiz_router)

    @app.exception_handler(QuizBankError)
    async def quizbank_error_handler(request: Request, exc: QuizBankError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
        # Only a non-object body gets here; login reports it like any other credential mismatch
        err = Unauthorized() if request.url.path == "/auth/login" else InvalidInput()
        return JSONResponse(status_code=err.status_code, content=err.to_body())

    @app.get("/health")
    def health():
        """Health check (JSON)."""
        return {"status": "ok", "message": "Quiz Bank API"}

    return app


app = create_app()
