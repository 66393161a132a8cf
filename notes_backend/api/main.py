import logging
import secrets
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_backend.api.config import Settings, load_settings
from notes_backend.api.errors import NotesAppError
from notes_backend.api.middleware import RequestLoggingMiddleware, configure_logging
from notes_backend.api.routes import auth, notes, pages, todos
from notes_backend.api.sessions import SessionIssuer
from notes_backend.api.todos import TodoStore
from notes_database.db import make_engine, make_session_factory
from notes_database.init_db import init_db

logger = logging.getLogger("notes_backend")


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the application: engine and session factory, session issuer and
    todo store live on app.state and reach handlers through dependencies.
    Tables are created if missing.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="Personal Notes Backend API",
        description="Backend API for user auth, personal notes, todos and a few pages.",
        version="1.0.0",
        openapi_tags=[
            {"name": "Authentication", "description": "User registration, login, and session cookie"},
            {"name": "Notes", "description": "Create, update, view, delete, search notes"},
            {"name": "Todos", "description": "In-memory todo list"},
        ],
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    engine = make_engine(settings.database_url)
    init_db(engine)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    secret_key = settings.secret_key
    if not secret_key:
        logger.warning("SECRET_KEY is not set; using a random key, sessions will not survive a restart")
        secret_key = secrets.token_urlsafe(32)
    app.state.sessions = SessionIssuer(secret_key, secure=settings.session_cookie_secure)
    app.state.todos = TodoStore()

    app.include_router(auth.router)
    app.include_router(notes.router)
    app.include_router(todos.router)
    app.include_router(pages.router)
    app.mount("/static", StaticFiles(directory=str(pages.STATIC_DIR)), name="static")

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotesAppError)
    def app_error_handler(request, exc: NotesAppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s %s", request.method, request.url.path, exc.message, exc.context)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    def validation_error_handler(request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": _validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    def custom_http_exception_handler(request, exc):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _validation_message(exc: RequestValidationError) -> str:
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            return "invalid JSON"
        loc = error.get("loc", ())
        if len(loc) >= 2 and loc[0] == "path":
            return "invalid id"
    return "invalid request"


# PUBLIC_INTERFACE
def run():
    """Console entry point: serves the app with uvicorn on HOST:PORT."""
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Server running at http://localhost:%d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
