# devconnector/main.py

import logging
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from devconnector.api import users
from devconnector.config import Settings, load_settings
from devconnector.core.security import PasswordHasher, TokenSigner
from devconnector.database import build_engine, build_session_factory, init_db


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the API. Without explicit settings they are read from the
    environment, and a missing signing key stops startup with ConfigurationError.
    """
    if settings is None:
        settings = load_settings()

    engine = build_engine(settings.database_url)
    init_db(engine)

    app = FastAPI(title="devconnector API", version="0.1.0")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.password_hasher = PasswordHasher(settings.bcrypt_rounds)
    app.state.token_signer = TokenSigner(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, users.validation_exception_handler)
    app.include_router(users.router)

    return app


def serve():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
    uvicorn.run(create_app(settings), host="0.0.0.0", port=8000)


if __name__ == "__main__":
    serve()
