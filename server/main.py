# server/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo import MongoClient

from server.api import auth, pages
from server.config import Settings, get_settings
from server.core.auth import AuthService
from server.core.errors import AuthError, InvalidCredentials, MissingField
from server.core.security import PasswordHasher, TokenService
from server.core.users import UserStore
from server.database import connect, get_users_collection, init_db
from server.logger import get_logger, set_level


logger = get_logger("main")


def create_app(settings: Settings | None = None, mongo_client: MongoClient | None = None) -> FastAPI:
    """
    Builds the application. The Mongo client is opened at startup (lifespan) unless
    one is passed in; a connection failure aborts startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        set_level(settings.log_level)

        try:
            client = mongo_client if mongo_client is not None else connect(settings)
        except Exception:
            logger.exception("Could not connect to MongoDB")
            raise

        collection = get_users_collection(client, settings)
        try:
            init_db(collection)
        except Exception:
            logger.exception("Could not create the users collection index")
            if mongo_client is None:
                client.close()
            raise

        app.state.user_store = UserStore(collection)
        app.state.auth_service = AuthService(
            store=app.state.user_store,
            hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
            tokens=TokenService(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.access_token_expire_minutes,
            ),
        )
        logger.info("Server ready")

        yield

        if mongo_client is None:
            client.close()

    app = FastAPI(title="Bearer Auth Service", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(pages.router)

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected malformed body on %s %s", request.method, request.url.path)
        # login never reports a missing field
        if request.url.path == "/api/login":
            error = InvalidCredentials()
        else:
            error = MissingField()
        return JSONResponse(status_code=error.status_code, content={"error": error.message})

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run("server.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
