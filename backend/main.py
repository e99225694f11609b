from dotenv import load_dotenv
load_dotenv()

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from identity.errors import IdentityError, InternalError
from routes import auth
from store import UserStore

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


def _error_response(exc: IdentityError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _identity_error(request: Request, exc: IdentityError):
    return _error_response(exc)


def create_app(user_store: Optional[UserStore] = None) -> FastAPI:
    """Build the API. Tests pass their own store; otherwise one is made from config."""
    app = FastAPI(title="Mock Auth API", version="0.1.0")

    if user_store is None:
        user_store = UserStore.with_demo_users() if config.SEED_DEMO_USERS else UserStore()
    app.state.user_store = user_store

    app.add_exception_handler(IdentityError, _identity_error)

    # Must be added before CORSMiddleware so it runs inside it.
    @app.middleware("http")
    async def unexpected_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s", request.url.path)
            return _error_response(InternalError())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)

    @app.get("/")
    def health():
        return {"status": "ok", "service": "mock-auth"}

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
