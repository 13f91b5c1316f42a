from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from socialnet.core.config import Settings, get_settings
from socialnet.db.init_db import create_all_tables
from socialnet.db.session import create_db_engine, create_session_factory
from socialnet.middleware.request_logging import RequestLoggingMiddleware
from socialnet.middleware.auth_logging import AuthLoggingMiddleware
from socialnet.modules.auth.api.router import router as auth_router
from socialnet.modules.user_management.api.router import router as user_router, admin_router
from socialnet.modules.posts.api.router import router as posts_router
from socialnet.modules.posts.comments.api.router import router as comments_router
from socialnet.modules.posts.likes.api.router import router as likes_router

logger = logging.getLogger("socialnet")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    settings = request.app.state.settings
    detail = str(exc) if settings.DEBUG else "Internal server error"
    return JSONResponse(status_code=500, content={"detail": detail})


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
    create_all_tables(app.state.engine)
    yield
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application, its engine and its session factory from one Settings object"""
    settings = settings or get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        exception_handlers={
            RequestValidationError: request_validation_exception_handler,
            HTTPException: http_exception_handler,
            Exception: unhandled_exception_handler,
        },
        debug=settings.DEBUG,
        description="Minimal social networking backend: accounts, posts, comments and likes",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    engine = create_db_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # Add middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(AuthLoggingMiddleware, api_prefix=settings.API_PREFIX)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    prefix = settings.API_PREFIX
    app.include_router(auth_router, prefix=prefix, tags=["authentication"])
    app.include_router(user_router, prefix=f"{prefix}/users", tags=["users"])
    app.include_router(admin_router, prefix=f"{prefix}/admin", tags=["admin"])
    app.include_router(posts_router, prefix=f"{prefix}/posts", tags=["posts"])
    app.include_router(comments_router, prefix=f"{prefix}/posts/{{post_id}}/comments", tags=["comments"])
    app.include_router(likes_router, prefix=f"{prefix}/posts/{{post_id}}/like", tags=["likes"])

    @app.get(f"{prefix}/")
    async def root():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "documentation": "/docs" if settings.DEBUG else None,
        }

    return app
