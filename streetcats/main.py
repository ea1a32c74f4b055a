# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import auth_router, cat_router, comment_router
from .core.config import get_settings
from .di.container import get_container
from .domain.repositories import UserRepository, CatRepository, CommentRepository
from .api.v1.errors import http_exception_handler
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


async def ensure_indexes() -> None:
    """
    Create the indexes the repositories rely on.

    The unique email index is what makes concurrent registrations safe, so a
    failure is logged loudly; the app still starts so it can serve reads.
    """
    container = get_container()
    for repository_type in (UserRepository, CatRepository, CommentRepository):
        try:
            await container.get(repository_type).ensure_indexes()
        except Exception as e:
            logger.error(f"Failed to ensure indexes for {repository_type.__name__}: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Warns about the development JWT secret, ensures database indexes and
    closes the MongoDB client on shutdown.
    """
    settings = get_settings()
    if settings.uses_fallback_secret:
        logger.warning(
            "JWT_SECRET_KEY is not set; using the built-in development secret. "
            "Set JWT_SECRET_KEY in production."
        )

    await ensure_indexes()
    logger.info("StreetCats API started")

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Static serving of uploaded images

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="StreetCats API",
        version="1.0.0",
        description="Geotagged street cat sightings with comments",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(cat_router, prefix="/api/v1/cats")
    application.include_router(comment_router, prefix="/api/v1/comments")

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    application.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

    @application.get("/")
    async def root() -> dict:
        return {"message": "Hello StreetCats!"}

    return application


# Create application instance
app = create_application()
