# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import user_router
from .core.config import get_settings
from .di.container import get_container, reset_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the image directory and the unique email index exist on
    startup. On shutdown closes the MongoDB client and drops the DI
    container, so a restarted app builds repositories on a fresh client.
    """
    Path(get_settings().image_upload_dir).mkdir(parents=True, exist_ok=True)

    try:
        await get_container().get(UserRepository).ensure_indexes()
        logger.info("User indexes ensured")
    except Exception as e:
        # Without the index only the create pre-check guards against duplicate emails
        logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)

    yield

    try:
        close_connection()
    except Exception as e:
        logger.error(f"Error closing MongoDB connection: {e}", exc_info=True)

    # Repositories hold the closed client's collection
    reset_container()

    logger.info("Application shutdown complete")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the same generic 400 as rule violations."""
    logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed"},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging level
    - CORS middleware configuration
    - API route registration and generated docs at /api-docs
    - Static serving of uploaded profile images

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.getLogger("user_api").setLevel(settings.log_level)

    application = FastAPI(
        title="User API",
        version="1.0.0",
        description="This is an API for managing users",
        docs_url="/api-docs",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, request_validation_handler)

    application.include_router(user_router, prefix="/user")

    # Directory is created in lifespan startup
    application.mount(
        settings.image_url_prefix,
        StaticFiles(directory=settings.image_upload_dir, check_dir=False),
        name="images",
    )

    @application.get("/health", tags=["health"], operation_id="health")
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
