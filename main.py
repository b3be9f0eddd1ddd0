from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.errors import AppError, ConfigurationError
from app.core.logging import get_logger, setup_logging
from app.apis.deps import get_fallbacks, get_generation_client
from app.apis.ask.main import router as ask_router
from app.apis.documents.main import router as documents_router
from app.apis.flashcards.main import router as flashcards_router
from app.apis.quiz.main import router as quiz_router
from app.apis.summarize.main import router as summarize_router
from app.apis.tts.main import router as tts_router

import uvicorn
from fastapi.middleware.cors import CORSMiddleware


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Invalid fallback overrides should stop startup, not the first request
    get_fallbacks()
    try:
        get_generation_client()
    except ConfigurationError as e:
        logger.warning("Generation endpoints disabled: %s", e.message)
    yield


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    loc = ".".join(str(p) for p in errors[0].get("loc", ())) if errors else ""
    message = f"{loc}: {detail}" if loc else detail
    return JSONResponse(status_code=400, content={"error": message})


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app.name, version=settings.app.version, lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    app.include_router(quiz_router)
    app.include_router(flashcards_router)
    app.include_router(ask_router)
    app.include_router(summarize_router)
    app.include_router(tts_router)
    app.include_router(documents_router)

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "app": settings.app.name,
            "version": settings.app.version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.app.port,
            reload=not settings.app.is_production,
        )
    except Exception as e:
        print(f"An error occurred when starting the server: {e}.")
