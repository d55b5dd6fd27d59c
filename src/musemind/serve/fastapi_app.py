"""FastAPI service for themed poem generation.

Endpoints:
- GET /api/health
- GET /                   static entry page from the public directory
- POST /api/generate-poem { "userInput": "...", "theme": "lovelines|moodverse|soulscript" }
"""
from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from musemind.common.config import Settings, get_settings
from musemind.common.logging_setup import setup_logging
from musemind.common.schema import ErrorOut, GeneratePoemIn, GeneratePoemOut, HealthOut
from musemind.poem.errors import InvalidInput, PoemGenerationError, RouteNotFound, classify_error
from musemind.poem.service import PoemClient, generate_poem, utc_timestamp
from musemind.serve.gemini_client import GeminiClient

LOGGER = logging.getLogger("musemind.app")


def _error_response(exc: BaseException) -> JSONResponse:
    status, message = classify_error(exc)
    return JSONResponse(status_code=status, content=ErrorOut(error=message).model_dump())


def create_app(settings: Settings | None = None, client: PoemClient | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; read from the environment when omitted.
        client: Upstream client; a GeminiClient over ``settings`` when omitted.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.has_api_key:
            LOGGER.error("GEMINI_API_KEY not found in environment; poem generation will fail")
        yield

    app = FastAPI(title="MuseMind", lifespan=lifespan)
    app.state.settings = settings
    app.state.poem_client = client or GeminiClient(settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in (404, 405):
            return _error_response(RouteNotFound(request.url.path))
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(InvalidInput("request body failed validation"))

    @app.get("/api/health", response_model=HealthOut)
    async def health() -> HealthOut:
        return HealthOut(
            status="ok",
            message="MuseMind backend is running with Gemini API!",
            timestamp=utc_timestamp(),
        )

    @app.post(
        "/api/generate-poem",
        response_model=GeneratePoemOut,
        response_model_exclude_unset=True,
        responses={400: {"model": ErrorOut}},
    )
    async def generate(body: GeneratePoemIn, request: Request):
        try:
            result = await generate_poem(body.userInput, body.theme, request.app.state.poem_client)
        except PoemGenerationError as e:
            LOGGER.error("Error generating poem: %s", type(e).__name__)
            return _error_response(e)
        except Exception:
            LOGGER.exception("Unexpected error generating poem")
            return _error_response(RuntimeError())
        out = {"success": True, "poem": result.poem, "timestamp": result.timestamp}
        # theme is echoed as sent and left out when the caller sent none
        if "theme" in body.model_fields_set:
            out["theme"] = result.theme
        return GeneratePoemOut(**out)

    public = Path(settings.public_dir)

    @app.get("/", include_in_schema=False)
    async def index():
        page = public / "index.html"
        if not page.is_file():
            return _error_response(RouteNotFound("/"))
        return FileResponse(page)

    if public.is_dir():
        app.mount("/", StaticFiles(directory=public), name="public")

    return app


setup_logging(get_settings().log_level)
app = create_app()
