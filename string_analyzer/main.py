import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from string_analyzer.config import settings
from string_analyzer.errors import StringAnalyzerError
from string_analyzer.logging import RequestLoggingMiddleware, init_logging
from string_analyzer.routes import router
from string_analyzer.store import StringStore

logger = logging.getLogger("string_analyzer")


def _describe_validation_errors(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    where = ".".join(loc) or "request body"
    return f"Invalid {where}: {first.get('msg', 'invalid value')}"


def create_app(store: Optional[StringStore] = None) -> FastAPI:
    """Build the API with its own record store (a fresh one unless given)."""
    init_logging()

    app = FastAPI(
        title=settings.APP_TITLE,
        version="1.0.0",
        description=(
            "Analyze strings and store their computed properties.\n\n"
            "Features:\n"
            "- Length, palindrome flag, unique characters, word count, SHA-256 and character frequencies\n"
            "- Filtering by properties via query parameters\n"
            "- A small natural language query interpreter"
        ),
    )
    app.state.store = store if store is not None else StringStore()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    # -------------------------------
    # Unified error response handlers
    # -------------------------------
    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_error_handler(request: Request, exc: StringAnalyzerError):
        logger.warning(
            "%s: %s %s -> %s | %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            "HTTPException: %s %s -> %s | detail=%s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.detail,
        )
        body = {"error": exc.detail if isinstance(exc.detail, str) else "Error"}
        return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Malformed JSON, non-object bodies and bad query strings are all client input errors
        logger.warning(
            "ValidationError: %s %s | errors=%s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return JSONResponse(status_code=400, content={"error": _describe_validation_errors(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception: %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


app = create_app()


def run() -> None:
    logger.info("String Analyzer API starting on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
