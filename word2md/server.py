"""FastAPI application exposing the converter over HTTP."""

from __future__ import annotations

import html
import logging
import time
from pathlib import Path

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from word2md.config.models import Word2MdConfig
from word2md.converter import (
    MarkdownRenderer,
    UnsupportedFileError,
    WordConverter,
    validate_file_extension,
)

logger = logging.getLogger(__name__)

CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'self'",
        "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net https://fonts.googleapis.com",
        "font-src 'self' https://fonts.gstatic.com",
        "script-src 'self'",
        "img-src 'self' data:",
        "connect-src 'self'",
    ]
)

SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}

MISSING_FILE_ERROR = "You must upload a file to convert."
MISSING_DOC_MESSAGE = "You must upload a document to convert."


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "message": message},
    )


def create_app(config: Word2MdConfig | None = None) -> FastAPI:
    """Build the app around a single converter shared by all requests."""
    config = config or Word2MdConfig()
    app = FastAPI(title="word2md", openapi_url=None, redirect_slashes=False)
    app.state.converter = WordConverter(
        renderer=MarkdownRenderer(),
        extraction=config.extraction,
        lint=config.lint,
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        logger.info(
            "%s %s %d %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # known path with the wrong method is reported like an unknown path
        if exc.status_code in (404, 405):
            logger.info("404 - Path not found: %s", request.url.path)
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.post("/api/convert")
    async def api_convert(file: UploadFile | None = File(None)):
        if file is None or not file.filename:
            return _error(400, MISSING_FILE_ERROR, "Please select a .docx file to upload.")

        try:
            validate_file_extension(file.filename)
            data = await file.read()
            markdown = await app.state.converter.convert(data)
        except UnsupportedFileError as e:
            return _error(400, "Invalid file type", e.message)
        except Exception:
            logger.exception("Conversion failed for %s", file.filename)
            return _error(
                500,
                "Internal server error",
                "An unexpected error occurred during conversion.",
            )

        return {
            "success": True,
            "markdown": markdown,
            "originalFilename": file.filename,
            "size": len(data),
        }

    @app.post("/raw")
    async def raw(doc: UploadFile | None = File(None)):
        if doc is None or not doc.filename:
            return PlainTextResponse(MISSING_DOC_MESSAGE, status_code=400)

        try:
            validate_file_extension(doc.filename)
        except UnsupportedFileError as e:
            return PlainTextResponse(html.escape(e.message), status_code=400)

        markdown = await app.state.converter.convert(await doc.read())
        return PlainTextResponse(markdown)

    @app.get("/_healthcheck")
    async def healthcheck():
        return PlainTextResponse("OK")

    if config.server.static_dir:
        static_dir = Path(config.server.static_dir)
        if static_dir.is_dir():
            logger.info("Serving static files from: %s", static_dir)
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("Static directory not found: %s", static_dir)

    return app
