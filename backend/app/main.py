"""
FastAPI application for the Complexity Analyzer.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from core.analyzer import HeuristicComplexityAnalyzer
from core.examples import EXAMPLES, get_example
from core.ratings import rate_space, rate_time
from core.report import format_export

from app.config import settings, logger
from app.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    AnalysisResult,
    AnalysisState,
    ErrorResponse,
    ExampleResponse,
)
from app import __version__


analyzer = HeuristicComplexityAnalyzer()

_telemetry: dict[str, Any] = {
    "requests_total": 0,
    "requests_failed": 0,
    "validation_errors": 0,
}


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


async def request_size_middleware(request: Request, call_next):
    if request.method in ("POST", "PUT", "PATCH"):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > settings.MAX_REQUEST_SIZE:
            return JSONResponse(
                status_code=413,
                content={
                    "success": False,
                    "state": AnalysisState.ERROR.value,
                    "error": "request_too_large",
                    "details": f"Request body exceeds {settings.MAX_REQUEST_SIZE} bytes",
                },
            )
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------


analysis_router = APIRouter()


@analysis_router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_code(request: AnalyzeRequest):
    """
    Analyze code complexity.

    Returns time and space complexity, one explanation per axis, a
    detailed report and display ratings.
    """
    _telemetry["requests_total"] += 1
    logger.info("Analysis requested - %d chars, language=%s", len(request.code), request.language)

    if settings.SIMULATED_DELAY_SECONDS > 0:
        await asyncio.sleep(settings.SIMULATED_DELAY_SECONDS)

    analysis = analyzer.analyze(request.code, request.language)

    result = AnalysisResult(
        **analysis.model_dump(),
        timeRating=rate_time(analysis.timeComplexity),
        spaceRating=rate_space(),
        language=request.language,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )

    logger.info("Analysis completed - time=%s space=%s", result.timeComplexity, result.spaceComplexity)
    return AnalyzeResponse(success=True, state=AnalysisState.DONE, result=result)


@analysis_router.post("/export", response_class=PlainTextResponse)
async def export_result(result: AnalysisResult):
    """Plain-text rendering of a result, ready for the clipboard."""
    return PlainTextResponse(format_export(result))


examples_router = APIRouter()


@examples_router.get("/examples")
async def list_examples():
    return {"languages": list(EXAMPLES), "default": "pseudocode"}


@examples_router.get("/examples/{language}", response_model=ExampleResponse)
async def example_for_language(language: str):
    """Example snippet; unknown languages get the pseudocode example."""
    normalized = language.strip().lower()
    if normalized not in EXAMPLES:
        normalized = "pseudocode"
    return ExampleResponse(language=normalized, code=get_example(normalized))


health_router = APIRouter()


@health_router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@health_router.get("/metrics")
async def metrics():
    """In-process request counters."""
    return {
        "success": True,
        "metrics": _telemetry,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ---------------------------------------------------------------------------
# FastAPI app assembly
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Complexity Analyzer v%s starting", __version__)
    logger.info("Server: %s:%d", settings.HOST, settings.PORT)
    if settings.SIMULATED_DELAY_SECONDS > 0:
        logger.info("Simulated analysis delay: %.2fs", settings.SIMULATED_DELAY_SECONDS)

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="Complexity Analyzer API",
    description="Heuristic time and space complexity estimates for code snippets",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log without request bodies and return a generic error."""
    logger.error(
        "Unhandled exception on %s %s: %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        str(exc)[:200],
    )
    _telemetry["requests_failed"] += 1
    return JSONResponse(
        status_code=500,
        content={"success": False, "state": AnalysisState.ERROR.value, "error": "Internal server error"},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return the first validation message, log only field names and types."""
    errors = exc.errors()
    error_details = [
        {"field": err.get("loc", [])[-1] if err.get("loc") else "unknown", "type": err.get("type")}
        for err in errors[:5]
    ]
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, error_details)
    _telemetry["validation_errors"] += 1

    details = None
    if errors:
        details = str(errors[0].get("msg", "")).removeprefix("Value error, ")

    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "state": AnalysisState.ERROR.value,
            "error": "Invalid request format",
            "details": details,
        },
    )


app.middleware("http")(security_headers_middleware)
app.middleware("http")(request_size_middleware)

cors_origins = settings.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Complexity Analyzer API",
        "version": __version__,
        "endpoints": {
            "/analyze": "POST - Analyze code complexity",
            "/export": "POST - Render a result as plain text",
            "/examples/{language}": "GET - Example snippet",
            "/health": "GET - Health check",
        },
    }


app.include_router(health_router, prefix="/api/v1", tags=["health"])
app.include_router(analysis_router, prefix="/api/v1", tags=["analysis"])
app.include_router(examples_router, prefix="/api/v1", tags=["examples"])
app.include_router(health_router, tags=["health-compat"])
app.include_router(analysis_router, tags=["analysis-compat"])
app.include_router(examples_router, tags=["examples-compat"])
