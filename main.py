"""FastAPI application for the HTML attribute stripper.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import json
import logging
import os
import traceback
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

# Load .env next to this file so STRIPPER_* settings are picked up
load_dotenv(Path(__file__).resolve().parent / ".env")

from models.request import CleanRequest
from models.response import PipelineResult
from parsing.classify import (
    CATEGORY_DESCRIPTIONS,
    FUNCTIONAL_ATTRIBUTES,
    STYLING_ATTRIBUTES,
    classify,
)
from parsing.errors import ParseFailure
from pipeline import run

MAX_INPUT_CHARS = int(os.getenv("STRIPPER_MAX_INPUT_CHARS", "1000000"))


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

def resolve_log_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Include optional extra fields when present
        for key in ("stage", "input_chars", "output_chars", "removed_count", "error"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("stripper")
logger.addHandler(_handler)
logger.setLevel(resolve_log_level(os.getenv("STRIPPER_LOG_LEVEL", "INFO")))
# Prevent propagation to root logger to avoid duplicate output
logger.propagate = False


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="HTML Attribute Stripper")

PARSE_FAILURE_DETAIL = "Failed to parse HTML. Please check your input."


@app.exception_handler(ParseFailure)
async def parse_failure_handler(request: Request, exc: ParseFailure) -> JSONResponse:
    """Report unparseable input; the caller keeps its previous output."""
    logger.warning("parse failure", extra={"error": str(exc)})
    return JSONResponse(status_code=422, content={"detail": PARSE_FAILURE_DETAIL})


@app.exception_handler(Exception)
async def catch_all_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and answer with a generic 500."""
    logger.error(
        "Unhandled exception: %s: %s\n%s",
        type(exc).__name__,
        exc,
        traceback.format_exc(),
    )
    return JSONResponse(status_code=500, content={"detail": "Internal error"})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/clean", response_model=PipelineResult)
def clean(request: CleanRequest) -> PipelineResult:
    """Strip non-functional attributes and tidy the submitted fragment."""
    if len(request.html) > MAX_INPUT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Input exceeds {MAX_INPUT_CHARS} characters",
        )
    return run(request.html, request.options)


@app.get("/attributes")
async def attributes() -> dict:
    """Reference lists: which names are kept, which are styling."""
    return {
        "functional": sorted(FUNCTIONAL_ATTRIBUTES),
        "styling": sorted(STYLING_ATTRIBUTES),
        "categories": {c.value: desc for c, desc in CATEGORY_DESCRIPTIONS.items()},
    }


@app.get("/attributes/{name}")
async def attribute_category(name: str) -> dict:
    """Classify a single attribute name."""
    return {"name": name, "category": classify(name).value}
