"""
Number Translator: FastAPI Server
=================================

RESTful API for translating spelled-out English integers.

Endpoints:
    POST /translate         Translate one phrase
    POST /translate/batch   Translate up to 100 phrases
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from number_translator import __version__
from number_translator.config import Settings
from number_translator.lexicon import LEXICON
from number_translator.models import Token, TranslationResult, ValidationFinding
from number_translator.pipeline import translate

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (load settings) ───────────────────────────

_settings: Settings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read settings from the environment on startup."""
    global _settings  # noqa: PLW0603
    _settings = Settings()
    logging.basicConfig(level=_settings.log_level)
    logger.info("Number translator ready (strict_characters=%s)", _settings.strict_characters)
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Translator API",
    description=(
        "Converts spelled-out English integers into numbers. "
        "Malformed phrases are rejected with a machine-readable reason "
        "naming the offending word and its position."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────

MAX_PHRASE_LENGTH = 1_000


class TranslateRequest(BaseModel):
    """Request body for the /translate endpoint."""

    phrase: str = Field(
        ...,
        max_length=MAX_PHRASE_LENGTH,
        description="The spelled-out number to translate.",
        json_schema_extra={"example": "two million three hundred thousand forty five"},
    )


class BatchTranslateRequest(BaseModel):
    """Request body for the /translate/batch endpoint."""

    phrases: list[Annotated[str, Field(max_length=MAX_PHRASE_LENGTH)]] = Field(
        ..., min_length=1, max_length=100
    )


class TokenOut(Token):
    """API-facing token (inherits all fields from Token)."""


class FindingOut(ValidationFinding):
    """API-facing finding (inherits all fields from ValidationFinding)."""


class TranslateResponse(BaseModel):
    """Structured translation result returned by the API."""

    phrase: str
    is_valid: bool
    value: Optional[int] = None
    words: list[str]
    tokens: list[TokenOut]
    error: Optional[FindingOut] = None

    model_config = {"json_schema_extra": {"example": {
        "phrase": "ten ten",
        "is_valid": False,
        "value": None,
        "words": ["ten", "ten"],
        "tokens": [
            {"word": "ten", "word_class": "SOLO", "value": 10, "position": 0},
            {"word": "ten", "word_class": "SOLO", "value": 10, "position": 1},
        ],
        "error": {
            "code": "DUPLICATE_ADJACENT_CLASS",
            "message": "'ten' at position 1 repeats the SOLO word type of the word before it.",
            "word": "ten",
            "position": 1,
            "details": {"word_class": "SOLO"},
        },
    }}}


class BatchTranslateResponse(BaseModel):
    valid_count: int
    invalid_count: int
    results: list[TranslateResponse]


class HealthResponse(BaseModel):
    status: str
    version: str
    lexicon_size: int
    strict_characters: bool


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> Settings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Translator not initialised")
    return _settings


def _build_response(result: TranslationResult) -> TranslateResponse:
    """Convert the internal TranslationResult to the API response schema."""
    error_out = (
        FindingOut.model_validate(result.error, from_attributes=True)
        if result.error
        else None
    )
    tokens_out = [
        TokenOut.model_validate(t, from_attributes=True) for t in result.tokens
    ]
    return TranslateResponse(
        phrase=result.phrase,
        is_valid=result.is_valid,
        value=result.value,
        words=result.words,
        tokens=tokens_out,
        error=error_out,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/translate",
    summary="Translate a spelled-out number",
    tags=["Translation"],
    responses={503: {"description": "Translator not yet initialised"}},
)
def translate_phrase(request: TranslateRequest) -> TranslateResponse:
    """Translate one phrase.

    Returns 200 for well-formed AND malformed phrases:
    - **is_valid**: `true` if the phrase translated
    - **value**: the integer, when valid
    - **error**: code, message, word and position of the first violation
    """
    settings = _get_settings()
    return _build_response(translate(request.phrase, settings))


@app.post(
    "/translate/batch",
    summary="Translate several phrases at once",
    tags=["Translation"],
    responses={503: {"description": "Translator not yet initialised"}},
)
def translate_batch(request: BatchTranslateRequest) -> BatchTranslateResponse:
    """Translate up to 100 phrases independently; one bad phrase does not fail the batch."""
    settings = _get_settings()
    results = [_build_response(translate(p, settings)) for p in request.phrases]
    valid_count = sum(1 for r in results if r.is_valid)
    return BatchTranslateResponse(
        valid_count=valid_count,
        invalid_count=len(results) - valid_count,
        results=results,
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Translator not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    settings = _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        lexicon_size=len(LEXICON),
        strict_characters=settings.strict_characters,
    )
