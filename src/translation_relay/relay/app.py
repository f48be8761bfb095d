"""FastAPI translation relay.

Endpoints:
- GET /translate?text=...&inputType=japanese|romanji|english
- GET /phrases, GET /api/phrases (placeholders, always empty)
- GET /health
- static files from STATIC_DIR at /
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from translation_relay.common.config import load_settings
from translation_relay.common.errors import MissingTextError, RelayError
from translation_relay.common.logging_setup import setup_logging
from translation_relay.common.schema import PhrasesOut, TranslateOut
from translation_relay.relay import upstream
from translation_relay.relay.direction import resolve_direction, romanization_source
from translation_relay.relay.romanizer import EngineHandle

LOGGER = logging.getLogger("translation_relay.app")

SETTINGS = load_settings()
setup_logging(SETTINGS.log_level)

ENGINE = EngineHandle()

# Phrase and word listings are disabled; the endpoints stay for the front end.
PHRASES: list[str] = []
WORDS: list[str] = []

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def _start_romanizer() -> None:
    """Begin loading the romanization dictionaries without blocking startup."""
    ENGINE.start()

@app.exception_handler(RelayError)
async def _relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "romanizer": ENGINE.state.value}


def translate_text(text: str | None, input_type: str | None) -> TranslateOut:
    """
    Resolve direction, translate upstream and attach romaji where it applies.

    Raises:
        RelayError: client, upstream and readiness failures.
    """
    if not text:
        raise MissingTextError()

    direction = resolve_direction(text, input_type)
    source = romanization_source(input_type, direction)
    # Check the gate first so a doomed request costs no upstream call.
    romanizer = ENGINE.get() if source else None

    LOGGER.info(
        "Incoming: text=%r inputType=%s from=%s to=%s",
        text,
        input_type,
        direction.from_lang,
        direction.to_lang,
    )
    translated = upstream.fetch_translation(text, direction, SETTINGS)

    romanized = None
    if romanizer is not None:
        romanized = romanizer.convert(text if source == "input" else translated)

    return TranslateOut(
        input=text,
        from_lang=direction.from_lang,
        to_lang=direction.to_lang,
        translated=translated,
        romanized=romanized,
    )


@app.get("/translate", response_model=TranslateOut)
def translate(text: str | None = None, inputType: str | None = None) -> JSONResponse:  # noqa: N803
    try:
        payload = translate_text(text, inputType)
    except RelayError:
        raise
    except Exception as e:
        LOGGER.exception("Translation failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Translation failed", "details": str(e)},
        )
    body = payload.model_dump(by_alias=True)
    LOGGER.info("Outgoing: %s", body)
    return JSONResponse(content=body)


def _phrases() -> PhrasesOut:
    return PhrasesOut(
        phrases=PHRASES,
        words=WORDS,
        total={
            "phrases": len(PHRASES),
            "words": len(WORDS),
            "combined": len(PHRASES) + len(WORDS),
        },
    )

@app.get("/phrases", response_model=PhrasesOut)
def phrases() -> PhrasesOut:
    return _phrases()

@app.get("/api/phrases", response_model=PhrasesOut)
def api_phrases() -> PhrasesOut:
    return _phrases()


# Mounted last so the API routes above take precedence.
app.mount("/", StaticFiles(directory=SETTINGS.static_dir, html=True), name="static")
