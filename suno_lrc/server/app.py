"""FastAPI application exposing alignment over HTTP.

WHY: A browser front end (or curl, n8n, a bot) cannot run the aligner
itself and usually cannot call Suno directly because of CORS. This app
does both server-side: it fetches a clip from Suno, aligns pasted JSON,
and re-renders edited lines, always returning LRC and SRT together.

HOW: A single FastAPI app with five endpoints grouped by tags. Alignment
runs inline (it is fast and pure); only the Suno fetch is awaited.

RULES:
- Error responses use a consistent ErrorResponse schema
- Invalid clip IDs → 400
- Suno errors keep their HTTP status; transport failures → 502
- Payload and processing errors (empty lyrics, no words, nothing
  matched, malformed JSON) → 422
- Request validation errors (including NaN or infinite times) → 422,
  without the rejected input echoed back
- The X-Suno-Token header overrides SUNO_SESSION_TOKEN per request
"""

from __future__ import annotations

import logging
from typing import Annotated, List, Optional

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from suno_lrc import __version__
from suno_lrc.api.client import SunoAPIError, SunoClient, is_valid_clip_id
from suno_lrc.core.pipeline import LyricsProcessingError, generate, render
from suno_lrc.core.words import WordPayloadError, parse_words
from suno_lrc.formatters import FORMATTERS
from suno_lrc.server.models import (
    AlignmentRequest,
    AlignmentResponse,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    RenderRequest,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Suno LRC API",
    description=(
        "Align Suno lyric prompts to aligned-lyrics word timings and render "
        "LRC (synced lyrics) and SRT (subtitles)."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 without echoing the rejected input, which may be NaN or infinity."""
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


# ---------------------------------------------------------------------------
# Endpoints: Alignment
# ---------------------------------------------------------------------------


@app.post(
    "/alignments",
    response_model=AlignmentResponse,
    tags=["alignment"],
    summary="Align pasted lyrics and word JSON",
    description=(
        "Manual mode: send the lyric prompt and the aligned-lyrics JSON copied "
        "from Suno. Returns aligned lines plus LRC and SRT content."
    ),
    responses={
        422: {"model": ErrorResponse, "description": "Unusable words payload or nothing could be aligned"},
    },
)
async def create_alignment(request: AlignmentRequest) -> AlignmentResponse:
    try:
        words = parse_words(request.words, strict=True)
        result = generate(request.lyrics, words)
    except (WordPayloadError, LyricsProcessingError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return AlignmentResponse.from_result(result)


@app.get(
    "/clips/{clip_id}/alignment",
    response_model=AlignmentResponse,
    tags=["alignment"],
    summary="Fetch a Suno clip and align it",
    description=(
        "Fetches the clip's aligned words and lyric prompt from Suno, then "
        "aligns them. Private clips need a session token."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Clip ID is not a UUID"},
        401: {"model": ErrorResponse, "description": "Suno rejected the session token"},
        422: {"model": ErrorResponse, "description": "Clip has no lyrics or no usable words"},
        502: {"model": ErrorResponse, "description": "Suno could not be reached"},
    },
)
async def align_clip(
    clip_id: str,
    x_suno_token: Annotated[
        Optional[str],
        Header(description="Suno session token (the __session cookie value)."),
    ] = None,
) -> AlignmentResponse:
    if not is_valid_clip_id(clip_id):
        raise HTTPException(
            status_code=400,
            detail="Please enter a valid Suno Song ID (UUID).",
        )

    try:
        async with SunoClient(token=x_suno_token) as client:
            words, metadata = await client.fetch_clip(clip_id)
    except SunoAPIError as exc:
        logger.warning("Suno fetch failed for clip %s: %s", clip_id, exc)
        raise HTTPException(status_code=exc.status_code or 502, detail=exc.message)

    try:
        result = generate(metadata.prompt, words)
    except LyricsProcessingError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return AlignmentResponse.from_result(result, title=metadata.title)


@app.post(
    "/render",
    response_model=AlignmentResponse,
    tags=["alignment"],
    summary="Re-render edited lines",
    description=(
        "Editor path: send lines whose text or times were changed by hand. "
        "Lines are rendered exactly as given, without re-alignment."
    ),
)
async def render_lines(request: RenderRequest) -> AlignmentResponse:
    result = render([line.to_line() for line in request.lines])
    return AlignmentResponse.from_result(result)


# ---------------------------------------------------------------------------
# Endpoints: Formats / Health
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        output = formatter.format([])[0]
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=output.suffix,
            media_type=output.media_type,
        ))
    return result


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the suno-lrc-api console script."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
