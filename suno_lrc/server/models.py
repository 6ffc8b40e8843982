"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own request/response model. Line models
mirror the AlignedLine IR and convert to and from it.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Times are float seconds; NaN and infinity are rejected
- Line times may also be sent as editor strings ("mm:ss.xx")
- words on an aligned line is reserved and always empty
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from suno_lrc.core.ir import AlignedLine, TimedWord
from suno_lrc.core.pipeline import GenerationResult
from suno_lrc.formatters.timecode import format_editor_time, parse_editor_time


class WordModel(BaseModel):
    """A timed word, as stored on an aligned line."""

    text: str = Field(description="Word text as sung.")
    start_s: float = Field(allow_inf_nan=False, description="Start time in seconds.")
    end_s: Optional[float] = Field(default=None, allow_inf_nan=False, description="End time in seconds.")
    confidence: Optional[float] = Field(default=None, allow_inf_nan=False, description="Alignment score.")


class LineModel(BaseModel):
    """One aligned lyric line.

    RULES:
    - start_s / end_s accept float seconds or an editor string
      ("mm:ss.xx" or plain seconds); anything parse_editor_time rejects,
      and NaN or infinity, is a 422
    - start_label / end_label are output-only "mm:ss.xx" renderings
    """

    text: str = Field(description="Lyric line text.")
    start_s: float = Field(
        allow_inf_nan=False,
        description="Line start in seconds, or an editor time such as '01:05.26'.",
    )
    end_s: float = Field(
        allow_inf_nan=False,
        description="Line end in seconds, or an editor time such as '01:07.00'.",
    )
    words: List[WordModel] = Field(
        default_factory=list,
        description="Reserved. Always empty in current responses.",
    )

    @field_validator("start_s", "end_s", mode="before")
    @classmethod
    def _parse_editor_input(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        seconds = parse_editor_time(value)
        if seconds is None:
            raise ValueError("Invalid time '{}'. Use mm:ss.xx or seconds.".format(value))
        return seconds

    @computed_field(description="Line start as shown in the editor (mm:ss.xx).")
    @property
    def start_label(self) -> str:
        return format_editor_time(self.start_s)

    @computed_field(description="Line end as shown in the editor (mm:ss.xx).")
    @property
    def end_label(self) -> str:
        return format_editor_time(self.end_s)

    @classmethod
    def from_line(cls, line: AlignedLine) -> LineModel:
        return cls(
            text=line.text,
            start_s=line.start_s,
            end_s=line.end_s,
            words=[
                WordModel(text=w.text, start_s=w.start_s, end_s=w.end_s, confidence=w.confidence)
                for w in line.words
            ],
        )

    def to_line(self) -> AlignedLine:
        return AlignedLine(
            text=self.text,
            start_s=self.start_s,
            end_s=self.end_s,
            words=[
                TimedWord(text=w.text, start_s=w.start_s, end_s=w.end_s, confidence=w.confidence)
                for w in self.words
            ],
        )


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class AlignmentRequest(BaseModel):
    """Lyric text plus aligned-lyrics JSON pasted by the client.

    RULES:
    - words accepts any JSON shape the Suno endpoint has been seen to
      return (bare array or wrapped object); it is parsed strictly
    """

    lyrics: str = Field(description="Lyric prompt, lines separated by newlines.")
    words: Any = Field(description="Aligned-lyrics JSON: an array of words or an object containing one.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "lyrics": "[Verse]\nHello world\nGoodbye moon",
                "words": [
                    {"word": "Hello", "start_s": 0.5, "end_s": 0.9, "p_align": 0.97},
                    {"word": "world", "start_s": 0.9, "end_s": 1.4, "p_align": 0.95},
                    {"word": "Goodbye", "start_s": 2.0, "end_s": 2.6, "p_align": 0.93},
                    {"word": "moon", "start_s": 2.6, "end_s": 3.3, "p_align": 0.96},
                ],
            }
        ]
    }}


class RenderRequest(BaseModel):
    """Edited lines to re-render into LRC and SRT."""

    lines: List[LineModel] = Field(description="Aligned lines in output order.")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class AlignmentResponse(BaseModel):
    """Aligned lines with both rendered outputs."""

    title: Optional[str] = Field(default=None, description="Clip title, when fetched from Suno.")
    lines: List[LineModel] = Field(description="Aligned lines in lyric order.")
    lrc: str = Field(description="LRC (synced lyrics) content.")
    srt: str = Field(description="SRT (subtitles) content.")

    @classmethod
    def from_result(cls, result: GenerationResult, title: Optional[str] = None) -> AlignmentResponse:
        return cls(
            title=title,
            lines=[LineModel.from_line(line) for line in result.lines],
            lrc=result.lrc_content,
            srt=result.srt_content,
        )


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in CLI flags.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '.lrc').")
    media_type: str = Field(description="MIME type of the produced file.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
