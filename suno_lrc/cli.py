"""Command-line interface for the Suno lyric aligner.

WHY: Users want LRC/SRT files for a Suno song without opening a browser.
The CLI wires the pipeline together (fetch or load words and lyrics,
align, run the selected formatters, save files) behind one command.

HOW: Two input modes share the same back half:
  fetch mode:  suno_lrc <clip-id> [--token T] [--proxy-url U]
  manual mode: suno_lrc --lyrics lyrics.txt --words aligned.json
Fetch mode runs the async SunoClient via asyncio.run(). Both modes hand
the lyric text and TimedWord list to generate(), then save one file per
formatter output. Status messages go to stderr.

RULES:
- Exactly one mode: a clip ID, or both --lyrics and --words
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}; stem is --name, else the clip title,
  else DEFAULT_OUTPUT_STEM; numeric suffix on conflicts (song-2.lrc)
- Any user-facing error prints "Error: ..." to stderr and exits 1
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from suno_lrc.api.client import SunoAPIError, SunoClient, is_valid_clip_id
from suno_lrc.config import DEFAULT_OUTPUT_STEM
from suno_lrc.core.ir import TimedWord
from suno_lrc.core.pipeline import LyricsProcessingError, generate
from suno_lrc.core.words import WordPayloadError, load_words_json
from suno_lrc.formatters import FORMATTERS
from suno_lrc.formatters.base import FormatterOutput

_UNSAFE_FILENAME_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]+')


class CLIError(Exception):
    """Raised for invalid command-line input; the message is shown as-is."""


def _status(msg: str) -> None:
    """Print a status message to stderr (stdout stays clean for piping)."""
    print(msg, file=sys.stderr, flush=True)


def _safe_stem(name: str) -> str:
    """Turn a clip title into a usable file stem."""
    stem = _UNSAFE_FILENAME_RE.sub("_", name).strip(" .")
    return stem or DEFAULT_OUTPUT_STEM


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. my_song.lrc)
    - Conflict: {stem}-2{suffix}, {stem}-3{suffix}, ...
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, suffix)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    """Write one formatter output as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _parse_formats(value: Optional[str]) -> List[str]:
    if not value:
        return list(FORMATTERS.keys())
    keys = [f.strip() for f in value.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            raise CLIError("Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS.keys()))
            ))
    return keys


async def _fetch_from_suno(
    clip_id: str,
    token: Optional[str],
    proxy_url: Optional[str],
) -> Tuple[str, List[TimedWord], Optional[str]]:
    """Fetch lyric prompt, words and title for ``clip_id``."""
    async with SunoClient(token=token, proxy_url=proxy_url) as client:
        _status("Fetching clip {} from {}...".format(clip_id, client.base_url))
        words, metadata = await client.fetch_clip(clip_id)
    _status("  {} aligned words, title: {}".format(len(words), metadata.title or "(none)"))
    return metadata.prompt, words, metadata.title


def _load_manual(lyrics_path: str, words_path: str) -> Tuple[str, List[TimedWord]]:
    """Read lyric text and pasted aligned-lyrics JSON from disk."""
    try:
        prompt = Path(lyrics_path).read_text(encoding="utf-8")
        words_text = Path(words_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CLIError("Cannot read input file: {}".format(exc)) from exc
    words = load_words_json(words_text)
    _status("Loaded {} words from {}".format(len(words), words_path))
    return prompt, words


def run(args: argparse.Namespace) -> List[Path]:
    """Execute the pipeline for parsed arguments and return the saved paths.

    Raises:
        CLIError, SunoAPIError, WordPayloadError, LyricsProcessingError.
    """
    manual = bool(args.lyrics or args.words)
    if manual and args.clip_id:
        raise CLIError("Give either a clip ID or --lyrics/--words, not both.")
    if manual and not (args.lyrics and args.words):
        raise CLIError("Manual mode needs both --lyrics and --words.")
    if not manual and not args.clip_id:
        raise CLIError("Give a Suno clip ID, or --lyrics and --words.")

    format_keys = _parse_formats(args.formats)

    output_dir = Path(args.output_dir).resolve() if args.output_dir else Path.cwd()
    if not output_dir.is_dir():
        raise CLIError("Output directory does not exist: {}".format(output_dir))

    title: Optional[str] = None
    if manual:
        prompt, words = _load_manual(args.lyrics, args.words)
    else:
        if not is_valid_clip_id(args.clip_id):
            raise CLIError("Please enter a valid Suno Song ID (UUID).")
        prompt, words, title = asyncio.run(
            _fetch_from_suno(args.clip_id, args.token, args.proxy_url)
        )

    _status("Aligning lyrics...")
    result = generate(prompt, words)
    _status("  {} lines aligned".format(len(result.lines)))

    stem = _safe_stem(args.name or title or DEFAULT_OUTPUT_STEM)
    saved: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(result.lines):
            path = _save_output(output, stem, output_dir)
            saved.append(path)
            _status("  Saved {}: {}".format(formatter.name, path.name))
    return saved


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="suno_lrc",
        description="Generate synchronized LRC and SRT files from a Suno song's "
                    "aligned lyrics.",
    )
    parser.add_argument(
        "clip_id",
        nargs="?",
        default=None,
        help="Suno song/clip ID (UUID) to fetch words and lyrics for.",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="Suno session token (default: SUNO_SESSION_TOKEN from the environment).",
    )
    parser.add_argument(
        "--proxy-url",
        default=None,
        help="Proxy URL that forwards to the Suno API (default: SUNO_PROXY_URL).",
    )
    parser.add_argument(
        "--lyrics",
        default=None,
        help="Manual mode: path to a text file with the lyric prompt.",
    )
    parser.add_argument(
        "--words",
        default=None,
        help="Manual mode: path to the aligned-lyrics JSON.",
    )
    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: current directory).",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Output file stem (default: the clip title, or '{}').".format(DEFAULT_OUTPUT_STEM),
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging (unmatched lines, dropped words).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m suno_lrc`` and the ``suno-lrc`` script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        saved = run(args)
    except (CLIError, SunoAPIError, WordPayloadError, LyricsProcessingError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)

    _status("")
    _status("Done! Saved {} file(s).".format(len(saved)))


if __name__ == "__main__":
    main()
