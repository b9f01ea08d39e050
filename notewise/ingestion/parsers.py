"""Transcript parsers for WebVTT captions, plain text and JSON segment exports."""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any

from notewise.ingestion.models import TranscriptSegment

_TIMESTAMP_RE = re.compile(
    r"(\d{1,2}:\d{2}:\d{2}[.,]\d{3}|\d{2}:\d{2}[.,]\d{3})\s*-->\s*"
    r"(\d{1,2}:\d{2}:\d{2}[.,]\d{3}|\d{2}:\d{2}[.,]\d{3})"
)
_SPEAKER_RE = re.compile(r"^([^:]{1,40}?):\s+(.+)$")
# <v Speaker>text</v>; the closing tag may be omitted.
_VOICE_TAG_RE = re.compile(r"^<v ([^>]+)>(.*?)(?:</v>)?$", re.DOTALL)


def _parse_vtt_timestamp(ts: str) -> float:
    """Convert a VTT timestamp (``HH:MM:SS.mmm`` or ``MM:SS.mmm``) to seconds."""
    parts = ts.strip().replace(",", ".").split(":")
    if len(parts) == 3:
        hours, minutes, seconds = parts
    elif len(parts) == 2:
        hours = "0"
        minutes, seconds = parts
    else:
        return 0.0
    return int(hours) * 3600 + int(minutes) * 60 + float(seconds)


def _split_speaker(text: str) -> tuple[str | None, str]:
    voice = _VOICE_TAG_RE.match(text)
    if voice:
        return voice.group(1).strip(), voice.group(2).strip()
    labelled = _SPEAKER_RE.match(text)
    if labelled:
        return labelled.group(1).strip(), labelled.group(2).strip()
    return None, text


def parse_vtt(content: str) -> list[TranscriptSegment]:
    """Parse WebVTT captions into segments, one per cue.

    Speaker labels are read from ``<v Name>`` voice tags or a leading
    ``Name:`` prefix; voice tags take precedence.
    """
    segments: list[TranscriptSegment] = []
    lines = content.strip().splitlines()
    i = 0
    while i < len(lines):
        match = _TIMESTAMP_RE.search(lines[i])
        i += 1
        if not match:
            continue

        text_lines: list[str] = []
        while i < len(lines) and lines[i].strip() and not _TIMESTAMP_RE.search(lines[i]):
            text_lines.append(lines[i].strip())
            i += 1

        speaker, text = _split_speaker(" ".join(text_lines))
        if text:
            segments.append(
                TranscriptSegment(
                    text=text,
                    speaker=speaker,
                    start_time=_parse_vtt_timestamp(match.group(1)),
                    end_time=_parse_vtt_timestamp(match.group(2)),
                )
            )

    return segments


def parse_plain_text(content: str) -> list[TranscriptSegment]:
    """Parse a plain-text transcript, one segment per non-blank line."""
    segments: list[TranscriptSegment] = []
    for line in content.strip().splitlines():
        line = line.strip()
        if not line:
            continue
        speaker, text = _split_speaker(line)
        segments.append(TranscriptSegment(text=text, speaker=speaker))
    return segments


def _segment_from_json(item: dict[str, Any]) -> TranscriptSegment:
    # Exported notes store offsets in milliseconds; other tools use seconds.
    if "startMs" in item or "endMs" in item:
        start = item.get("startMs")
        end = item.get("endMs")
        start_time = start / 1000.0 if start is not None else None
        end_time = end / 1000.0 if end is not None else None
    else:
        start_time = item.get("start_time")
        end_time = item.get("end_time")
    return TranscriptSegment(
        text=str(item["text"]),
        speaker=item.get("speaker"),
        start_time=start_time,
        end_time=end_time,
    )


def parse_json(content: str) -> list[TranscriptSegment]:
    """Parse a JSON transcript.

    Supported shapes::

        {"segments": [{"text": "...", "startMs": 0, "endMs": 5000}]}
        {"segments": [{"speaker": "A", "text": "...", "start_time": 0.0, "end_time": 5.0}]}
        [{"text": "..."}, ...]

    Raises:
        ValueError: If the payload is neither a segment list nor an object with
            a ``segments`` key.
    """
    data = json.loads(content)
    if isinstance(data, dict) and "segments" in data:
        items = data["segments"]
    elif isinstance(data, list):
        items = data
    else:
        keys = list(data.keys()) if isinstance(data, dict) else type(data).__name__
        msg = f"Unrecognized JSON transcript format. Keys: {keys}"
        raise ValueError(msg)

    return [_segment_from_json(item) for item in items if isinstance(item, dict) and item.get("text")]


def parse_transcript(content: str, format: str) -> list[TranscriptSegment]:
    """Dispatch to the correct parser based on *format*.

    Args:
        content: Raw transcript text.
        format: One of ``"vtt"``, ``"text"`` / ``"txt"``, or ``"json"``.

    Returns:
        Parsed transcript segments.

    Raises:
        ValueError: If *format* is not recognized.
    """
    dispatch: dict[str, Callable[[str], list[TranscriptSegment]]] = {
        "vtt": parse_vtt,
        "text": parse_plain_text,
        "txt": parse_plain_text,
        "json": parse_json,
    }

    parser = dispatch.get(format)
    if parser is None:
        msg = f"Unknown transcript format: {format!r}. Supported: {list(dispatch.keys())}"
        raise ValueError(msg)

    return parser(content)
