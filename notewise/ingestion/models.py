"""Data models for transcript ingestion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TranscriptSegment:
    """One spoken or typed stretch of a transcript."""

    text: str
    speaker: str | None = None
    start_time: float | None = None  # seconds from recording start
    end_time: float | None = None
