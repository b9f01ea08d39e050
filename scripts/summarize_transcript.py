"""Summarize transcript files offline and print the results as JSON."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from notewise.flashcards.generator import generate_flashcards
from notewise.ingestion.parsers import parse_transcript
from notewise.providers.offline import OfflineProvider
from notewise.summarizer import join_segments, summarize_segments

_FORMATS_BY_SUFFIX = {".vtt": "vtt", ".json": "json", ".txt": "text"}


def summarize_file(path: Path, user_name: str, with_flashcards: bool = False) -> dict:
    """Parse, summarize and optionally build flashcards for one transcript file."""
    transcript_format = _FORMATS_BY_SUFFIX.get(path.suffix.lower(), "text")
    segments = parse_transcript(path.read_text(encoding="utf-8"), transcript_format)
    summary = summarize_segments(segments, user_name)
    title = asyncio.run(OfflineProvider().generate_title(join_segments(segments)))

    result: dict = {
        "file": path.name,
        "title": title,
        "segments": len(segments),
        "summary": summary.to_dict(),
    }
    if with_flashcards:
        result["flashcards"] = [card.to_dict() for card in generate_flashcards(summary, note_id=path.stem)]
    return result


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("files", nargs="+", type=Path)
    parser.add_argument("--user", default="Me")
    parser.add_argument("--flashcards", action="store_true")
    args = parser.parse_args()

    results = []
    for filepath in args.files:
        try:
            results.append(summarize_file(filepath, args.user, args.flashcards))
        except (OSError, ValueError) as e:
            print(f"ERROR {filepath}: {e}", file=sys.stderr)

    print(json.dumps(results, indent=2))
