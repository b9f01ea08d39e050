"""Cue tables for rule-based extraction.

Each cue is a named pattern with an optional capture group, so cues can be
tested one at a time and swapped out for another language's table.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from notewise.nlp.text import STOP_WORDS


@dataclass(frozen=True)
class CuePattern:
    """A named regular expression, optionally capturing the text of interest."""

    name: str
    pattern: re.Pattern[str]
    group: int | None = None

    def search(self, text: str) -> re.Match[str] | None:
        return self.pattern.search(text)

    def capture(self, text: str) -> str | None:
        """Return the captured text (or the whole match when no group is set)."""
        match = self.pattern.search(text)
        if match is None:
            return None
        return match.group(self.group or 0)


def _cue(name: str, regex: str, group: int | None = None, flags: int = re.IGNORECASE) -> CuePattern:
    return CuePattern(name=name, pattern=re.compile(regex, flags), group=group)


_PRONOUN = r"\b(?:i|we|he|she|they|you)"
# Leading words that never name an owner: pronouns, determiners, question words.
OWNERLESS_SUBJECTS: frozenset[str] = STOP_WORDS | frozenset(
    {"i", "it", "everyone", "someone", "somebody", "nobody", "everything", "something", "nothing"}
)
_NOT_A_SUBJECT = r"(?i:" + "|".join(map(re.escape, sorted(OWNERLESS_SUBJECTS))) + r")\b"

DECISION_CUES: tuple[CuePattern, ...] = (
    _cue("we_decided", r"we decided"),
    _cue("it_was_decided", r"it was decided"),
    _cue("the_decision_is", r"the decision is"),
    _cue("we_agreed", r"we agreed"),
    _cue("agreed_to", r"agreed to"),
    _cue("will_go_with", r"will go with"),
    _cue("final_decision", r"final decision"),
    _cue("conclusion_is", r"conclusion is"),
    _cue("we_will_proceed", r"we'll proceed"),
    _cue("approved", r"approved"),
    _cue("lets_go_ahead", r"let's go ahead"),
)

# Order matters: the first cue that matches a sentence wins.
ACTION_CUES: tuple[CuePattern, ...] = (
    _cue("pronoun_will", _PRONOUN + r"\s+will\s+(.+)", group=1),
    _cue("pronoun_need_to", _PRONOUN + r"\s+need\s+to\s+(.+)", group=1),
    _cue("please", r"\bplease\s+(.+)", group=1),
    _cue("action_item", r"action\s*item[:\s]+(.+)", group=1),
    _cue("todo", r"\btodo[:\s]+(.+)", group=1),
    _cue("pronoun_should", _PRONOUN + r"\s+should\s+(.+)", group=1),
    _cue("make_sure", r"\bmake sure\s+(.+)", group=1),
    _cue("follow_up", r"\bfollow\s+up\s+(?:on|with)\s+(.+)", group=1),
    _cue(
        "named_subject",
        r"^(?!" + _NOT_A_SUBJECT + r")[A-Z][\w'-]*\s+(?:will|needs?\s+to|should)\s+(.+)",
        group=1,
        flags=0,
    ),
)

SUBJECT_CUE = _cue("subject", r"^(\w+)\s+(?:will|needs?|should)\b", group=1)

_DUE_DATE_TERMS = (
    r"monday|tuesday|wednesday|thursday|friday|saturday|sunday|tomorrow"
    r"|next\s+week|end\s+of\s+(?:the\s+)?(?:day|week|month)"
    r"|\d{1,2}/\d{1,2}(?:/\d{2,4})?"
)

# "by Friday" is preferred over a bare "Friday" mentioned elsewhere.
DUE_DATE_CUES: tuple[CuePattern, ...] = (
    _cue("by_date", r"\bby\s+(" + _DUE_DATE_TERMS + r")\b", group=1),
    _cue("bare_date", r"\b(" + _DUE_DATE_TERMS + r")\b", group=1),
)

QUESTION_STARTERS: tuple[str, ...] = (
    "Who is responsible for",
    "When will",
    "What is the timeline for",
    "Why was",
    "How will we handle",
    "What are the next steps for",
    "Who will follow up on",
    "What is the status of",
)
