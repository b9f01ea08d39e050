"""Tests for rule-based extraction: cue tables, decisions, action items, topics."""

from __future__ import annotations

import random

import pytest

from notewise.extraction.cues import ACTION_CUES, DECISION_CUES, DUE_DATE_CUES, QUESTION_STARTERS
from notewise.extraction.extractor import (
    detect_due_date,
    detect_owner,
    extract_action_items,
    extract_decisions,
    extract_highlights,
    extract_open_questions,
    extract_topics,
    generate_follow_ups,
)
from notewise.extraction.models import ActionItem, Summary

# ---------------------------------------------------------------------------
# Cue tables
# ---------------------------------------------------------------------------


class TestCueTables:
    def test_cue_names_are_unique(self) -> None:
        for table in (DECISION_CUES, ACTION_CUES, DUE_DATE_CUES):
            names = [cue.name for cue in table]
            assert len(names) == len(set(names))

    def test_action_cue_captures_task(self) -> None:
        cue = next(c for c in ACTION_CUES if c.name == "please")
        assert cue.capture("Could you please send the slides") == "send the slides"

    def test_capture_without_match(self) -> None:
        assert DECISION_CUES[0].capture("Nothing decided yet") is None

    def test_capture_whole_match_without_group(self) -> None:
        cue = next(c for c in DECISION_CUES if c.name == "approved")
        assert cue.capture("The budget was APPROVED today") == "APPROVED"


# ---------------------------------------------------------------------------
# Decisions
# ---------------------------------------------------------------------------


class TestExtractDecisions:
    @pytest.mark.parametrize(
        "sentence",
        [
            "We decided to move forward with the new platform.",
            "It was decided that launch slips a week.",
            "The decision is to hire two engineers.",
            "We agreed on the vendor shortlist.",
            "Finance agreed to cover the travel costs.",
            "We will go with option B.",
            "The final decision rests with legal.",
            "Our conclusion is that the test passed.",
            "We'll proceed with the migration.",
            "The budget was approved by the board.",
            "Let's go ahead and ship it.",
        ],
    )
    def test_each_cue_detected(self, sentence: str) -> None:
        assert extract_decisions([sentence]) == [sentence]

    def test_case_insensitive(self) -> None:
        assert extract_decisions(["WE DECIDED to pause hiring."]) == ["WE DECIDED to pause hiring."]

    def test_ignores_plain_sentences(self) -> None:
        assert extract_decisions(["Revenue grew by 15% last quarter."]) == []

    def test_limit(self) -> None:
        sentences = [f"We decided item {i} is done." for i in range(15)]
        assert len(extract_decisions(sentences)) == 10
        assert len(extract_decisions(sentences, limit=3)) == 3

    def test_keeps_order(self) -> None:
        sentences = ["We agreed on B.", "Filler sentence here.", "We decided on A."]
        assert extract_decisions(sentences) == ["We agreed on B.", "We decided on A."]


# ---------------------------------------------------------------------------
# Owners and due dates
# ---------------------------------------------------------------------------


class TestDetectOwner:
    def test_named_subject(self) -> None:
        assert detect_owner("Alice will prepare the report.", "Me") == "Alice"

    def test_needs_subject(self) -> None:
        assert detect_owner("Bob needs to review the contract.", "Me") == "Bob"

    def test_pronoun_keeps_default(self) -> None:
        assert detect_owner("I will send the notes.", "Dana") == "Dana"
        assert detect_owner("We should update the roadmap.", "Dana") == "Dana"

    def test_filler_subject_keeps_default(self) -> None:
        assert detect_owner("It will ship next week.", "Dana") == "Dana"
        assert detect_owner("This should be reviewed.", "Dana") == "Dana"

    def test_no_subject_keeps_default(self) -> None:
        assert detect_owner("Please send the notes.", "Dana") == "Dana"


class TestDetectDueDate:
    @pytest.mark.parametrize(
        ("sentence", "due"),
        [
            ("Ship it by Friday.", "Friday"),
            ("Send the draft tomorrow.", "tomorrow"),
            ("Let's revisit next week.", "next week"),
            ("Finish by end of the month.", "end of the month"),
            ("Wrap up by end of day.", "end of day"),
            ("The deadline is 3/14.", "3/14"),
            ("File it before 12/31/2025.", "12/31/2025"),
        ],
    )
    def test_detects_terms(self, sentence: str, due: str) -> None:
        assert detect_due_date(sentence) == due

    def test_prefers_by_clause(self) -> None:
        assert detect_due_date("On Monday we said it is due by Friday.") == "Friday"

    def test_none_when_absent(self) -> None:
        assert detect_due_date("Prepare the budget report.") is None


# ---------------------------------------------------------------------------
# Action items
# ---------------------------------------------------------------------------


class TestExtractActionItems:
    def test_named_owner_with_due_date(self) -> None:
        items = extract_action_items(["Alice will prepare the Q2 budget report by Friday."], "Me")
        assert items == [ActionItem(owner="Alice", task="prepare the Q2 budget report by Friday", due="Friday")]

    def test_pronoun_uses_default_owner(self) -> None:
        items = extract_action_items(["I will send the meeting notes to everyone."], "Dana")
        assert items == [ActionItem(owner="Dana", task="send the meeting notes to everyone")]

    @pytest.mark.parametrize(
        ("sentence", "task"),
        [
            ("We need to finalize the vendor list.", "finalize the vendor list"),
            ("Please update the onboarding guide!", "update the onboarding guide"),
            ("Action item: book the venue.", "book the venue"),
            ("TODO: migrate the database.", "migrate the database"),
            ("You should review the pull request.", "review the pull request"),
            ("Make sure the tests pass in CI.", "the tests pass in CI"),
            ("Follow up with legal about the contract.", "legal about the contract"),
        ],
    )
    def test_cues(self, sentence: str, task: str) -> None:
        items = extract_action_items([sentence], "Me")
        assert [item.task for item in items] == [task]

    def test_questions_are_not_named_subjects(self) -> None:
        assert extract_action_items(["When will the new hire start?"], "Me") == []

    @pytest.mark.parametrize(
        "sentence",
        [
            "It will rain tomorrow afternoon.",
            "This should be fine overall.",
            "That will take a while to settle.",
            "There should be enough seats.",
            "Everyone will enjoy the offsite.",
        ],
    )
    def test_pronouns_are_not_named_subjects(self, sentence: str) -> None:
        assert extract_action_items([sentence], "Me") == []

    def test_short_tasks_ignored(self) -> None:
        assert extract_action_items(["Okay then, please go."], "Me") == []

    def test_deduplicates_case_insensitively(self) -> None:
        items = extract_action_items(
            ["Please send the slides.", "please SEND THE SLIDES."],
            "Me",
        )
        assert len(items) == 1

    def test_one_item_per_sentence(self) -> None:
        items = extract_action_items(["I will draft it and please review it after."], "Me")
        assert len(items) == 1

    def test_no_cues(self) -> None:
        assert extract_action_items(["Revenue grew by 15% last quarter."], "Me") == []


# ---------------------------------------------------------------------------
# Questions, topics, follow-ups, highlights
# ---------------------------------------------------------------------------


class TestExtractOpenQuestions:
    def test_question_marks_only(self) -> None:
        sentences = ["When will the new hire start?", "The budget is final.", "Who owns QA? "]
        assert extract_open_questions(sentences) == ["When will the new hire start?", "Who owns QA? "]

    def test_limit(self) -> None:
        sentences = [f"Is item {i} done?" for i in range(12)]
        assert len(extract_open_questions(sentences)) == 10


class TestExtractTopics:
    def test_capitalized_and_long_enough(self) -> None:
        text = "Budget budget budget planning planning team ops ops ops ops"
        assert extract_topics(text) == ["Budget", "Planning", "Team"]

    def test_limit(self) -> None:
        text = " ".join(f"topicword{i}" for i in range(30))
        assert len(extract_topics(text)) == 10

    def test_empty(self) -> None:
        assert extract_topics("") == []


class TestGenerateFollowUps:
    def test_pairs_topics_with_starters(self) -> None:
        assert generate_follow_ups(["Budget", "Hiring"]) == [
            f"{QUESTION_STARTERS[0]} Budget?",
            f"{QUESTION_STARTERS[1]} Hiring?",
        ]

    def test_limit(self) -> None:
        topics = [f"Topic{i}" for i in range(8)]
        assert len(generate_follow_ups(topics)) == 5

    def test_no_starter_repeats_before_all_used(self) -> None:
        topics = [f"Topic{i}" for i in range(len(QUESTION_STARTERS))]
        follow_ups = generate_follow_ups(topics, limit=len(topics), rng=random.Random(7))
        starters = {q.rsplit(" ", 1)[0] for q in follow_ups}
        assert starters == set(QUESTION_STARTERS)

    def test_seeded_rng_is_reproducible(self) -> None:
        topics = ["Budget", "Hiring", "Roadmap"]
        first = generate_follow_ups(topics, rng=random.Random(42))
        second = generate_follow_ups(topics, rng=random.Random(42))
        assert first == second

    def test_empty_topics(self) -> None:
        assert generate_follow_ups([]) == []


class TestExtractHighlights:
    def test_drops_short_sentences(self) -> None:
        sentences = ["Short one here.", "This sentence is comfortably long enough."]
        assert extract_highlights(sentences) == ["This sentence is comfortably long enough."]

    def test_empty(self) -> None:
        assert extract_highlights([]) == []


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TestSummaryModel:
    def test_defaults_are_empty_lists(self) -> None:
        data = Summary().to_dict()
        assert all(value == [] for value in data.values())

    def test_from_dict_drops_malformed_entries(self) -> None:
        summary = Summary.from_dict(
            {
                "tldr": ["One.", None],
                "action_items": [{"owner": "Alice", "task": "Ship it", "due": "Friday"}, {"owner": "Bob"}, "junk"],
                "sentiment_by_segment": [0.5, "bad", 3],
            }
        )
        assert summary.tldr == ["One."]
        assert summary.action_items == [ActionItem(owner="Alice", task="Ship it", due="Friday")]
        assert summary.sentiment_by_segment == [0.5, 1.0]
        assert summary.topics == []

    def test_action_item_to_dict(self) -> None:
        assert ActionItem(owner="Me", task="Send notes").to_dict() == {"owner": "Me", "task": "Send notes", "due": None}
