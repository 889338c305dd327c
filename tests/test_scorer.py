"""Tests for the answer-scoring parse/fallback chain and the scoring loop."""

from __future__ import annotations

import requests

from interview.scorer import (
    DEFAULT_FEEDBACK,
    parse_score_reply,
    scan_reply,
    score_answers,
)
from tests.conftest import FakeResponse, completion


def test_parse_well_formed_json() -> None:
    assert parse_score_reply('{"score": 8, "feedback": "text"}') == (8, "text")


def test_parse_json_keeps_float_score() -> None:
    assert parse_score_reply('{"score": 7.5, "feedback": "ok"}') == (7.5, "ok")


def test_parse_json_with_mistyped_fields_keeps_defaults() -> None:
    # A valid object with a string score and numeric feedback contributes nothing
    assert parse_score_reply('{"score": "9", "feedback": 3}') == (0, DEFAULT_FEEDBACK)
    assert parse_score_reply('{"score": true}') == (0, DEFAULT_FEEDBACK)


def test_parse_json_partial_fields() -> None:
    assert parse_score_reply('{"score": 6}') == (6, DEFAULT_FEEDBACK)
    assert parse_score_reply('{"feedback": "Be concise."}') == (0, "Be concise.")


def test_parse_json_non_object_keeps_defaults() -> None:
    assert parse_score_reply("[1, 2]") == (0, DEFAULT_FEEDBACK)
    assert parse_score_reply('"score: 9"') == (0, DEFAULT_FEEDBACK)


def test_parse_json_null_falls_back_to_scan() -> None:
    assert parse_score_reply("null") == (5, DEFAULT_FEEDBACK)


def test_regex_fallback_score() -> None:
    score, feedback = parse_score_reply("Sure! score: 7 because it was decent")
    assert score == 7
    assert feedback == DEFAULT_FEEDBACK


def test_regex_fallback_score_and_feedback() -> None:
    reply = "Score - 9\nFeedback: Clear structure and concrete examples.\nThanks!"
    assert parse_score_reply(reply) == (9, "Clear structure and concrete examples.")


def test_regex_fallback_default_score() -> None:
    assert parse_score_reply("I cannot evaluate this answer.") == (5, DEFAULT_FEEDBACK)


def test_prose_before_json_uses_regex_scan() -> None:
    reply = 'Here you go: {"score": 8, "feedback": "Great detail"}'
    score, feedback = parse_score_reply(reply)
    # The quote after "score" stops the score pattern, so the default applies
    assert score == 5
    assert feedback.startswith('"')


def test_scan_reply_two_digit_limit() -> None:
    assert scan_reply("SCORE:100")[0] == 10


def test_score_answers_returns_one_result_per_pair(fake_post, settings) -> None:
    fake = fake_post([
        completion('{"score": 8, "feedback": "text"}'),
        completion("  score: 7  "),
        completion("no idea"),
    ])
    scores, feedback = score_answers(settings, ["q1", "q2", "q3"], ["a1", "a2", "a3"])
    assert scores == [8, 7, 5]
    assert feedback == ["text", DEFAULT_FEEDBACK, DEFAULT_FEEDBACK]
    assert len(fake.calls) == 3


def test_score_answers_failed_call_uses_default_and_continues(fake_post, settings, caplog) -> None:
    fake_post([
        requests.exceptions.ConnectionError("boom"),
        FakeResponse(429, {"error": {"message": "rate limited"}}),
        completion('{"score": 9, "feedback": "Excellent"}'),
    ])
    with caplog.at_level("WARNING"):
        scores, feedback = score_answers(settings, ["q1", "q2", "q3"], ["a1", "a2", "a3"])
    assert scores == [0, 0, 9]
    assert feedback == [DEFAULT_FEEDBACK, DEFAULT_FEEDBACK, "Excellent"]
    assert "Q1" in caplog.text
    assert "Q2" in caplog.text


def test_score_answers_malformed_body_counts_as_call_failure(fake_post, settings) -> None:
    fake_post([FakeResponse(200, {"choices": []}), completion(None)])
    scores, feedback = score_answers(settings, ["q1", "q2"], ["a1", "a2"])
    assert scores == [0, 0]
    assert feedback == [DEFAULT_FEEDBACK, DEFAULT_FEEDBACK]


def test_score_answers_prompt_contents(fake_post, settings) -> None:
    fake = fake_post([completion('{"score": 4, "feedback": "ok"}')])
    score_answers(settings, ["What is Python?"], ["A language."])
    messages = fake.calls[0]["json"]["messages"]
    assert messages[0]["role"] == "system"
    assert "Return ONLY valid JSON" in messages[0]["content"]
    assert messages[1] == {"role": "user", "content": "Question: What is Python?\nAnswer: A language."}


def test_non_standard_json_constants_use_regex_scan() -> None:
    assert parse_score_reply("NaN") == (5, DEFAULT_FEEDBACK)
    assert parse_score_reply('{"score": Infinity}') == (5, DEFAULT_FEEDBACK)
    assert parse_score_reply('{"score": -Infinity, "feedback": "meh"}')[0] == 5


def test_nan_score_with_feedback_uses_regex_scan() -> None:
    score, feedback = parse_score_reply('{"score": NaN, "feedback": "x"}')
    assert score == 5
    # The feedback pattern captures the rest of the line after the key
    assert feedback == '": "x"}'


def test_non_string_values_are_rendered_into_prompt(fake_post, settings) -> None:
    fake = fake_post([completion('{"score": 2, "feedback": "Too short."}')])
    scores, _ = score_answers(settings, ["Years of Python?"], [42])
    assert scores == [2]
    assert fake.calls[0]["json"]["messages"][1]["content"] == "Question: Years of Python?\nAnswer: 42"


def test_null_and_bool_values_in_prompt(fake_post, settings) -> None:
    fake = fake_post([completion("{}"), completion("{}")])
    score_answers(settings, [None, "Remote?"], ["n/a", True])
    assert fake.calls[0]["json"]["messages"][1]["content"] == "Question: null\nAnswer: n/a"
    assert fake.calls[1]["json"]["messages"][1]["content"] == "Question: Remote?\nAnswer: true"
