import json
import logging
import re
from typing import List, Sequence, Tuple, Union

from config import Settings
from .llm_openrouter import LLMError, chat_completion
from .prompts import SCORE_SYSTEM_PROMPT, SCORE_USER_TEMPLATE

logger = logging.getLogger(__name__)

Number = Union[int, float]

DEFAULT_SCORE = 0
FALLBACK_SCORE = 5
DEFAULT_FEEDBACK = "⚠️ Default feedback: Please provide a detailed and structured answer."

SCORE_RE = re.compile(r"score\s*[:\-]?\s*(\d{1,2})", re.IGNORECASE)
FEEDBACK_RE = re.compile(r"feedback\s*[:\-]?\s*(.+)", re.IGNORECASE)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _as_text(value) -> str:
    if value is None or isinstance(value, bool):
        return json.dumps(value)
    return str(value)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def scan_reply(reply: str) -> Tuple[int, str]:
    """Regex fallback for replies that are not valid JSON."""
    score_match = SCORE_RE.search(reply)
    feedback_match = FEEDBACK_RE.search(reply)
    score = int(score_match.group(1)) if score_match else FALLBACK_SCORE
    feedback = feedback_match.group(1).strip() if feedback_match else DEFAULT_FEEDBACK
    return score, feedback


def parse_score_reply(reply: str) -> Tuple[Number, str]:
    """
    Turn a model reply into a (score, feedback) pair.

    JSON is tried first on the whole reply. A JSON object contributes only a
    numeric score and a string feedback; missing or mistyped fields keep the
    defaults. Anything strict JSON rejects (including NaN and Infinity) and a
    bare null go through the regex scan instead.
    """
    try:
        parsed = json.loads(reply, parse_constant=_reject_constant)
    except ValueError:
        return scan_reply(reply)
    if parsed is None:
        return scan_reply(reply)

    score, feedback = DEFAULT_SCORE, DEFAULT_FEEDBACK
    if isinstance(parsed, dict):
        if _is_number(parsed.get("score")):
            score = parsed["score"]
        if isinstance(parsed.get("feedback"), str):
            feedback = parsed["feedback"]
    return score, feedback


def score_answer(settings: Settings, question, answer) -> Tuple[Number, str]:
    messages = [
        {"role": "system", "content": SCORE_SYSTEM_PROMPT},
        {"role": "user", "content": SCORE_USER_TEMPLATE.format(question=_as_text(question), answer=_as_text(answer))},
    ]
    reply = chat_completion(settings, messages).strip()
    return parse_score_reply(reply)


def score_answers(
    settings: Settings, questions: Sequence, answers: Sequence
) -> Tuple[List[Number], List[str]]:
    """Score each question/answer pair in order; a failed call never aborts the batch."""
    scores: List[Number] = []
    feedback: List[str] = []

    for i, (question, answer) in enumerate(zip(questions, answers)):
        try:
            score, fb = score_answer(settings, question, answer)
        except LLMError as e:
            logger.warning(f"AI call failed, using default score for Q{i + 1}: {e}")
            score, fb = DEFAULT_SCORE, DEFAULT_FEEDBACK

        scores.append(score)
        feedback.append(fb)

    return scores, feedback
