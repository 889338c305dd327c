"""
View-state bookkeeping for the interview wizard.

The Streamlit page keeps everything in ``st.session_state``; the helpers here
are plain functions over that state so the transitions can be tested without
a running Streamlit server.
"""
from typing import Dict, List, MutableMapping, Optional, Sequence

import pandas as pd

UPLOAD, GENERATE, GENERATING, ANSWER, FEEDBACK = 1, 2, 3, 4, 5

STEP_LABELS = [
    (1, "Upload Resume"),
    (2, "Generate Questions"),
    (3, "Answer Questions"),
    (4, "Get Feedback"),
]

INVALID_FILE_ERROR = "Please select a valid PDF file"
GENERATE_FAILED_ERROR = "❌ Failed to generate questions. Please check the server or API key."
EVALUATE_FAILED_ERROR = "❌ Failed to evaluate answers."

DEFAULT_THEME = "dark"


def initial_state() -> Dict[str, object]:
    return {
        "resume_name": None,
        "resume_bytes": None,
        "questions": [],
        "answers": {},
        "scores": [],
        "feedback": [],
        "error": "",
        "loading": False,
        "current_step": UPLOAD,
    }


def ensure_state(state: MutableMapping) -> None:
    for key, value in initial_state().items():
        if key not in state:
            state[key] = value


def step_status(step: int, current_step: int) -> str:
    if step < current_step:
        return "completed"
    if step == current_step:
        return "active"
    return "pending"


def is_pdf(name: Optional[str], content_type: Optional[str]) -> bool:
    if content_type:
        return content_type == "application/pdf"
    return bool(name) and name.lower().endswith(".pdf")


def select_resume(state: MutableMapping, name: str, content_type: Optional[str], data: bytes) -> bool:
    """Accept a newly chosen file; a PDF resets the interview and moves to step 2."""
    if not is_pdf(name, content_type):
        state["error"] = INVALID_FILE_ERROR
        return False
    state.update(initial_state())
    state["resume_name"] = name
    state["resume_bytes"] = data
    state["current_step"] = GENERATE
    return True


def split_questions(reply: str) -> List[str]:
    """Non-blank lines of the model reply, untouched otherwise."""
    return [q for q in reply.split("\n") if q.strip()]


def start_generation(state: MutableMapping) -> None:
    state["loading"] = True
    state["error"] = ""
    state["questions"] = []
    state["current_step"] = GENERATING


def finish_generation(state: MutableMapping, reply: Optional[str]) -> None:
    """Record the questions, or fall back to step 2 with an error when reply is None."""
    if reply is None:
        state["error"] = GENERATE_FAILED_ERROR
        state["current_step"] = GENERATE
    else:
        state["questions"] = split_questions(reply)
        state["current_step"] = ANSWER
    state["loading"] = False


def set_answer(state: MutableMapping, index: int, text: str) -> None:
    state["answers"] = {**state["answers"], index: text}


def answers_payload(answers: Dict[int, str]) -> List[str]:
    # Only stored answers are sent, in index order; gaps make the list short.
    return [answers[i] for i in sorted(answers)]


def can_evaluate(state: MutableMapping) -> bool:
    return not state["loading"] and len(state["answers"]) > 0


def finish_evaluation(state: MutableMapping, scores: Optional[Sequence], feedback: Optional[Sequence[str]]) -> None:
    """Store scores/feedback; both None means the request failed."""
    if scores is None and feedback is None:
        state["error"] = EVALUATE_FAILED_ERROR
    else:
        state["scores"] = list(scores or [])
        state["feedback"] = list(feedback or [])
        state["current_step"] = FEEDBACK
    state["loading"] = False


def score_badge(score) -> str:
    if score >= 7:
        return "high"
    if score >= 4:
        return "medium"
    return "low"


def results_frame(questions: Sequence[str], answers: Dict[int, str], scores: Sequence, feedback: Sequence[str]) -> pd.DataFrame:
    rows = []
    for i, q in enumerate(questions):
        rows.append({
            "Question": q,
            "Answer": answers.get(i, ""),
            "Score": scores[i] if i < len(scores) else None,
            "Feedback": feedback[i] if i < len(feedback) else "",
        })
    return pd.DataFrame(rows, columns=["Question", "Answer", "Score", "Feedback"])


def toggle_theme(theme: str) -> str:
    return "light" if theme == "dark" else "dark"
