import os
from typing import Dict, List, Sequence, Tuple

import requests

API_URL = os.getenv("API_URL", "http://localhost:5000")


def generate_questions(resume_text: str, api_url: str = API_URL, timeout: float = 120) -> str:
    """POST the resume text and return the newline-delimited questions."""
    r = requests.post(f"{api_url}/api/generate", json={"resumeText": resume_text}, timeout=timeout)
    r.raise_for_status()
    return r.json()["questions"]


def evaluate_answers(
    questions: Sequence[str],
    answers: Sequence[str],
    api_url: str = API_URL,
    timeout: float = 300,
) -> Tuple[List, List[str]]:
    """POST question/answer arrays and return (scores, feedback)."""
    payload: Dict[str, object] = {
        "questions": list(questions),
        "answers": list(answers),
        "resumeText": "",
    }
    r = requests.post(f"{api_url}/api/score", json=payload, timeout=timeout)
    r.raise_for_status()
    data = r.json()
    return data.get("scores") or [], data.get("feedback") or []
