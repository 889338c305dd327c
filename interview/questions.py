from config import Settings
from .llm_openrouter import chat_completion
from .prompts import GENERATE_SYSTEM_PROMPT


def generate_questions(settings: Settings, resume_text: str) -> str:
    """Ask the model for interview questions; the reply is returned unmodified."""
    messages = [
        {"role": "system", "content": GENERATE_SYSTEM_PROMPT},
        {"role": "user", "content": resume_text},
    ]
    return chat_completion(settings, messages)
