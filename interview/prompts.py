GENERATE_SYSTEM_PROMPT = (
    "Generate 5 unique and specific interview questions based on the resume text below. "
    "Return each question in a new line only."
)

SCORE_SYSTEM_PROMPT = """Return ONLY valid JSON:
{"score": 8, "feedback": "Your answer was strong and specific."}"""

SCORE_USER_TEMPLATE = """Question: {question}
Answer: {answer}"""
