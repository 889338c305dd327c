from pydantic import BaseModel
from typing import Any, List, Union


# Question generation request (raw text extracted from the resume PDF)
class GenerateIn(BaseModel):
    resumeText: str


# Newline-delimited questions, exactly as the model returned them
class GenerateOut(BaseModel):
    questions: str


# Parallel arrays of any JSON values; extra keys such as resumeText are ignored
class ScoreIn(BaseModel):
    questions: List[Any]
    answers: List[Any]


# Scores and feedback aligned by index with the request
class ScoreOut(BaseModel):
    scores: List[Union[int, float]]
    feedback: List[str]


class ErrorOut(BaseModel):
    error: str
