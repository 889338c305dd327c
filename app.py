from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from config import Settings, load_settings
from schemas import GenerateIn, GenerateOut, ScoreIn, ScoreOut, ErrorOut
from interview.llm_openrouter import LLMError
from interview.questions import generate_questions
from interview.scorer import score_answers

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MISSING_KEY_ERROR = "API Key not found in .env"
MISMATCH_ERROR = "Questions and answers must be arrays of equal length."
GENERATE_ERROR = "Failed to generate interview questions."
SCORE_ERROR = "Failed to evaluate answers."

settings = load_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report the configuration captured at startup."""
    s: Settings = app.state.settings
    logger.info(f"Using model {s.model_name} at {s.api_url}")
    if not s.has_api_key:
        logger.warning("OPENROUTER_API_KEY is not set; question generation and scoring will fail")
    yield
    logger.info("Application shutting down.")


app = FastAPI(title="AI Interview Preparation Tool", version="1.0.0", lifespan=lifespan)
app.state.settings = settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    if request.url.path == "/api/score":
        return _error(400, MISMATCH_ERROR)
    fields = ", ".join(".".join(str(p) for p in err["loc"] if p != "body") for err in exc.errors())
    return _error(400, f"Invalid request body: {fields or 'body'}")


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/")
async def root():
    return {"message": "AI Interview Preparation API is working"}


@app.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "model": settings.model_name,
        "api_key_configured": settings.has_api_key,
    }


@app.post(
    "/api/generate",
    response_model=GenerateOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def generate(body: GenerateIn, settings: Settings = Depends(get_settings)):
    """Generate interview questions from resume text."""
    if not settings.has_api_key:
        return _error(500, MISSING_KEY_ERROR)

    logger.info(f"Generating questions from {len(body.resumeText)} characters of resume text")
    try:
        questions = generate_questions(settings, body.resumeText)
    except LLMError as e:
        logger.error(f"❌ Error generating questions: {e.describe()}")
        return _error(500, GENERATE_ERROR)

    return GenerateOut(questions=questions)


@app.post(
    "/api/score",
    response_model=ScoreOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def score(body: ScoreIn, settings: Settings = Depends(get_settings)):
    """Score every answer and return per-question feedback."""
    if len(body.questions) != len(body.answers):
        return _error(400, MISMATCH_ERROR)
    if not settings.has_api_key:
        return _error(500, MISSING_KEY_ERROR)

    logger.info(f"Scoring {len(body.questions)} answers")
    try:
        scores, feedback = score_answers(settings, body.questions, body.answers)
    except Exception as e:
        logger.error(f"❌ Final error scoring: {e}", exc_info=True)
        return _error(500, SCORE_ERROR)

    return ScoreOut(scores=scores, feedback=feedback)


if __name__ == "__main__":
    import uvicorn
    logger.info(f"✅ Server running at http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
