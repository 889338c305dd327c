from io import BytesIO
from typing import List, Mapping, Optional, Sequence, Union

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

REPORT_FILENAME = "interview-feedback.pdf"

Answers = Union[Mapping[int, str], Sequence[str]]


def _lookup(values, index: int) -> Optional[object]:
    if isinstance(values, Mapping):
        return values.get(index)
    return values[index] if index < len(values) else None


def _printable(text: str) -> str:
    # The built-in Type 1 fonts only cover Latin-1; emoji and the like are dropped.
    return text.encode("latin-1", "ignore").decode("latin-1").strip()


def report_entries(
    questions: Sequence[str],
    answers: Answers,
    scores: Sequence,
    feedback: Sequence[str],
) -> List[List[str]]:
    """Text lines for each question: question, answer, score and feedback."""
    entries = []
    for i, question in enumerate(questions):
        answer = _lookup(answers, i)
        score = _lookup(scores, i)
        fb = _lookup(feedback, i)
        entries.append([
            f"Q{i + 1}: {question}",
            f"Ans: {answer or ''}",
            f"Score: {score if score is not None else 'N/A'}",
            f"Feedback: {fb or 'N/A'}",
        ])
    return entries


def render_report_pdf(
    questions: Sequence[str],
    answers: Answers,
    scores: Sequence,
    feedback: Sequence[str],
) -> BytesIO:
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=LETTER)
    c.setTitle("Interview Feedback")
    width, height = LETTER

    left = 0.75 * inch
    top = 0.75 * inch
    bottom = 0.75 * inch
    max_width = width - 2 * left

    font_body = "Helvetica"
    font_bold = "Helvetica-Bold"
    body_size = 10.5
    leading = 13.5
    block_gap = 10

    y = height - top

    def new_page():
        nonlocal y
        c.showPage()
        y = height - top

    def wrap_text(text: str, font: str) -> list[str]:
        lines: list[str] = []
        for paragraph in text.split("\n"):
            words = paragraph.split()
            if not words:
                lines.append("")
                continue
            cur = words[0]
            for w in words[1:]:
                test = cur + " " + w
                if c.stringWidth(test, font, body_size) <= max_width:
                    cur = test
                else:
                    lines.append(cur)
                    cur = w
            lines.append(cur)
        return lines

    for entry in report_entries(questions, answers, scores, feedback):
        for n, text in enumerate(entry):
            font = font_bold if n == 0 else font_body
            for line in wrap_text(_printable(text), font):
                if y - leading <= bottom:
                    new_page()
                c.setFont(font, body_size)
                c.drawString(left, y, line)
                y -= leading
        y -= block_gap

    c.save()
    buf.seek(0)
    return buf
