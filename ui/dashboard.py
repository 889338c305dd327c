# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import logging
import streamlit as st
import requests
from parsers.pdf import pdf_to_text
from reports.pdf_report import render_report_pdf, REPORT_FILENAME
from ui import api_client, wizard

logger = logging.getLogger(__name__)

# -------------------- CONFIG --------------------
API_URL = api_client.API_URL
st.set_page_config(page_title="AI Interview Preparation Tool", page_icon="🤖", layout="wide")

THEMES = {
    "dark": {"bg": "#0f172a", "fg": "#e2e8f0", "card": "#1e293b"},
    "light": {"bg": "#f8fafc", "fg": "#0f172a", "card": "#ffffff"},
}
BADGE_COLORS = {"high": "#16a34a", "medium": "#d97706", "low": "#dc2626"}
STEP_ICONS = {"completed": "✅", "active": "🔵", "pending": "⚪"}

# -------------------- SESSION STATE --------------------
wizard.ensure_state(st.session_state)
if "api_url" not in st.session_state:
    st.session_state.api_url = API_URL

# Theme survives reloads through the ?theme= query parameter
theme = st.query_params.get("theme", wizard.DEFAULT_THEME)
if theme not in THEMES:
    theme = wizard.DEFAULT_THEME
colors = THEMES[theme]
st.markdown(
    f"""
    <style>
    .stApp {{ background-color: {colors['bg']}; color: {colors['fg']}; }}
    .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label {{ color: {colors['fg']}; }}
    </style>
    """,
    unsafe_allow_html=True,
)

# -------------------- HEADER --------------------
title_col, theme_col = st.columns([10, 1])
with title_col:
    st.title("🤖 AI Interview Preparation Tool")
with theme_col:
    if st.button("☀️" if theme == "dark" else "🌙", help="Toggle theme"):
        st.query_params["theme"] = wizard.toggle_theme(theme)
        st.rerun()

# -------------------- PROGRESS --------------------
step_cols = st.columns(len(wizard.STEP_LABELS))
for col, (step, label) in zip(step_cols, wizard.STEP_LABELS):
    status = wizard.step_status(step, st.session_state.current_step)
    col.markdown(f"{STEP_ICONS[status]} **{step}. {label}**")

# ==================== STEP 1: Upload Resume ====================
with st.container(border=True):
    st.markdown("### 📄 Upload Your Resume")
    st.markdown("Upload a PDF file to generate personalized interview questions")
    resume_file = st.file_uploader("📁 Choose PDF File", type=["pdf"])

    if resume_file is not None and resume_file.name != st.session_state.resume_name:
        if wizard.select_resume(st.session_state, resume_file.name, resume_file.type, resume_file.getvalue()):
            # Drop answer widgets left over from the previous resume
            for key in [k for k in st.session_state.keys() if str(k).startswith("answer_")]:
                del st.session_state[key]

    if st.session_state.resume_bytes:
        st.caption(f"📎 {st.session_state.resume_name}")
        generate_clicked = st.button(
            "🚀 Generate Interview Questions",
            disabled=st.session_state.loading,
        )
        if generate_clicked:
            wizard.start_generation(st.session_state)
            reply = None
            with st.spinner("Generating Questions..."):
                text = pdf_to_text(st.session_state.resume_bytes)
                if text:
                    try:
                        reply = api_client.generate_questions(text, st.session_state.api_url)
                    except (requests.exceptions.RequestException, KeyError, ValueError) as e:
                        logger.error(f"❌ Question generation request failed: {e}")
                else:
                    logger.error("❌ No text could be extracted from the resume PDF")
            wizard.finish_generation(st.session_state, reply)

# -------------------- ERROR --------------------
if st.session_state.error:
    st.error(f"⚠️ {st.session_state.error}")

# ==================== STEP 3-5: Questions, Answers, Feedback ====================
questions = st.session_state.questions
if questions:
    st.subheader("📝 Interview Questions")
    st.markdown(
        "Answer each question thoughtfully. Your responses will be evaluated for quality and relevance."
    )

    scores = st.session_state.scores
    feedback = st.session_state.feedback

    for i, q in enumerate(questions):
        with st.container(border=True):
            header = f"**Q{i + 1}**"
            if i < len(scores):
                badge = wizard.score_badge(scores[i])
                header += f" &nbsp; <span style='color:{BADGE_COLORS[badge]}'>🎯 {scores[i]}/10</span>"
            st.markdown(header, unsafe_allow_html=True)
            st.markdown(q)

            value = st.text_area(
                "Your answer",
                value=st.session_state.answers.get(i, ""),
                placeholder="Type your answer here...",
                height=120,
                key=f"answer_{i}",
                label_visibility="collapsed",
            )
            if value != st.session_state.answers.get(i, "") and (value or i in st.session_state.answers):
                wizard.set_answer(st.session_state, i, value)

            if i < len(feedback) and feedback[i]:
                st.info(f"💡 **AI Feedback**\n\n{feedback[i]}")

    eval_col, download_col = st.columns(2)
    with eval_col:
        evaluate_clicked = st.button("📊 Get AI Evaluation", disabled=not wizard.can_evaluate(st.session_state))
    if evaluate_clicked:
        st.session_state.loading = True
        new_scores, new_feedback = None, None
        with st.spinner("Evaluating..."):
            try:
                new_scores, new_feedback = api_client.evaluate_answers(
                    questions,
                    wizard.answers_payload(st.session_state.answers),
                    st.session_state.api_url,
                )
            except (requests.exceptions.RequestException, ValueError) as e:
                logger.error(f"❌ Evaluation Error: {e}")
        wizard.finish_evaluation(st.session_state, new_scores, new_feedback)
        st.rerun()

    if st.session_state.scores:
        st.markdown("### 📊 Results")
        st.table(wizard.results_frame(questions, st.session_state.answers, scores, feedback))
        with download_col:
            report = render_report_pdf(questions, st.session_state.answers, scores, feedback)
            st.download_button(
                "📥 Download Report",
                data=report,
                file_name=REPORT_FILENAME,
                mime="application/pdf",
            )
