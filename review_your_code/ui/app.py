"""
Streamlit page for ReviewYourCode.

Run with ``streamlit run review_your_code/ui/app.py``.
"""

import asyncio

import streamlit as st

from review_your_code.config import setup_logging
from review_your_code.models.schemas import Language, Mode
from review_your_code.ui.session import AssistantSession
from review_your_code.utils.helpers import (
    format_generation_markdown,
    format_review_markdown,
    score_color,
)

setup_logging()

st.set_page_config(page_title="ReviewYourCode", layout="wide")
st.title("ReviewYourCode")
st.caption("Review & Generate Code with AI")

if "session" not in st.session_state:
    st.session_state.session = AssistantSession()
session: AssistantSession = st.session_state.session

modes = [Mode.REVIEW, Mode.GENERATE]
mode = st.radio(
    "Mode",
    modes,
    index=modes.index(session.mode),
    format_func=lambda m: "Code Review" if m == Mode.REVIEW else "Code Generation",
    horizontal=True,
)
if mode != session.mode:
    session.switch_mode(mode)

languages = list(Language)
session.language = st.selectbox(
    "Programming Language",
    languages,
    index=languages.index(session.language),
    format_func=lambda lang: lang.label,
)

if session.mode == Mode.REVIEW:
    session.code = st.text_area(
        "Your Code",
        value=session.code,
        height=320,
        placeholder="Paste your code here for AI-powered review...",
    )
    chars, lines = session.code_stats
    st.caption(f"{chars} characters • {lines} lines")
    session.error_description = st.text_area(
        "Error Description (optional)",
        value=session.error_description,
        placeholder="Describe any specific error messages, issues, or problems you're experiencing with this code...",
    )
    label = "Review Code"
else:
    session.code_request = st.text_area(
        "Describe the code you want",
        value=session.code_request,
        height=200,
        placeholder=f"Describe the {session.language.label} code you want to generate...",
    )
    st.caption(f"{session.request_length} characters")
    label = "Generate Code"

if st.button(label, type="primary", disabled=not session.can_submit):
    spinner = "Analyzing Code..." if session.mode == Mode.REVIEW else "Generating Code..."
    with st.spinner(spinner):
        asyncio.run(session.submit())

if session.error:
    st.error(session.error)
    if st.button("Dismiss"):
        session.dismiss_error()
        st.rerun()

if session.review:
    score = session.review.overall_score
    st.markdown(f":{score_color(score)}[**{score}/10**]")
    st.markdown(format_review_markdown(session.review))

if session.generated_code:
    st.markdown(format_generation_markdown(session.generated_code, session.language))

if not session.has_output and not session.is_loading:
    st.info("💡 Pro tip: Add error descriptions for more targeted help")
