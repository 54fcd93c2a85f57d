# streamlit_app.py

import os
import asyncio
import logging
import streamlit as st
from dotenv import load_dotenv
from models import EducationState, RequestStatus
from services import EducationApiClient, EducationSession

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s %(message)s',
)
logger = logging.getLogger(__name__)

load_dotenv()
BASE_URL = os.getenv("FASTAPI_URL", "http://localhost:5000")
GENERATE_URL = f"{BASE_URL}/api/v1/education/generate"
REQUEST_TIMEOUT = 60

# --- Must be first Streamlit command ---
st.set_page_config(page_title="Health EduGuide", page_icon="🩺", layout="centered")

# --- Initialize State ---
if "education_state" not in st.session_state:
    st.session_state.education_state = EducationState()
if "form_version" not in st.session_state:
    st.session_state.form_version = 0

state: EducationState = st.session_state.education_state
session = EducationSession(
    education_service=EducationApiClient(GENERATE_URL, timeout=REQUEST_TIMEOUT),
    state=state,
)


def handle_submit(symptom: str, duration: str, context: str):
    with st.spinner("Searching Education Database..."):
        asyncio.run(session.submit(symptom, duration, context))


def handle_reset():
    session.reset()
    # a new key set clears the form inputs
    st.session_state.form_version += 1

# --- Header ---
st.title("🩺 Health EduGuide")
st.markdown(
    "Get structured, evidence-based educational information about common health symptoms. "
    "_This tool is for educational purposes only and is not a diagnostic service._"
)
st.divider()

# --- Symptom Form ---
version = st.session_state.form_version
with st.form("symptom_form"):
    symptom = st.text_input(
        "What is the primary symptom?",
        placeholder="e.g. Sore throat, Mild headache, Stiff neck",
        key=f"symptom_{version}",
    )
    col1, col2 = st.columns(2)
    with col1:
        duration = st.text_input(
            "How long has it lasted?",
            placeholder="e.g. 2 days, 3 weeks",
            key=f"duration_{version}",
        )
    with col2:
        context = st.text_input(
            "Any general context? (Optional)",
            placeholder="e.g. Occurs after meals, worse at night",
            key=f"context_{version}",
        )
    submitted = st.form_submit_button(
        "Generate Educational Guide",
        disabled=state.is_pending,
        use_container_width=True,
    )

if submitted:
    handle_submit(symptom, duration, context)

# --- Error Box ---
if state.error:
    st.error(state.error, icon="⚠️")

# --- Result Section ---
if state.status != RequestStatus.IDLE:
    header_col, reset_col = st.columns([3, 1])
    with header_col:
        if state.status == RequestStatus.SUCCEEDED:
            st.subheader("Educational Insights")
    with reset_col:
        st.button("↺ Start Over", on_click=handle_reset)

if state.status == RequestStatus.SUCCEEDED and state.result:
    with st.container(border=True):
        st.markdown(state.result, unsafe_allow_html=True)

# --- Footer ---
st.divider()
st.caption(
    "This tool is powered by AI and should be used for informational purposes only. "
    "It is not a substitute for professional medical advice, diagnosis, or treatment."
)
st.caption("🛡️ Secure · 🕵️ Anonymous · 🎓 Educational")

# --- Persistent Emergency Callout ---
with st.sidebar:
    st.error(
        "**In an Emergency?**\n\n"
        "Call your local emergency services (e.g. 911) immediately.",
        icon="🚑",
    )
