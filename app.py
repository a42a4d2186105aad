# app.py

import hashlib
import tempfile
from pathlib import Path

import streamlit as st

from nlp.career import CareerAnalysisError, analyze_career_path
from services.ingestion import ingest_resume
from services.talent_record import build_talent_record

st.set_page_config(page_title="Talent Ingest", page_icon="🧾", layout="wide")
st.title("Talent Ingest")

uploaded = st.file_uploader("Upload a resume (PDF/DOCX/TXT)", type=["pdf", "docx", "txt"])

record = {}
if uploaded is not None:
    payload = uploaded.read()
    resume_hash = hashlib.sha1(payload).hexdigest()
    if st.session_state.get("_resume_hash") != resume_hash:
        st.session_state["_resume_hash"] = resume_hash
        st.session_state.pop("ingestion", None)
        st.session_state.pop("career_analysis", None)

    result = st.session_state.get("ingestion")
    if result is None:
        suffix = "." + uploaded.name.split(".")[-1].lower()
        with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp:
            tmp.write(payload)
            tmp_path = tmp.name
        try:
            result = ingest_resume(tmp_path, file_name=uploaded.name)
        finally:
            Path(tmp_path).unlink(missing_ok=True)
        st.session_state["ingestion"] = result

    if result.parsed is None:
        st.error(result.notice)
    else:
        record = build_talent_record(result.parsed, file_name=result.file_name)
        if result.needs_review:
            st.warning(result.notice)
        else:
            st.success("Resume parsed.")

col_form, col_data = st.columns([1, 1], gap="large")

with col_form:
    st.subheader("Talent Record")
    with st.form("talent_record"):
        st.text_input("Name", value=record.get("name", ""), key="name")
        st.text_input("Role", value=record.get("role", ""), key="role")
        st.text_input("Location", value=record.get("location", ""), key="location")
        st.text_input("Unit", value=record.get("unit", ""), key="unit")
        st.text_input("Email", value=record.get("contactEmail", ""), key="email")
        st.text_input("Phone", value=record.get("contactPhone", ""), key="phone")
        submitted = st.form_submit_button("Save")
    if submitted:
        st.info("Record captured for review.")

with col_data:
    if record:
        st.subheader("Structured Resume Snapshot")
        st.json(record)

        if st.button("Analyze career path"):
            try:
                st.session_state["career_analysis"] = analyze_career_path(record["resumeText"])
            except CareerAnalysisError as err:
                st.warning(f"Career analysis unavailable: {err}")
        analysis = st.session_state.get("career_analysis")
        if analysis:
            st.subheader("Career Analysis")
            st.json(analysis)
