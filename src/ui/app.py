"""AI Skills Playground -- Streamlit UI.

Pick a skill in the sidebar, upload an input, and browse the results in tabs.
"""

from __future__ import annotations

import streamlit as st

from src.ui.api_client import (
    analyze_conversation,
    analyze_document,
    analyze_image,
    check_health,
)

SKILLS = {
    "Conversation Analysis": "Transcribe a recording, split it into speaker turns, and summarize it.",
    "Image Analysis": "Describe an image: objects, colors, mood, and composition.",
    "Document Summarization": "Summarize a PDF, Word, or text file, or a web page.",
}

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="AI Skills Playground", layout="wide")

# ---------------------------------------------------------------------------
# Sidebar -- skill selector + API status
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("AI Skills Playground")
    st.markdown("---")

    skill: str = st.radio("Choose a skill", list(SKILLS.keys()))
    st.caption(SKILLS[skill])

    st.markdown("---")

    # API connection indicator
    api_healthy = check_health()
    if api_healthy:
        st.markdown(":green_circle: API connected")
    else:
        st.markdown(":red_circle: API unreachable")

st.header(skill)
st.write(SKILLS[skill])

# ---------------------------------------------------------------------------
# Skill: Conversation Analysis
# ---------------------------------------------------------------------------
if skill == "Conversation Analysis":
    uploaded_file = st.file_uploader(
        "Choose an audio file",
        type=["mp3", "wav", "m4a", "mp4", "ogg", "webm"],
    )

    if st.button("Analyze", disabled=uploaded_file is None):
        if not api_healthy:
            st.error("Cannot analyze: the API server is not reachable.")
        elif uploaded_file is not None:
            with st.spinner("Transcribing and analyzing..."):
                result = analyze_conversation(
                    file_content=uploaded_file.getvalue(),
                    filename=uploaded_file.name,
                    content_type=uploaded_file.type or "application/octet-stream",
                )
            if result:
                tab_transcript, tab_speakers, tab_summary = st.tabs(
                    ["Transcript", "Speakers", "Summary"]
                )
                with tab_transcript:
                    st.write(result.get("transcript", ""))
                with tab_speakers:
                    segments = result.get("diarization", [])
                    if not segments:
                        st.info("No speech segments detected.")
                    for seg in segments:
                        st.markdown(
                            f"`{seg.get('timestamp', '')}` **{seg.get('speaker', '')}:** "
                            f"{seg.get('text', '')}"
                        )
                with tab_summary:
                    st.markdown(result.get("summary", "Summary not available"))

# ---------------------------------------------------------------------------
# Skill: Image Analysis
# ---------------------------------------------------------------------------
elif skill == "Image Analysis":
    uploaded_file = st.file_uploader(
        "Choose an image",
        type=["png", "jpg", "jpeg", "gif", "webp"],
    )
    if uploaded_file is not None:
        st.image(uploaded_file, width=400)

    if st.button("Analyze", disabled=uploaded_file is None):
        if not api_healthy:
            st.error("Cannot analyze: the API server is not reachable.")
        elif uploaded_file is not None:
            with st.spinner("Analyzing image..."):
                result = analyze_image(
                    file_content=uploaded_file.getvalue(),
                    filename=uploaded_file.name,
                    content_type=uploaded_file.type or "image/png",
                )
            if result:
                tab_description, tab_details = st.tabs(["Description", "Details"])
                with tab_description:
                    st.write(result.get("description", ""))
                    st.metric("Confidence", f"{result.get('confidence', 0):.0%}")
                with tab_details:
                    details = result.get("details", {})
                    col_a, col_b = st.columns(2)
                    with col_a:
                        st.subheader("Objects")
                        for obj in details.get("objects", []):
                            st.write(f"- {obj}")
                    with col_b:
                        st.subheader("Colors")
                        for color in details.get("colors", []):
                            st.write(f"- {color}")
                    st.write(f"**Mood:** {details.get('mood', '')}")
                    st.write(f"**Composition:** {details.get('composition', '')}")

# ---------------------------------------------------------------------------
# Skill: Document Summarization
# ---------------------------------------------------------------------------
elif skill == "Document Summarization":
    uploaded_file = st.file_uploader(
        "Choose a document",
        type=["pdf", "docx", "doc", "txt", "md"],
    )
    url = st.text_input("...or enter a web page URL", placeholder="https://example.com/article")

    if st.button("Summarize", disabled=uploaded_file is None and not url):
        if not api_healthy:
            st.error("Cannot summarize: the API server is not reachable.")
        else:
            with st.spinner("Extracting and summarizing..."):
                if uploaded_file is not None:
                    result = analyze_document(
                        file_content=uploaded_file.getvalue(),
                        filename=uploaded_file.name,
                        content_type=uploaded_file.type or "text/plain",
                    )
                else:
                    result = analyze_document(url=url)
            if result:
                tab_summary, tab_points, tab_metadata = st.tabs(
                    ["Summary", "Key Points", "Metadata"]
                )
                with tab_summary:
                    st.markdown(result.get("summary", ""))
                with tab_points:
                    for point in result.get("key_points", []):
                        st.write(f"- {point}")
                with tab_metadata:
                    metadata = result.get("metadata", {})
                    col_a, col_b, col_c = st.columns(3)
                    col_a.metric("Words", str(metadata.get("word_count", 0)))
                    col_b.metric("Reading time", metadata.get("reading_time", "N/A"))
                    col_c.metric("Type", metadata.get("type", "N/A"))
                    st.write(f"**Language:** {metadata.get('language', 'N/A')}")
