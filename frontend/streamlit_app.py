import streamlit as st
import os

from frontend.api_client import ApiError, DocQAClient

API_BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")
client = DocQAClient(API_BASE)

SCOPES = {"Questions & Answers": "both", "Questions Only": "questions", "Answers Only": "answers"}

st.set_page_config(page_title="PDF Question Desk", layout="wide")
st.title("📄 PDF Question Desk")

with st.sidebar:
    st.header("Upload PDFs")
    files = st.file_uploader("PDF files", type=["pdf"], accept_multiple_files=True)
    if st.button("Process", type="primary") and files:
        with st.spinner(f"Extracting text and questions from {len(files)} file(s)..."):
            outcomes = client.upload_documents([(f.name, f.getvalue()) for f in files])
        for outcome in outcomes:
            if "error" in outcome:
                st.error(f"{outcome['filename']}: {outcome['error']}")
            else:
                st.success(f"Found {len(outcome['document']['questions'])} questions in {outcome['filename']}")
        stored = [o["document"] for o in outcomes if "document" in o]
        if stored:
            st.session_state["current_doc"] = stored[-1]
            st.session_state.pop("selected_question", None)

# Document list
st.subheader("🗂️ Your Documents")
try:
    documents = client.list_documents()
except ApiError as e:
    documents = []
    st.error(str(e))
if not documents:
    st.info("No documents found. Upload a document to get started.")
for d in documents:
    c1, c2, c3 = st.columns([6, 2, 1])
    c1.write(f"**{d['filename']}**")
    c2.caption(f"{len(d.get('questions') or [])} questions")
    if c3.button("Open", key=f"open-{d['id']}"):
        st.session_state["current_doc"] = d
        st.session_state.pop("selected_question", None)
    if c3.button("Delete", key=f"del-{d['id']}"):
        try:
            client.delete_document(d["id"])
        except ApiError as e:
            st.error(str(e))
        else:
            if (st.session_state.get("current_doc") or {}).get("id") == d["id"]:
                st.session_state.pop("current_doc", None)
            st.rerun()

# Questions + answer panel
doc = st.session_state.get("current_doc")
if doc:
    left, right = st.columns(2)
    with left:
        st.subheader(f"❓ Questions in {doc['filename']}")
        if not doc.get("questions"):
            st.write("No questions found in this document.")
        for i, q in enumerate(doc.get("questions") or [], start=1):
            if st.button(f"{i}. {q}", key=f"q-{doc['id']}-{i}"):
                st.session_state["selected_question"] = q
                if q not in (doc.get("answers") or {}):
                    with st.spinner("Generating answer..."):
                        try:
                            doc = client.answer_and_save(doc, q)
                            st.session_state["current_doc"] = doc
                        except ApiError as e:
                            st.error(str(e))
                            if isinstance(e.body, dict) and e.body.get("answer"):
                                doc = {**doc, "answers": {**(doc.get("answers") or {}), q: e.body["answer"]}}
    with right:
        q = st.session_state.get("selected_question")
        if q:
            st.subheader("💬 Answer")
            st.markdown(f"**Question:** {q}")
            st.write((doc.get("answers") or {}).get(q) or "Click on the question to generate an answer.")

# Search
st.subheader("🔎 Search")
term = st.text_input("Search for questions in file...")
scope = st.selectbox("Search in", list(SCOPES))
if st.button("Search") and term:
    try:
        data = client.search(term, SCOPES[scope])
    except ApiError as e:
        st.error(str(e))
    else:
        st.caption(f"{data['count']} results")
        for r in data["results"]:
            if r["type"] == "question":
                st.markdown(f"**Question** in _{r['filename']}_: {r['content']}")
                if r.get("answer"):
                    st.write(r["answer"])
            elif r["type"] == "answer":
                st.markdown(f"**Answer** in _{r['filename']}_ to: {r['question']}")
                st.write(r["content"])
            else:
                st.markdown(f"**Document**: {r['content']}")
