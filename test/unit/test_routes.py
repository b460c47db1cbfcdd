"""
HTTP-level tests for every endpoint, using FastAPI's TestClient.
"""
from storage import local_store
from storage.local_store import get_document, list_documents, upsert_document


def _upload(client, name="exam.pdf", data=b"%PDF-1.4 fake", content_type="application/pdf"):
    return client.post("/extract-text", files={"file": (name, data, content_type)})


class TestExtractText:

    def test_success(self, client, fake_pdf):
        resp = _upload(client)

        assert resp.status_code == 200
        assert resp.json() == {
            "text": "Page one text.\nWhat is X?",
            "pageCount": 2,
            "filename": "exam.pdf",
            "success": True,
        }

    def test_missing_file(self, client):
        resp = client.post("/extract-text")

        assert resp.status_code == 400
        assert resp.json() == {"error": "No file provided", "success": False}

    def test_empty_file(self, client, fake_pdf):
        resp = _upload(client, data=b"")

        assert resp.status_code == 400
        assert resp.json()["error"] == "No file provided"

    def test_non_pdf_rejected(self, client, fake_pdf):
        resp = _upload(client, name="notes.txt", data=b"hello", content_type="text/plain")

        assert resp.status_code == 400
        assert resp.json()["error"] == "Only PDF files are supported"

    def test_unreadable_pdf(self, client):
        resp = _upload(client, data=b"definitely not a pdf")

        assert resp.status_code == 500
        body = resp.json()
        assert body["error"] == "Failed to extract text from PDF"
        assert body["details"]
        assert body["success"] is False


class TestExtractQuestions:

    def test_success(self, client, fake_llm):
        resp = client.post("/extract-questions", json={"text": "What is X?", "filename": "exam.pdf"})

        assert resp.status_code == 200
        assert resp.json() == {"questions": ["What is X?"], "filename": "exam.pdf", "success": True}

    def test_missing_text(self, client, fake_llm):
        resp = client.post("/extract-questions", json={"filename": "exam.pdf"})

        assert resp.status_code == 400
        assert resp.json()["error"] == "No text provided"
        assert fake_llm.agents == []

    def test_malformed_llm_output(self, client, fake_llm):
        fake_llm.replies["question_extractor"] = "not json"

        resp = client.post("/extract-questions", json={"text": "What is X?"})

        assert resp.status_code == 500
        body = resp.json()
        assert body["error"] == "Failed to process extracted questions"
        assert body["content"] == "not json"

    def test_upstream_failure(self, client, fake_llm):
        fake_llm.replies["question_extractor"] = RuntimeError("invalid api key")

        resp = client.post("/extract-questions", json={"text": "What is X?"})

        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to extract questions"
        assert "invalid api key" in resp.json()["details"]


class TestAnswerQuestion:

    def test_success(self, client, fake_llm):
        resp = client.post(
            "/answer-question",
            json={"question": "What is X?", "context": "X is Y.", "filename": "exam.pdf"},
        )

        assert resp.status_code == 200
        assert resp.json() == {"answer": "X is the answer.", "success": True}

    def test_missing_question_or_context(self, client, fake_llm):
        for payload in ({"context": "c"}, {"question": "q"}, {"question": "", "context": "c"}):
            resp = client.post("/answer-question", json=payload)

            assert resp.status_code == 400
            assert resp.json()["error"] == "Missing question or context"

    def test_records_answer_when_document_id_given(self, client, fake_llm):
        upsert_document({"id": "d1", "filename": "exam.pdf", "questions": ["What is X?"], "answers": {}})

        resp = client.post(
            "/answer-question",
            json={"question": "What is X?", "context": "X is Y.", "filename": "exam.pdf", "documentId": "d1"},
        )

        assert resp.status_code == 200
        assert get_document("d1")["answers"] == {"What is X?": "X is the answer."}

    def test_unknown_document_id_still_answers(self, client, fake_llm):
        resp = client.post(
            "/answer-question",
            json={"question": "Q?", "context": "c", "documentId": "ghost"},
        )

        assert resp.status_code == 200
        assert list_documents() == []

    def test_save_failure_returns_generated_answer(self, client, fake_llm, monkeypatch):
        upsert_document({"id": "d1", "filename": "exam.pdf", "questions": ["What is X?"], "answers": {}})

        def _boom(src, dst):
            raise OSError("read-only file system")

        monkeypatch.setattr(local_store.os, "replace", _boom)
        resp = client.post(
            "/answer-question",
            json={"question": "What is X?", "context": "X is Y.", "documentId": "d1"},
        )

        assert resp.status_code == 500
        body = resp.json()
        assert body["error"] == "Failed to save answer"
        assert body["answer"] == "X is the answer."
        assert "read-only" in body["details"]
        assert body["success"] is False

    def test_upstream_failure(self, client, fake_llm):
        fake_llm.replies["answerer"] = RuntimeError("timeout")

        resp = client.post("/answer-question", json={"question": "Q?", "context": "c"})

        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to generate answer"


class TestDocuments:

    def test_get_empty(self, client):
        resp = client.get("/search")

        assert resp.status_code == 200
        assert resp.json() == {"documents": [], "success": True}

    def test_put_then_get(self, client, sample_documents):
        for doc in sample_documents:
            assert client.put("/search", json=doc).json() == {"success": True}

        docs = client.get("/search").json()["documents"]
        assert docs == sample_documents

    def test_put_existing_replaces(self, client, sample_documents):
        client.put("/search", json=sample_documents[0])
        client.put("/search", json={**sample_documents[0], "questions": ["Only this?"]})

        docs = client.get("/search").json()["documents"]
        assert len(docs) == 1
        assert docs[0]["questions"] == ["Only this?"]

    def test_put_invalid(self, client):
        resp = client.put("/search", json={"filename": "a.pdf"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid document data", "success": False}

    def test_search(self, client, sample_documents):
        for doc in sample_documents:
            client.put("/search", json=doc)

        resp = client.post("/search", json={"searchTerm": "FOO", "searchIn": "answers"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["count"] == 1
        assert body["results"][0]["type"] == "answer"
        assert body["results"][0]["documentId"] == "doc-2"

    def test_search_defaults_to_both(self, client, sample_documents):
        for doc in sample_documents:
            client.put("/search", json=doc)

        body = client.post("/search", json={"searchTerm": "biology"}).json()

        assert [r["type"] for r in body["results"]] == ["document"]

    def test_search_missing_term(self, client):
        resp = client.post("/search", json={"searchIn": "both"})

        assert resp.status_code == 400
        assert resp.json()["error"] == "No search term provided"

    def test_search_unknown_scope(self, client):
        resp = client.post("/search", json={"searchTerm": "x", "searchIn": "filenames"})

        assert resp.status_code == 400

    def test_delete(self, client, sample_documents):
        for doc in sample_documents:
            client.put("/search", json=doc)

        resp = client.request("DELETE", "/search", json={"id": "doc-1"})

        assert resp.json() == {"success": True}
        assert [d["id"] for d in client.get("/search").json()["documents"]] == ["doc-2"]

    def test_delete_unknown_reports_success(self, client, sample_documents):
        client.put("/search", json=sample_documents[0])

        resp = client.request("DELETE", "/search", json={"id": "nope"})

        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        assert len(client.get("/search").json()["documents"]) == 1

    def test_delete_missing_id(self, client):
        resp = client.request("DELETE", "/search", json={})

        assert resp.status_code == 400
        assert resp.json()["error"] == "No document ID provided"

    def test_storage_failure_is_500(self, client, store_dir):
        (store_dir / "documents.json").write_text("{broken", encoding="utf-8")

        resp = client.get("/search")

        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to get documents"
        assert resp.json()["success"] is False
