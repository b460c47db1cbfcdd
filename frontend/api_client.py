"""HTTP client for the backend, plus the two multi-step user flows the UI runs."""
import hashlib
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)


def make_doc_id(filename: str) -> str:
    base = f"{filename}-{time.time_ns()}"
    return hashlib.sha1(base.encode()).hexdigest()[:16]


class ApiError(Exception):
    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        message = body.get("error") if isinstance(body, dict) else body
        super().__init__(f"{status_code}: {message}")


class DocQAClient:
    """
    Thin wrapper over the backend endpoints.

    `session` may be anything with a requests-style ``request(method, url, **kw)``;
    a ``requests.Session`` is created when none is given.
    """

    def __init__(self, api_base: str = "", session: Optional[Any] = None):
        self.api_base = api_base.rstrip("/")
        self.session = session or requests.Session()

    def _call(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        resp = self.session.request(method, f"{self.api_base}{path}", **kwargs)
        try:
            body = resp.json()
        except ValueError:
            body = resp.text
        if not 200 <= resp.status_code < 300:
            raise ApiError(resp.status_code, body)
        return body

    def extract_text(self, filename: str, data: bytes) -> Dict[str, Any]:
        return self._call("POST", "/extract-text", files={"file": (filename, data, "application/pdf")})

    def extract_questions(self, text: str, filename: str) -> List[str]:
        return self._call("POST", "/extract-questions", json={"text": text, "filename": filename})["questions"]

    def answer_question(self, question: str, context: str, filename: str, document_id: Optional[str] = None) -> str:
        payload = {"question": question, "context": context, "filename": filename}
        if document_id:
            payload["documentId"] = document_id
        return self._call("POST", "/answer-question", json=payload)["answer"]

    def list_documents(self) -> List[Dict[str, Any]]:
        return self._call("GET", "/search")["documents"]

    def save_document(self, document: Dict[str, Any]) -> None:
        self._call("PUT", "/search", json=document)

    def search(self, term: str, search_in: str = "both") -> Dict[str, Any]:
        return self._call("POST", "/search", json={"searchTerm": term, "searchIn": search_in})

    def delete_document(self, document_id: str) -> None:
        self._call("DELETE", "/search", json={"id": document_id})

    # -- user flows -------------------------------------------------------

    def upload_document(self, filename: str, data: bytes) -> Dict[str, Any]:
        """Extract text, extract questions, then store the new document."""
        extracted = self.extract_text(filename, data)
        questions = self.extract_questions(extracted["text"], filename)
        document = {
            "id": make_doc_id(filename),
            "filename": filename,
            "text": extracted["text"],
            "questions": questions,
            "answers": {},
        }
        self.save_document(document)
        logger.info(f"Uploaded {filename}: pages={extracted['pageCount']} questions={len(questions)}")
        return document

    def answer_and_save(self, document: Dict[str, Any], question: str) -> Dict[str, Any]:
        """Answer `question` from the document text; the backend records it on the stored document."""
        answer = self.answer_question(question, document.get("text", ""), document["filename"], document["id"])
        updated = dict(document)
        updated["answers"] = {**(document.get("answers") or {}), question: answer}
        return updated

    def upload_documents(self, files: List[Tuple[str, bytes]]) -> List[Dict[str, Any]]:
        """
        Run `upload_document` for each (filename, data) pair.

        One outcome per file, in order: ``{"filename", "document"}`` on success or
        ``{"filename", "error"}`` when that file failed; later files still run.
        """
        outcomes = []
        for filename, data in files:
            try:
                outcomes.append({"filename": filename, "document": self.upload_document(filename, data)})
            except ApiError as e:
                logger.warning(f"Upload failed for {filename}: {e}")
                outcomes.append({"filename": filename, "error": str(e)})
        return outcomes
