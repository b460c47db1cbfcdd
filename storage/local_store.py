import json, os, logging, tempfile, threading
from typing import Dict, Any, List, Optional
from shared.config import settings
from backend.app.models.schemas import AnswerHit, DocumentHit, QuestionHit, SearchResult, SEARCH_SCOPES
from backend.app.services.exceptions import StorageError

logger = logging.getLogger(__name__)

# Every read-modify-write on the store file happens under this lock.
_LOCK = threading.RLock()

def _docs_file() -> str:
    return settings.docs_file

def _ensure_db() -> None:
    path = _docs_file()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    if not os.path.exists(path):
        _save_index({"documents": []})

def _load_index() -> Dict[str, Any]:
    try:
        _ensure_db()
        with open(_docs_file(), "r", encoding="utf-8") as f:
            db = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read document store {_docs_file()}: {e}")
        raise StorageError(f"Failed to read document store: {e}") from e
    if not isinstance(db, dict) or not isinstance(db.get("documents"), list):
        raise StorageError("Document store is malformed: expected {documents: [...]}")
    return db

def _save_index(db: Dict[str, Any]) -> None:
    path = _docs_file()
    directory = os.path.dirname(path) or "."
    tmp_path = None
    try:
        os.makedirs(directory, exist_ok=True)
        # Write beside the target, then swap it in so readers never see a half-written file.
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
        ) as tmp:
            tmp_path = tmp.name
            json.dump(db, tmp, ensure_ascii=False, indent=2)
        os.replace(tmp_path, path)
    except BaseException as e:
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except FileNotFoundError:
                pass
        if isinstance(e, (OSError, TypeError, ValueError)):
            logger.error(f"Failed to write document store {path}: {e}")
            raise StorageError(f"Failed to write document store: {e}") from e
        raise

def list_documents() -> List[Dict[str, Any]]:
    with _LOCK:
        return _load_index()["documents"]

def get_document(doc_id: str) -> Optional[Dict[str, Any]]:
    with _LOCK:
        for doc in _load_index()["documents"]:
            if doc.get("id") == doc_id:
                return doc
    return None

def upsert_document(document: Dict[str, Any]) -> None:
    """Replace the record with the same id, or append it."""
    if not document.get("id") or not document.get("filename"):
        raise ValueError("document requires both id and filename")
    with _LOCK:
        db = _load_index()
        docs = db["documents"]
        for i, existing in enumerate(docs):
            if existing.get("id") == document["id"]:
                docs[i] = document
                break
        else:
            docs.append(document)
        _save_index(db)
    logger.info(f"Stored document id={document['id']} questions={len(document.get('questions') or [])}")

def record_answer(doc_id: str, question: str, answer: str) -> Optional[Dict[str, Any]]:
    with _LOCK:
        db = _load_index()
        for doc in db["documents"]:
            if doc.get("id") == doc_id:
                doc.setdefault("answers", {})[question] = answer
                _save_index(db)
                return doc
    return None

def delete_document(doc_id: str) -> bool:
    """Drop the record; returns False when nothing matched (the store is left untouched)."""
    with _LOCK:
        db = _load_index()
        kept = [d for d in db["documents"] if d.get("id") != doc_id]
        if len(kept) == len(db["documents"]):
            return False
        db["documents"] = kept
        _save_index(db)
    logger.info(f"Deleted document id={doc_id}")
    return True

def search_documents(term: str, search_in: str = "both") -> List[SearchResult]:
    if search_in not in SEARCH_SCOPES:
        raise ValueError(f"search_in must be one of {', '.join(SEARCH_SCOPES)}")
    needle = term.lower()
    results: List[SearchResult] = []
    for doc in list_documents():
        doc_id, filename = doc.get("id", ""), doc.get("filename", "")
        answers = doc.get("answers") or {}

        if search_in in ("both", "questions"):
            for question in doc.get("questions") or []:
                if needle in question.lower():
                    results.append(QuestionHit(
                        content=question, document_id=doc_id, filename=filename,
                        answer=answers.get(question, ""),
                    ))

        if search_in in ("both", "answers"):
            for question, answer in answers.items():
                if needle in str(answer).lower():
                    results.append(AnswerHit(
                        content=str(answer), question=question, document_id=doc_id, filename=filename,
                    ))

        if search_in == "both" and needle in filename.lower():
            results.append(DocumentHit(content=filename, document_id=doc_id, filename=filename))
    return results
