import logging
from fastapi import APIRouter, HTTPException
from backend.app.models.schemas import DeleteRequest, Document, SearchRequest, SEARCH_SCOPES
from backend.app.services.exceptions import StorageError
from storage.local_store import delete_document, list_documents, search_documents, upsert_document

logger = logging.getLogger(__name__)

# The document store is exposed as the four HTTP methods on one path.
router = APIRouter()

@router.get("/search")
def get_documents():
    try:
        documents = list_documents()
    except StorageError as e:
        logger.error(f"Error getting documents: {e}")
        raise HTTPException(500, {"error": "Failed to get documents", "details": str(e)})
    return {"documents": documents, "success": True}

@router.put("/search")
def save_document(document: Document):
    if not document.id or not document.filename:
        raise HTTPException(400, "Invalid document data")
    try:
        upsert_document(document.model_dump())
    except StorageError as e:
        logger.error(f"Error saving document: {e}")
        raise HTTPException(500, {"error": "Failed to save document", "details": str(e)})
    return {"success": True}

@router.post("/search")
def search(payload: SearchRequest):
    if not payload.search_term:
        raise HTTPException(400, "No search term provided")
    if payload.search_in not in SEARCH_SCOPES:
        raise HTTPException(400, f"searchIn must be one of: {', '.join(SEARCH_SCOPES)}")
    try:
        results = search_documents(payload.search_term, payload.search_in)
    except StorageError as e:
        logger.error(f"Error searching documents: {e}")
        raise HTTPException(500, {"error": "Failed to search documents", "details": str(e)})
    return {
        "results": [r.model_dump(by_alias=True) for r in results],
        "count": len(results),
        "success": True,
    }

@router.delete("/search")
def remove_document(payload: DeleteRequest):
    if not payload.id:
        raise HTTPException(400, "No document ID provided")
    try:
        delete_document(payload.id)
    except StorageError as e:
        logger.error(f"Error deleting document: {e}")
        raise HTTPException(500, {"error": "Failed to delete document", "details": str(e)})
    return {"success": True}
