import logging
from fastapi import APIRouter, HTTPException
from backend.app.models.schemas import AnswerRequest
from backend.app.services.exceptions import AnswerError, StorageError
from backend.app.services.orchestrator import answer_question, save_answer

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/answer-question")
async def answer_question_route(payload: AnswerRequest):
    if not payload.question or not payload.context:
        raise HTTPException(400, "Missing question or context")
    try:
        answer = await answer_question(payload.question, payload.context, payload.filename)
    except AnswerError as e:
        logger.error(f"Failed to answer question: {e}")
        raise HTTPException(500, {"error": "Failed to generate answer", "details": str(e)})
    if payload.document_id:
        try:
            save_answer(payload.document_id, payload.question, answer)
        except StorageError as e:
            # Error body still carries the generated answer.
            logger.error(f"Failed to save answer for document {payload.document_id}: {e}")
            raise HTTPException(500, {"error": "Failed to save answer", "details": str(e), "answer": answer})
    return {"answer": answer, "success": True}
