import logging
import os
from typing import Optional
from fastapi import APIRouter, File, HTTPException, UploadFile
from backend.app.models.schemas import ExtractTextResponse, QuestionsRequest
from backend.app.services.exceptions import ExtractionError, ParsingError, QuestionExtractionError
from backend.app.services.orchestrator import extract_text, extract_questions

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/extract-text")
async def extract_text_route(file: Optional[UploadFile] = File(None)):
    if file is None:
        raise HTTPException(400, "No file provided")
    if os.path.splitext(file.filename or "")[1].lower() != ".pdf":
        raise HTTPException(400, "Only PDF files are supported")
    content = await file.read()
    if not content:
        raise HTTPException(400, "No file provided")
    try:
        pdf = extract_text(content)
    except ExtractionError as e:
        logger.error(f"PDF extraction failed for {file.filename}: {e}")
        raise HTTPException(500, {"error": "Failed to extract text from PDF", "details": str(e)})
    return ExtractTextResponse(text=pdf.text, page_count=pdf.page_count, filename=file.filename).model_dump(by_alias=True)

@router.post("/extract-questions")
async def extract_questions_route(payload: QuestionsRequest):
    if not payload.text:
        raise HTTPException(400, "No text provided")
    try:
        questions = await extract_questions(payload.text)
    except ParsingError as e:
        logger.error(f"Failed to parse LLM response: {e} content={e.content!r}")
        raise HTTPException(500, {
            "error": "Failed to process extracted questions", "details": str(e), "content": e.content,
        })
    except QuestionExtractionError as e:
        logger.error(f"Question extraction failed: {e}")
        raise HTTPException(500, {"error": "Failed to extract questions", "details": str(e)})
    return {"questions": questions, "filename": payload.filename, "success": True}
