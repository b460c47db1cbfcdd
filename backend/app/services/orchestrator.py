import logging
from typing import List, Optional

from backend.app.services.langsmith_logger import traceable
from backend.app.services.pdf_extractor import ExtractedPdf, extract_pdf_text

from agents.workflows import QuestionExtractionWorkflow, AnswerWorkflow

# Storage
from storage.local_store import record_answer

logger = logging.getLogger(__name__)

question_workflow = QuestionExtractionWorkflow()
answer_workflow = AnswerWorkflow()


def extract_text(data: bytes) -> ExtractedPdf:
    return extract_pdf_text(data)


@traceable("extract_questions")
async def extract_questions(text: str) -> List[str]:
    return await question_workflow.run(text)


@traceable("answer_question")
async def answer_question(question: str, context: str, filename: Optional[str] = None) -> str:
    return await answer_workflow.run(question, context, filename)


def save_answer(doc_id: str, question: str, answer: str) -> bool:
    """
    Record the answer under the question in the stored document's answer map.
    An unknown doc_id is logged and ignored; StorageError propagates.
    """
    if record_answer(doc_id, question, answer) is None:
        logger.warning(f"Answer not recorded: no document with id={doc_id}")
        return False
    return True
