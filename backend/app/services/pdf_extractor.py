import io
import logging
from dataclasses import dataclass

from pypdf import PdfReader

from backend.app.services.exceptions import ExtractionError
from backend.app.services.langsmith_logger import traceable

logger = logging.getLogger(__name__)

@dataclass
class ExtractedPdf:
    text: str
    page_count: int

@traceable("extract_pdf_text", run_type="tool")
def extract_pdf_text(data: bytes) -> ExtractedPdf:
    """Read every page of an in-memory PDF and join the page texts with newlines."""
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        raise ExtractionError(str(e)) from e
    text = "\n".join(pages).strip()
    logger.info(f"Extracted PDF text: pages={len(pages)} chars={len(text)}")
    return ExtractedPdf(text=text, page_count=len(pages))
