class PipelineError(Exception):
    """Base class for pipeline exceptions."""

class ExtractionError(PipelineError):
    """Raised when pypdf cannot open or read the uploaded PDF."""

class QuestionExtractionError(PipelineError):
    """Raised when the LLM call for question extraction fails."""

class ParsingError(PipelineError):
    """Raised when the LLM returns output that is not a JSON question list."""
    def __init__(self, message: str, content: str | None = None):
        super().__init__(message)
        self.content = content

class AnswerError(PipelineError):
    """Raised when answer generation fails."""

class StorageError(PipelineError):
    """Raised when the document store cannot be read or written."""

class ValidationError(PipelineError):
    """Raised when validation fails; include details in message."""
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}
