from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Literal, Optional, Union

SEARCH_SCOPES = ("both", "questions", "answers")

class Document(BaseModel):
    id: Optional[str] = None
    filename: Optional[str] = None
    text: str = ""
    questions: List[str] = Field(default_factory=list)
    answers: Dict[str, str] = Field(default_factory=dict)

class ExtractTextResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    page_count: int = Field(alias="pageCount")
    filename: Optional[str] = None
    success: bool = True

class QuestionsRequest(BaseModel):
    text: Optional[str] = None
    filename: Optional[str] = None

class AnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: Optional[str] = None
    context: Optional[str] = None
    filename: Optional[str] = None
    document_id: Optional[str] = Field(default=None, alias="documentId")  # record answer when set

class SearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    search_term: Optional[str] = Field(default=None, alias="searchTerm")
    search_in: str = Field(default="both", alias="searchIn")

class DeleteRequest(BaseModel):
    id: Optional[str] = None

# Search results are a tagged union on `type`.

class _SearchHit(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str
    document_id: str = Field(alias="documentId")
    filename: str

class QuestionHit(_SearchHit):
    type: Literal["question"] = "question"
    answer: str = ""

class AnswerHit(_SearchHit):
    type: Literal["answer"] = "answer"
    question: str

class DocumentHit(_SearchHit):
    type: Literal["document"] = "document"

SearchResult = Union[QuestionHit, AnswerHit, DocumentHit]
