"""
Workflows wrapping single-shot AutoGen agents.

Each workflow exposes a `run(...)` coroutine that:
1) builds a fresh agent from the registry,
2) sends one prompt and reads the final message,
3) validates the output, raising a PipelineError subclass on failure.
"""
from __future__ import annotations
import json
import logging
import re
from typing import List
from agents import system_prompts
from backend.app.services.agent_registry import agent_registry
from backend.app.services.validators import QuestionListValidator, AnswerValidator
from backend.app.services.exceptions import ParsingError, QuestionExtractionError, AnswerError
from shared.config import settings

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)

def _last_message_text(result) -> str:
    content = result.messages[-1].content
    return content if isinstance(content, str) else str(content)

def parse_questions(content: str) -> List[str]:
    """Decode the extractor's reply into a list of question strings."""
    body = content.strip()
    fenced = _FENCE_RE.match(body)
    if fenced:
        body = fenced.group(1)
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Model output is not valid JSON: {e}", content) from e
    ok, info = QuestionListValidator.validate(payload)
    if not ok:
        raise ParsingError(f"Invalid response format from LLM: {info}", content)
    return QuestionListValidator.clean(QuestionListValidator.unwrap(payload))

class QuestionExtractionWorkflow:
    async def run(self, text: str) -> List[str]:
        try:
            agent = await agent_registry.build("question_extractor", system_prompts.QUESTION_EXTRACTOR_PROMPT)
            res = await agent.run(
                task="Extract all questions from the following text:\n\n" + text[:settings.question_text_limit]
            )
            content = _last_message_text(res)
        except Exception as e:
            raise QuestionExtractionError(str(e)) from e
        if not content.strip():
            raise QuestionExtractionError("LLM returned an empty response")
        questions = parse_questions(content)
        logger.info(f"Extracted {len(questions)} questions from {len(text)} chars")
        return questions

class AnswerWorkflow:
    async def run(self, question: str, context: str, filename: str | None = None) -> str:
        try:
            agent = await agent_registry.build("answerer", system_prompts.ANSWER_PROMPT)
            task = (
                f'Context from document "{filename or ""}":\n\n'
                f"{context[:settings.answer_context_limit]}\n\n"
                f"Question: {question}\n\nAnswer:"
            )
            res = await agent.run(task=task)
            answer = _last_message_text(res)
        except Exception as e:
            raise AnswerError(str(e)) from e
        ok, info = AnswerValidator.validate(answer)
        if not ok:
            raise AnswerError(f"LLM returned no answer: {info}")
        return answer.strip()
