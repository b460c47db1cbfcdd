"""
Validation of LLM outputs before they reach the document store.

The question extractor must hand back a JSON array of strings (optionally wrapped
in an object under ``questions``); anything else is rejected rather than guessed at.
"""
from __future__ import annotations
from typing import Any, Dict, List, Tuple


class QuestionListValidator:
    """
    Validator for the question-extraction payload.

    Accepts either a bare JSON array or an object holding a ``questions`` array,
    and requires every element to be a string.
    """

    @staticmethod
    def unwrap(payload: Any) -> Any:
        """Return the candidate question list from a decoded payload."""
        if isinstance(payload, dict) and "questions" in payload:
            return payload["questions"]
        return payload

    @staticmethod
    def validate(payload: Any) -> Tuple[bool, Dict]:
        """
        Validate a decoded question-extraction payload.

        Args:
            payload: The JSON value decoded from the model output

        Returns:
            Tuple of (is_valid, details) where details carries the failure reason
        """
        questions = QuestionListValidator.unwrap(payload)
        if not isinstance(questions, list):
            return False, {"reason": "not_a_list", "got": type(questions).__name__}
        bad = [i for i, q in enumerate(questions) if not isinstance(q, str)]
        if bad:
            return False, {"reason": "non_string_items", "indexes": bad}
        return True, {}

    @staticmethod
    def clean(questions: List[str]) -> List[str]:
        return [q.strip() for q in questions if q.strip()]


class AnswerValidator:
    """Check the answer is a non-empty string."""
    @staticmethod
    def validate(answer: Any) -> Tuple[bool, Dict]:
        if not isinstance(answer, str) or not answer.strip():
            return False, {"reason": "empty_answer"}
        return True, {}
