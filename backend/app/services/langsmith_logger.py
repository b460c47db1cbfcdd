import logging
from typing import Callable, Literal

from shared.config import settings

logger = logging.getLogger(__name__)

RunType = Literal["chain", "llm", "tool", "parser"]


def _passthrough(func):
    return func


def traceable(name: str, run_type: RunType = "chain") -> Callable:
    """
    Wrap a pipeline step in a LangSmith run when LANGSMITH_TRACING=1.

    Runs are tagged with the pipeline step and APP_ENV so dev and prod traces
    can be told apart in one project. Without an API key tracing stays off.
    """
    if not settings.langsmith_tracing:
        return _passthrough
    if not settings.langsmith_api_key:
        logger.warning(f"LANGSMITH_TRACING=1 but LANGSMITH_API_KEY is unset; not tracing {name}")
        return _passthrough

    # Only import the client when tracing is on
    from langsmith import traceable as _traceable  # type: ignore
    return _traceable(
        name=name,
        run_type=run_type,
        project_name=settings.langsmith_project,
        tags=["pdf-question-desk", name],
        metadata={"app_env": settings.app_env},
    )
