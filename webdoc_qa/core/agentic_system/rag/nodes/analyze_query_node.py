"""Query analysis node for the query-analysis workflow.

Turns the question into a SearchSpec using structured model output.

Dependencies: logging, langchain_core, pydantic, webdoc_qa.models.search
System role: First stage of the query-analyzed RAG graph
"""

import logging
from typing import Any

from langchain_core.runnables import Runnable
from pydantic import ValidationError

from webdoc_qa.core.agentic_system.rag.rag_prompt import QUERY_ANALYSIS_PROMPT
from webdoc_qa.core.agentic_system.rag.rag_schema import RAGState
from webdoc_qa.core.exceptions import ProviderError, SchemaError
from webdoc_qa.models.search import SearchSpec

logger = logging.getLogger(__name__)


def parse_search_spec(result: dict[str, Any]) -> SearchSpec:
    """Validate raw structured output into a SearchSpec.

    Args:
        result: Output of with_structured_output(..., include_raw=True),
            a dict with raw, parsed and parsing_error keys

    Returns:
        SearchSpec: Validated query and section

    Raises:
        SchemaError: When parsing failed or no structured object was produced
    """
    parsing_error = result.get("parsing_error")
    if parsing_error is not None:
        raise SchemaError(
            "Structured output did not match SearchSpec",
            reason=str(parsing_error),
        )

    parsed = result.get("parsed")
    if parsed is None:
        raise SchemaError("Model returned no structured search spec")
    if isinstance(parsed, SearchSpec):
        return parsed

    try:
        return SearchSpec.model_validate(parsed)
    except ValidationError as e:
        raise SchemaError("Structured output did not match SearchSpec", reason=str(e)) from e


async def analyze_query_node(state: RAGState, structured_model: Runnable) -> dict:
    """Produce a SearchSpec for the question.

    Args:
        state: Graph state with question
        structured_model: Chat model wrapped with SearchSpec structured output (include_raw=True)

    Returns:
        dict: State update with search

    Raises:
        SchemaError: When the model output fails validation
        ProviderError: When the model call fails
    """
    logger.info(f"{__name__}:analyze_query_node - START question_len={len(state['question'])}")

    messages = QUERY_ANALYSIS_PROMPT.invoke({"question": state["question"]})
    try:
        result = await structured_model.ainvoke(messages)
    except Exception as e:
        logger.error(f"{__name__}:analyze_query_node - FAILED: {type(e).__name__}: {e}")
        raise ProviderError(f"Query analysis failed: {e}", operation="analyze_query") from e

    search = parse_search_spec(result)
    logger.info(
        f"{__name__}:analyze_query_node - END query={search.query!r} section={search.section.value}"
    )
    return {"search": search}
