"""Answer generation node for the retrieve-then-generate graphs.

Dependencies: logging, langchain_core
System role: Final stage of the plain and query-analyzed RAG graphs
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate

from webdoc_qa.core.agentic_system.messages import message_text
from webdoc_qa.core.agentic_system.rag.rag_schema import RAGState
from webdoc_qa.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


async def generate_node(
    state: RAGState,
    chat_model: BaseChatModel,
    prompt: ChatPromptTemplate,
) -> dict:
    """Compose an answer from the retrieved context.

    Args:
        state: Graph state with question and context
        chat_model: Chat model for generation
        prompt: Template with {question} and {context}

    Returns:
        dict: State update with answer

    Raises:
        ProviderError: When the model call fails
    """
    context = state.get("context", [])
    docs_content = "\n\n".join(result.content for result in context)
    messages = prompt.invoke({"question": state["question"], "context": docs_content})

    logger.info(f"{__name__}:generate_node - START context_len={len(docs_content)}")
    try:
        response = await chat_model.ainvoke(messages)
    except Exception as e:
        logger.error(f"{__name__}:generate_node - FAILED: {type(e).__name__}: {e}")
        raise ProviderError(f"Answer generation failed: {e}", operation="generate") from e

    answer = message_text(response)
    logger.info(f"{__name__}:generate_node - END answer_len={len(answer)}")
    return {"answer": answer}
