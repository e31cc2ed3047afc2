"""Generation node for the tool-calling graph.

Answers from the latest tool results plus the conversational history.

Dependencies: logging, langchain_core, langgraph
System role: Final node of the tool-calling graph
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import SystemMessage
from langgraph.graph import MessagesState

from webdoc_qa.core.agentic_system.agent.agent_prompt import build_generate_system_prompt
from webdoc_qa.core.agentic_system.messages import (
    collect_recent_tool_messages,
    conversation_messages,
    message_text,
)
from webdoc_qa.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


async def agent_generate_node(state: MessagesState, chat_model: BaseChatModel) -> dict:
    """Generate an answer from the latest tool round.

    The system prompt carries the content of the trailing tool messages;
    the history excludes tool messages and tool-calling AI messages.

    Args:
        state: Graph state ending with one or more tool messages
        chat_model: Chat model for generation (no tools bound)

    Returns:
        dict: State update appending the answer message

    Raises:
        ProviderError: When the model call fails
    """
    tool_messages = collect_recent_tool_messages(state["messages"])
    docs_content = "\n\n".join(message_text(message) for message in tool_messages)
    prompt = [SystemMessage(build_generate_system_prompt(docs_content))]
    prompt.extend(conversation_messages(state["messages"]))

    logger.info(
        f"{__name__}:agent_generate_node - START tool_messages={len(tool_messages)} "
        f"prompt_messages={len(prompt)}"
    )
    try:
        response = await chat_model.ainvoke(prompt)
    except Exception as e:
        logger.error(f"{__name__}:agent_generate_node - FAILED: {type(e).__name__}: {e}")
        raise ProviderError(f"Answer generation failed: {e}", operation="generate") from e

    logger.info(f"{__name__}:agent_generate_node - END answer_len={len(message_text(response))}")
    return {"messages": [response]}
