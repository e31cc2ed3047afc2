"""
Message helpers for the orchestration graphs.

Dependencies: langchain_core.messages
System role: Message windowing and content extraction
"""

from collections.abc import Sequence

from langchain_core.messages import AIMessage, BaseMessage, ToolMessage


def message_text(message: BaseMessage) -> str:
    """
    Extract plain text from a message.

    Handles both string content and the list-of-blocks content some
    providers return.

    Args:
        message: Any LangChain message

    Returns:
        str: Concatenated text content
    """
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for item in content:
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, dict):
            parts.append(str(item.get("text", "")))
        else:
            parts.append(str(item))
    return "".join(parts)


def collect_recent_tool_messages(messages: Sequence[BaseMessage]) -> list[ToolMessage]:
    """
    Return the most recent contiguous run of tool messages.

    Scans backward from the end and stops at the first non-tool message,
    so only the results of the latest tool round are used, not every
    tool result in the conversation.

    Args:
        messages: Conversation in chronological order

    Returns:
        list[ToolMessage]: Trailing tool messages in chronological order
    """
    recent: list[ToolMessage] = []
    for message in reversed(messages):
        if not isinstance(message, ToolMessage):
            break
        recent.append(message)
    recent.reverse()
    return recent


def conversation_messages(messages: Sequence[BaseMessage]) -> list[BaseMessage]:
    """
    Filter a conversation down to its conversational turns.

    Keeps human and system messages, and AI messages that did not request
    tools. Tool messages and tool-calling AI messages are dropped.

    Args:
        messages: Conversation in chronological order

    Returns:
        list[BaseMessage]: Filtered messages, order preserved
    """
    return [
        message
        for message in messages
        if message.type in ("human", "system")
        or (isinstance(message, AIMessage) and not message.tool_calls)
    ]
