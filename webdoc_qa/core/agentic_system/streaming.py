"""
Stream chunk rendering.

Formats the chunks yielded by graph.astream for terminal output, in
either values (full state) or updates (per-node delta) mode.

Dependencies: langchain_core.messages, webdoc_qa.models
System role: Terminal output for streamed workflow steps
"""

import json
from typing import Any

from langchain_core.messages import AIMessage, BaseMessage

from webdoc_qa.boundary.vdb.vector_schemas import VectorSearchResult
from webdoc_qa.core.agentic_system.messages import message_text
from webdoc_qa.models.search import SearchSpec
from webdoc_qa.models.workflow import StreamMode

SEPARATOR = "--------\n"
PREVIEW_CHARS = 80


def format_message(message: BaseMessage) -> str:
    """
    Render a message as "[role]: content" plus its tool calls.

    Args:
        message: Message to render

    Returns:
        str: Rendered text
    """
    text = f"[{message.type}]: {message_text(message)}"
    if isinstance(message, AIMessage) and message.tool_calls:
        calls = "\n".join(
            f"- {call['name']}({json.dumps(call['args'])})" for call in message.tool_calls
        )
        text += f" \nTools: \n{calls}"
    return text


def format_field(name: str, value: Any) -> str:
    """Render one RAG state field."""
    if isinstance(value, SearchSpec):
        return f"{name}: query={value.query!r} section={value.section.value}"
    if isinstance(value, list) and all(isinstance(item, VectorSearchResult) for item in value):
        lines = [f"{name}: {len(value)} chunk(s)"]
        for result in value:
            preview = result.content[:PREVIEW_CHARS].replace("\n", " ")
            lines.append(
                f"  - [{result.metadata.section.value}] {result.metadata.source} "
                f"(score={result.similarity_score:.3f}): {preview}"
            )
        return "\n".join(lines)
    return f"{name}: {value}"


def format_state(state: dict[str, Any]) -> str:
    """Render the populated fields of a RAG state."""
    return "\n".join(format_field(name, value) for name, value in state.items())


def format_chunk(chunk: Any, stream_mode: StreamMode, message_based: bool) -> str:
    """
    Render one streamed chunk.

    Args:
        chunk: Value yielded by graph.astream
        stream_mode: Mode the stream was opened with
        message_based: Whether the state is a message list

    Returns:
        str: Rendered text
    """
    if StreamMode(stream_mode) is StreamMode.VALUES:
        if message_based:
            messages = chunk.get("messages", [])
            return format_message(messages[-1]) if messages else ""
        return format_state(chunk)

    sections = []
    for node, update in chunk.items():
        lines = [f"Update from node {node}:"]
        if update:
            if message_based:
                lines.extend(format_message(message) for message in update.get("messages", []))
            else:
                lines.append(format_state(update))
        sections.append("\n".join(lines))
    return "\n".join(sections)
