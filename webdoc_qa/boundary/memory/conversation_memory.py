"""
Conversation memory.

Per-thread message history backed by a LangGraph checkpointer. Graphs
compiled against the checkpointer save after every step; this class
exposes the thread config and read access to the stored messages.

Dependencies: langgraph.checkpoint, langchain_core.messages
System role: Multi-turn memory keyed by thread_id
"""

import logging

from langchain_core.messages import BaseMessage
from langchain_core.runnables import RunnableConfig
from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.checkpoint.memory import InMemorySaver

logger = logging.getLogger(__name__)


class ConversationMemory:
    """Process-lifetime conversation store keyed by thread ID."""

    def __init__(self, checkpointer: BaseCheckpointSaver | None = None) -> None:
        """
        Initialize memory.

        Args:
            checkpointer: Checkpoint saver to use (in-memory if None)
        """
        self._checkpointer = checkpointer or InMemorySaver()

    @property
    def checkpointer(self) -> BaseCheckpointSaver:
        """Checkpointer to compile memory-backed graphs against."""
        return self._checkpointer

    @staticmethod
    def config_for(thread_id: str, recursion_limit: int | None = None) -> RunnableConfig:
        """
        Build the runnable config selecting a thread.

        Args:
            thread_id: Conversation thread identifier
            recursion_limit: Optional graph step bound

        Returns:
            RunnableConfig: Config to pass to graph stream/invoke
        """
        config: RunnableConfig = {"configurable": {"thread_id": thread_id}}
        if recursion_limit is not None:
            config["recursion_limit"] = recursion_limit
        return config

    def load(self, thread_id: str) -> list[BaseMessage]:
        """
        Load the latest saved messages for a thread.

        Args:
            thread_id: Conversation thread identifier

        Returns:
            list[BaseMessage]: Messages in order, empty for an unknown thread
        """
        checkpoint_tuple = self._checkpointer.get_tuple(self.config_for(thread_id))
        if checkpoint_tuple is None:
            return []

        messages = checkpoint_tuple.checkpoint["channel_values"].get("messages", [])
        logger.debug(f"{__name__}:load - thread_id={thread_id} messages={len(messages)}")
        return list(messages)
