"""
Conversation memory boundary.
"""

from webdoc_qa.boundary.memory.conversation_memory import ConversationMemory

__all__ = ["ConversationMemory"]
