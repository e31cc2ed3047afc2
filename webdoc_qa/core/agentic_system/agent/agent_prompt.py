"""
Agent system prompts.

Dependencies: None
System role: Prompt text for the tool-calling and react agents
"""

GENERATE_SYSTEM_PROMPT = (
    "You are an assistant for question-answering tasks. "
    "Use the following pieces of retrieved context to answer "
    "the question. If you don't know the answer, say that you "
    "don't know. Use three sentences maximum and keep the "
    "answer concise."
    "\n\n"
)

REACT_SYSTEM_PROMPT = (
    "You are an assistant for question-answering tasks over a single blog post. "
    "Call the retrieve tool whenever the question needs information from the post; "
    "you may call it more than once with different queries. "
    "Answer in three sentences maximum."
)


def build_generate_system_prompt(docs_content: str) -> str:
    """
    Build the generation system prompt around retrieved context.

    Args:
        docs_content: Concatenated tool message content

    Returns:
        str: System prompt text
    """
    return f"{GENERATE_SYSTEM_PROMPT}{docs_content}"
