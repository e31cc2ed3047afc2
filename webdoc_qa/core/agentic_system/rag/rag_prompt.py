"""
Prompt templates for the retrieve-then-generate graphs.

Dependencies: langchain_core.prompts, webdoc_qa.models.workflow
System role: Prompt templates for answer generation and query analysis
"""

from langchain_core.prompts import ChatPromptTemplate

from webdoc_qa.models.workflow import PromptStyle

CLOSING_PHRASE = "thanks for asking!"

DEFAULT_TEMPLATE = """You are an assistant for question-answering tasks. Use the following pieces of retrieved context to answer the question. If you don't know the answer, just say that you don't know. Use three sentences maximum and keep the answer concise.
Question: {question}
Context: {context}
Answer:"""

CUSTOM_TEMPLATE = f"""Use the following pieces of context to answer the question at the end.
If you don't know the answer, just say that you don't know, don't try to make up an answer.
Use three sentences maximum and keep the answer as concise as possible.
Always say "{CLOSING_PHRASE}" at the end of the answer.

{{context}}

Question: {{question}}

Helpful Answer:"""

RAG_PROMPTS: dict[PromptStyle, ChatPromptTemplate] = {
    PromptStyle.DEFAULT: ChatPromptTemplate.from_messages([("human", DEFAULT_TEMPLATE)]),
    PromptStyle.CUSTOM: ChatPromptTemplate.from_messages([("human", CUSTOM_TEMPLATE)]),
}

QUERY_ANALYSIS_PROMPT = ChatPromptTemplate.from_messages([
    ("system", """Rewrite the user's question as a concise search query over a single blog post.
Also choose which part of the post most likely answers it: beginning, middle or end."""),
    ("human", "{question}"),
])


def get_rag_prompt(style: PromptStyle = PromptStyle.DEFAULT) -> ChatPromptTemplate:
    """
    Get the answer prompt template.

    Args:
        style: Template variant

    Returns:
        ChatPromptTemplate: Template with {question} and {context} variables
    """
    return RAG_PROMPTS[PromptStyle(style)]
