"""
Shared test fixtures and configuration for entire test suite.

Provides: scripted tool-calling chat model, keyword-count embeddings,
a fixture copy of the tutorial post, and an indexed in-memory store.
No test touches the network.

Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import uuid
from typing import Any
from unittest.mock import MagicMock

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import Field

from webdoc_qa.boundary.memory.conversation_memory import ConversationMemory
from webdoc_qa.boundary.vdb.memory_store import MemoryVectorsStore
from webdoc_qa.configs.ingestion import IngestionSettings
from webdoc_qa.core.ingestion import IngestionPipeline
from webdoc_qa.dependencies import Providers

TUTORIAL_URL = "https://lilianweng.github.io/posts/2023-06-23-agent/"

# One paragraph per chunk at chunk_size=400: 9 chunks, 3 per section.
TUTORIAL_PARAGRAPHS = (
    "Building agents with an LLM as the core controller is a cool concept. In an LLM-powered "
    "autonomous agent system, the LLM functions as the brain of the agent, complemented by several "
    "key components: planning, memory and tool use. Several proof-of-concept demos, such as AutoGPT, "
    "GPT-Engineer and BabyAGI, serve as inspiring examples.",
    "Task decomposition is how an agent handles a complicated task: it breaks the task into smaller "
    "and simpler steps. Chain of thought has become a standard prompting technique; the model is "
    "instructed to think step by step, which turns big tasks into multiple manageable tasks and "
    "sheds light on the thinking process.",
    "Tree of Thoughts extends chain of thought by exploring multiple reasoning possibilities at each "
    "step. Task decomposition can be done by the LLM with simple prompting, by using task-specific "
    "instructions such as writing a story outline, or with human inputs.",
    "Self-reflection is a vital aspect that allows autonomous agents to improve iteratively by "
    "refining past action decisions and correcting previous mistakes. Reflexion is a framework to "
    "equip agents with dynamic memory and self-reflection capabilities to improve reasoning skills.",
    "Memory can be defined as the processes used to acquire, store, retain, and later retrieve "
    "information. Sensory memory is the earliest stage; short-term memory stores information we are "
    "currently aware of; long-term memory can store information for a remarkably long time.",
    "The external memory can alleviate the restriction of finite attention span. A standard practice "
    "is to save the embedding representation of information into a vector store database that can "
    "support fast maximum inner-product search.",
    "Tool use is a remarkable and distinguishing characteristic of human beings. Equipping LLMs with "
    "external tools can significantly extend the model capabilities. MRKL, Toolformer and HuggingGPT "
    "route requests to expert modules, calculators and API calls.",
    "ChemCrow is a domain-specific example in which an LLM is augmented with expert-designed tools "
    "to accomplish organic synthesis, drug discovery, and materials design across chemistry.",
    "Challenges remain: finite context length limits the inclusion of historical information, "
    "long-term planning over a lengthy history remains difficult, and the reliability of the natural "
    "language interface is questionable because models may make formatting errors.",
)

TUTORIAL_TEXT = "\n\n".join(TUTORIAL_PARAGRAPHS)


class KeywordEmbeddings(Embeddings):
    """Deterministic embeddings counting vocabulary words (plus a bias dimension)."""

    vocabulary = (
        "task",
        "decomposition",
        "reflection",
        "memory",
        "tool",
        "planning",
        "agent",
        "context",
        "search",
        "chemistry",
    )

    def _embed(self, text: str) -> list[float]:
        lowered = text.lower()
        return [float(lowered.count(word)) for word in self.vocabulary] + [0.1]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._embed(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._embed(text)


class ScriptedChatModel(BaseChatModel):
    """Chat model double that replays scripted responses and records every call."""

    responses: list[BaseMessage] = Field(default_factory=list)
    calls: list[list[BaseMessage]] = Field(default_factory=list)
    bound_tools: list[Any] = Field(default_factory=list)

    @property
    def _llm_type(self) -> str:
        return "scripted"

    def _generate(self, messages, stop=None, run_manager=None, **kwargs) -> ChatResult:
        self.calls.append(list(messages))
        if not self.responses:
            raise AssertionError("ScriptedChatModel ran out of responses")
        message = self.responses.pop(0)
        return ChatResult(generations=[ChatGeneration(message=message)])

    def bind_tools(self, tools, *, tool_choice=None, **kwargs):
        self.bound_tools = list(tools)
        return self


def tool_call_message(name: str, args: dict[str, Any], call_id: str | None = None) -> AIMessage:
    """Build an AI message requesting one tool call."""
    return AIMessage(
        content="",
        tool_calls=[
            {
                "name": name,
                "args": args,
                "id": call_id or f"call_{uuid.uuid4().hex[:8]}",
                "type": "tool_call",
            }
        ],
    )


@pytest.fixture
def tutorial_document() -> Document:
    """Provide the fixture page as a single loaded record."""
    return Document(page_content=TUTORIAL_TEXT, metadata={"source": TUTORIAL_URL})


@pytest.fixture
def ingestion_settings() -> IngestionSettings:
    """Provide settings that split the fixture into one chunk per paragraph."""
    return IngestionSettings(source_url=TUTORIAL_URL, selector="p", chunk_size=400, chunk_overlap=50)


@pytest.fixture
def stub_loading_task(tutorial_document: Document) -> MagicMock:
    """Provide a loading task that returns the fixture page without network access."""
    task = MagicMock()

    async def aload(source_url: str) -> list[Document]:
        return [Document(page_content=tutorial_document.page_content, metadata={"source": source_url})]

    task.aload.side_effect = aload
    return task


@pytest.fixture
def embeddings() -> KeywordEmbeddings:
    """Provide deterministic keyword embeddings."""
    return KeywordEmbeddings()


@pytest.fixture
def vector_store(embeddings: KeywordEmbeddings) -> MemoryVectorsStore:
    """Provide an empty in-memory vector store."""
    return MemoryVectorsStore(embeddings)


@pytest.fixture
async def indexed_store(
    vector_store: MemoryVectorsStore,
    ingestion_settings: IngestionSettings,
    stub_loading_task: MagicMock,
) -> MemoryVectorsStore:
    """Provide a vector store holding the nine labeled fixture chunks."""
    pipeline = IngestionPipeline(
        vector_store=vector_store,
        settings=ingestion_settings,
        loading_task=stub_loading_task,
    )
    await pipeline.aingest()
    return vector_store


@pytest.fixture
def chat_model() -> ScriptedChatModel:
    """Provide a scripted chat model with no responses queued."""
    return ScriptedChatModel()


@pytest.fixture
def providers(
    chat_model: ScriptedChatModel,
    embeddings: KeywordEmbeddings,
    indexed_store: MemoryVectorsStore,
) -> Providers:
    """Provide a Providers container wired to test doubles."""
    return Providers(
        chat_model=chat_model,
        embeddings=embeddings,
        vector_store=indexed_store,
        memory=ConversationMemory(),
    )
