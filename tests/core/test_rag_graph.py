"""
Test suite for the plain and query-analyzed RAG graphs.

System role: Verification of retrieve -> generate and analyze_query -> retrieve -> generate
"""

import pytest
from langchain_core.messages import AIMessage

from conftest import ScriptedChatModel, tool_call_message
from webdoc_qa.core.agentic_system.rag import create_rag_graph
from webdoc_qa.core.agentic_system.rag.nodes import parse_search_spec
from webdoc_qa.core.agentic_system.rag.rag_prompt import CLOSING_PHRASE, get_rag_prompt
from webdoc_qa.core.exceptions import ProviderError, SchemaError
from webdoc_qa.models.chunk import Section
from webdoc_qa.models.search import SearchSpec
from webdoc_qa.models.workflow import PromptStyle

QUESTION = "What is Task Decomposition?"
ANSWER = "Task decomposition breaks a complicated task into smaller and simpler steps."


def _search_call(query: str, section: str) -> AIMessage:
    return tool_call_message("SearchSpec", {"query": query, "section": section})


class TestPlainRAG:
    """Test suite for the retrieve -> generate graph."""

    @pytest.mark.asyncio
    async def test_graph_should_answer_from_retrieved_context(
        self, chat_model: ScriptedChatModel, indexed_store
    ) -> None:
        """Test the answer is generated from the two task decomposition chunks."""
        # Arrange
        chat_model.responses = [AIMessage(ANSWER)]
        graph = create_rag_graph(chat_model, indexed_store)

        # Act
        state = await graph.ainvoke({"question": QUESTION})

        # Assert
        assert state["answer"] == ANSWER
        assert len(state["context"]) == 2
        assert all("Task decomposition" in result.content for result in state["context"])
        assert "search" not in state

        prompt_text = chat_model.calls[0][0].content
        assert QUESTION in prompt_text
        assert state["context"][0].content in prompt_text

    @pytest.mark.asyncio
    async def test_custom_prompt_should_request_closing_phrase(
        self, chat_model: ScriptedChatModel, indexed_store
    ) -> None:
        """Test the custom template is used when selected."""
        chat_model.responses = [AIMessage(f"{ANSWER} {CLOSING_PHRASE}")]
        graph = create_rag_graph(chat_model, indexed_store, prompt_style=PromptStyle.CUSTOM)

        state = await graph.ainvoke({"question": QUESTION})

        assert state["answer"].endswith(CLOSING_PHRASE)
        assert CLOSING_PHRASE in chat_model.calls[0][0].content

    @pytest.mark.asyncio
    async def test_k_should_bound_context(self, chat_model: ScriptedChatModel, indexed_store) -> None:
        """Test that top_k controls how many chunks are retrieved."""
        chat_model.responses = [AIMessage(ANSWER)]
        graph = create_rag_graph(chat_model, indexed_store, k=4)

        state = await graph.ainvoke({"question": QUESTION})

        assert len(state["context"]) == 4

    @pytest.mark.asyncio
    async def test_model_failure_should_raise_provider_error(self, indexed_store) -> None:
        """Test that a failing chat model surfaces as ProviderError."""
        graph = create_rag_graph(ScriptedChatModel(), indexed_store)

        with pytest.raises(ProviderError) as exc_info:
            await graph.ainvoke({"question": QUESTION})

        assert exc_info.value.details["operation"] == "generate"


class TestQueryAnalyzedRAG:
    """Test suite for the analyze_query -> retrieve -> generate graph."""

    @pytest.mark.asyncio
    async def test_graph_should_record_search_and_filter_section(
        self, chat_model: ScriptedChatModel, indexed_store
    ) -> None:
        """Test the analyzed query and section drive retrieval."""
        chat_model.responses = [_search_call("task decomposition", "beginning"), AIMessage(ANSWER)]
        graph = create_rag_graph(chat_model, indexed_store, analyze_query=True)

        state = await graph.ainvoke({"question": QUESTION})

        assert state["search"] == SearchSpec(query="task decomposition", section=Section.BEGINNING)
        assert all(result.metadata.section is Section.BEGINNING for result in state["context"])
        assert state["answer"] == ANSWER
        assert len(chat_model.calls) == 2

    @pytest.mark.asyncio
    async def test_section_filter_should_override_similarity(
        self, chat_model: ScriptedChatModel, indexed_store
    ) -> None:
        """Test that a section of end only returns end chunks even for a beginning topic."""
        chat_model.responses = [_search_call("task decomposition", "end"), AIMessage(ANSWER)]
        graph = create_rag_graph(chat_model, indexed_store, analyze_query=True)

        state = await graph.ainvoke({"question": "What does the end of the post say about task decomposition?"})

        assert state["context"]
        assert all(result.metadata.section is Section.END for result in state["context"])

    @pytest.mark.asyncio
    async def test_disabled_section_filter_should_search_everything(
        self, chat_model: ScriptedChatModel, indexed_store
    ) -> None:
        """Test that with filtering off the analyzed query still drives retrieval."""
        chat_model.responses = [_search_call("task decomposition", "end"), AIMessage(ANSWER)]
        graph = create_rag_graph(
            chat_model, indexed_store, analyze_query=True, section_filter=False
        )

        state = await graph.ainvoke({"question": QUESTION})

        assert state["search"].section is Section.END
        assert all(result.metadata.section is Section.BEGINNING for result in state["context"])

    @pytest.mark.asyncio
    async def test_invalid_section_should_raise_schema_error(
        self, chat_model: ScriptedChatModel, indexed_store
    ) -> None:
        """Test that a section outside the closed set fails before retrieval."""
        chat_model.responses = [_search_call("task decomposition", "preface")]
        graph = create_rag_graph(chat_model, indexed_store, analyze_query=True)

        with pytest.raises(SchemaError):
            await graph.ainvoke({"question": QUESTION})

        assert len(chat_model.calls) == 1

    @pytest.mark.asyncio
    async def test_plain_text_reply_should_raise_schema_error(
        self, chat_model: ScriptedChatModel, indexed_store
    ) -> None:
        """Test that a reply with no structured call is rejected."""
        chat_model.responses = [AIMessage("I think the beginning.")]
        graph = create_rag_graph(chat_model, indexed_store, analyze_query=True)

        with pytest.raises(SchemaError):
            await graph.ainvoke({"question": QUESTION})


class TestParseSearchSpec:
    """Test suite for structured output validation."""

    def test_parsed_model_should_pass_through(self) -> None:
        spec = SearchSpec(query="q", section=Section.MIDDLE)

        assert parse_search_spec({"raw": None, "parsed": spec, "parsing_error": None}) is spec

    def test_parsed_dict_should_be_validated(self) -> None:
        result = {"parsed": {"query": "q", "section": "end"}, "parsing_error": None}

        assert parse_search_spec(result).section is Section.END

    def test_parsing_error_should_raise(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            parse_search_spec({"parsed": None, "parsing_error": ValueError("bad section")})

        assert "bad section" in exc_info.value.details["reason"]
        assert exc_info.value.details["operation"] == "analyze_query"

    def test_invalid_dict_should_raise(self) -> None:
        with pytest.raises(SchemaError):
            parse_search_spec({"parsed": {"query": "q", "section": "preface"}})


class TestRagPrompts:
    """Test suite for prompt selection."""

    @pytest.mark.parametrize("style", list(PromptStyle))
    def test_prompts_should_take_question_and_context(self, style: PromptStyle) -> None:
        prompt = get_rag_prompt(style)

        assert set(prompt.input_variables) == {"question", "context"}

    def test_prompt_style_should_accept_string(self) -> None:
        assert get_rag_prompt("custom") is get_rag_prompt(PromptStyle.CUSTOM)
