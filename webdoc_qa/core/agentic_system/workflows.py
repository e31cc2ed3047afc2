"""
Workflow factory.

Builds the compiled graph, inputs and run config for a selected workflow
from injected providers.

Dependencies: rag and agent graph builders, webdoc_qa.configs
System role: Single entry point from workflow settings to a runnable graph
"""

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.messages import HumanMessage
from langchain_core.runnables import RunnableConfig

from webdoc_qa.boundary.memory.conversation_memory import ConversationMemory
from webdoc_qa.core.agentic_system.agent import (
    create_agent_graph,
    create_react_agent_graph,
    create_retrieve_tool,
    recursion_limit_for,
)
from webdoc_qa.core.agentic_system.rag import create_rag_graph
from webdoc_qa.models.workflow import Workflow

if TYPE_CHECKING:
    from langgraph.graph.state import CompiledStateGraph

    from webdoc_qa.configs.workflow import WorkflowSettings
    from webdoc_qa.dependencies import Providers

logger = logging.getLogger(__name__)


def build_workflow(providers: "Providers", settings: "WorkflowSettings") -> "CompiledStateGraph":
    """
    Build the compiled graph for settings.workflow.

    Args:
        providers: Chat model, vector store and memory
        settings: Workflow settings

    Returns:
        CompiledStateGraph: Runnable graph
    """
    workflow = Workflow(settings.workflow)
    logger.info(f"{__name__}:build_workflow - workflow={workflow.value}")

    if workflow in (Workflow.RAG, Workflow.QUERY_ANALYSIS):
        return create_rag_graph(
            providers.chat_model,
            providers.vector_store,
            analyze_query=workflow is Workflow.QUERY_ANALYSIS,
            section_filter=settings.section_filter,
            k=settings.top_k,
            prompt_style=settings.prompt_style,
        )

    retrieve_tool = create_retrieve_tool(providers.vector_store, k=settings.top_k)
    checkpointer = providers.memory.checkpointer if workflow.uses_memory else None

    if workflow is Workflow.REACT:
        return create_react_agent_graph(providers.chat_model, retrieve_tool, checkpointer)
    return create_agent_graph(providers.chat_model, retrieve_tool, checkpointer)


def build_inputs(workflow: Workflow, question: str) -> dict[str, Any]:
    """
    Build the graph input for a question.

    Args:
        workflow: Selected workflow
        question: User question

    Returns:
        dict: {"question": ...} or {"messages": [HumanMessage]}
    """
    if Workflow(workflow).is_message_based:
        return {"messages": [HumanMessage(question)]}
    return {"question": question}


def build_config(settings: "WorkflowSettings", thread_id: str | None = None) -> RunnableConfig:
    """
    Build the run config (thread selection and step bound).

    Args:
        settings: Workflow settings
        thread_id: Thread override (settings.thread_id if None)

    Returns:
        RunnableConfig: Config for stream/invoke
    """
    workflow = Workflow(settings.workflow)
    if not workflow.uses_memory:
        return {}

    recursion_limit = (
        recursion_limit_for(settings.max_iterations) if workflow is Workflow.REACT else None
    )
    return ConversationMemory.config_for(thread_id or settings.thread_id, recursion_limit)
