"""
Orchestration workflow settings.

Selects the graph shape and controls retrieval, streaming and memory.

Dependencies: pydantic, pydantic_settings, webdoc_qa.models.workflow
System role: Orchestration graph configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from webdoc_qa.models.workflow import PromptStyle, StreamMode, Workflow


class WorkflowSettings(BaseSettings):
    """Orchestration graph configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WORKFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    workflow: Workflow = Field(
        default=Workflow.CONVERSATIONAL,
        description="Graph shape: rag, query-analysis, agent, conversational or react",
    )
    top_k: int = Field(
        default=2,
        ge=1,
        le=50,
        description="Number of chunks to retrieve per search",
    )
    section_filter: bool = Field(
        default=True,
        description="Restrict query-analysis retrieval to the analyzed section",
    )
    stream_mode: StreamMode = Field(
        default=StreamMode.VALUES,
        description="Stream full state snapshots (values) or per-step deltas (updates)",
    )
    prompt_style: PromptStyle = Field(
        default=PromptStyle.DEFAULT,
        description="Answer prompt template for rag and query-analysis workflows",
    )
    thread_id: str = Field(
        default="abc123",
        min_length=1,
        description="Conversation thread for memory-backed workflows",
    )
    max_iterations: int = Field(
        default=10,
        ge=1,
        description="Upper bound on model/tool rounds for the react agent",
    )
