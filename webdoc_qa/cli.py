"""
Command-line entry point.

Ingests the source page, then streams the selected workflow's answer to
one question (plus optional follow-ups on the same thread).

Dependencies: argparse, python-dotenv, webdoc_qa.application, webdoc_qa.configs
System role: Process entry point
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from webdoc_qa.application import QuestionAnsweringService
from webdoc_qa.configs import IngestionSettings, Settings, WorkflowSettings, get_settings
from webdoc_qa.core.agentic_system import SEPARATOR, format_chunk
from webdoc_qa.core.exceptions import ConfigurationError, WebDocQAException
from webdoc_qa.dependencies import build_providers
from webdoc_qa.models.workflow import PromptStyle, StreamMode, Workflow
from webdoc_qa.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="webdoc-qa",
        description="Answer a question about a web page with retrieval-augmented generation.",
    )
    parser.add_argument("question", help="Question to answer")
    parser.add_argument(
        "--workflow",
        choices=[workflow.value for workflow in Workflow],
        help="Graph shape (default: WORKFLOW_WORKFLOW or conversational)",
    )
    parser.add_argument("--thread-id", help="Conversation thread for memory-backed workflows")
    parser.add_argument(
        "--follow-up",
        action="append",
        default=[],
        metavar="QUESTION",
        help="Follow-up question on the same thread (repeatable)",
    )
    parser.add_argument(
        "--stream-mode",
        choices=[mode.value for mode in StreamMode],
        help="Stream full state (values) or per-step updates",
    )
    parser.add_argument(
        "--section-filter",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Restrict query-analysis retrieval to the analyzed section",
    )
    parser.add_argument(
        "--prompt-style",
        choices=[style.value for style in PromptStyle],
        help="Answer prompt for rag and query-analysis workflows",
    )
    parser.add_argument("--top-k", type=int, help="Chunks retrieved per search")
    parser.add_argument("--url", help="Web page to index")
    parser.add_argument("--selector", help="HTML tag to extract text from")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """
    Apply command-line overrides on top of environment settings.

    Overridden sections are re-validated, so flags obey the same bounds
    as environment variables.

    Args:
        settings: Settings loaded from environment
        args: Parsed arguments

    Returns:
        Settings: Copy with non-empty overrides applied

    Raises:
        ConfigurationError: When an override fails validation
    """
    workflow_updates = {
        "workflow": args.workflow,
        "thread_id": args.thread_id,
        "stream_mode": args.stream_mode,
        "section_filter": args.section_filter,
        "prompt_style": args.prompt_style,
        "top_k": args.top_k,
    }
    ingestion_updates = {"source_url": args.url, "selector": args.selector}

    try:
        workflow = WorkflowSettings.model_validate({
            **settings.workflow.model_dump(),
            **{key: value for key, value in workflow_updates.items() if value is not None},
        })
        ingestion = IngestionSettings.model_validate({
            **settings.ingestion.model_dump(),
            **{key: value for key, value in ingestion_updates.items() if value is not None},
        })
    except ValidationError as e:
        raise ConfigurationError(f"Invalid command-line option: {e}") from e

    return settings.model_copy(update={"workflow": workflow, "ingestion": ingestion})


async def run(settings: Settings, questions: list[str]) -> None:
    """
    Build providers, ingest, and stream each question.

    Args:
        settings: Effective settings
        questions: Question followed by any follow-ups

    Raises:
        WebDocQAException: On configuration, ingestion or provider failure
    """
    providers = build_providers(settings.providers)
    service = QuestionAnsweringService(providers, settings.ingestion, settings.workflow)

    result = await service.aingest()
    print(
        f"Indexed {result.chunk_count} chunks from {result.source_url} "
        f"(sections: {result.section_counts})"
    )

    workflow = service.workflow
    for question in questions:
        print(f"Processing with {workflow.value} workflow...\n")
        async for chunk in service.astream(question):
            print(format_chunk(chunk, settings.workflow.stream_mode, workflow.is_message_based))
            print(SEPARATOR)


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Args:
        argv: Arguments (sys.argv[1:] if None)

    Returns:
        int: Process exit status
    """
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = apply_overrides(get_settings(), args)
    except WebDocQAException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.effective_log_level)

    if args.follow_up and not settings.workflow.workflow.uses_memory:
        parser.error("--follow-up requires the conversational or react workflow")

    print(f'Processing query: "{args.question}"')
    try:
        asyncio.run(run(settings, [args.question, *args.follow_up]))
    except WebDocQAException as e:
        logger.error(f"{__name__}:main - {type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
