"""
Test suite for configuration loading.
"""

import pytest

from webdoc_qa.configs import Settings, WorkflowSettings, get_settings
from webdoc_qa.configs.ingestion import DEFAULT_SOURCE_URL
from webdoc_qa.core.exceptions import ConfigurationError
from webdoc_qa.models.workflow import PromptStyle, StreamMode, Workflow


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test without a .env file and with a fresh settings cache."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestSettings:
    """Test suite for Settings and get_settings."""

    def test_defaults(self) -> None:
        """Test the documented defaults."""
        settings = Settings()

        assert settings.ingestion.source_url == DEFAULT_SOURCE_URL
        assert settings.ingestion.selector == "p"
        assert settings.ingestion.chunk_size == 1000
        assert settings.ingestion.chunk_overlap == 200
        assert settings.workflow.workflow is Workflow.CONVERSATIONAL
        assert settings.workflow.top_k == 2
        assert settings.workflow.section_filter is True
        assert settings.workflow.stream_mode is StreamMode.VALUES
        assert settings.workflow.prompt_style is PromptStyle.DEFAULT
        assert settings.workflow.thread_id == "abc123"

    def test_environment_should_override_defaults(self, isolated_env) -> None:
        """Test prefixed environment variables reach nested settings."""
        isolated_env.setenv("WORKFLOW_WORKFLOW", "query-analysis")
        isolated_env.setenv("WORKFLOW_TOP_K", "4")
        isolated_env.setenv("INGESTION_CHUNK_SIZE", "500")
        isolated_env.setenv("INGESTION_CHUNK_OVERLAP", "50")

        settings = get_settings()

        assert settings.workflow.workflow is Workflow.QUERY_ANALYSIS
        assert settings.workflow.top_k == 4
        assert settings.ingestion.chunk_size == 500

    def test_get_settings_should_be_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_invalid_value_should_raise_configuration_error(self, isolated_env) -> None:
        """Test that validation failures are reported as ConfigurationError."""
        isolated_env.setenv("WORKFLOW_WORKFLOW", "summarize")

        with pytest.raises(ConfigurationError):
            get_settings()

    def test_top_k_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            WorkflowSettings(top_k=0)

    def test_debug_should_force_debug_logging(self, isolated_env) -> None:
        isolated_env.setenv("LOG_LEVEL", "warning")
        isolated_env.setenv("DEBUG", "true")

        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.effective_log_level == "DEBUG"
