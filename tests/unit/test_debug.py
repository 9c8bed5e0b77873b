"""Tests for logging configuration."""

import logging
import os
import subprocess
import sys

import pytest
from unittest.mock import patch

from oncomatch.config.debug import (
    get_logger,
    set_log_level,
    get_log_level,
    is_debug,
    reset_logger,
    warn,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    _LEVEL_MAP,
)


@pytest.fixture(autouse=True)
def clean_logger():
    """Reset logger state and the level env var around each test."""
    reset_logger()
    os.environ.pop(LOG_LEVEL_ENV, None)
    yield
    reset_logger()
    os.environ.pop(LOG_LEVEL_ENV, None)


class TestLogLevel:
    """Tests for log level management."""

    def test_default_log_level(self):
        get_logger()
        assert get_log_level() == DEFAULT_LOG_LEVEL == "INFO"

    @pytest.mark.parametrize("level,expected", [
        ("debug", "DEBUG"),
        ("Info", "INFO"),
        ("WARN", "WARN"),
        ("warning", "WARNING"),
        ("ERROR", "ERROR"),
    ])
    def test_set_log_level(self, level, expected):
        """Levels are accepted case-insensitively."""
        set_log_level(level)
        assert get_log_level() == expected
        assert is_debug() is (expected == "DEBUG")

    def test_invalid_level_raises(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            set_log_level("VERBOSE")

    def test_environment_variable_sets_level(self):
        os.environ[LOG_LEVEL_ENV] = "DEBUG"
        reset_logger()
        get_logger()
        assert get_log_level() == "DEBUG"

    def test_invalid_environment_value_falls_back(self):
        os.environ[LOG_LEVEL_ENV] = "LOUD"
        reset_logger()
        get_logger()
        assert get_log_level() == "INFO"

    def test_set_log_level_exports_environment(self):
        set_log_level("ERROR")
        assert os.environ.get(LOG_LEVEL_ENV) == "ERROR"


class TestGetLogger:
    """Tests for logger naming and handlers."""

    def test_root_logger(self):
        assert get_logger().name == "oncomatch"
        assert get_logger(None) is get_logger("oncomatch")

    def test_child_logger_keeps_prefix(self):
        assert get_logger("oncomatch.matching.exact").name == "oncomatch.matching.exact"

    def test_child_logger_gets_prefix(self):
        assert get_logger("cli").name == "oncomatch.cli"

    def test_root_logger_configuration(self):
        logger = get_logger()
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_level_applies_to_existing_logger(self):
        logger = get_logger()
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        assert all(handler.level == logging.DEBUG for handler in logger.handlers)

    def test_warn_helper_uses_root_logger(self):
        with patch.object(get_logger(), "warning") as mock_warning:
            warn("Malformed clause in %s", "V600E {excluding")
            mock_warning.assert_called_once_with("Malformed clause in %s", "V600E {excluding")

    def test_level_map_aliases(self):
        assert _LEVEL_MAP["WARN"] == _LEVEL_MAP["WARNING"] == logging.WARNING


class TestLibraryLogging:
    """Tests for the environment level reaching engine modules without the CLI."""

    SCRIPT = (
        "from oncomatch import KnowledgeBase, RelevantAlterationResolver\n"
        "from oncomatch.models import Gene\n"
        "kb = KnowledgeBase(genes=[Gene(entrez_gene_id=673, hugo_symbol='BRAF')])\n"
        "print(RelevantAlterationResolver.from_knowledge_base(kb).resolve_query('BRAF', 'V600=').names())\n"
    )

    def _run(self, level):
        env = {**os.environ, LOG_LEVEL_ENV: level}
        return subprocess.run(
            [sys.executable, "-c", self.SCRIPT], env=env, capture_output=True, text=True, check=True,
        )

    def test_debug_from_environment(self):
        result = self._run("DEBUG")
        assert result.stdout.strip() == "[]"
        assert "[DEBUG] oncomatch.resolution.orchestrator" in result.stderr
        assert "is synonymous" in result.stderr

    def test_default_level_hides_debug(self):
        result = self._run("INFO")
        assert "is synonymous" not in result.stderr

    def test_engine_loggers_share_root_handler(self):
        from oncomatch.resolution import orchestrator

        assert orchestrator.logger.name == "oncomatch.resolution.orchestrator"
        assert not orchestrator.logger.handlers
        assert orchestrator.logger.getEffectiveLevel() == get_logger().level
