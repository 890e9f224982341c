"""
Pytest configuration and shared fixtures for release-inquisitor tests.
"""

import sys
from pathlib import Path

import pytest


# Add project paths to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "shared"))

from inquisitor_config import JiraConfig, ReleaseConfig  # noqa: E402


SAMPLE_LOG = """\
a1b2c3d [FACT-2] Resolve networking facts on Solaris
e4f5a6b (fact-1) Fix memory fact on AIX
0a1b2c3 [maint] Update copyright year
9f8e7d6 Tweak whitespace in README
1234abc [FACT-1] Add regression test for AIX memory
5678def [packaging] Bump gem version
"""


@pytest.fixture(autouse=True)
def reset_log_handlers():
    """Drop handlers after each test so none keeps a closed capture stream."""
    yield
    from inquisitor_logging.logger import _loggers

    for logger in _loggers.values():
        for handler in logger._logger.handlers[:]:
            logger._logger.removeHandler(handler)


@pytest.fixture
def temp_dir(tmp_path):
    """Alias for pytest's tmp_path fixture."""
    return tmp_path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove JIRA_ variables that would leak in from the developer's shell."""
    for name in ("JIRA_USERNAME", "JIRA_PASSWORD", "JIRA_BASE_URL", "JIRA_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    return monkeypatch


@pytest.fixture
def jira_config():
    """A valid Jira config that never prompts."""
    return JiraConfig(
        base_url="https://jira.example.com",
        username="adrien",
        password="hunter2",
    )


@pytest.fixture
def release_config(temp_dir):
    """A release whose repository is an empty temp directory."""
    return ReleaseConfig(
        repo_path=temp_dir,
        project="FACT",
        from_rev="2.0.2",
        to_rev="HEAD",
        fix_version="2.1.0",
    )


@pytest.fixture
def sample_log():
    return SAMPLE_LOG
