"""Shared test fixtures and configuration."""

import json
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the clog-ai config directory at a temporary location."""
    mock_dir = temp_dir / ".config" / "clog-ai"
    mocker.patch("clog_ai.config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture
def clean_env(mocker, monkeypatch):
    """Remove API key environment variables and disable .env loading."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("AZURE_OPENAI_API_KEY", raising=False)
    mocker.patch("clog_ai.config.load_dotenv")


@pytest.fixture
def write_config(config_dir, clean_env):
    """Write a config.json with the given fields into the temporary config dir."""

    def _write(**fields):
        config_dir.mkdir(parents=True, exist_ok=True)
        config_file = config_dir / "config.json"
        config_file.write_text(json.dumps(fields, indent=2))
        return config_file

    return _write


@pytest.fixture
def openai_config_dict():
    """A valid OpenAI configuration."""
    return {
        "language": "en",
        "datasource": "openai",
        "openai_api_key": "sk-test",
        "openai_model": "",
    }


@pytest.fixture
def azure_config_dict():
    """A valid Azure configuration."""
    return {
        "language": "zh",
        "datasource": "azure",
        "azure_api_key": "azure-key",
        "azure_deployment_id": "my-deployment",
        "azure_base_url": "https://example.openai.azure.com",
        "azure_model": "gpt-35-turbo-16k",
        "azure_api_version": "2023-07-01-preview",
    }


@pytest.fixture
def sample_diff():
    """Sample git diff HEAD output."""
    return """diff --git a/x.txt b/x.txt
index 1234567..abcdefg 100644
--- a/x.txt
+++ b/x.txt
@@ -1,2 +1,2 @@
 hello
-wrold
+world
"""


@pytest.fixture
def sample_llm_response():
    """Sample raw LLM reply with the commit log wrapped in output tags."""
    return "Here is the commit log:\n<output>\ndocs: update readme\n\n* fix typo\n</output>\nDone."


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
