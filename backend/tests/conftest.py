"""Configuração pytest e fixtures."""
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

# Garante que backend está no path
_backend = Path(__file__).resolve().parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

from meetings_api.config import Settings  # noqa: E402
from meetings_api.services.azure_client import AzureDevOpsClient  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: testes que exigem .env (Azure DevOps real)")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def settings():
    return Settings(AZURE_DEVOPS_ORG="databriz", AZURE_DEVOPS_PAT="pat-123", _env_file=None)


@pytest.fixture
def make_response():
    """Fábrica de respostas falsas do requests."""

    def _make(
        status_code: int = 200,
        json_data=None,
        *,
        content_type: str = "application/json; charset=utf-8",
        url: str = "https://dev.azure.com/databriz/_apis/x",
        text: str = "",
    ):
        r = MagicMock()
        r.status_code = status_code
        r.headers = {"Content-Type": content_type}
        r.url = url
        r.text = text
        if isinstance(json_data, Exception):
            r.json.side_effect = json_data
        else:
            r.json.return_value = json_data
        return r

    return _make


@pytest.fixture
def session():
    s = MagicMock(spec=requests.Session)
    s.headers = {}
    return s


@pytest.fixture
def azure_client(settings, session):
    return AzureDevOpsClient(settings, session=session)
