"""Testes para Settings."""
import pytest

from meetings_api.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.AZURE_DEVOPS_BASE_URL == "https://dev.azure.com"
    assert s.PROJECTS_API_VERSION == "5.1"
    assert s.PROJECT_TEAMS_API_VERSION == "5.0"
    assert s.AZURE_DEVOPS_TIMEOUT == 30.0


def test_pipeline_placeholder_treated_as_empty():
    s = Settings(AZURE_DEVOPS_ORG="$(AZURE_DEVOPS_ORG)", AZURE_DEVOPS_PAT="$(PAT)", _env_file=None)
    assert s.AZURE_DEVOPS_ORG == ""
    assert s.AZURE_DEVOPS_PAT == ""


def test_org_url_without_double_slash():
    s = Settings(AZURE_DEVOPS_ORG="databriz", AZURE_DEVOPS_BASE_URL="https://dev.azure.com/", _env_file=None)
    assert s.azure_devops_org_url == "https://dev.azure.com/databriz"


@pytest.mark.parametrize("org, pat", [("databriz", ""), ("", "pat-123")])
def test_validate_pat_requires_org_and_pat(org, pat):
    s = Settings(AZURE_DEVOPS_ORG=org, AZURE_DEVOPS_PAT=pat, _env_file=None)
    with pytest.raises(ValueError):
        s.validate_pat()


def test_settings_are_read_only():
    s = Settings(AZURE_DEVOPS_ORG="databriz", _env_file=None)
    with pytest.raises(Exception):
        s.AZURE_DEVOPS_ORG = "other"
