"""Configurações do sistema usando Pydantic Settings."""
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"


def _is_pipeline_placeholder(value: object) -> bool:
    """Azure DevOps Pipeline envia o literal '$(VAR)' quando a variável não está definida."""
    return isinstance(value, str) and value.strip().startswith("$(") and value.strip().endswith(")")


class Settings(BaseSettings):
    """Configurações da aplicação com validação automática."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Azure DevOps
    AZURE_DEVOPS_ORG: str = Field(
        default="",
        description="Organização do Azure DevOps",
    )
    AZURE_DEVOPS_PAT: str = Field(
        default="",
        description="Personal Access Token do Azure DevOps (obrigatório via env var)",
    )
    AZURE_DEVOPS_BASE_URL: str = Field(
        default="https://dev.azure.com",
        description="Endpoint base da API REST do Azure DevOps",
    )
    AZURE_DEVOPS_TIMEOUT: float = Field(
        default=30.0,
        gt=0,
        description="Timeout (segundos) aplicado a cada chamada ao Azure DevOps",
    )

    @field_validator("AZURE_DEVOPS_ORG", "AZURE_DEVOPS_PAT", mode="before")
    @classmethod
    def parse_pipeline_placeholder(cls, v: object) -> object:
        """Trata variáveis não definidas do Azure DevOps Pipeline como vazias."""
        if v is None or _is_pipeline_placeholder(v):
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("AZURE_DEVOPS_BASE_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Versões da API por família de chamadas
    PROJECTS_API_VERSION: str = Field(default="5.1", description="api-version de _apis/projects")
    PROJECT_TEAMS_API_VERSION: str = Field(default="5.0", description="api-version de _apis/projects/{id}/teams")
    TEAMS_API_VERSION: str = Field(default="5.1", description="api-version de membros e iterações de time")
    WORK_ITEMS_API_VERSION: str = Field(default="5.1", description="api-version de wit/wiql e wit/workitems")

    # API local
    API_PREFIX: str = Field(
        default="/v1",
        description="Prefixo das rotas expostas (ex.: /v1/azure/projects/list)",
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @property
    def azure_devops_org_url(self) -> str:
        """URL base da organização no Azure DevOps."""
        return f"{self.AZURE_DEVOPS_BASE_URL}/{self.AZURE_DEVOPS_ORG}"

    def validate_pat(self) -> None:
        """Valida que o PAT e a organização foram fornecidos. Chame antes de usar."""
        if not self.AZURE_DEVOPS_PAT:
            raise ValueError("AZURE_DEVOPS_PAT deve ser configurado via variável de ambiente")
        if not self.AZURE_DEVOPS_ORG:
            raise ValueError("AZURE_DEVOPS_ORG deve ser configurado via variável de ambiente")


@lru_cache
def get_settings() -> Settings:
    """Configuração única do processo (somente leitura)."""
    return Settings()
